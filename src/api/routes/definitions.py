"""Reference data routes.

Sponsors, centers, researchers, project codes and the work-performed catalog
share one set of CRUD routes, generated per type by ``create_crud_router``.
Reads are open; writes need a Level 2 or Level 3 caller.
"""

import uuid
from typing import Any, Dict, List, Type

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from api.routes.auth import get_current_user
from core.dependencies import EntityStoreDep, ensure_super_admin, seed_dependency
from core.exceptions import EntityNotFoundError
from core.responses import ok
from schemas.common import ApiResponse, DeletedInfo
from schemas.definition import (
    Center,
    CenterCreate,
    CenterUpdate,
    ProjectCode,
    ProjectCodeCreate,
    ProjectCodeUpdate,
    Researcher,
    ResearcherCreate,
    ResearcherUpdate,
    Sponsor,
    SponsorCreate,
    SponsorUpdate,
    WorkPerformed,
    WorkPerformedCreate,
    WorkPerformedUpdate,
)
from utils import permissions
from utils.entities import CENTER, PROJECT_CODE, RESEARCHER, SPONSOR, WORK_PERFORMED, EntityType


def require_definition_manager(
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> Dict[str, Any]:
    """Dependency: the caller must be allowed to change reference data."""
    if not permissions.can_manage_definitions(current_user):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only Level 2 and Level 3 users can modify definitions.",
        )
    return current_user


def create_crud_router(
    path: str,
    entity_type: EntityType,
    record_schema: Type[BaseModel],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    tag: str,
) -> APIRouter:
    """Build list/create/get/update/delete routes for one entity type.

    Args:
        path: URL prefix, e.g. ``/api/sponsors``.
        entity_type: Storage descriptor of the type.
        record_schema: Schema of a stored record (response body).
        create_schema: Request body for create.
        update_schema: Request body for partial update.
        tag: OpenAPI tag.

    Returns:
        An APIRouter that seeds the type before every request.
    """
    router = APIRouter(
        prefix=path,
        tags=[tag],
        dependencies=[Depends(ensure_super_admin), Depends(seed_dependency(entity_type))],
    )
    not_found = f"{tag} not found."

    @router.get("", response_model=ApiResponse[List[record_schema]], summary=f"List {tag}")
    def list_entities(store: EntityStoreDep) -> dict:
        return ok(store.list(entity_type))

    @router.post("", response_model=ApiResponse[record_schema], summary=f"Create {tag}")
    def create_entity(
        req: create_schema,
        store: EntityStoreDep,
        current_user: Dict[str, Any] = Depends(require_definition_manager),
    ) -> dict:
        record = {**req.model_dump(), "id": str(uuid.uuid4())}
        return ok(store.create(entity_type, record))

    @router.get("/{entity_id}", response_model=ApiResponse[record_schema], summary=f"Get {tag}")
    def get_entity(entity_id: str, store: EntityStoreDep) -> dict:
        record = store.get(entity_type, entity_id)
        if record is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return ok(record)

    @router.put("/{entity_id}", response_model=ApiResponse[record_schema], summary=f"Update {tag}")
    def update_entity(
        entity_id: str,
        req: update_schema,
        store: EntityStoreDep,
        current_user: Dict[str, Any] = Depends(require_definition_manager),
    ) -> dict:
        updates = req.model_dump(exclude_unset=True, exclude_none=True)
        try:
            record = store.patch(entity_type, entity_id, updates)
        except EntityNotFoundError:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return ok(record)

    @router.delete("/{entity_id}", response_model=ApiResponse[DeletedInfo], summary=f"Delete {tag}")
    def delete_entity(
        entity_id: str,
        store: EntityStoreDep,
        current_user: Dict[str, Any] = Depends(require_definition_manager),
    ) -> dict:
        if not store.delete(entity_type, entity_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=not_found)
        return ok({"id": entity_id, "deleted": True})

    return router


sponsors_router = create_crud_router(
    "/api/sponsors", SPONSOR, Sponsor, SponsorCreate, SponsorUpdate, "Sponsor"
)
centers_router = create_crud_router(
    "/api/centers", CENTER, Center, CenterCreate, CenterUpdate, "Center"
)
researchers_router = create_crud_router(
    "/api/researchers", RESEARCHER, Researcher, ResearcherCreate, ResearcherUpdate, "Researcher"
)
project_codes_router = create_crud_router(
    "/api/project-codes", PROJECT_CODE, ProjectCode, ProjectCodeCreate, ProjectCodeUpdate, "Project code"
)
work_performed_router = create_crud_router(
    "/api/work-performed", WORK_PERFORMED, WorkPerformed, WorkPerformedCreate, WorkPerformedUpdate, "Work performed"
)

routers = [
    sponsors_router,
    centers_router,
    researchers_router,
    project_codes_router,
    work_performed_router,
]
