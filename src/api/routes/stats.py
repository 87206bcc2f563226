"""Dashboard statistics routes.

One ``GET /api/stats/<name>-count`` route per entity type, reporting how many
records are currently indexed. Types are seeded before counting.
"""

from fastapi import APIRouter, Depends

from core.dependencies import EntityStoreDep, ensure_super_admin
from core.responses import ok
from schemas.common import ApiResponse, CountInfo
from utils.entities import (
    CENTER,
    PROJECT_CODE,
    RESEARCHER,
    SDC_TRACKING_ENTRY,
    SPONSOR,
    USER,
    WORK_PERFORMED,
    EntityType,
)

router = APIRouter(
    prefix="/api/stats",
    tags=["Stats"],
    dependencies=[Depends(ensure_super_admin)],
)

COUNTED_TYPES = {
    "user": USER,
    "sponsor": SPONSOR,
    "center": CENTER,
    "researcher": RESEARCHER,
    "project-code": PROJECT_CODE,
    "work-performed": WORK_PERFORMED,
    "sdc-tracking": SDC_TRACKING_ENTRY,
}


def _add_count_route(name: str, entity_type: EntityType) -> None:
    @router.get(
        f"/{name}-count",
        response_model=ApiResponse[CountInfo],
        summary=f"Count {entity_type.index_name}",
        name=f"{name}-count",
    )
    def count_entities(store: EntityStoreDep) -> dict:
        store.ensure_seed(entity_type)
        return ok({"count": store.count(entity_type)})


for _name, _entity_type in COUNTED_TYPES.items():
    _add_count_route(_name, _entity_type)
