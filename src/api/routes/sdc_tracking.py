"""SDC tracking routes.

Tracking entries plus their work items, nested under the parent entry.
Deleting an entry removes its work items as well.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from api.routes.auth import get_current_user
from core.dependencies import SdcTrackingManagerDep, ensure_super_admin, seed_dependency
from core.exceptions import EntityNotFoundError, PermissionDeniedError, ValidationError
from core.responses import ok
from schemas.common import ApiResponse, DeletedInfo
from schemas.sdc_tracking import (
    SdcTrackingEntry,
    SdcTrackingEntryCreate,
    SdcTrackingEntryUpdate,
    SdcWorkItem,
    SdcWorkItemCreate,
)
from utils.entities import SDC_TRACKING_ENTRY, SDC_WORK_PERFORMED_ITEM

router = APIRouter(
    prefix="/api/sdc-tracking",
    tags=["SDC Tracking"],
    dependencies=[
        Depends(ensure_super_admin),
        Depends(seed_dependency(SDC_TRACKING_ENTRY, SDC_WORK_PERFORMED_ITEM)),
    ],
)


def _not_found(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def _forbidden(e: PermissionDeniedError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))


@router.get("", response_model=ApiResponse[List[SdcTrackingEntry]], summary="List entries")
def list_entries(manager: SdcTrackingManagerDep) -> dict:
    return ok(manager.list_entries())


@router.post("", response_model=ApiResponse[SdcTrackingEntry], summary="Create entry")
def create_entry(
    req: SdcTrackingEntryCreate,
    manager: SdcTrackingManagerDep,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> dict:
    """Create a tracking entry. The caller is recorded as its creator.

    Permission requirements:
    - Level 2 and Level 3 only
    """
    try:
        entry = manager.create_entry(current_user, req.model_dump())
    except PermissionDeniedError as e:
        raise _forbidden(e)
    return ok(entry)


@router.get("/{entry_id}", response_model=ApiResponse[SdcTrackingEntry], summary="Get entry")
def get_entry(entry_id: str, manager: SdcTrackingManagerDep) -> dict:
    try:
        return ok(manager.get_entry(entry_id))
    except EntityNotFoundError:
        raise _not_found("Entry not found.")


@router.put("/{entry_id}", response_model=ApiResponse[SdcTrackingEntry], summary="Update entry")
def update_entry(
    entry_id: str,
    req: SdcTrackingEntryUpdate,
    manager: SdcTrackingManagerDep,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> dict:
    """Patch a tracking entry.

    Permission requirements:
    - The entry's creator, whatever their level
    - Any Level 2 or Level 3 user

    Raises:
        HTTPException: If the entry is missing, permission denied, or the
            resulting start time is not before the end time.
    """
    updates = req.model_dump(exclude_unset=True, exclude_none=True)
    try:
        entry = manager.update_entry(current_user, entry_id, updates)
    except EntityNotFoundError:
        raise _not_found("Entry not found.")
    except PermissionDeniedError as e:
        raise _forbidden(e)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ok(entry)


@router.delete("/{entry_id}", response_model=ApiResponse[DeletedInfo], summary="Delete entry")
def delete_entry(
    entry_id: str,
    manager: SdcTrackingManagerDep,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> dict:
    """Delete a tracking entry together with all of its work items."""
    try:
        manager.delete_entry(current_user, entry_id)
    except EntityNotFoundError:
        raise _not_found("Entry not found.")
    except PermissionDeniedError as e:
        raise _forbidden(e)
    return ok({"id": entry_id, "deleted": True})


@router.get(
    "/{entry_id}/work-items",
    response_model=ApiResponse[List[SdcWorkItem]],
    summary="List work items of an entry",
)
def list_work_items(entry_id: str, manager: SdcTrackingManagerDep) -> dict:
    return ok(manager.list_work_items(entry_id))


@router.post(
    "/{entry_id}/work-items",
    response_model=ApiResponse[SdcWorkItem],
    summary="Add a work item to an entry",
)
def create_work_item(
    entry_id: str,
    req: SdcWorkItemCreate,
    manager: SdcTrackingManagerDep,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> dict:
    try:
        item = manager.create_work_item(current_user, entry_id, req.model_dump())
    except EntityNotFoundError:
        raise _not_found("Entry not found.")
    except PermissionDeniedError as e:
        raise _forbidden(e)
    return ok(item)


@router.delete(
    "/{entry_id}/work-items/{item_id}",
    response_model=ApiResponse[DeletedInfo],
    summary="Delete a work item",
)
def delete_work_item(
    entry_id: str,
    item_id: str,
    manager: SdcTrackingManagerDep,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> dict:
    try:
        manager.delete_work_item(current_user, entry_id, item_id)
    except EntityNotFoundError as e:
        detail = (
            "Entry not found."
            if e.entity_name == SDC_TRACKING_ENTRY.name
            else "Work item not found."
        )
        raise _not_found(detail)
    except PermissionDeniedError as e:
        raise _forbidden(e)
    return ok({"id": item_id, "deleted": True})
