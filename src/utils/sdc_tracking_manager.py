"""SDC tracking management utilities.

Tracking entries and their nested work items. Deleting an entry also deletes
every work item that points at it.
"""

import logging
import uuid
from typing import Any, Dict, List

from core.exceptions import EntityNotFoundError, PermissionDeniedError, ValidationError
from schemas.sdc_tracking import check_time_range
from utils import permissions
from utils.entities import SDC_TRACKING_ENTRY, SDC_WORK_PERFORMED_ITEM
from utils.entity_store import EntityStore

logger = logging.getLogger(__name__)


class SdcTrackingManager:
    """Manages tracking entries and their work items."""

    def __init__(self, store: EntityStore):
        self.store = store

    def list_entries(self) -> List[Dict[str, Any]]:
        return self.store.list(SDC_TRACKING_ENTRY)

    def get_entry(self, entry_id: str) -> Dict[str, Any]:
        """Get a tracking entry.

        Raises:
            EntityNotFoundError: If the entry does not exist.
        """
        entry = self.store.get(SDC_TRACKING_ENTRY, entry_id)
        if entry is None:
            raise EntityNotFoundError(SDC_TRACKING_ENTRY.name, entry_id)
        return entry

    def create_entry(self, actor: Dict[str, Any], data: Dict[str, Any]) -> Dict[str, Any]:
        """Create a tracking entry owned by the actor.

        Args:
            actor: The user creating the entry; becomes ``createdBy``.
            data: Validated entry fields.

        Returns:
            The stored entry.

        Raises:
            PermissionDeniedError: If the actor may not create entries.
        """
        if not permissions.can_create_tracking_entry(actor):
            raise PermissionDeniedError("Only Level 2 and Level 3 users can add entries.")
        entry = {**data, "id": str(uuid.uuid4()), "createdBy": actor["id"]}
        return self.store.create(SDC_TRACKING_ENTRY, entry)

    def update_entry(
        self, actor: Dict[str, Any], entry_id: str, updates: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Patch a tracking entry.

        Raises:
            EntityNotFoundError: If the entry does not exist.
            PermissionDeniedError: If the actor is neither creator nor admin.
            ValidationError: If the merged times are out of order.
        """
        entry = self.get_entry(entry_id)
        self._check_can_modify(actor, entry)

        merged = {**entry, **updates}
        try:
            check_time_range(merged["startTime"], merged["endTime"])
        except ValueError as e:
            raise ValidationError(str(e)) from e

        # createdBy is fixed at creation time
        updates = {k: v for k, v in updates.items() if k != "createdBy"}
        return self.store.patch(SDC_TRACKING_ENTRY, entry_id, updates)

    def delete_entry(self, actor: Dict[str, Any], entry_id: str) -> int:
        """Delete a tracking entry and all of its work items.

        Returns:
            Number of work items removed along with the entry.

        Raises:
            EntityNotFoundError: If the entry does not exist.
            PermissionDeniedError: If the actor is neither creator nor admin.
        """
        entry = self.get_entry(entry_id)
        self._check_can_modify(actor, entry)

        self.store.delete(SDC_TRACKING_ENTRY, entry_id)
        item_ids = [item["id"] for item in self.list_work_items(entry_id)]
        removed = self.store.delete_many(SDC_WORK_PERFORMED_ITEM, item_ids)
        logger.info(
            "Deleted tracking entry %s with %d work item(s)", entry_id, removed
        )
        return removed

    def list_work_items(self, entry_id: str) -> List[Dict[str, Any]]:
        return [
            item
            for item in self.store.list(SDC_WORK_PERFORMED_ITEM)
            if item["sdcTrackingEntryId"] == entry_id
        ]

    def create_work_item(
        self, actor: Dict[str, Any], entry_id: str, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Add a work item under an entry.

        Raises:
            EntityNotFoundError: If the parent entry does not exist.
            PermissionDeniedError: If the actor may not modify the entry.
        """
        entry = self.get_entry(entry_id)
        self._check_can_modify(actor, entry)
        item = {**data, "id": str(uuid.uuid4()), "sdcTrackingEntryId": entry_id}
        return self.store.create(SDC_WORK_PERFORMED_ITEM, item)

    def delete_work_item(self, actor: Dict[str, Any], entry_id: str, item_id: str) -> None:
        """Delete one work item of an entry.

        Raises:
            EntityNotFoundError: If the entry or the item does not exist, or
                the item belongs to another entry.
            PermissionDeniedError: If the actor may not modify the entry.
        """
        entry = self.get_entry(entry_id)
        item = self.store.get(SDC_WORK_PERFORMED_ITEM, item_id)
        if item is None or item["sdcTrackingEntryId"] != entry_id:
            raise EntityNotFoundError(SDC_WORK_PERFORMED_ITEM.name, item_id)
        self._check_can_modify(actor, entry)
        self.store.delete(SDC_WORK_PERFORMED_ITEM, item_id)

    def _check_can_modify(self, actor: Dict[str, Any], entry: Dict[str, Any]) -> None:
        if not permissions.can_modify_tracking_entry(actor, entry):
            raise PermissionDeniedError(
                "Only the entry's creator or a Level 2/3 user can change it."
            )
