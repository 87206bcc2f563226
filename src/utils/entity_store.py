"""Indexed entity storage.

This module provides a generic key-value store for entities backed by
SQLAlchemy. Each entity type keeps its records in one namespace of the
``entity_records`` table and an ordered list of its ids in the
``entity_indexes`` table, which is what listing walks.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

import pytz
from sqlalchemy import and_
from sqlalchemy.orm import Session

from core.exceptions import EntityNotFoundError, ValidationError
from models.entity_index import EntityIndexModel
from models.entity_record import EntityRecordModel
from models.seed_marker import SeedMarkerModel
from utils.entities import EntityType

logger = logging.getLogger(__name__)


class EntityStore:
    """Generic list/get/create/patch/delete operations over entity types."""

    def __init__(self, db: Session):
        """Initialize EntityStore.

        Args:
            db: SQLAlchemy Session.
        """
        self.db = db

    def list(self, entity_type: EntityType) -> List[Dict[str, Any]]:
        """List all records of a type in index order.

        Args:
            entity_type: The entity type to enumerate.

        Returns:
            Records in the order their ids were added to the index.
        """
        rows = (
            self.db.query(EntityRecordModel.state)
            .join(
                EntityIndexModel,
                and_(
                    EntityIndexModel.entity_id == EntityRecordModel.entity_id,
                    EntityIndexModel.index_name == entity_type.index_name,
                ),
            )
            .filter(EntityRecordModel.entity_name == entity_type.name)
            .order_by(EntityIndexModel.position)
            .all()
        )
        return [entity_type.with_defaults(state) for (state,) in rows]

    def get(self, entity_type: EntityType, entity_id: str) -> Optional[Dict[str, Any]]:
        """Get a record by id.

        Args:
            entity_type: The entity type to look in.
            entity_id: ID of the record.

        Returns:
            The record if found, None otherwise.
        """
        model = self._get_model(entity_type, entity_id)
        if model is None:
            return None
        return entity_type.with_defaults(model.state)

    def exists(self, entity_type: EntityType, entity_id: str) -> bool:
        return self._get_model(entity_type, entity_id) is not None

    def create(self, entity_type: EntityType, record: Dict[str, Any]) -> Dict[str, Any]:
        """Store a record under its id and add the id to the type's index.

        An existing record with the same id is overwritten.

        Args:
            entity_type: The entity type to store into.
            record: The full record, including its ``id``.

        Returns:
            The stored record.

        Raises:
            ValidationError: If the record has no id.
        """
        state = self._put(entity_type, record)
        self.db.commit()
        logger.info("Created %s: %s", entity_type.name, state["id"])
        return state

    def patch(
        self, entity_type: EntityType, entity_id: str, updates: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Merge the supplied fields onto an existing record.

        Fields absent from ``updates`` keep their stored values. The ``id``
        field is never changed.

        Args:
            entity_type: The entity type of the record.
            entity_id: ID of the record to update.
            updates: Partial record.

        Returns:
            The updated record.

        Raises:
            EntityNotFoundError: If no record has this id.
        """
        model = self._get_model(entity_type, entity_id)
        if model is None:
            raise EntityNotFoundError(entity_type.name, entity_id)

        changes = {key: value for key, value in updates.items() if key != "id"}
        # JSON columns only notice reassignment, not in-place mutation
        model.state = {**entity_type.with_defaults(model.state), **changes}
        self.db.commit()
        self.db.refresh(model)
        return entity_type.with_defaults(model.state)

    def delete(self, entity_type: EntityType, entity_id: str) -> bool:
        """Delete a record and drop its id from the index.

        Args:
            entity_type: The entity type of the record.
            entity_id: ID of the record to delete.

        Returns:
            True if a record was present and removed, False otherwise.
        """
        deleted = self._remove(entity_type, entity_id)
        self.db.commit()
        if deleted:
            logger.info("Deleted %s: %s", entity_type.name, entity_id)
        return deleted

    def delete_many(self, entity_type: EntityType, entity_ids: Iterable[str]) -> int:
        """Delete several records in one commit.

        Args:
            entity_type: The entity type of the records.
            entity_ids: IDs to delete. Unknown ids are skipped.

        Returns:
            Number of records actually removed.
        """
        removed = 0
        for entity_id in entity_ids:
            if self._remove(entity_type, entity_id):
                removed += 1
        self.db.commit()
        if removed:
            logger.info("Deleted %d %s record(s)", removed, entity_type.name)
        return removed

    def count(self, entity_type: EntityType) -> int:
        """Return the number of ids in the type's index."""
        return (
            self.db.query(EntityIndexModel)
            .filter(EntityIndexModel.index_name == entity_type.index_name)
            .count()
        )

    def ensure_seed(self, entity_type: EntityType) -> None:
        """Insert the type's seed records at most once.

        Seeds go in only if the index is empty and has never been seeded
        before. Either way the index is marked as seeded afterwards.
        """
        if self.db.get(SeedMarkerModel, entity_type.index_name) is not None:
            return

        seeded = 0
        if self.count(entity_type) == 0:
            for record in entity_type.seed_data:
                self._put(entity_type, record)
                seeded += 1
        self.db.add(
            SeedMarkerModel(
                index_name=entity_type.index_name,
                seeded_at=datetime.now(pytz.utc).isoformat(),
            )
        )
        self.db.commit()
        if seeded:
            logger.info("Seeded %d %s record(s)", seeded, entity_type.name)

    def _get_model(
        self, entity_type: EntityType, entity_id: str
    ) -> Optional[EntityRecordModel]:
        return self.db.get(EntityRecordModel, (entity_type.name, entity_id))

    def _in_index(self, entity_type: EntityType, entity_id: str) -> bool:
        return (
            self.db.query(EntityIndexModel)
            .filter(
                EntityIndexModel.index_name == entity_type.index_name,
                EntityIndexModel.entity_id == entity_id,
            )
            .first()
            is not None
        )

    def _put(self, entity_type: EntityType, record: Dict[str, Any]) -> Dict[str, Any]:
        entity_id = record.get("id")
        if not entity_id:
            raise ValidationError(f"Cannot store {entity_type.name} without an id")

        state = entity_type.with_defaults(record)
        model = self._get_model(entity_type, entity_id)
        if model is None:
            self.db.add(
                EntityRecordModel(
                    entity_name=entity_type.name,
                    entity_id=entity_id,
                    state=state,
                )
            )
        else:
            model.state = state

        if not self._in_index(entity_type, entity_id):
            self.db.add(
                EntityIndexModel(index_name=entity_type.index_name, entity_id=entity_id)
            )
        # Seeding adds several rows before one commit
        self.db.flush()
        return dict(state)

    def _remove(self, entity_type: EntityType, entity_id: str) -> bool:
        (
            self.db.query(EntityIndexModel)
            .filter(
                EntityIndexModel.index_name == entity_type.index_name,
                EntityIndexModel.entity_id == entity_id,
            )
            .delete(synchronize_session=False)
        )
        model = self._get_model(entity_type, entity_id)
        if model is None:
            return False
        self.db.delete(model)
        return True
