"""Entity index database model.

Ordered membership list of ids per entity type, used for enumeration.
"""

from sqlalchemy import Column, Integer, String, UniqueConstraint
from .base import Base


class EntityIndexModel(Base):
    """One id belonging to one index, ordered by insertion position."""

    __tablename__ = "entity_indexes"
    __table_args__ = (
        UniqueConstraint(
            "index_name",
            "entity_id",
            name="uq_entity_indexes_index_entity",
        ),
    )

    position = Column(Integer, primary_key=True, autoincrement=True)
    index_name = Column(String, index=True, nullable=False)  # e.g. 'sponsors'
    entity_id = Column(String, nullable=False)
