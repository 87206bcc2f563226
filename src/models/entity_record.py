"""Entity record database model.

One row per stored entity. The (entity_name, entity_id) pair forms the key
and the record itself is kept as a JSON document.
"""

from sqlalchemy import JSON, Column, String
from .base import Base


class EntityRecordModel(Base):
    """Key-value row holding one entity's state."""

    __tablename__ = "entity_records"

    entity_name = Column(String, primary_key=True)  # e.g. 'sponsor'
    entity_id = Column(String, primary_key=True)
    state = Column(JSON, nullable=False)
