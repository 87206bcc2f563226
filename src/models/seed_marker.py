"""Seed marker database model.

Records which indexes have already received their seed data, so emptying an
index later does not bring the seed records back.
"""

from sqlalchemy import Column, String
from .base import Base


class SeedMarkerModel(Base):
    __tablename__ = "entity_seed_markers"

    index_name = Column(String, primary_key=True)
    seeded_at = Column(String, nullable=False)  # ISO format string
