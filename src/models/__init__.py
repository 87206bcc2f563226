"""Database models."""

from .base import Base
from .entity_index import EntityIndexModel
from .entity_record import EntityRecordModel
from .seed_marker import SeedMarkerModel

__all__ = ["Base", "EntityIndexModel", "EntityRecordModel", "SeedMarkerModel"]
