"""Dependency injection module for FastAPI.

This module provides dependency injection functions for FastAPI routes,
following Google Python Style Guide and FastAPI best practices.
"""

from typing import Annotated, Callable

from fastapi import Depends
from sqlalchemy.orm import Session

from core.database import get_db
from utils import entity_store
from utils import sdc_tracking_manager
from utils import user_manager
from utils.entities import EntityType


def get_entity_store(db: Session = Depends(get_db)) -> entity_store.EntityStore:
    """Get EntityStore instance with request-scoped DB session.

    Args:
        db: Database session.

    Returns:
        EntityStore instance.
    """
    return entity_store.EntityStore(db)


EntityStoreDep = Annotated[entity_store.EntityStore, Depends(get_entity_store)]


def get_user_manager(store: EntityStoreDep) -> user_manager.UserManager:
    """Get UserManager instance sharing the request's store.

    Args:
        store: Request-scoped entity store.

    Returns:
        UserManager instance.
    """
    return user_manager.UserManager(store)


def get_sdc_tracking_manager(
    store: EntityStoreDep,
) -> sdc_tracking_manager.SdcTrackingManager:
    """Get SdcTrackingManager instance sharing the request's store."""
    return sdc_tracking_manager.SdcTrackingManager(store)


# Type aliases for dependency injection
UserManagerDep = Annotated[user_manager.UserManager, Depends(get_user_manager)]
SdcTrackingManagerDep = Annotated[
    sdc_tracking_manager.SdcTrackingManager, Depends(get_sdc_tracking_manager)
]


def ensure_super_admin(user_manager: UserManagerDep) -> None:
    """Router dependency: make sure the super-admin account exists."""
    user_manager.ensure_super_admin()


def seed_dependency(*entity_types: EntityType) -> Callable[..., None]:
    """Build a router dependency that seeds the given types if empty.

    Args:
        *entity_types: Types whose seed data must be present.

    Returns:
        A dependency function for ``APIRouter(dependencies=[Depends(...)])``.
    """

    def ensure_seeded(store: EntityStoreDep) -> None:
        for entity_type in entity_types:
            store.ensure_seed(entity_type)

    return ensure_seeded
