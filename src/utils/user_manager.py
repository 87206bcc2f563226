"""User management utilities.

This module provides user management functionality on top of the entity
store: the permanent super-admin account, plaintext credential checks,
role-based visibility and the create/update/delete rules for users.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

import config
from core.exceptions import (
    EntityNotFoundError,
    PermissionDeniedError,
    ProtectedEntityError,
    UserAlreadyExistsError,
)
from schemas.user import User
from utils import permissions
from utils.entities import USER
from utils.entity_store import EntityStore
from utils.seed_data import SUPER_ADMIN_USER

logger = logging.getLogger(__name__)


def to_public(user: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of the user record without its password."""
    public = dict(user)
    public.pop("password", None)
    return public


class UserManager:
    """Manages user records and the rules around them."""

    def __init__(self, store: EntityStore):
        """Initialize UserManager.

        Args:
            store: Request-scoped entity store.
        """
        self.store = store

    def ensure_super_admin(self) -> None:
        """Recreate the super-admin account if it is missing."""
        if self.store.exists(USER, config.SUPER_ADMIN_ID):
            return
        self.store.create(USER, dict(SUPER_ADMIN_USER))
        logger.info("Seeded super admin user: %s", config.SUPER_ADMIN_ID)

    def list_users(self) -> List[Dict[str, Any]]:
        """List all users, passwords included."""
        return self.store.list(USER)

    def get_user_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        return self.store.get(USER, user_id)

    def get_user_by_username(self, username: str) -> Optional[Dict[str, Any]]:
        """Get a user by username.

        Args:
            username: Username to look up.

        Returns:
            The first user with this username, None if there is none.
        """
        for user in self.list_users():
            if user["username"] == username:
                return user
        return None

    def authenticate(self, username: str, password: str) -> Optional[Dict[str, Any]]:
        """Check plaintext credentials.

        Args:
            username: Username to log in as.
            password: Password to compare verbatim.

        Returns:
            The public profile on success, None for an unknown user or a
            wrong password alike.
        """
        user = self.get_user_by_username(username)
        if user is None or user.get("password") != password:
            logger.warning("Failed login attempt for username: %s", username)
            return None
        logger.info("User logged in: %s", username)
        return to_public(user)

    def list_visible_users(self, viewer: Dict[str, Any]) -> List[Dict[str, Any]]:
        """List the public profiles the viewer is allowed to see."""
        return [to_public(u) for u in permissions.visible_users(viewer, self.list_users())]

    def get_visible_user(self, viewer: Dict[str, Any], user_id: str) -> Dict[str, Any]:
        """Get one public profile.

        Raises:
            EntityNotFoundError: If the user does not exist or is hidden from
                the viewer.
        """
        user = self.get_user_by_id(user_id)
        if user is None or not permissions.can_view_user(viewer, user):
            raise EntityNotFoundError(USER.name, user_id)
        return to_public(user)

    def create_user(
        self,
        actor: Dict[str, Any],
        username: str,
        password: str,
        role: str,
    ) -> Dict[str, Any]:
        """Create a new user.

        Args:
            actor: The user performing the action.
            username: Username for the new user; surrounding whitespace is
                stripped.
            password: Plaintext password.
            role: Role of the new user.

        Returns:
            Public profile of the created user.

        Raises:
            PermissionDeniedError: If the actor may not create this role.
            UserAlreadyExistsError: If the username is taken.
        """
        if not permissions.can_create_user(actor, role):
            raise PermissionDeniedError(f"You cannot create users with role '{role}'.")

        username = username.strip()
        if self.get_user_by_username(username) is not None:
            raise UserAlreadyExistsError(f"User '{username}' already exists")

        user = User(id=str(uuid.uuid4()), username=username, password=password, role=role)
        stored = self.store.create(USER, user.model_dump())
        logger.info("Created user: %s (%s)", username, role)
        return to_public(stored)

    def update_user(
        self,
        actor: Dict[str, Any],
        user_id: str,
        username: Optional[str] = None,
        role: Optional[str] = None,
        password: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Update a user's username, role and/or password.

        Values equal to the stored ones are not treated as changes, so a
        client may resend the whole profile.

        Raises:
            EntityNotFoundError: If the user does not exist.
            PermissionDeniedError: If the actor may not make the change.
            ProtectedEntityError: If the change would rename or demote the
                super admin, or set its password on its behalf.
            UserAlreadyExistsError: If the new username is taken.
        """
        target = self.get_user_by_id(user_id)
        if target is None:
            raise EntityNotFoundError(USER.name, user_id)
        if not permissions.can_edit_user(actor, target):
            raise PermissionDeniedError("You cannot edit this user.")

        updates: Dict[str, Any] = {}

        if username is not None and username.strip() != target["username"]:
            if not permissions.can_change_username(actor):
                raise PermissionDeniedError("You cannot change usernames.")
            if permissions.is_super_admin_account(user_id):
                raise ProtectedEntityError("Super Admin username cannot be changed.")
            username = username.strip()
            existing = self.get_user_by_username(username)
            if existing is not None and existing["id"] != user_id:
                raise UserAlreadyExistsError(f"User '{username}' already exists")
            updates["username"] = username

        if role is not None and role != target["role"]:
            if not permissions.can_change_role(actor):
                raise PermissionDeniedError("Only a Level 3 user can change roles.")
            if permissions.is_super_admin_account(user_id):
                raise ProtectedEntityError("Super Admin role cannot be changed.")
            updates["role"] = role

        if password:
            if permissions.is_super_admin_account(user_id) and actor["id"] != user_id:
                raise ProtectedEntityError("Only the Super Admin can change its own password.")
            updates["password"] = password

        updated = self.store.patch(USER, user_id, updates)
        return to_public(updated)

    def delete_user(self, actor: Dict[str, Any], user_id: str) -> None:
        """Delete a user.

        Raises:
            ProtectedEntityError: If the user is the super admin.
            EntityNotFoundError: If the user does not exist.
            PermissionDeniedError: If the actor may not delete this user.
        """
        if permissions.is_super_admin_account(user_id):
            raise ProtectedEntityError("Super Admin cannot be deleted.")

        target = self.get_user_by_id(user_id)
        if target is None:
            raise EntityNotFoundError(USER.name, user_id)
        if not permissions.can_delete_user(actor, target):
            raise PermissionDeniedError("You cannot delete this user.")

        self.store.delete(USER, user_id)
