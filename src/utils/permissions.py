"""Role-ranked permission rules.

Users hold one of three levels. A higher level implies broader privilege:

- Level 1: normal user.
- Level 2: admin.
- Level 3: super admin.

Every helper takes plain user records (dicts with ``id`` and ``role``).
"""

from typing import Any, Dict, Iterable, List

import config

USER_ROLES = ("Level 1", "Level 2", "Level 3")

ROLE_LEVELS: Dict[str, int] = {role: rank for rank, role in enumerate(USER_ROLES, start=1)}

NORMAL_USER = 1
ADMIN = 2
SUPER_ADMIN = 3


def role_level(role: str) -> int:
    """Return the numeric rank of a role, 0 for unknown roles."""
    return ROLE_LEVELS.get(role, 0)


def user_level(user: Dict[str, Any]) -> int:
    return role_level(user.get("role", ""))


def is_super_admin_account(user_id: str) -> bool:
    """Whether the id belongs to the permanent super-admin account."""
    return user_id == config.SUPER_ADMIN_ID


def can_manage_definitions(actor: Dict[str, Any]) -> bool:
    """Create, update and delete of reference data needs admin or above."""
    return user_level(actor) >= ADMIN


def can_view_user(viewer: Dict[str, Any], target: Dict[str, Any]) -> bool:
    """Level 3 sees everyone, Level 2 sees itself and Level 1, Level 1 sees itself."""
    if viewer["id"] == target["id"]:
        return True
    level = user_level(viewer)
    if level >= SUPER_ADMIN:
        return True
    if level == ADMIN:
        return user_level(target) == NORMAL_USER
    return False


def visible_users(
    viewer: Dict[str, Any], users: Iterable[Dict[str, Any]]
) -> List[Dict[str, Any]]:
    return [user for user in users if can_view_user(viewer, user)]


def can_create_user(actor: Dict[str, Any], role: str) -> bool:
    level = user_level(actor)
    if level >= SUPER_ADMIN:
        return True
    if level == ADMIN:
        return role_level(role) == NORMAL_USER
    return False


def can_edit_user(actor: Dict[str, Any], target: Dict[str, Any]) -> bool:
    """Anyone may edit their own profile; admins may edit users they can see."""
    if actor["id"] == target["id"]:
        return True
    return user_level(actor) >= ADMIN and can_view_user(actor, target)


def can_change_role(actor: Dict[str, Any]) -> bool:
    return user_level(actor) >= SUPER_ADMIN


def can_change_username(actor: Dict[str, Any]) -> bool:
    return user_level(actor) >= ADMIN


def can_delete_user(actor: Dict[str, Any], target: Dict[str, Any]) -> bool:
    if is_super_admin_account(target["id"]):
        return False
    return user_level(actor) >= ADMIN and can_view_user(actor, target)


def can_create_tracking_entry(actor: Dict[str, Any]) -> bool:
    return user_level(actor) >= ADMIN


def can_modify_tracking_entry(actor: Dict[str, Any], entry: Dict[str, Any]) -> bool:
    """The entry's creator, or any admin, may edit or delete it."""
    if entry.get("createdBy") == actor["id"]:
        return True
    return user_level(actor) >= ADMIN
