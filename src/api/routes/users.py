"""User management routes.

Visibility and edit rights depend on the caller's level. Passwords are never
returned.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, status

from api.routes.auth import get_current_user
from core.dependencies import UserManagerDep, ensure_super_admin
from core.exceptions import (
    EntityNotFoundError,
    PermissionDeniedError,
    ProtectedEntityError,
    UserAlreadyExistsError,
)
from core.responses import ok
from schemas.common import ApiResponse, DeletedInfo
from schemas.user import CreateUserRequest, PublicUser, UpdateUserRequest

router = APIRouter(
    prefix="/api/users",
    tags=["User"],
    dependencies=[Depends(ensure_super_admin)],
)


@router.get("", response_model=ApiResponse[List[PublicUser]], summary="List users")
def list_users(
    user_manager: UserManagerDep,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> dict:
    """List the users visible to the caller.

    - Level 3: everyone
    - Level 2: themselves and all Level 1 users
    - Level 1: only themselves
    """
    return ok(user_manager.list_visible_users(current_user))


@router.post("", response_model=ApiResponse[PublicUser], summary="Create user")
def create_user(
    req: CreateUserRequest,
    user_manager: UserManagerDep,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> dict:
    """Create a user.

    Permission requirements:
    - Level 3: any role
    - Level 2: Level 1 users only
    - Level 1: no permission

    Raises:
        HTTPException: If permission denied or the username is taken.
    """
    try:
        user = user_manager.create_user(
            current_user,
            username=req.username,
            password=req.password,
            role=req.role,
        )
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except UserAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ok(user)


@router.get("/{user_id}", response_model=ApiResponse[PublicUser], summary="Get user")
def get_user(
    user_id: str,
    user_manager: UserManagerDep,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> dict:
    try:
        user = user_manager.get_visible_user(current_user, user_id)
    except EntityNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found.",
        )
    return ok(user)


@router.put("/{user_id}", response_model=ApiResponse[PublicUser], summary="Update user")
def update_user(
    user_id: str,
    req: UpdateUserRequest,
    user_manager: UserManagerDep,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> dict:
    """Update a user's username, role or password.

    Permission requirements:
    - Anyone may edit their own profile
    - Level 3 may edit anyone and is the only level that can change roles
    - Level 2 may edit Level 1 users; Level 2 and 3 may change usernames

    Raises:
        HTTPException: If the user is missing, permission denied, the new
            username is taken or the change would alter the super admin.
    """
    try:
        user = user_manager.update_user(
            current_user,
            user_id,
            username=req.username,
            role=req.role,
            password=req.password,
        )
    except EntityNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found.",
        )
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except UserAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ProtectedEntityError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ok(user)


@router.delete("/{user_id}", response_model=ApiResponse[DeletedInfo], summary="Delete user")
def delete_user(
    user_id: str,
    user_manager: UserManagerDep,
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> dict:
    """Delete a user. The super admin can never be deleted.

    Raises:
        HTTPException: If the target is the super admin, missing, or the
            caller lacks permission.
    """
    try:
        user_manager.delete_user(current_user, user_id)
    except ProtectedEntityError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found.",
        )
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return ok({"id": user_id, "deleted": True})
