"""Authentication routes.

This module handles login and resolves the calling user for other routes.

The server keeps no session state. After logging in, the client holds on to
the returned profile and sends the user's id in the ``X-User-Id`` header on
requests that need to know who is calling.
"""

import logging
from typing import Dict, Any, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, status

from config import USER_ID_HEADER
from core.dependencies import UserManagerDep, ensure_super_admin
from core.responses import ok
from schemas.common import ApiResponse
from schemas.user import LoginRequest, PublicUser
from utils.user_manager import to_public

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/auth",
    tags=["Auth"],
    dependencies=[Depends(ensure_super_admin)],
)


def get_current_user(
    user_manager: UserManagerDep,
    caller_id: Optional[str] = Header(default=None, alias=USER_ID_HEADER),
) -> Dict[str, Any]:
    """Get the calling user from the user id header.

    Args:
        user_manager: Injected UserManager instance.
        caller_id: Value of the user id header.

    Returns:
        The caller's full user record.

    Raises:
        HTTPException: If the header is missing or names no user.
    """
    if not caller_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required.",
        )
    user = user_manager.get_user_by_id(caller_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found.",
        )
    return user


@router.post("/login", response_model=ApiResponse[PublicUser], summary="Log in")
def login(
    req: LoginRequest,
    user_manager: UserManagerDep,
) -> dict:
    """Login with username and password.

    Unknown usernames and wrong passwords fail the same way.

    Args:
        req: Login request with username and password.
        user_manager: Injected UserManager instance.

    Returns:
        The user's profile, without the password.

    Raises:
        HTTPException: If the credentials do not match.
    """
    profile = user_manager.authenticate(req.username, req.password)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials.",
        )
    return ok(profile)


@router.get("/me", response_model=ApiResponse[PublicUser], summary="Current user")
def get_current_user_info(
    current_user: Dict[str, Any] = Depends(get_current_user),
) -> dict:
    """Return the calling user's profile."""
    return ok(to_public(current_user))
