"""User endpoint handlers."""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from user_api.config import Settings
from user_api.dependencies import get_settings, get_store
from user_api.models import (
    CreatedUserResponse,
    ErrorResponse,
    UserListResponse,
    validate_user_payload,
)
from user_api.store import UserStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user", tags=["users"])


@router.post(
    "",
    status_code=201,
    response_model=CreatedUserResponse,
    responses={400: {"model": ErrorResponse}},
)
def create_user(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    settings: Settings = Depends(get_settings),
    store: UserStore = Depends(get_store),
):
    """Create a user from a JSON body with ``name`` and ``email``."""
    data = validate_user_payload(payload)
    user = store.create(data.name, data.email)

    logger.info("[%s] User created: %s", settings.env_name, user.name)

    return CreatedUserResponse(env=settings.env_name, **user.model_dump())


@router.get("", response_model=UserListResponse)
def list_users(
    settings: Settings = Depends(get_settings),
    store: UserStore = Depends(get_store),
):
    """List all users in creation order."""
    users = store.list()
    return UserListResponse(env=settings.env_name, total=len(users), users=users)
