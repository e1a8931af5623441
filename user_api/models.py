"""Data models for the User API service."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from user_api.errors import ValidationError


REQUIRED_FIELDS_MESSAGE = "Name and email are required."


class User(BaseModel):
    """A user record held in the store."""
    id: str
    name: str
    email: str


class UserCreate(BaseModel):
    """Validated body of a create-user request."""
    name: str
    email: str


class CreatedUserResponse(BaseModel):
    """Response body for a created user, tagged with the environment name."""
    env: str
    id: str
    name: str
    email: str


class UserListResponse(BaseModel):
    """Response body for the user listing."""
    env: str
    total: int
    users: List[User]


class ErrorResponse(BaseModel):
    """Error payload returned for rejected requests."""
    error: str


def validate_user_payload(payload: Optional[Dict[str, Any]]) -> UserCreate:
    """
    Check that a create-user body carries a non-empty string name and email.

    A missing body is treated as an empty object.

    Args:
        payload: Decoded JSON body

    Returns:
        UserCreate with the accepted values

    Raises:
        ValidationError: If either field is missing, empty, or not a string
    """
    payload = payload or {}
    name = payload.get("name")
    email = payload.get("email")

    if not isinstance(name, str) or not isinstance(email, str) or not name or not email:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    return UserCreate(name=name, email=email)
