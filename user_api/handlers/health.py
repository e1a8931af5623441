"""Health check endpoint handler."""
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from user_api.config import Settings
from user_api.dependencies import get_settings

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
def health_check(settings: Settings = Depends(get_settings)):
    """
    Health check endpoint reporting the running environment.

    Returns:
        str: Plain-text status message
    """
    return f"API is running in {settings.env_name} environment."
