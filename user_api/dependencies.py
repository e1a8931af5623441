"""FastAPI dependencies resolving per-app state."""
from fastapi import Request

from user_api.config import Settings
from user_api.store import UserStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> UserStore:
    return request.app.state.store
