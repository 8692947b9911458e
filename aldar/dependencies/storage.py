from fastapi import Request

from aldar.config import Settings
from aldar.services.sessions import SessionStore
from aldar.services.storage import MemStorage


def get_storage(request: Request) -> MemStorage:
    return request.app.state.storage


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.sessions


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
