from typing import Optional

from fastapi import Depends, Request
from structlog import get_logger

from aldar.config import Settings
from aldar.core.errors import AuthenticationError, AuthorizationError
from aldar.dependencies.storage import get_session_store, get_settings, get_storage
from aldar.models import User, UserRole
from aldar.services.sessions import SessionStore
from aldar.services.storage import MemStorage

logger = get_logger()


async def get_session(
    request: Request,
    sessions: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
) -> Optional[dict]:
    session_id = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not session_id:
        return None
    return await sessions.get(session_id)


async def require_authenticated(session: Optional[dict] = Depends(get_session)) -> int:
    """Pass when the request carries a live session with a user id; returns that id."""
    user_id = session.get("userId") if session else None
    if user_id is None:
        raise AuthenticationError()
    return user_id


async def require_admin(
    user_id: int = Depends(require_authenticated),
    storage: MemStorage = Depends(get_storage),
) -> User:
    user = storage.get_user(user_id)
    if user is None or user.role != UserRole.admin:
        logger.warning("Admin access denied", user_id=user_id)
        raise AuthorizationError()
    return user
