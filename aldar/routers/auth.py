from functools import lru_cache

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool
from structlog import get_logger

from aldar.config import Settings
from aldar.core import messages
from aldar.core.errors import AuthenticationError, NotFoundError
from aldar.core.security import hash_password, verify_password
from aldar.dependencies.auth import require_authenticated
from aldar.dependencies.storage import get_session_store, get_settings, get_storage
from aldar.schemas.auth import LoginRequest, UserProfileResponse, UserResponse
from aldar.schemas.common import MessageResponse
from aldar.services.sessions import SessionStore, new_session_id
from aldar.services.storage import MemStorage

logger = get_logger()
router = APIRouter(prefix="/api", tags=["auth"])


@lru_cache(maxsize=None)
def _placeholder_hash(rounds: int) -> str:
    return hash_password("placeholder-password", rounds=rounds)


@router.post("/login", response_model=UserResponse)
async def login(
    payload: LoginRequest,
    request: Request,
    response: Response,
    storage: MemStorage = Depends(get_storage),
    sessions: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
):
    user = storage.get_user_by_username(payload.username)
    # Unknown usernames still pay for a bcrypt check so both failures look alike
    if user is not None:
        password_hash = user.password_hash
    else:
        password_hash = await run_in_threadpool(_placeholder_hash, settings.PASSWORD_HASH_ROUNDS)
    password_ok = await run_in_threadpool(verify_password, payload.password, password_hash)
    if user is None or not password_ok:
        logger.info("Login failed", username=payload.username)
        raise AuthenticationError(messages.INVALID_CREDENTIALS)

    previous = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if previous:
        await sessions.destroy(previous)
    session_id = new_session_id()
    await sessions.set(session_id, {"userId": user.id})
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        session_id,
        max_age=settings.SESSION_TTL_SECONDS,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    logger.info("User logged in", user_id=user.id, role=user.role)
    return user


@router.post("/logout", response_model=MessageResponse)
async def logout(
    request: Request,
    response: Response,
    sessions: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
):
    session_id = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if session_id:
        await sessions.destroy(session_id)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": messages.LOGOUT_SUCCESS}


@router.get("/user", response_model=UserProfileResponse)
async def current_user(user_id: int = Depends(require_authenticated), storage: MemStorage = Depends(get_storage)):
    user = storage.get_user(user_id)
    if user is None:
        raise NotFoundError(messages.USER_NOT_FOUND)
    return user
