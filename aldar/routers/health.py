from fastapi import APIRouter, Depends
from structlog import get_logger

from aldar.dependencies.storage import get_session_store, get_storage
from aldar.services.sessions import SessionStore
from aldar.services.storage import MemStorage

logger = get_logger()
router = APIRouter(prefix="/api", tags=["health"])

@router.get("/health")
async def health():
    return {"status": "ok"}

@router.get("/health/ready")
async def readiness(sessions: SessionStore = Depends(get_session_store), storage: MemStorage = Depends(get_storage)):
    details = {"status": "ok", "checks": {}, "counts": {}}

    # Session backend check
    try:
        ok = await sessions.ping()
        details["checks"]["sessions"] = "ok" if ok else "fail"
        if not ok:
            details["status"] = "degraded"
    except Exception as e:
        logger.warning("health session store fail", error=str(e))
        details["checks"]["sessions"] = f"fail: {str(e)}"
        details["status"] = "degraded"

    details["counts"] = {
        "properties": len(storage.properties),
        "users": len(storage.users),
        "contactMessages": len(storage.contact_messages),
        "testimonials": len(storage.testimonials),
    }
    return details
