# /app/routers/health_router.py

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..core import config
from ..core.exceptions import GenerationError
from ..services import gemini_service, generation_dispatcher, prompt_library
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", summary="Service and Database Health")
def health_check(
    db: DatabaseService = Depends(get_db_service)
):
    health = {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": config.APP_ENV,
        "database": {
            "configured": bool(config.DATABASE_URL),
            "connected": False,
        },
    }
    try:
        db.ping()
        health["database"]["connected"] = True
    except Exception as e:
        logger.error("Database health check failed: %s", e)
        health["status"] = "error"
        health["database"]["error"] = str(e)

    status_code = status.HTTP_200_OK if health["status"] == "ok" else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(content=health, status_code=status_code)


@router.get("/ai", summary="Gemini Connectivity Check")
async def ai_health_check():
    """Sends a short greeting through the chat model to prove the key and model work."""
    client = gemini_service.get_gemini_client()
    result = await generation_dispatcher.dispatch_text(
        client, prompt_library.HEALTH_CHECK_PROMPT, config.GEMINI_CHAT_MODEL
    )
    if result.is_error:
        raise GenerationError("Failed to test Gemini API", details=result.reason)
    return {"response": result.text}
