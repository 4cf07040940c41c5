# wordhoard\adapters\api\routers\health.py
from typing import Dict

import structlog
from fastapi import APIRouter, Depends, Response, status

from wordhoard.adapters.api.dependencies import get_lexicon_store
from wordhoard.services.lexicon_store import LexiconStore

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe():
    """Returns 200 OK if the service is operational."""
    return {"status": "ok", "service": "wordhoard-api"}


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_probe(
    response: Response,
    store: LexiconStore = Depends(get_lexicon_store),
) -> Dict[str, str]:
    """
    Checks the storage medium. Returns 503 Service Unavailable if it is not
    accessible.
    """
    health_status = {"storage": "down"}

    try:
        if await store.health_check():
            health_status["storage"] = "up"
    except Exception as e:
        logger.error("health_check_failed", component="storage", error=str(e))

    if health_status["storage"] != "up":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("readiness_probe_failed", status=health_status)

    return health_status
