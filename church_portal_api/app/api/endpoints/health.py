"""Liveness endpoint reporting whether MongoDB answers."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Request
from pymongo.errors import PyMongoError


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def health_check(request: Request) -> Dict[str, Any]:
    db_connected = True
    try:
        await request.app.state.database.command("ping")
    except PyMongoError as exc:
        logger.warning("Database ping failed: %s", exc)
        db_connected = False
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "db_connected": db_connected,
    }
