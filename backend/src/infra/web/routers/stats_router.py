import os
import time
from datetime import datetime, timezone
from typing import Any

import psutil
import structlog
from fastapi import APIRouter, Response, status
from sqlalchemy import text

from infra.config.config import get_config
from infra.db.session import get_engine
from infra.utils.formatters import format_bytes, format_uptime

logger = structlog.stdlib.get_logger(__name__)

router = APIRouter(prefix="/stats", tags=["Stats"])

_start_time: float = time.time()
_current_process: psutil.Process = psutil.Process(os.getpid())


async def _check_database() -> str:
    try:
        async with get_engine().connect() as connection:
            await connection.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Database health check failed")
        return "DOWN"

    return "UP"


@router.get(
    "/health",
    response_model=dict[str, Any],
    status_code=status.HTTP_200_OK,
    summary="Get application health status",
)
async def get_health(response: Response):
    config = get_config()

    try:
        memory_info = _current_process.memory_full_info()
        database_status = await _check_database()

        if database_status != "UP":
            response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

        return {
            "status": "UP" if database_status == "UP" else "DEGRADED",
            "database": database_status,
            "uptime": format_uptime(time.time() - _start_time),
            "app_name": config.APP_NAME,
            "version": config.VERSION,
            "ram": format_bytes(memory_info.rss),
            "cpu_percent": _current_process.cpu_percent(interval=0.1),
            "timestamp": datetime.now(timezone.utc),
        }

    except Exception as e:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

        return {
            "status": "DEGRADED",
            "error": str(e),
            "timestamp": datetime.now(timezone.utc),
        }
