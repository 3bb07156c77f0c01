"""Health check endpoints for production monitoring."""

import logging
import os
import time
from typing import Any, Dict

import psutil
from django.conf import settings
from django.db import connections
from django.db.utils import DatabaseError
from django.http import JsonResponse
from django.utils import timezone

logger = logging.getLogger(__name__)

APP_VERSION = os.environ.get("APP_VERSION", "1.0.0")
APP_START_TIME = time.time()


def _get_uptime_formatted() -> Dict[str, Any]:
    """Get uptime in human-readable format and raw seconds."""
    uptime_seconds = int(time.time() - APP_START_TIME)
    days, remainder = divmod(uptime_seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)

    parts = []
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    parts.append(f"{seconds}s")

    return {"seconds": uptime_seconds, "formatted": " ".join(parts)}


def _get_system_metrics() -> Dict[str, Any]:
    """Get process metrics (memory, CPU)."""
    try:
        process = psutil.Process()
        memory_info = process.memory_info()

        return {
            "memory": {
                "rss_mb": round(memory_info.rss / 1024 / 1024, 2),
                "percent": round(process.memory_percent(), 2),
            },
            "cpu": {
                "percent": round(process.cpu_percent(interval=0.1), 2),
                "num_threads": process.num_threads(),
            },
        }
    except psutil.Error as e:
        return {"error": str(e)}


def check_database(alias: str = "default") -> Dict[str, Any]:
    """Run a trivial query on ``alias``; report latency or the failure."""
    started = time.monotonic()
    try:
        with connections[alias].cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError as e:
        logger.warning("Database health check failed: %s", e)
        return {"status": "unhealthy", "error": str(e)}
    return {"status": "healthy", "latency_ms": round((time.monotonic() - started) * 1000, 2)}


def health_check(request):
    """
    Liveness probe. Returns 200 while the process can serve requests;
    does not touch the database.
    """
    return JsonResponse(
        {
            "status": "healthy",
            "version": APP_VERSION,
            "environment": "production" if not settings.DEBUG else "development",
            "timestamp": timezone.now().isoformat(),
            "uptime": _get_uptime_formatted(),
        }
    )


def readiness_check(request):
    """Readiness probe: 200 when the submissions database answers, 503 otherwise."""
    database = check_database(settings.IDEAHUB_DATABASE)
    ready = database["status"] == "healthy"
    return JsonResponse(
        {
            "status": "ready" if ready else "not_ready",
            "checks": {"database": database},
            "timestamp": timezone.now().isoformat(),
        },
        status=200 if ready else 503,
    )


def detailed_health(request):
    database = check_database(settings.IDEAHUB_DATABASE)
    return JsonResponse(
        {
            "status": database["status"],
            "version": APP_VERSION,
            "uptime": _get_uptime_formatted(),
            "database": {
                **database,
                "engine": settings.DATABASES[settings.IDEAHUB_DATABASE].get("ENGINE", "unknown"),
            },
            "system": _get_system_metrics(),
            "timestamp": timezone.now().isoformat(),
        },
        status=200 if database["status"] == "healthy" else 503,
    )
