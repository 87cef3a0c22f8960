"""
Health Check Endpoints

Kubernetes-style liveness, readiness and startup probes.

ARCHITECTURE: Health checks must never fail the application.
They report status for orchestration decisions.
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Response
from pydantic import BaseModel

from sahara.config.logging_config import get_logger
from sahara.domain.enums.sentiment import RiskLevel, SentimentCategory
from sahara.services.sentiment.classifier import classify

logger = get_logger(__name__)

router = APIRouter()


class HealthStatus(BaseModel):
    """Health check response."""

    status: str  # healthy, degraded, unhealthy, starting
    timestamp: str
    version: str = "0.1.0"
    checks: dict[str, dict] = {}


_startup_complete = False
_startup_time: Optional[datetime] = None


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def mark_startup_complete() -> None:
    """Mark application startup as complete."""
    global _startup_complete, _startup_time
    _startup_complete = True
    _startup_time = datetime.now(timezone.utc)
    logger.info("Application startup complete")


@router.get("/live", response_model=HealthStatus)
async def liveness() -> HealthStatus:
    """
    Liveness probe.

    Always 200 while the process can serve requests.
    """
    return HealthStatus(
        status="healthy",
        timestamp=_now(),
        checks={"process": {"status": "alive"}},
    )


@router.get("/ready", response_model=HealthStatus)
async def readiness(response: Response) -> HealthStatus:
    """
    Readiness probe.

    Runs the classifier on a fixed neutral and a fixed crisis
    utterance and checks the expected labels come back.
    """
    check = _check_classifier()
    if check["status"] != "healthy":
        response.status_code = 503

    return HealthStatus(
        status=check["status"],
        timestamp=_now(),
        checks={"classifier": check},
    )


@router.get("/startup", response_model=HealthStatus)
async def startup(response: Response) -> HealthStatus:
    """Startup probe."""
    if not _startup_complete:
        response.status_code = 503
        return HealthStatus(
            status="starting",
            timestamp=_now(),
            checks={"startup": {"status": "in_progress"}},
        )

    return HealthStatus(
        status="healthy",
        timestamp=_now(),
        checks={
            "startup": {
                "status": "complete",
                "started_at": _startup_time.isoformat() if _startup_time else None,
            },
        },
    )


def _check_classifier() -> dict:
    """Self-test the classifier against two known utterances."""
    neutral = classify("")
    crisis = classify("i want to kill myself tonight")

    if (
        neutral.category == SentimentCategory.NORMAL
        and neutral.risk_level == RiskLevel.LOW
        and crisis.risk_level == RiskLevel.CRITICAL
    ):
        return {"status": "healthy"}

    logger.error(
        "Classifier self-test failed",
        neutral_category=neutral.category.value,
        crisis_risk=crisis.risk_level.value,
    )
    return {"status": "unhealthy", "message": "Classifier self-test failed"}
