"""
Prometheus Metrics

Observability for the Sahara sentiment service.
Exposes metrics at /metrics for Prometheus scraping.

ARCHITECTURE: Metrics are recorded at the API layer only. The
classifier and analyzers stay free of side effects.
"""

from fastapi import APIRouter, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    REGISTRY,
    Counter,
    Histogram,
    Info,
    generate_latest,
)

from sahara.domain.models.progress import ProgressAnalysis
from sahara.domain.models.sentiment import SentimentResult

# =============================================================================
# CLASSIFICATION METRICS
# =============================================================================

CLASSIFICATIONS_TOTAL = Counter(
    "sahara_classifications_total",
    "Messages classified by category",
    ["category", "source"],  # source: chat, journal, api
)

RISK_ASSESSMENTS_TOTAL = Counter(
    "sahara_risk_assessments_total",
    "Classifications by risk level",
    ["risk_level"],  # low, moderate, high, critical
)

WELLNESS_SCORE = Histogram(
    "sahara_wellness_score",
    "Distribution of wellness scores",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

CRISIS_KEYWORD_DETECTIONS = Counter(
    "sahara_crisis_keyword_detections_total",
    "Messages that tripped the crisis keyword check",
)

# =============================================================================
# PROGRESS METRICS
# =============================================================================

PROGRESS_ANALYSES_TOTAL = Counter(
    "sahara_progress_analyses_total",
    "Progress analyses by trend",
    ["trend"],  # improving, stable, declining
)

# =============================================================================
# API METRICS
# =============================================================================

HTTP_REQUESTS_TOTAL = Counter(
    "sahara_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

SYSTEM_INFO = Info(
    "sahara_system",
    "Sahara system information",
)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def track_classification(result: SentimentResult, source: str = "api") -> None:
    """Record one classification."""
    CLASSIFICATIONS_TOTAL.labels(category=result.category.value, source=source).inc()
    RISK_ASSESSMENTS_TOTAL.labels(risk_level=result.risk_level.value).inc()
    WELLNESS_SCORE.observe(result.wellness_score)


def track_crisis_detection() -> None:
    """Record a crisis keyword hit."""
    CRISIS_KEYWORD_DETECTIONS.inc()


def track_progress_analysis(analysis: ProgressAnalysis) -> None:
    """Record one progress analysis."""
    PROGRESS_ANALYSES_TOTAL.labels(trend=analysis.trend.value).inc()


def track_http_request(method: str, endpoint: str, status_code: int) -> None:
    """Record one HTTP request."""
    HTTP_REQUESTS_TOTAL.labels(
        method=method,
        endpoint=endpoint,
        status_code=str(status_code),
    ).inc()


def update_system_info(environment: str, version: str = "0.1.0") -> None:
    """Update system info metric with current environment."""
    SYSTEM_INFO.info({
        "version": version,
        "environment": environment,
    })


# =============================================================================
# METRICS ENDPOINT
# =============================================================================

metrics_router = APIRouter(tags=["metrics"])


@metrics_router.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics in text exposition format."""
    return Response(
        content=generate_latest(REGISTRY),
        media_type=CONTENT_TYPE_LATEST,
    )
