"""Metrics infrastructure package."""

from sahara.infrastructure.metrics.prometheus_metrics import (
    # Classification metrics
    CLASSIFICATIONS_TOTAL,
    RISK_ASSESSMENTS_TOTAL,
    WELLNESS_SCORE,
    CRISIS_KEYWORD_DETECTIONS,
    # Progress metrics
    PROGRESS_ANALYSES_TOTAL,
    # API metrics
    HTTP_REQUESTS_TOTAL,
    # Helpers
    track_classification,
    track_crisis_detection,
    track_progress_analysis,
    track_http_request,
    update_system_info,
    # Router
    metrics_router,
)

__all__ = [
    "CLASSIFICATIONS_TOTAL",
    "RISK_ASSESSMENTS_TOTAL",
    "WELLNESS_SCORE",
    "CRISIS_KEYWORD_DETECTIONS",
    "PROGRESS_ANALYSES_TOTAL",
    "HTTP_REQUESTS_TOTAL",
    "track_classification",
    "track_crisis_detection",
    "track_progress_analysis",
    "track_http_request",
    "update_system_info",
    "metrics_router",
]
