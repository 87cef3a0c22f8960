"""
SAHARA Domain Layer

Value objects produced by the analysis services.
Independent of the HTTP layer and of any storage.
"""

from sahara.domain.enums import (
    EmotionalIntensity,
    EntrySource,
    PetAnimation,
    ProgressTrend,
    RiskLevel,
    SentimentCategory,
    TherapeuticApproach,
)
from sahara.domain.models import (
    EmotionalAnalysis,
    ProgressAnalysis,
    ProgressEntry,
    SentimentResult,
    WeeklyScore,
)

__all__ = [
    # Enums
    "EmotionalIntensity",
    "EntrySource",
    "PetAnimation",
    "ProgressTrend",
    "RiskLevel",
    "SentimentCategory",
    "TherapeuticApproach",
    # Models
    "EmotionalAnalysis",
    "ProgressAnalysis",
    "ProgressEntry",
    "SentimentResult",
    "WeeklyScore",
]
