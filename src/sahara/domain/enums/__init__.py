"""Domain enums package."""

from sahara.domain.enums.sentiment import (
    EntrySource,
    ProgressTrend,
    RiskLevel,
    SentimentCategory,
)
from sahara.domain.enums.support import (
    EmotionalIntensity,
    PetAnimation,
    TherapeuticApproach,
)

__all__ = [
    "EntrySource",
    "ProgressTrend",
    "RiskLevel",
    "SentimentCategory",
    "EmotionalIntensity",
    "PetAnimation",
    "TherapeuticApproach",
]
