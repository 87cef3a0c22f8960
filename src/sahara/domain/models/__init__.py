"""Domain models package."""

from sahara.domain.models.emotional_analysis import EmotionalAnalysis
from sahara.domain.models.progress import ProgressAnalysis, ProgressEntry, WeeklyScore
from sahara.domain.models.sentiment import SentimentResult

__all__ = [
    "EmotionalAnalysis",
    "ProgressAnalysis",
    "ProgressEntry",
    "WeeklyScore",
    "SentimentResult",
]
