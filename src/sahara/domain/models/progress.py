"""
Progress Domain Models

Historical classified entries and the aggregate computed over them
for the dashboard trend indicators.
"""

from dataclasses import dataclass, field
from datetime import datetime

from sahara.domain.enums.sentiment import EntrySource, ProgressTrend, SentimentCategory
from sahara.domain.models.sentiment import SentimentResult


@dataclass(frozen=True)
class ProgressEntry:
    """
    One historical data point.

    Attributes:
        date: When the message or journal entry was written
        sentiment: Classification of ``text``
        source: Chat message or journal entry
        text: Original text (never logged)
    """

    date: datetime
    sentiment: SentimentResult
    source: EntrySource = EntrySource.CHAT
    text: str = ""


@dataclass(frozen=True)
class WeeklyScore:
    """Average wellness of one bucket of seven consecutive entries."""

    week: str
    score: int

    def to_dict(self) -> dict:
        return {"week": self.week, "score": self.score}


@dataclass(frozen=True)
class ProgressAnalysis:
    """
    Aggregate over a list of progress entries.

    Recomputed on demand from the full list; there is no
    incremental update contract.
    """

    trend: ProgressTrend = ProgressTrend.STABLE
    average_wellness: int = 75
    dominant_category: SentimentCategory = SentimentCategory.NORMAL
    weekly_scores: tuple[WeeklyScore, ...] = ()
    recent_mood: SentimentCategory = SentimentCategory.NORMAL
    insights: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "trend": self.trend.value,
            "averageWellness": self.average_wellness,
            "dominantCategory": self.dominant_category.value,
            "weeklyScores": [week.to_dict() for week in self.weekly_scores],
            "recentMood": self.recent_mood.value,
            "insights": list(self.insights),
        }
