"""
Sentiment Enumerations

Closed label sets produced by the sentiment classifier and the
progress analyzer.

NOTE: Member order of SentimentCategory is significant. Arg-max ties
resolve to the earliest member.
"""

from enum import StrEnum


class SentimentCategory(StrEnum):
    """
    Mental-health sentiment categories.

    Mutually exclusive as an output label; the classifier scores
    every category and reports the arg-max.
    """

    NORMAL = "normal"
    ANXIETY = "anxiety"
    DEPRESSION = "depression"
    STRESS = "stress"
    SUICIDAL = "suicidal"
    BIPOLAR = "bipolar"
    PERSONALITY_DISORDER = "personality_disorder"


class RiskLevel(StrEnum):
    """
    Coarse escalation flag derived from category scores.

    SAFETY_NOTE: CRITICAL is meant to surface crisis helpline
    resources. The classifier never escalates on its own; callers do.
    """

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def requires_crisis_resources(self) -> bool:
        """Whether callers should display helpline resources."""
        return self in (RiskLevel.HIGH, RiskLevel.CRITICAL)


class EntrySource(StrEnum):
    """Where a progress entry originated."""

    CHAT = "chat"
    JOURNAL = "journal"


class ProgressTrend(StrEnum):
    """Direction of wellness across a list of entries."""

    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"
