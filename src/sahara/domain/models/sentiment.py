"""
Sentiment Result Domain Model

Output of classifying a single utterance. Created fresh per message,
never mutated, and optionally persisted by callers as a row tag
(category / wellness score / risk level) next to the source message.
"""

from dataclasses import dataclass, field

from sahara.domain.enums.sentiment import RiskLevel, SentimentCategory

# Normalized scores may drift from 1.0 by float rounding only
SCORE_SUM_TOLERANCE: float = 1e-9


@dataclass(frozen=True)
class SentimentResult:
    """
    Classification of one utterance.

    Attributes:
        category: Arg-max label over ``scores``
        confidence: Normalized arg-max score (0.0-1.0)
        scores: Full normalized distribution over every category
        risk_level: Escalation flag derived from the scores
        keywords: Matched surface forms, de-duplicated, at most 10
        wellness_score: Heuristic wellness indicator (0-100)
    """

    category: SentimentCategory = SentimentCategory.NORMAL
    confidence: float = 0.0
    scores: dict[SentimentCategory, float] = field(default_factory=dict)
    risk_level: RiskLevel = RiskLevel.LOW
    keywords: tuple[str, ...] = ()
    wellness_score: int = 100

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be 0.0-1.0, got {self.confidence}")
        if not 0 <= self.wellness_score <= 100:
            raise ValueError(f"Wellness score must be 0-100, got {self.wellness_score}")
        if self.scores:
            total = sum(self.scores.values())
            if abs(total - 1.0) > SCORE_SUM_TOLERANCE:
                raise ValueError(f"Scores must sum to 1.0, got {total}")
            if self.scores.get(self.category, 0.0) < max(self.scores.values()):
                raise ValueError(f"Category {self.category.value} is not the top score")

    @classmethod
    def from_tag(
        cls,
        category: SentimentCategory,
        wellness_score: int,
        risk_level: RiskLevel = RiskLevel.LOW,
    ) -> "SentimentResult":
        """
        Rebuild a result from a stored row tag.

        Tags keep no distribution, so the tagged category gets all of it.
        """
        scores = {member: 0.0 for member in SentimentCategory}
        scores[category] = 1.0
        return cls(
            category=category,
            confidence=1.0,
            scores=scores,
            risk_level=risk_level,
            wellness_score=wellness_score,
        )

    @property
    def is_crisis(self) -> bool:
        """Whether the risk level calls for crisis resources."""
        return self.risk_level.requires_crisis_resources

    def to_tag(self) -> dict:
        """Compact form stored alongside a chat message or journal entry."""
        return {
            "category": self.category.value,
            "wellnessScore": self.wellness_score,
            "riskLevel": self.risk_level.value,
        }

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "category": self.category.value,
            "confidence": self.confidence,
            "scores": {category.value: score for category, score in self.scores.items()},
            "riskLevel": self.risk_level.value,
            "keywords": list(self.keywords),
            "wellnessScore": self.wellness_score,
        }
