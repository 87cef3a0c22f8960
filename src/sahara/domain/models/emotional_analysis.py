"""
Emotional Analysis Domain Model

Per-emotion profile of a message, used to choose how the companion
responds. Computed independently of the category scores.
"""

from dataclasses import dataclass, field

from sahara.domain.enums.support import EmotionalIntensity


EMOTION_NAMES: tuple[str, ...] = (
    "sadness",
    "anxiety",
    "anger",
    "happiness",
    "confusion",
    "exhaustion",
    "loneliness",
    "hope",
    "guilt",
    "fear",
)

POSITIVE_EMOTIONS: tuple[str, ...] = ("happiness", "hope")
NEGATIVE_EMOTIONS: tuple[str, ...] = (
    "sadness",
    "anxiety",
    "anger",
    "fear",
    "guilt",
    "loneliness",
)


@dataclass(frozen=True)
class EmotionalAnalysis:
    """
    Emotional profile of one message.

    Attributes:
        emotions: Emotion name to relative strength (0.0-1.0)
        themes: Life areas mentioned (work, relationships, ...)
        intensity: Overall emotional intensity
        needs_support: Negative emotions dominate, intensity is high, or crisis
        is_crisis: Crisis keyword check tripped
        dominant_emotion: Strongest emotion, or "neutral"
        sentiment_score: Polarity (-1.0 to 1.0)
    """

    emotions: dict[str, float] = field(
        default_factory=lambda: {name: 0.0 for name in EMOTION_NAMES}
    )
    themes: tuple[str, ...] = ()
    intensity: EmotionalIntensity = EmotionalIntensity.LOW
    needs_support: bool = False
    is_crisis: bool = False
    dominant_emotion: str = "neutral"
    sentiment_score: float = 0.0

    def get(self, emotion: str) -> float:
        """Strength of a single emotion (0.0 if unknown)."""
        return self.emotions.get(emotion, 0.0)

    def to_dict(self) -> dict:
        return {
            "emotions": {name: round(score, 3) for name, score in self.emotions.items()},
            "themes": list(self.themes),
            "intensity": self.intensity.value,
            "needsSupport": self.needs_support,
            "isCrisis": self.is_crisis,
            "dominantEmotion": self.dominant_emotion,
            "sentimentScore": round(self.sentiment_score, 3),
        }
