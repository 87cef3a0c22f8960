"""
Support Enumerations

Labels used when turning an analysis into a companion reply.
"""

from enum import StrEnum


class TherapeuticApproach(StrEnum):
    """
    Conversational approach for a templated reply.

    CRISIS_SUPPORT always takes precedence over every other approach.
    """

    VALIDATION = "validation"
    EXPLORATION = "exploration"
    GROUNDING = "grounding"
    ENCOURAGEMENT = "encouragement"
    REFLECTION = "reflection"
    COMFORT = "comfort"
    CRISIS_SUPPORT = "crisis_support"


class PetAnimation(StrEnum):
    """Animation hint for the companion pet."""

    IDLE = "idle"
    HAPPY = "happy"
    THINKING = "thinking"
    GLOW = "glow"
    COMFORT = "comfort"
    CELEBRATE = "celebrate"
    BREATHE = "breathe"


class EmotionalIntensity(StrEnum):
    """Overall strength of detected emotions."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
