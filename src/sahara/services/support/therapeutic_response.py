"""
Therapeutic Response

Template-based companion replies. Used as the offline fallback when
no LLM reply is available, and to pick a pet animation.

ARCHITECTURE: Decision rules are checked in priority order, crisis
first. Randomness comes only from the injected ``random.Random``.

CLINICAL_REVIEW_REQUIRED: Templates and approach rules should be
reviewed by the clinical team.
"""

import random
from dataclasses import dataclass
from typing import Optional

from sahara.config.logging_config import get_logger
from sahara.domain.enums.sentiment import RiskLevel
from sahara.domain.enums.support import EmotionalIntensity, PetAnimation, TherapeuticApproach
from sahara.domain.models.emotional_analysis import EmotionalAnalysis
from sahara.domain.models.sentiment import SentimentResult
from sahara.services.sentiment.classifier import classify
from sahara.services.sentiment.emotion_analyzer import analyze_emotions

logger = get_logger(__name__)


RESPONSE_TEMPLATES: dict[TherapeuticApproach, tuple[str, ...]] = {
    TherapeuticApproach.VALIDATION: (
        "What you're feeling is completely valid. It takes courage to share that.",
        "I hear you, and your feelings make sense given what you're going through.",
        "Thank you for trusting me with this. Your emotions are real and important.",
        "It's okay to feel this way. You don't have to have it all figured out.",
    ),
    TherapeuticApproach.EXPLORATION: (
        "I'd love to understand more. What do you think might be behind these feelings?",
        "That's interesting. Can you tell me more about what's been on your mind?",
        "I'm curious - when did you first start noticing this?",
        "Let's explore this together. What feels most important to you right now?",
    ),
    TherapeuticApproach.GROUNDING: (
        "Let's take a moment together. Can you feel your feet on the ground?",
        "Take a slow, deep breath with me. You're safe in this moment.",
        "Right now, in this moment, you're okay. Let's focus on the present.",
        "What's one thing you can see, hear, or feel right now?",
    ),
    TherapeuticApproach.ENCOURAGEMENT: (
        "I'm so proud of you for recognizing that. That's real growth.",
        "You're doing better than you think. Every small step counts.",
        "Your resilience is inspiring. You've handled so much already.",
        "I believe in you. You have the strength to get through this.",
    ),
    TherapeuticApproach.REFLECTION: (
        "It sounds like you've been carrying a lot. How does it feel to share this?",
        "What do you think this experience is teaching you about yourself?",
        "If you could give yourself advice right now, what would you say?",
        "What would taking care of yourself look like today?",
    ),
    TherapeuticApproach.COMFORT: (
        "I'm here with you. You don't have to face this alone.",
        "It's okay to not be okay right now. I'm here to listen.",
        "Your feelings are heavy right now, and that's understandable.",
        "Take all the time you need. There's no rush here.",
    ),
    TherapeuticApproach.CRISIS_SUPPORT: (
        "I'm really glad you told me this. You don't have to go through it alone. "
        "Please consider reaching out to a crisis helpline - they're available 24/7.",
        "What you're feeling sounds incredibly difficult. Your life matters. "
        "Would you consider calling a helpline?",
        "I hear how much pain you're in. Please know that help is available. "
        "Crisis counselors are trained to help.",
    ),
}

PET_REFERENCES: dict[TherapeuticApproach, str] = {
    TherapeuticApproach.VALIDATION: "Your companion seems to sense what you're feeling too.",
    TherapeuticApproach.EXPLORATION: "Your pet tilts their head curiously, as if wondering along with us.",
    TherapeuticApproach.GROUNDING: "Your pet's calm presence might help you feel more grounded.",
    TherapeuticApproach.ENCOURAGEMENT: "Your pet seems proud of you too!",
    TherapeuticApproach.REFLECTION: "Your pet watches thoughtfully as you reflect.",
    TherapeuticApproach.COMFORT: "Your pet moves closer, offering silent comfort.",
    TherapeuticApproach.CRISIS_SUPPORT: "Your pet is here with you, and so am I.",
}

FOLLOW_UP_QUESTIONS: tuple[str, ...] = (
    "Would you like to tell me more?",
    "How does that make you feel?",
    "What's been on your mind about this?",
    "What would help you feel better right now?",
)

PET_REFERENCE_PROBABILITY: float = 0.3
FOLLOW_UP_PROBABILITY: float = 0.5


@dataclass(frozen=True)
class TherapeuticResponse:
    """
    Templated companion reply.

    Attributes:
        content: Reply text
        approach: Approach the template was drawn from
        suggested_animation: Pet animation hint
        sentiment: Category classification of the message
        emotional: Emotional profile of the message
    """

    content: str
    approach: TherapeuticApproach
    suggested_animation: PetAnimation
    sentiment: SentimentResult
    emotional: EmotionalAnalysis

    def to_dict(self) -> dict:
        return {
            "content": self.content,
            "approach": self.approach.value,
            "suggestedAnimation": self.suggested_animation.value,
            "sentiment": self.sentiment.to_dict(),
            "emotionalAnalysis": self.emotional.to_dict(),
        }


def determine_approach(
    sentiment: SentimentResult,
    emotional: EmotionalAnalysis,
) -> TherapeuticApproach:
    """
    Choose the conversational approach.

    SAFETY_CRITICAL: Crisis keywords or CRITICAL risk always yield
    CRISIS_SUPPORT.
    """
    if emotional.is_crisis or sentiment.risk_level == RiskLevel.CRITICAL:
        return TherapeuticApproach.CRISIS_SUPPORT

    sadness = emotional.get("sadness")
    anxiety = emotional.get("anxiety")

    if emotional.intensity == EmotionalIntensity.HIGH and (sadness > 0.5 or anxiety > 0.5):
        return TherapeuticApproach.COMFORT
    if emotional.get("confusion") > 0.5:
        return TherapeuticApproach.EXPLORATION
    if anxiety > 0.5 or emotional.get("fear") > 0.5:
        return TherapeuticApproach.GROUNDING
    if sadness > 0.3 or emotional.get("loneliness") > 0.3:
        return TherapeuticApproach.VALIDATION
    if emotional.get("happiness") > 0.3 or emotional.get("hope") > 0.3:
        return TherapeuticApproach.ENCOURAGEMENT
    return TherapeuticApproach.REFLECTION


def suggest_animation(
    approach: TherapeuticApproach,
    emotional: EmotionalAnalysis,
) -> PetAnimation:
    """Pet animation for a templated reply."""
    if emotional.is_crisis:
        return PetAnimation.COMFORT
    if emotional.get("happiness") > 0.5:
        return PetAnimation.HAPPY
    if approach in (TherapeuticApproach.GROUNDING, TherapeuticApproach.COMFORT):
        return PetAnimation.GLOW
    if approach in (TherapeuticApproach.EXPLORATION, TherapeuticApproach.REFLECTION):
        return PetAnimation.THINKING
    if approach == TherapeuticApproach.ENCOURAGEMENT:
        return PetAnimation.CELEBRATE
    return PetAnimation.IDLE


def generate_response(
    message: str,
    rng: Optional[random.Random] = None,
) -> TherapeuticResponse:
    """
    Build a templated reply for a user message.

    Pet references and follow-up questions are never added during
    a crisis.

    Args:
        message: Raw user message
        rng: Random source (a fresh unseeded Random when None)

    Returns:
        TherapeuticResponse
    """
    rng = rng or random.Random()

    sentiment = classify(message)
    emotional = analyze_emotions(message)
    approach = determine_approach(sentiment, emotional)

    content = rng.choice(RESPONSE_TEMPLATES[approach])

    if not emotional.is_crisis:
        if rng.random() < PET_REFERENCE_PROBABILITY:
            content = f"{content} {PET_REFERENCES[approach]}"
        if rng.random() < FOLLOW_UP_PROBABILITY:
            content = f"{content} {rng.choice(FOLLOW_UP_QUESTIONS)}"

    logger.debug(
        "Therapeutic response generated",
        approach=approach.value,
        category=sentiment.category.value,
        risk_level=sentiment.risk_level.value,
    )

    return TherapeuticResponse(
        content=content,
        approach=approach,
        suggested_animation=suggest_animation(approach, emotional),
        sentiment=sentiment,
        emotional=emotional,
    )
