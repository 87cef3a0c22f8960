"""
Supportive Messages

Short companion copy and display metadata keyed by sentiment
category.

CLINICAL_REVIEW_REQUIRED: Copy for the suicidal category must
always point to crisis resources.
"""

import random
from dataclasses import dataclass
from typing import Optional

from sahara.domain.enums.sentiment import RiskLevel, SentimentCategory
from sahara.domain.enums.support import PetAnimation
from sahara.domain.models.sentiment import SentimentResult


SUPPORTIVE_MESSAGES: dict[SentimentCategory, tuple[str, ...]] = {
    SentimentCategory.NORMAL: (
        "You're doing great! Keep nurturing your well-being.",
        "It's wonderful to see you in a good place.",
        "Your positive energy is inspiring!",
    ),
    SentimentCategory.ANXIETY: (
        "Take a deep breath. You're safe in this moment.",
        "It's okay to feel anxious. Let's work through this together.",
        "Remember: this feeling will pass. You've overcome challenges before.",
    ),
    SentimentCategory.DEPRESSION: (
        "You matter, and your feelings are valid.",
        "Even small steps forward are progress. Be gentle with yourself.",
        "You're not alone in this. Reaching out takes courage.",
    ),
    SentimentCategory.STRESS: (
        "It's okay to take a break. Your well-being comes first.",
        "One thing at a time. You don't have to do everything today.",
        "Remember to breathe. You're handling more than you realize.",
    ),
    SentimentCategory.SUICIDAL: (
        "Please reach out to a crisis helpline. You deserve support.",
        "Your life has value. Please talk to someone who can help.",
        "Crisis resources are available 24/7. You don't have to face this alone.",
    ),
    SentimentCategory.BIPOLAR: (
        "Tracking your moods is a great step. Patterns help us understand.",
        "Both highs and lows are part of your journey. You're learning.",
        "Consistency in self-care can help stabilize your mood.",
    ),
    SentimentCategory.PERSONALITY_DISORDER: (
        "Your emotions are valid, even when they feel intense.",
        "Building stable relationships takes time. Be patient with yourself.",
        "You're more than your diagnosis. Growth is always possible.",
    ),
}


@dataclass(frozen=True)
class CategoryInfo:
    """User-facing label, text and background color classes, and emoji."""

    label: str
    color: str
    bg_color: str
    emoji: str

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "color": self.color,
            "bgColor": self.bg_color,
            "emoji": self.emoji,
        }


CATEGORY_INFO: dict[SentimentCategory, CategoryInfo] = {
    SentimentCategory.NORMAL: CategoryInfo(label="Balanced", color="text-green-700", bg_color="bg-green-100", emoji="😊"),
    SentimentCategory.ANXIETY: CategoryInfo(label="Anxious", color="text-purple-700", bg_color="bg-purple-100", emoji="😰"),
    SentimentCategory.DEPRESSION: CategoryInfo(label="Low Mood", color="text-blue-700", bg_color="bg-blue-100", emoji="😔"),
    SentimentCategory.STRESS: CategoryInfo(label="Stressed", color="text-orange-700", bg_color="bg-orange-100", emoji="😤"),
    SentimentCategory.SUICIDAL: CategoryInfo(label="Crisis", color="text-red-700", bg_color="bg-red-100", emoji="🆘"),
    SentimentCategory.BIPOLAR: CategoryInfo(label="Fluctuating", color="text-yellow-700", bg_color="bg-yellow-100", emoji="🎭"),
    SentimentCategory.PERSONALITY_DISORDER: CategoryInfo(label="Intense", color="text-pink-700", bg_color="bg-pink-100", emoji="💫"),
}


def get_supportive_message(
    sentiment: SentimentResult,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Pick a supportive message for the result's category.

    Args:
        sentiment: Classification result
        rng: Random source (module-level random when None)

    Returns:
        One of the category's messages
    """
    chooser = rng or random
    return chooser.choice(SUPPORTIVE_MESSAGES[sentiment.category])


def get_category_info(category: SentimentCategory) -> CategoryInfo:
    """Display metadata for a category."""
    return CATEGORY_INFO[category]


def animation_for_sentiment(
    category: SentimentCategory,
    risk_level: RiskLevel,
) -> PetAnimation:
    """
    Pet animation for a classified chat message.

    High and critical risk always glow, whatever the category.
    """
    if risk_level in (RiskLevel.HIGH, RiskLevel.CRITICAL):
        return PetAnimation.GLOW

    if category == SentimentCategory.NORMAL:
        return PetAnimation.HAPPY
    if category in (SentimentCategory.ANXIETY, SentimentCategory.STRESS):
        return PetAnimation.BREATHE
    if category == SentimentCategory.DEPRESSION:
        return PetAnimation.GLOW
    return PetAnimation.THINKING
