"""
Sentiment Pattern Tables

Immutable keyword, phrase and weight tables for the sentiment
classifier. Changing any entry changes classification output and
the risk thresholds tuned against it; treat edits as a release.

CLINICAL_REVIEW_REQUIRED: Keyword lists and weights are heuristic
and have not been validated against clinical outcomes.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from sahara.domain.enums.sentiment import SentimentCategory


@dataclass(frozen=True)
class CategoryPattern:
    """
    Matching configuration for one category.

    Attributes:
        keywords: Single-word (or short) surface forms, scored at ``weight``
        phrases: Multi-word surface forms, scored at ``weight * PHRASE_MULTIPLIER``
        weight: Severity multiplier for the category
    """

    keywords: tuple[str, ...]
    phrases: tuple[str, ...]
    weight: float


# Base accumulator for NORMAL before any matching
NORMAL_BASE_SCORE: float = 0.5

PHRASE_MULTIPLIER: float = 1.5
POSITIVE_INDICATOR_BOOST: float = 0.8
CRISIS_INDICATOR_BOOST: float = 2.0

MAX_KEYWORDS: int = 10


CATEGORY_PATTERNS: Mapping[SentimentCategory, CategoryPattern] = MappingProxyType({
    SentimentCategory.NORMAL: CategoryPattern(
        keywords=(
            "happy", "good", "great", "fine", "okay", "well", "peaceful", "calm", "content",
            "grateful", "thankful", "blessed", "joy", "love", "excited", "hopeful", "positive",
            "relaxed", "comfortable", "satisfied", "wonderful", "amazing", "fantastic",
            "better", "improving", "progress", "healing", "growing", "learning",
        ),
        phrases=(
            "feeling good", "doing well", "had a great day", "feeling better", "making progress",
            "grateful for", "thankful for", "happy about", "excited about", "looking forward",
        ),
        weight=1.0,
    ),
    SentimentCategory.ANXIETY: CategoryPattern(
        keywords=(
            "anxious", "worried", "nervous", "restless", "scared", "fear", "panic", "uneasy",
            "tense", "overwhelmed", "racing", "breathe", "insomnia", "overthinking", "afraid",
            "dread", "apprehensive", "jittery", "shaky", "sweating", "pounding", "trembling",
            "confused", "trouble sleeping", "cant sleep", "restive", "agitated",
        ),
        phrases=(
            "cant stop thinking", "what if", "something is wrong", "feel scared", "heart racing",
            "cant breathe", "panic attack", "so worried", "really nervous", "feel restless",
            "trouble sleeping", "confused mind", "restless heart", "out of tune", "feel nervous",
        ),
        weight=1.3,
    ),
    SentimentCategory.DEPRESSION: CategoryPattern(
        keywords=(
            "sad", "depressed", "hopeless", "empty", "worthless", "tired", "exhausted",
            "lonely", "alone", "crying", "tears", "numb", "meaningless", "pointless",
            "unmotivated", "dark", "heavy", "burden", "miserable", "despair", "grief",
            "lost", "broken", "shattered", "hollow", "void", "lifeless",
        ),
        phrases=(
            "no energy", "cant get up", "dont care", "whats the point", "feel empty",
            "so tired", "feel nothing", "all alone", "no one cares", "feel worthless",
            "hate myself", "feel like a burden", "want to cry", "feel so sad",
        ),
        weight=1.4,
    ),
    SentimentCategory.STRESS: CategoryPattern(
        keywords=(
            "stressed", "pressure", "deadline", "overwhelmed", "burnout", "frustrated",
            "irritated", "angry", "tension", "headache", "overloaded", "exhausted",
            "demanding", "hectic", "chaotic", "crazy", "insane", "impossible",
        ),
        phrases=(
            "too much", "cant cope", "breaking point", "so stressed", "under pressure",
            "work is killing", "no time", "falling behind", "cant handle", "losing it",
        ),
        weight=1.2,
    ),
    SentimentCategory.SUICIDAL: CategoryPattern(
        keywords=(
            "suicide", "suicidal", "die", "death", "end", "kill", "harm", "hurt",
            "disappear", "gone", "final", "goodbye", "last", "never wake",
        ),
        phrases=(
            "kill myself", "end it all", "dont want to live", "better off dead",
            "no reason to live", "want to die", "ending my life", "self harm",
            "hurt myself", "give up", "cant go on", "no point living", "not be here",
        ),
        weight=2.5,
    ),
    SentimentCategory.BIPOLAR: CategoryPattern(
        keywords=(
            "manic", "mania", "euphoric", "invincible", "unstoppable", "hyper",
            "impulsive", "reckless", "cycles", "episodes", "swings", "extreme",
        ),
        phrases=(
            "mood swings", "up and down", "high energy", "cant stop", "racing thoughts",
            "then crash", "feel amazing then terrible", "extreme highs", "extreme lows",
        ),
        weight=1.4,
    ),
    SentimentCategory.PERSONALITY_DISORDER: CategoryPattern(
        keywords=(
            "identity", "unstable", "abandonment", "rejection", "splitting", "intense",
            "impulsive", "emptiness", "dissociate", "detached", "unreal",
        ),
        phrases=(
            "who am i", "fear of rejection", "black and white", "intense emotions",
            "self image", "feel detached", "dont know myself", "people leave me",
        ),
        weight=1.3,
    ),
})


# Each hit adds a flat POSITIVE_INDICATOR_BOOST to NORMAL
POSITIVE_INDICATORS: tuple[str, ...] = (
    "getting better", "feeling better", "improving", "hopeful", "grateful",
    "support", "helped", "therapy", "treatment", "coping", "managing",
    "progress", "recovery", "healing", "stronger", "proud", "accomplished",
)

# Each hit adds CRISIS_INDICATOR_BOOST to SUICIDAL, only once SUICIDAL is non-zero
CRISIS_INDICATORS: tuple[str, ...] = (
    "right now", "tonight", "today", "immediately", "cant take it anymore",
    "plan to", "method", "goodbye", "final", "last time", "this is it",
)

WELLNESS_WEIGHTS: Mapping[SentimentCategory, float] = MappingProxyType({
    SentimentCategory.NORMAL: 100,
    SentimentCategory.STRESS: 55,
    SentimentCategory.ANXIETY: 45,
    SentimentCategory.DEPRESSION: 35,
    SentimentCategory.BIPOLAR: 40,
    SentimentCategory.PERSONALITY_DISORDER: 40,
    SentimentCategory.SUICIDAL: 5,
})

# Risk thresholds apply to raw, pre-normalization accumulators
CRITICAL_SUICIDAL_THRESHOLD: float = 3.0
MODERATE_RAW_THRESHOLD: float = 3.0
# Applies to the normalized arg-max confidence
MODERATE_CONFIDENCE_THRESHOLD: float = 0.4
