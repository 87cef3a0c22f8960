"""
Emotion Analyzer

Keyword-based emotional profile of a message: ten emotion strengths,
mentioned life themes, intensity and polarity. Feeds the choice of
therapeutic approach; it does not affect category scores or risk.

CLINICAL_VALIDATION_REQUIRED: Emotion lists and intensity cut-offs
are heuristic.
"""

from types import MappingProxyType
from typing import Mapping

from sahara.domain.enums.support import EmotionalIntensity
from sahara.domain.models.emotional_analysis import (
    EMOTION_NAMES,
    NEGATIVE_EMOTIONS,
    POSITIVE_EMOTIONS,
    EmotionalAnalysis,
)
from sahara.services.safety.crisis_keywords import detect_crisis_keywords


EMOTION_PATTERNS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "sadness": (
        "sad", "depressed", "down", "unhappy", "miserable", "hopeless", "empty",
        "crying", "tears", "heartbroken", "grief", "mourning", "loss", "lonely",
        "worthless", "numb", "despair", "melancholy", "blue", "gloomy",
    ),
    "anxiety": (
        "anxious", "worried", "nervous", "stressed", "panic", "fear", "scared",
        "overwhelmed", "restless", "tense", "uneasy", "dread", "apprehensive",
        "racing thoughts", "can't sleep", "insomnia", "overthinking", "paranoid",
    ),
    "anger": (
        "angry", "frustrated", "annoyed", "irritated", "furious", "mad", "rage",
        "resentful", "bitter", "hostile", "hate", "disgusted", "fed up",
    ),
    "happiness": (
        "happy", "joyful", "excited", "grateful", "thankful", "blessed", "content",
        "peaceful", "calm", "relaxed", "hopeful", "optimistic", "proud", "loved",
        "amazing", "wonderful", "great", "good", "better", "improving",
    ),
    "confusion": (
        "confused", "lost", "uncertain", "unsure", "don't know", "unclear",
        "mixed feelings", "conflicted", "torn", "indecisive", "puzzled",
    ),
    "exhaustion": (
        "tired", "exhausted", "drained", "burnt out", "fatigued", "worn out",
        "no energy", "can't cope", "overwhelmed", "too much", "breaking point",
    ),
    "loneliness": (
        "lonely", "alone", "isolated", "no one", "nobody", "abandoned", "rejected",
        "left out", "disconnected", "misunderstood", "invisible",
    ),
    "hope": (
        "hope", "hopeful", "looking forward", "excited about", "can't wait",
        "optimistic", "positive", "better days", "things will improve",
    ),
    "guilt": (
        "guilty", "ashamed", "regret", "sorry", "my fault", "blame myself",
        "should have", "shouldn't have", "disappointed in myself",
    ),
    "fear": (
        "afraid", "scared", "terrified", "frightened", "worried about",
        "dreading", "anxious about", "nervous about", "fear of",
    ),
})

THEME_PATTERNS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "relationships": ("friend", "family", "partner", "boyfriend", "girlfriend", "spouse", "parent", "mother", "father"),
    "work": ("work", "job", "career", "boss", "colleague", "deadline", "project", "meeting", "office"),
    "health": ("health", "sick", "illness", "pain", "doctor", "hospital", "medication", "therapy"),
    "self_worth": ("worthless", "useless", "failure", "not good enough", "inadequate", "hate myself"),
    "future": ("future", "tomorrow", "next week", "plans", "goals", "dreams", "what if"),
    "past": ("past", "yesterday", "used to", "remember", "memories", "regret"),
    "change": ("change", "different", "new", "transition", "moving", "starting", "ending"),
    "identity": ("who am i", "identity", "purpose", "meaning", "direction", "lost"),
})

HIGH_INTENSITY_THRESHOLD: float = 3.0
MEDIUM_INTENSITY_THRESHOLD: float = 1.5


class EmotionAnalyzer:
    """
    Keyword-based emotion profiler.

    Each emotion scores one point per matching pattern; scores are
    then divided by the largest score (or 1) so the strongest
    emotion is 1.0.
    """

    def analyze(self, text: str) -> EmotionalAnalysis:
        """
        Build the emotional profile of a message.

        Args:
            text: Raw user input

        Returns:
            EmotionalAnalysis; all-zero and "neutral" for empty text
        """
        text_lower = (text or "").lower()

        hits = {
            emotion: sum(1 for pattern in EMOTION_PATTERNS[emotion] if pattern in text_lower)
            for emotion in EMOTION_NAMES
        }
        scale = max(max(hits.values()), 1)
        emotions = {emotion: count / scale for emotion, count in hits.items()}

        themes = tuple(
            theme for theme, patterns in THEME_PATTERNS.items()
            if any(pattern in text_lower for pattern in patterns)
        )
        is_crisis = detect_crisis_keywords(text_lower)

        total = sum(emotions.values())
        if total > HIGH_INTENSITY_THRESHOLD:
            intensity = EmotionalIntensity.HIGH
        elif total > MEDIUM_INTENSITY_THRESHOLD:
            intensity = EmotionalIntensity.MEDIUM
        else:
            intensity = EmotionalIntensity.LOW

        dominant = "neutral"
        if total > 0:
            dominant = max(EMOTION_NAMES, key=emotions.__getitem__)

        positive = sum(emotions[name] for name in POSITIVE_EMOTIONS)
        negative = sum(emotions[name] for name in NEGATIVE_EMOTIONS)
        polarity = (positive - negative) / max(positive + negative, 1)

        return EmotionalAnalysis(
            emotions=emotions,
            themes=themes,
            intensity=intensity,
            needs_support=(
                negative > positive
                or intensity == EmotionalIntensity.HIGH
                or is_crisis
            ),
            is_crisis=is_crisis,
            dominant_emotion=dominant,
            sentiment_score=max(-1.0, min(1.0, polarity)),
        )


_default_analyzer = EmotionAnalyzer()


def analyze_emotions(text: str) -> EmotionalAnalysis:
    """Profile text with the shared stateless analyzer."""
    return _default_analyzer.analyze(text)
