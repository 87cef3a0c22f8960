"""
Sentiment Classifier

Rule-based scorer that maps a free-text utterance to one of seven
mental-health categories, a risk level, and a wellness score.

ARCHITECTURE: Pure and synchronous. Reads only the immutable tables in
``patterns`` and allocates per-call state, so it is safe to call inline
from any number of concurrent request handlers.

Matching is plain substring containment on the lower-cased text, with no
tokenization or word boundaries. A keyword that is also part of a phrase
is counted twice. Risk thresholds were tuned against exactly this
behaviour; do not switch to word-boundary matching.

CLINICAL_REVIEW_REQUIRED: Output is a heuristic wellness signal,
not a diagnosis.
"""

import math
from typing import Iterable

from sahara.config.logging_config import get_logger
from sahara.domain.enums.sentiment import RiskLevel, SentimentCategory
from sahara.domain.models.sentiment import SentimentResult
from sahara.services.sentiment.patterns import (
    CATEGORY_PATTERNS,
    CRISIS_INDICATOR_BOOST,
    CRISIS_INDICATORS,
    CRITICAL_SUICIDAL_THRESHOLD,
    MAX_KEYWORDS,
    MODERATE_CONFIDENCE_THRESHOLD,
    MODERATE_RAW_THRESHOLD,
    NORMAL_BASE_SCORE,
    PHRASE_MULTIPLIER,
    POSITIVE_INDICATOR_BOOST,
    POSITIVE_INDICATORS,
    WELLNESS_WEIGHTS,
)

logger = get_logger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


class SentimentClassifier:
    """
    Keyword and phrase weighted sentiment classifier.

    Scoring:
    1. NORMAL starts at a base score, every other category at zero
    2. Keyword hit: + category weight
    3. Phrase hit: + category weight * 1.5
    4. Positive indicator hit: flat boost to NORMAL
    5. Crisis indicator hit: boost to SUICIDAL, only if already non-zero
    6. Normalize to a distribution and take the arg-max

    Usage:
        classifier = SentimentClassifier()
        result = classifier.classify("I can't sleep and I'm so worried")
    """

    def classify(self, text: str) -> SentimentResult:
        """
        Classify a single utterance.

        Never raises. Empty or unrecognised text yields NORMAL with
        LOW risk.

        Args:
            text: Arbitrary user text

        Returns:
            SentimentResult with distribution, risk and wellness score
        """
        text_lower = (text or "").lower()

        raw_scores: dict[SentimentCategory, float] = {
            category: 0.0 for category in SentimentCategory
        }
        raw_scores[SentimentCategory.NORMAL] = NORMAL_BASE_SCORE
        matched: list[str] = []

        for category, pattern in CATEGORY_PATTERNS.items():
            keyword_hits = self._find_matches(text_lower, pattern.keywords)
            phrase_hits = self._find_matches(text_lower, pattern.phrases)

            raw_scores[category] += pattern.weight * len(keyword_hits)
            raw_scores[category] += pattern.weight * PHRASE_MULTIPLIER * len(phrase_hits)
            matched.extend(keyword_hits)
            matched.extend(phrase_hits)

        positive_hits = self._find_matches(text_lower, POSITIVE_INDICATORS)
        raw_scores[SentimentCategory.NORMAL] += POSITIVE_INDICATOR_BOOST * len(positive_hits)
        matched.extend(positive_hits)

        # Crisis language only amplifies an existing suicidal signal
        if raw_scores[SentimentCategory.SUICIDAL] > 0:
            crisis_hits = self._find_matches(text_lower, CRISIS_INDICATORS)
            raw_scores[SentimentCategory.SUICIDAL] += CRISIS_INDICATOR_BOOST * len(crisis_hits)

        scores = self._normalize(raw_scores)

        # max() keeps the first maximal member in enum order
        category = max(SentimentCategory, key=scores.__getitem__)
        confidence = min(max(scores[category], 0.0), 1.0)

        risk_level = self._derive_risk_level(raw_scores, category, confidence)
        wellness_score = self.calculate_wellness_score(scores)

        if risk_level == RiskLevel.CRITICAL:
            logger.warning(
                "Critical sentiment risk detected",
                category=category.value,
                suicidal_raw=round(raw_scores[SentimentCategory.SUICIDAL], 3),
                wellness_score=wellness_score,
            )

        return SentimentResult(
            category=category,
            confidence=confidence,
            scores=scores,
            risk_level=risk_level,
            keywords=tuple(dict.fromkeys(matched))[:MAX_KEYWORDS],
            wellness_score=wellness_score,
        )

    @staticmethod
    def calculate_wellness_score(scores: dict[SentimentCategory, float]) -> int:
        """
        Blend normalized category scores into a 0-100 wellness score.

        Args:
            scores: Normalized distribution over categories

        Returns:
            Wellness score, rounded and clamped to [0, 100]
        """
        blended = sum(
            WELLNESS_WEIGHTS[category] * score
            for category, score in scores.items()
        )
        return round_half_up(max(0.0, min(100.0, blended)))

    def _find_matches(self, text: str, patterns: Iterable[str]) -> list[str]:
        """
        Find patterns contained in text, in table order.

        Args:
            text: Lower-cased text to search
            patterns: Surface forms to look for

        Returns:
            Patterns present as substrings
        """
        return [pattern for pattern in patterns if pattern in text]

    def _normalize(
        self,
        raw_scores: dict[SentimentCategory, float],
    ) -> dict[SentimentCategory, float]:
        """Divide every accumulator by the total (a zero total counts as 1)."""
        total = sum(raw_scores.values()) or 1.0
        return {category: score / total for category, score in raw_scores.items()}

    def _derive_risk_level(
        self,
        raw_scores: dict[SentimentCategory, float],
        category: SentimentCategory,
        confidence: float,
    ) -> RiskLevel:
        """
        Derive the risk level.

        SAFETY_CRITICAL: Suicidal, depression and anxiety thresholds
        compare raw accumulators; the generic rule compares the
        normalized confidence. Both domains are intentional.
        """
        suicidal = raw_scores[SentimentCategory.SUICIDAL]
        if suicidal > 0:
            if suicidal > CRITICAL_SUICIDAL_THRESHOLD:
                return RiskLevel.CRITICAL
            return RiskLevel.HIGH

        if (
            raw_scores[SentimentCategory.DEPRESSION] > MODERATE_RAW_THRESHOLD
            or raw_scores[SentimentCategory.ANXIETY] > MODERATE_RAW_THRESHOLD
        ):
            return RiskLevel.MODERATE

        if category != SentimentCategory.NORMAL and confidence > MODERATE_CONFIDENCE_THRESHOLD:
            return RiskLevel.MODERATE

        return RiskLevel.LOW


_default_classifier = SentimentClassifier()


def classify(text: str) -> SentimentResult:
    """Classify text with the shared stateless classifier."""
    return _default_classifier.classify(text)
