"""
Unit Tests for Sentiment Classifier

Tests keyword/phrase scoring, risk derivation and wellness blending.
"""

import pytest

from sahara.domain.enums.sentiment import RiskLevel, SentimentCategory
from sahara.domain.models.sentiment import SentimentResult
from sahara.services.sentiment.classifier import (
    SentimentClassifier,
    classify,
    round_half_up,
)
from sahara.services.sentiment.patterns import (
    CATEGORY_PATTERNS,
    CRISIS_INDICATORS,
    MAX_KEYWORDS,
    POSITIVE_INDICATORS,
)


def _sweep_texts() -> list[str]:
    """Every table entry alone, in upper and title case, and in mixed pairs."""
    surface_forms = [
        form
        for pattern in CATEGORY_PATTERNS.values()
        for form in pattern.keywords + pattern.phrases
    ]
    surface_forms += list(POSITIVE_INDICATORS) + list(CRISIS_INDICATORS)

    texts = []
    for index, form in enumerate(surface_forms):
        partner = surface_forms[(index * 7 + 3) % len(surface_forms)]
        texts.append(form.upper())
        texts.append(form.title())
        texts.append(f"Today I {form.upper()} but also {partner.title()}, kill Myself?")
        texts.append(f"{partner} {form}")
    return texts


SWEEP_TEXTS = _sweep_texts()


class TestSentimentClassifier:
    """Test suite for SentimentClassifier."""

    @pytest.fixture
    def classifier(self) -> SentimentClassifier:
        """Create classifier instance."""
        return SentimentClassifier()

    def test_empty_input(self, classifier: SentimentClassifier) -> None:
        """Empty text is fully normal with no risk."""
        result = classifier.classify("")
        assert result.category == SentimentCategory.NORMAL
        assert result.confidence == 1.0
        assert result.risk_level == RiskLevel.LOW
        assert result.wellness_score == 100
        assert result.keywords == ()

    def test_unrecognised_text(self, classifier: SentimentClassifier) -> None:
        """Text with no pattern hits behaves like empty text."""
        result = classifier.classify("xyz qrs")
        assert result.category == SentimentCategory.NORMAL
        assert result.risk_level == RiskLevel.LOW
        assert result.wellness_score == 100

    def test_scores_cover_every_category(self, classifier: SentimentClassifier) -> None:
        """Distribution has all seven categories and sums to 1."""
        result = classifier.classify("I am worried about my deadline and feel sad")
        assert set(result.scores) == set(SentimentCategory)
        assert sum(result.scores.values()) == pytest.approx(1.0)
        assert all(0.0 <= score <= 1.0 for score in result.scores.values())

    def test_confidence_is_argmax_score(self, classifier: SentimentClassifier) -> None:
        """Confidence equals the score of the reported category."""
        result = classifier.classify("so stressed about the deadline")
        assert result.confidence == pytest.approx(result.scores[result.category])
        assert result.confidence == max(result.scores.values())

    def test_anxiety_message(self, classifier: SentimentClassifier) -> None:
        """Three anxiety keywords push raw anxiety over the moderate threshold."""
        result = classifier.classify("I am anxious, nervous and scared")
        assert result.category == SentimentCategory.ANXIETY
        assert result.risk_level == RiskLevel.MODERATE
        assert result.wellness_score == 51
        assert result.keywords == ("anxious", "nervous", "scared")

    def test_positive_message(self, classifier: SentimentClassifier) -> None:
        """Positive words and indicators keep everything in normal."""
        result = classifier.classify("Happy, grateful, great day")
        assert result.category == SentimentCategory.NORMAL
        assert result.confidence == 1.0
        assert result.risk_level == RiskLevel.LOW
        assert result.wellness_score == 100
        assert result.keywords == ("happy", "great", "grateful")

    def test_suicidal_phrase_is_critical(self, classifier: SentimentClassifier) -> None:
        """Keyword plus overlapping phrase exceeds the critical threshold."""
        result = classifier.classify("I want to kill myself")
        assert result.category == SentimentCategory.SUICIDAL
        assert result.risk_level == RiskLevel.CRITICAL
        assert result.is_crisis
        assert result.wellness_score == 12

    def test_single_suicidal_keyword_is_high(self, classifier: SentimentClassifier) -> None:
        """One suicidal keyword (2.5) stays below critical."""
        result = classifier.classify("I feel hurt")
        assert result.category == SentimentCategory.SUICIDAL
        assert result.risk_level == RiskLevel.HIGH

    def test_crisis_indicator_amplifies_suicidal(self, classifier: SentimentClassifier) -> None:
        """A crisis indicator lifts an existing suicidal signal to critical."""
        result = classifier.classify("I feel hurt tonight")
        assert result.risk_level == RiskLevel.CRITICAL

    def test_kill_myself_tonight_is_critical(self, classifier: SentimentClassifier) -> None:
        result = classifier.classify("kill myself tonight")
        assert result.category == SentimentCategory.SUICIDAL
        assert result.risk_level == RiskLevel.CRITICAL

    def test_crisis_indicator_alone_does_nothing(self, classifier: SentimentClassifier) -> None:
        """Crisis indicators need an existing suicidal signal."""
        result = classifier.classify("see you tonight")
        assert result.category == SentimentCategory.NORMAL
        assert result.risk_level == RiskLevel.LOW
        assert result.scores[SentimentCategory.SUICIDAL] == 0.0

    def test_substring_matching_has_no_word_boundaries(
        self, classifier: SentimentClassifier
    ) -> None:
        """'end' inside 'weekend' counts as a suicidal keyword."""
        result = classifier.classify("I had a great weekend")
        assert "end" in result.keywords
        assert result.risk_level == RiskLevel.HIGH

    def test_depression_raw_threshold(self, classifier: SentimentClassifier) -> None:
        """Raw depression over 3 yields moderate risk."""
        result = classifier.classify("I feel sad and lonely and hopeless")
        assert result.category == SentimentCategory.DEPRESSION
        assert result.risk_level == RiskLevel.MODERATE

    def test_generic_confidence_rule(self, classifier: SentimentClassifier) -> None:
        """Non-normal label with confidence over 0.4 yields moderate risk."""
        result = classifier.classify("I am so stressed")
        assert result.category == SentimentCategory.STRESS
        assert result.confidence > 0.4
        assert result.risk_level == RiskLevel.MODERATE

    def test_case_insensitive(self, classifier: SentimentClassifier) -> None:
        """Upper-case input classifies the same as lower-case."""
        assert classifier.classify("I AM ANXIOUS") == classifier.classify("i am anxious")

    def test_idempotent(self, classifier: SentimentClassifier) -> None:
        """Repeated calls give equal results."""
        text = "Work is killing me, too much pressure and I can't sleep"
        assert classifier.classify(text) == classifier.classify(text)

    def test_keywords_capped_and_unique(self, classifier: SentimentClassifier) -> None:
        """Matched keywords are de-duplicated and limited."""
        result = classifier.classify(
            "happy good great fine okay peaceful calm content grateful "
            "thankful blessed joy love excited"
        )
        assert len(result.keywords) == MAX_KEYWORDS
        assert len(set(result.keywords)) == len(result.keywords)

    def test_wellness_in_range(self, classifier: SentimentClassifier) -> None:
        """Wellness stays within 0-100 even for saturated crisis text."""
        result = classifier.classify(
            "suicide kill myself end it all want to die goodbye tonight final"
        )
        assert 0 <= result.wellness_score <= 100
        assert result.risk_level == RiskLevel.CRITICAL

    def test_module_level_classify(self) -> None:
        """Module-level function delegates to the shared classifier."""
        assert classify("I am anxious") == SentimentClassifier().classify("I am anxious")


class TestClassifierProperties:
    """Distribution properties that hold for any input."""

    @pytest.mark.parametrize("text", SWEEP_TEXTS)
    def test_distribution_properties(self, text: str) -> None:
        result = classify(text)

        assert abs(sum(result.scores.values()) - 1.0) < 1e-9
        assert result.category == max(SentimentCategory, key=result.scores.__getitem__)
        assert result.confidence == result.scores[result.category]
        assert 0 <= result.wellness_score <= 100
        assert len(result.keywords) <= MAX_KEYWORDS

    @pytest.mark.parametrize("text", SWEEP_TEXTS[::9])
    def test_case_does_not_matter(self, text: str) -> None:
        assert classify(text.upper()) == classify(text.lower())


class TestWellnessScore:
    """Test the wellness blend."""

    def test_all_normal(self) -> None:
        scores = {category: 0.0 for category in SentimentCategory}
        scores[SentimentCategory.NORMAL] = 1.0
        assert SentimentClassifier.calculate_wellness_score(scores) == 100

    def test_all_suicidal(self) -> None:
        scores = {category: 0.0 for category in SentimentCategory}
        scores[SentimentCategory.SUICIDAL] = 1.0
        assert SentimentClassifier.calculate_wellness_score(scores) == 5

    def test_half_rounds_up(self) -> None:
        """Halves round up, not to even."""
        assert round_half_up(2.5) == 3
        assert round_half_up(50.5) == 51
        assert round_half_up(50.49) == 50


class TestSentimentResult:
    """Test SentimentResult dataclass."""

    def test_rejects_out_of_range_wellness(self) -> None:
        with pytest.raises(ValueError):
            SentimentResult(wellness_score=101)

    def test_rejects_out_of_range_confidence(self) -> None:
        with pytest.raises(ValueError):
            SentimentResult(confidence=1.5)

    def test_to_dict(self) -> None:
        """Test serialization to dictionary."""
        data = classify("I am anxious").to_dict()

        assert data["category"] == "anxiety"
        assert data["riskLevel"] in {"low", "moderate", "high", "critical"}
        assert set(data["scores"]) == {c.value for c in SentimentCategory}
        assert isinstance(data["wellnessScore"], int)

    def test_to_tag(self) -> None:
        tag = SentimentResult(
            category=SentimentCategory.STRESS,
            risk_level=RiskLevel.MODERATE,
            wellness_score=60,
        ).to_tag()
        assert tag == {"category": "stress", "wellnessScore": 60, "riskLevel": "moderate"}

    def test_from_tag_is_one_hot(self) -> None:
        """A stored tag rebuilds to a full distribution on its category."""
        result = SentimentResult.from_tag(
            category=SentimentCategory.ANXIETY,
            wellness_score=45,
            risk_level=RiskLevel.MODERATE,
        )

        assert result.confidence == 1.0
        assert set(result.scores) == set(SentimentCategory)
        assert result.scores[SentimentCategory.ANXIETY] == 1.0
        assert sum(result.scores.values()) == 1.0
        assert result.to_tag() == {
            "category": "anxiety",
            "wellnessScore": 45,
            "riskLevel": "moderate",
        }

    def test_rejects_scores_not_summing_to_one(self) -> None:
        scores = {category: 0.0 for category in SentimentCategory}
        scores[SentimentCategory.NORMAL] = 0.9
        with pytest.raises(ValueError):
            SentimentResult(confidence=0.9, scores=scores)

    def test_rejects_category_that_is_not_top_score(self) -> None:
        scores = {category: 0.0 for category in SentimentCategory}
        scores[SentimentCategory.NORMAL] = 0.3
        scores[SentimentCategory.STRESS] = 0.7
        with pytest.raises(ValueError):
            SentimentResult(category=SentimentCategory.NORMAL, confidence=0.3, scores=scores)
