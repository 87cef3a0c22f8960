"""
Unit Tests for Emotion Analyzer

Tests emotion strengths, themes, intensity and polarity.
"""

import pytest

from sahara.domain.enums.support import EmotionalIntensity
from sahara.domain.models.emotional_analysis import EMOTION_NAMES
from sahara.services.sentiment.emotion_analyzer import EmotionAnalyzer, analyze_emotions


class TestEmotionAnalyzer:
    """Test suite for EmotionAnalyzer."""

    @pytest.fixture
    def analyzer(self) -> EmotionAnalyzer:
        """Create analyzer instance."""
        return EmotionAnalyzer()

    def test_empty_input(self, analyzer: EmotionAnalyzer) -> None:
        """Empty text is neutral with no support need."""
        result = analyzer.analyze("")
        assert set(result.emotions) == set(EMOTION_NAMES)
        assert all(score == 0.0 for score in result.emotions.values())
        assert result.dominant_emotion == "neutral"
        assert result.intensity == EmotionalIntensity.LOW
        assert not result.needs_support
        assert result.sentiment_score == 0.0

    def test_sad_and_lonely(self, analyzer: EmotionAnalyzer) -> None:
        """Scores are relative to the strongest emotion."""
        result = analyzer.analyze("I feel sad and lonely")
        assert result.get("sadness") == 1.0
        assert result.get("loneliness") == 0.5
        assert result.dominant_emotion == "sadness"
        assert result.intensity == EmotionalIntensity.LOW
        assert result.needs_support
        assert result.sentiment_score == -1.0

    def test_positive_message(self, analyzer: EmotionAnalyzer) -> None:
        result = analyzer.analyze("I feel happy and hopeful about the future")
        assert result.dominant_emotion == "happiness"
        assert result.intensity == EmotionalIntensity.MEDIUM
        assert result.sentiment_score == 1.0
        assert not result.needs_support
        assert result.themes == ("future",)

    def test_high_intensity(self, analyzer: EmotionAnalyzer) -> None:
        """Many distinct emotions add up to high intensity."""
        result = analyzer.analyze("sad anxious angry confused tired lonely")
        assert result.intensity == EmotionalIntensity.HIGH
        assert result.needs_support

    def test_crisis_flag(self, analyzer: EmotionAnalyzer) -> None:
        """Crisis keywords set is_crisis and needs_support."""
        result = analyzer.analyze("I want to end my life")
        assert result.is_crisis
        assert result.needs_support

    def test_work_theme(self, analyzer: EmotionAnalyzer) -> None:
        result = analyzer.analyze("My boss gave me a deadline at work")
        assert result.themes == ("work",)

    def test_identity_theme_matches_mixed_case(self, analyzer: EmotionAnalyzer) -> None:
        """Theme patterns match after lower-casing."""
        result = analyzer.analyze("Who am I anymore")
        assert "identity" in result.themes

    def test_unknown_emotion_is_zero(self) -> None:
        assert analyze_emotions("happy").get("boredom") == 0.0

    def test_to_dict(self) -> None:
        data = analyze_emotions("I feel sad").to_dict()
        assert data["dominantEmotion"] == "sadness"
        assert data["intensity"] == "low"
        assert data["needsSupport"] is True
