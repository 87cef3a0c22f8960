"""
Unit Tests for Crisis Keyword Check

The check is independent of the sentiment classifier and may
disagree with it.
"""

from sahara.domain.enums.sentiment import RiskLevel
from sahara.services.safety.crisis_keywords import (
    detect_crisis_keywords,
    format_helplines,
    get_helpline_resources,
    matched_crisis_keywords,
)
from sahara.services.sentiment.classifier import classify


class TestCrisisKeywords:
    """Test crisis keyword detection."""

    def test_empty_text(self) -> None:
        assert matched_crisis_keywords("") == []
        assert not detect_crisis_keywords("")

    def test_normal_text(self) -> None:
        assert not detect_crisis_keywords("I had a lovely walk in the park")

    def test_keyword_detected(self) -> None:
        assert matched_crisis_keywords("I want to END MY LIFE") == ["end my life"]
        assert detect_crisis_keywords("thinking about suicide")

    def test_matches_in_list_order(self) -> None:
        matched = matched_crisis_keywords("overdose, I want to die, suicide")
        assert matched == ["suicide", "want to die", "overdose"]

    def test_apostrophe_is_literal(self) -> None:
        """Only the apostrophe form of "can't go on" is listed."""
        assert detect_crisis_keywords("I can't go on")
        assert not detect_crisis_keywords("I cant go on")

    def test_independent_of_classifier(self) -> None:
        """The two checks use different lists and can disagree."""
        text = "I can't go on"
        assert detect_crisis_keywords(text)
        assert classify(text).risk_level == RiskLevel.LOW


class TestHelplineResources:
    """Test helpline lookup."""

    def test_all_resources(self) -> None:
        assert len(get_helpline_resources()) == 4

    def test_us_resources(self) -> None:
        resources = get_helpline_resources("US")
        assert [r.phone for r in resources] == ["988", "Text HOME to 741741", "Various"]

    def test_country_code_case_insensitive(self) -> None:
        resources = get_helpline_resources("gb")
        assert resources[0].name == "Samaritans"
        assert resources[-1].country == "INTL"

    def test_unknown_country_gets_international(self) -> None:
        resources = get_helpline_resources("FR")
        assert [r.country for r in resources] == ["INTL"]

    def test_format_helplines(self) -> None:
        text = format_helplines(get_helpline_resources("US"))
        assert "988" in text
        assert text.count("\n") == 3
