"""Tests configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from sahara.config import Settings, get_settings
from sahara.domain.enums.sentiment import EntrySource, RiskLevel, SentimentCategory
from sahara.domain.models.progress import ProgressEntry
from sahara.domain.models.sentiment import SentimentResult


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings with small request limits."""
    return Settings(
        env="development",
        debug=True,
        api={"max_text_length": 200, "max_progress_entries": 20},
    )


@pytest.fixture
def client(test_settings: Settings) -> Iterator[TestClient]:
    """API client with test settings injected."""
    from sahara.main import app

    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_entry() -> Callable[..., ProgressEntry]:
    """Factory for progress entries with a fixed tag, one day apart."""
    start = datetime(2024, 1, 1, 9, 0)

    def _make(
        day: int,
        wellness_score: int,
        category: SentimentCategory = SentimentCategory.NORMAL,
        source: EntrySource = EntrySource.JOURNAL,
    ) -> ProgressEntry:
        return ProgressEntry(
            date=start + timedelta(days=day),
            sentiment=SentimentResult.from_tag(
                category=category,
                wellness_score=wellness_score,
                risk_level=RiskLevel.LOW,
            ),
            source=source,
        )

    return _make
