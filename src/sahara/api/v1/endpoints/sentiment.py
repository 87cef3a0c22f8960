"""
Sentiment Endpoints

Exposes message classification, progress analysis and the crisis
keyword check to the chat, journal and dashboard clients.

Classification never rejects text; only request-size limits apply.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from sahara.config import Settings, get_settings
from sahara.config.logging_config import get_logger
from sahara.domain.enums.sentiment import EntrySource, RiskLevel, SentimentCategory
from sahara.domain.models.progress import ProgressEntry
from sahara.domain.models.sentiment import SentimentResult
from sahara.infrastructure.metrics import (
    track_classification,
    track_crisis_detection,
    track_progress_analysis,
)
from sahara.services.safety.crisis_keywords import (
    get_helpline_resources,
    matched_crisis_keywords,
)
from sahara.services.sentiment.classifier import classify
from sahara.services.sentiment.progress_analyzer import analyze_progress
from sahara.services.support.supportive_messages import (
    animation_for_sentiment,
    get_category_info,
)

logger = get_logger(__name__)
router = APIRouter()


# Request Models

class ClassifyRequest(BaseModel):
    """Text to classify. Empty text is valid."""

    text: str = Field(default="", description="User message or journal entry")
    source: EntrySource = Field(default=EntrySource.CHAT)


class CrisisCheckRequest(BaseModel):
    """Text to run through the crisis keyword check."""

    text: str = Field(default="")
    country_code: Optional[str] = Field(default=None, min_length=2, max_length=4)


class ProgressEntryIn(BaseModel):
    """
    One history entry.

    Either send the stored row tag (category and wellness score) or
    just the text, which is then classified.
    """

    model_config = ConfigDict(populate_by_name=True)

    date: datetime
    text: str = ""
    source: EntrySource = EntrySource.CHAT
    category: Optional[SentimentCategory] = None
    wellness_score: Optional[int] = Field(default=None, ge=0, le=100, alias="wellnessScore")
    risk_level: Optional[RiskLevel] = Field(default=None, alias="riskLevel")


class ProgressRequest(BaseModel):
    """History to aggregate."""

    entries: list[ProgressEntryIn] = Field(default_factory=list)


def _enforce_text_limit(text: str, settings: Settings) -> None:
    if len(text) > settings.api.max_text_length:
        raise HTTPException(
            status_code=422,
            detail=f"Text exceeds {settings.api.max_text_length} characters",
        )


def _to_progress_entry(entry: ProgressEntryIn) -> ProgressEntry:
    """Rebuild a ProgressEntry from a stored tag, or classify the text."""
    if entry.category is not None and entry.wellness_score is not None:
        sentiment = SentimentResult.from_tag(
            category=entry.category,
            wellness_score=entry.wellness_score,
            risk_level=entry.risk_level or RiskLevel.LOW,
        )
    else:
        sentiment = classify(entry.text)

    return ProgressEntry(
        date=entry.date,
        sentiment=sentiment,
        source=entry.source,
        text=entry.text,
    )


@router.post(
    "/classify",
    summary="Classify a message into a sentiment category",
)
async def classify_message(
    request: ClassifyRequest,
    settings: Settings = Depends(get_settings),
) -> dict:
    """
    Classify one message.

    The response carries the full SentimentResult, the independent
    crisis keyword flag, and helplines when either that flag or the
    risk level calls for them.
    """
    _enforce_text_limit(request.text, settings)

    result = classify(request.text)
    is_crisis = bool(matched_crisis_keywords(request.text))

    track_classification(result, source=request.source.value)
    if is_crisis:
        track_crisis_detection()

    logger.info(
        "Message classified",
        source=request.source.value,
        category=result.category.value,
        risk_level=result.risk_level.value,
        wellness_score=result.wellness_score,
        is_crisis=is_crisis,
    )

    body = result.to_dict()
    body["isCrisisDetected"] = is_crisis
    body["categoryInfo"] = get_category_info(result.category).to_dict()
    body["suggestedAnimation"] = animation_for_sentiment(result.category, result.risk_level).value
    if (is_crisis or result.is_crisis) and settings.safety.include_helplines:
        body["crisisResources"] = [
            r.to_dict()
            for r in get_helpline_resources(settings.safety.default_country_code)
        ]
    return body


@router.post(
    "/progress",
    summary="Aggregate classified entries into a wellness trend",
)
async def progress(
    request: ProgressRequest,
    settings: Settings = Depends(get_settings),
) -> dict:
    """Analyze a user's chat and journal history."""
    if len(request.entries) > settings.api.max_progress_entries:
        raise HTTPException(
            status_code=422,
            detail=f"At most {settings.api.max_progress_entries} entries per request",
        )
    for entry in request.entries:
        _enforce_text_limit(entry.text, settings)

    analysis = analyze_progress([_to_progress_entry(e) for e in request.entries])
    track_progress_analysis(analysis)

    logger.info(
        "Progress analyzed",
        entry_count=len(request.entries),
        trend=analysis.trend.value,
        average_wellness=analysis.average_wellness,
    )
    return analysis.to_dict()


@router.post(
    "/crisis-check",
    summary="Run the crisis keyword check",
)
async def crisis_check(
    request: CrisisCheckRequest,
    settings: Settings = Depends(get_settings),
) -> dict:
    """
    Check a message for crisis keywords.

    SAFETY_NOTE: Independent of /classify; the two may disagree.
    """
    _enforce_text_limit(request.text, settings)

    matched = matched_crisis_keywords(request.text)
    is_crisis = bool(matched)

    resources = []
    if is_crisis:
        track_crisis_detection()
        logger.warning("Crisis keywords detected", match_count=len(matched))
        country = request.country_code or settings.safety.default_country_code
        resources = [r.to_dict() for r in get_helpline_resources(country)]

    return {
        "isCrisisDetected": is_crisis,
        "matched": matched,
        "resources": resources,
    }
