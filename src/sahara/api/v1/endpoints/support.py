"""
Support Endpoints

Templated companion replies and supportive copy. Used by clients as
the fallback when no LLM reply is available.
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from sahara.config import Settings, get_settings
from sahara.config.logging_config import get_logger
from sahara.infrastructure.metrics import track_classification
from sahara.services.support.supportive_messages import get_supportive_message
from sahara.services.support.therapeutic_response import generate_response

logger = get_logger(__name__)
router = APIRouter()


class RespondRequest(BaseModel):
    """Message to reply to."""

    message: str = Field(default="I need support")


@router.post(
    "/respond",
    summary="Generate a templated companion reply",
)
async def respond(
    request: RespondRequest,
    settings: Settings = Depends(get_settings),
) -> dict:
    """Reply to a message using the therapeutic templates."""
    if len(request.message) > settings.api.max_text_length:
        raise HTTPException(
            status_code=422,
            detail=f"Message exceeds {settings.api.max_text_length} characters",
        )

    response = generate_response(request.message)
    track_classification(response.sentiment, source="chat")

    body = response.to_dict()
    body["supportiveMessage"] = get_supportive_message(response.sentiment)
    return body
