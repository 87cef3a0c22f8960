"""Support services package - companion copy and templated replies."""

from sahara.services.support.supportive_messages import (
    CategoryInfo,
    animation_for_sentiment,
    get_category_info,
    get_supportive_message,
)
from sahara.services.support.therapeutic_response import (
    TherapeuticResponse,
    determine_approach,
    generate_response,
    suggest_animation,
)

__all__ = [
    "CategoryInfo",
    "animation_for_sentiment",
    "get_category_info",
    "get_supportive_message",
    "TherapeuticResponse",
    "determine_approach",
    "generate_response",
    "suggest_animation",
]
