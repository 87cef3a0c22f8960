"""Safety services package - crisis keyword check and helplines."""

from sahara.services.safety.crisis_keywords import (
    CRISIS_KEYWORDS,
    HelplineResource,
    detect_crisis_keywords,
    format_helplines,
    get_helpline_resources,
    matched_crisis_keywords,
)

__all__ = [
    "CRISIS_KEYWORDS",
    "HelplineResource",
    "detect_crisis_keywords",
    "format_helplines",
    "get_helpline_resources",
    "matched_crisis_keywords",
]
