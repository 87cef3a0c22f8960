"""
Crisis Keyword Check

Simple yes/no check that decides whether to show the helpline banner
and inject distress guidance into a chat turn.

ARCHITECTURE: Deliberately independent of the sentiment classifier.
The two use different lists and are not required to agree.

LEGAL_REVIEW_REQUIRED: Helpline information must be verified for
accuracy in each jurisdiction before release.
"""

from dataclasses import dataclass
from typing import Optional

from sahara.config.logging_config import get_logger

logger = get_logger(__name__)


CRISIS_KEYWORDS: tuple[str, ...] = (
    "suicide", "kill myself", "end my life", "want to die",
    "self-harm", "hurt myself", "cutting", "overdose",
    "no reason to live", "better off dead", "can't go on",
)

INTERNATIONAL = "INTL"


@dataclass(frozen=True)
class HelplineResource:
    """
    A single crisis helpline.

    Attributes:
        name: Service name
        phone: Phone number or texting instruction
        url: Service website
        country: ISO country code, or INTL for international directories
    """

    name: str
    phone: str
    url: str
    country: str

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "phone": self.phone,
            "url": self.url,
            "country": self.country,
        }

    def format_for_user(self) -> str:
        """Format resource for display to user."""
        return f"• **{self.name}**: {self.phone} ({self.url})"


HELPLINE_RESOURCES: tuple[HelplineResource, ...] = (
    HelplineResource(
        name="988 Suicide & Crisis Lifeline",
        phone="988",
        url="https://988lifeline.org",
        country="US",
    ),
    HelplineResource(
        name="Crisis Text Line",
        phone="Text HOME to 741741",
        url="https://www.crisistextline.org",
        country="US",
    ),
    HelplineResource(
        name="Samaritans",
        phone="116 123",
        url="https://www.samaritans.org",
        country="GB",
    ),
    HelplineResource(
        name="International Association for Suicide Prevention",
        phone="Various",
        url="https://www.iasp.info/resources/Crisis_Centres/",
        country=INTERNATIONAL,
    ),
)


def matched_crisis_keywords(text: str) -> list[str]:
    """
    Find crisis keywords contained in text.

    Args:
        text: Raw user input

    Returns:
        Matching keywords in list order
    """
    if not text:
        return []
    text_lower = text.lower()
    return [keyword for keyword in CRISIS_KEYWORDS if keyword in text_lower]


def detect_crisis_keywords(text: str) -> bool:
    """
    Check whether text contains any crisis keyword.

    SAFETY_NOTE: A hit only means "show the helpline banner".
    It is not a risk assessment.
    """
    detected = bool(matched_crisis_keywords(text))
    if detected:
        logger.warning("Crisis keywords detected", text_length=len(text))
    return detected


def get_helpline_resources(country_code: Optional[str] = None) -> list[HelplineResource]:
    """
    Get helplines for a country plus international directories.

    Args:
        country_code: ISO country code; None returns every resource

    Returns:
        Helpline resources, country-specific first
    """
    if country_code is None:
        return list(HELPLINE_RESOURCES)

    code = country_code.upper()
    local = [r for r in HELPLINE_RESOURCES if r.country == code]
    international = [r for r in HELPLINE_RESOURCES if r.country == INTERNATIONAL]
    return local + international


def format_helplines(resources: list[HelplineResource]) -> str:
    """Format helplines as a short markdown block."""
    lines = ["**You don't have to go through this alone. Support is available 24/7:**"]
    lines.extend(resource.format_for_user() for resource in resources)
    return "\n".join(lines)
