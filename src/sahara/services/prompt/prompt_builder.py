"""
Prompt Builder

Constructs the message list for a companion chat turn: system prompt,
optional pet personality, recent history, and distress guidance when
the crisis keyword check trips.

ARCHITECTURE: Builds prompts only. Sending them to an LLM is the
caller's job and lives outside this package.

CLINICAL_REVIEW_REQUIRED: System prompt text should be approved by
the clinical team.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from sahara.config.logging_config import get_logger
from sahara.domain.models.sentiment import SentimentResult
from sahara.services.safety.crisis_keywords import detect_crisis_keywords
from sahara.services.sentiment.classifier import classify

logger = get_logger(__name__)


SYSTEM_PROMPT: str = """You are Sahara, an AI-powered mental wellness companion designed to support students and young adults through empathetic conversation, emotional awareness, and gentle guidance.

CORE IDENTITY
- You are not a therapist, doctor, or counsellor.
- You never diagnose, label, or prescribe.
- Your role is to listen, reflect, support, and encourage healthy emotional habits.
- You must always feel calm, patient, warm, and non-judgemental.

COMMUNICATION STYLE
- Use simple, clear, emotionally safe language
- Avoid clinical or medical terms unless absolutely necessary
- Never shame, rush, or pressure the user
- Validate emotions without validating harmful behaviour

VIRTUAL PET INTEGRATION
- You are emotionally linked to a virtual pet companion.
- Reference the pet subtly, not excessively
- The pet reacts emotionally to the user's state

CONVERSATION OBJECTIVES
- Help the user express emotions
- Encourage reflection
- Promote emotional regulation
- Build consistency and trust
- Never overwhelm with advice. Prefer questions over instructions.

CRISIS HANDLING
If the user mentions self-harm or suicidal ideation:
- Respond calmly and empathetically
- State concern clearly
- Encourage reaching out to trusted people
- Provide crisis resources

ETHICAL CONSTRAINTS
- Never claim exclusivity
- Never discourage professional help
- Never manipulate emotions
- Always prioritize user well-being"""

DISTRESS_INSTRUCTION: str = (
    "The user may be in distress. Respond with extra care and compassion. "
    "Acknowledge their pain, let them know they're not alone, and gently remind "
    "them that professional support is available. Do not dismiss their feelings."
)

# Most recent history messages kept in the prompt
HISTORY_LIMIT: int = 10


@dataclass
class ChatPrompt:
    """
    Prompt ready for an LLM chat call.

    Attributes:
        messages: OpenAI-style role/content messages
        is_crisis_detected: Crisis keyword check on the latest user message
        sentiment: Classification of the latest user message, if any
    """

    messages: list[dict] = field(default_factory=list)
    is_crisis_detected: bool = False
    sentiment: Optional[SentimentResult] = None


def build_system_prompt(
    pet_name: Optional[str] = None,
    pet_personality: Optional[str] = None,
) -> str:
    """
    Build the companion system prompt.

    The pet section is added only when both name and personality
    are known.
    """
    prompt = SYSTEM_PROMPT

    if pet_name and pet_personality:
        prompt += (
            "\n\nCURRENT PET COMPANION\n"
            f'The user\'s pet is "{pet_name}" with a {pet_personality} personality.\n'
            f"Reference {pet_name} naturally when appropriate."
        )

    return prompt


def build_chat_messages(
    history: Sequence[dict],
    pet_name: Optional[str] = None,
    pet_personality: Optional[str] = None,
    pet_tone: Optional[str] = None,
) -> ChatPrompt:
    """
    Build the message list for one chat turn.

    Args:
        history: Prior messages as {"role", "content"} dicts, oldest first
        pet_name: Active pet name
        pet_personality: Active pet personality
        pet_tone: Extra tone guidance from the active pet

    Returns:
        ChatPrompt with messages, crisis flag and latest-message sentiment
    """
    system_content = build_system_prompt(pet_name, pet_personality)
    if pet_tone:
        system_content += f"\n\nAdditional tone guidance: {pet_tone}"

    messages: list[dict] = [{"role": "system", "content": system_content}]
    messages.extend(
        {"role": m["role"], "content": m["content"]}
        for m in list(history)[-HISTORY_LIMIT:]
    )

    latest = history[-1] if history else None
    is_crisis = False
    sentiment = None

    if latest is not None and latest.get("role") == "user":
        is_crisis = detect_crisis_keywords(latest.get("content", ""))
        sentiment = classify(latest.get("content", ""))

    if is_crisis:
        messages.append({"role": "system", "content": DISTRESS_INSTRUCTION})

    logger.debug(
        "Chat prompt built",
        message_count=len(messages),
        is_crisis=is_crisis,
    )

    return ChatPrompt(
        messages=messages,
        is_crisis_detected=is_crisis,
        sentiment=sentiment,
    )
