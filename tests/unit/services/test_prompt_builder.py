"""
Unit Tests for Prompt Builder

Tests chat message assembly and distress guidance injection.
"""

from sahara.domain.enums.sentiment import RiskLevel
from sahara.services.prompt.prompt_builder import (
    DISTRESS_INSTRUCTION,
    HISTORY_LIMIT,
    SYSTEM_PROMPT,
    build_chat_messages,
    build_system_prompt,
)


def _history(count: int) -> list[dict]:
    roles = ("user", "assistant")
    return [{"role": roles[i % 2], "content": f"message {i}"} for i in range(count)]


class TestBuildSystemPrompt:
    """System prompt construction."""

    def test_default_prompt(self) -> None:
        assert build_system_prompt() == SYSTEM_PROMPT

    def test_pet_section_needs_name_and_personality(self) -> None:
        assert build_system_prompt(pet_name="Miso") == SYSTEM_PROMPT

        prompt = build_system_prompt(pet_name="Miso", pet_personality="playful")
        assert prompt.startswith(SYSTEM_PROMPT)
        assert '"Miso" with a playful personality' in prompt


class TestBuildChatMessages:
    """Chat turn assembly."""

    def test_empty_history(self) -> None:
        prompt = build_chat_messages([])
        assert len(prompt.messages) == 1
        assert prompt.messages[0]["role"] == "system"
        assert not prompt.is_crisis_detected
        assert prompt.sentiment is None

    def test_history_trimmed(self) -> None:
        history = _history(HISTORY_LIMIT + 3)
        prompt = build_chat_messages(history)

        assert len(prompt.messages) == HISTORY_LIMIT + 1
        assert prompt.messages[1]["content"] == "message 3"

    def test_tone_guidance(self) -> None:
        prompt = build_chat_messages([], pet_tone="gentle and slow")
        assert prompt.messages[0]["content"].endswith("Additional tone guidance: gentle and slow")

    def test_latest_user_message_classified(self) -> None:
        prompt = build_chat_messages([{"role": "user", "content": "I am so stressed"}])
        assert prompt.sentiment is not None
        assert prompt.sentiment.category == "stress"
        assert prompt.messages[-1]["role"] == "user"

    def test_latest_assistant_message_not_classified(self) -> None:
        history = [
            {"role": "user", "content": "hi"},
            {"role": "assistant", "content": "Hello! How are you?"},
        ]
        assert build_chat_messages(history).sentiment is None

    def test_distress_instruction_on_crisis(self) -> None:
        prompt = build_chat_messages([{"role": "user", "content": "I want to kill myself"}])

        assert prompt.is_crisis_detected
        assert prompt.messages[-1] == {"role": "system", "content": DISTRESS_INSTRUCTION}
        assert prompt.sentiment.risk_level == RiskLevel.CRITICAL
