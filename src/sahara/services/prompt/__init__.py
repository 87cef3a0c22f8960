"""Prompt services package."""

from sahara.services.prompt.prompt_builder import (
    ChatPrompt,
    build_chat_messages,
    build_system_prompt,
)

__all__ = ["ChatPrompt", "build_chat_messages", "build_system_prompt"]
