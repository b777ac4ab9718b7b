"""Anthropic model definitions."""
from typing import List

from llmprovider.llm.models import ModelInfo

PROVIDER_NAME = "Anthropic"

_CLAUDE_CAPABILITIES = frozenset({"supports_streaming", "supports_tools", "supports_vision"})


class AnthropicModels:
    """Static Claude models."""

    @staticmethod
    def claude_35_sonnet() -> ModelInfo:
        return ModelInfo(
            name="claude-3-5-sonnet-latest",
            label="Claude 3.5 Sonnet",
            provider=PROVIDER_NAME,
            max_token_allowed=200000,
            capabilities=_CLAUDE_CAPABILITIES,
        )

    @staticmethod
    def claude_35_haiku() -> ModelInfo:
        return ModelInfo(
            name="claude-3-5-haiku-latest",
            label="Claude 3.5 Haiku",
            provider=PROVIDER_NAME,
            max_token_allowed=200000,
            capabilities=frozenset({"supports_streaming", "supports_tools"}),
        )

    @staticmethod
    def claude_3_opus() -> ModelInfo:
        return ModelInfo(
            name="claude-3-opus-latest",
            label="Claude 3 Opus",
            provider=PROVIDER_NAME,
            max_token_allowed=200000,
            capabilities=_CLAUDE_CAPABILITIES,
        )

    @classmethod
    def all(cls) -> List[ModelInfo]:
        return [cls.claude_35_sonnet(), cls.claude_35_haiku(), cls.claude_3_opus()]
