"""OpenAI model definitions."""
from typing import List

from llmprovider.llm.models import ModelInfo

PROVIDER_NAME = "OpenAI"


class OpenAIModels:
    """Static OpenAI models offered without a listing call."""

    @staticmethod
    def gpt4o() -> ModelInfo:
        return ModelInfo(
            name="gpt-4o",
            label="GPT-4o",
            provider=PROVIDER_NAME,
            max_token_allowed=128000,
            capabilities=frozenset({"supports_streaming", "supports_tools", "supports_vision", "supports_json_mode"}),
        )

    @staticmethod
    def gpt4o_mini() -> ModelInfo:
        return ModelInfo(
            name="gpt-4o-mini",
            label="GPT-4o Mini",
            provider=PROVIDER_NAME,
            max_token_allowed=128000,
            capabilities=frozenset({"supports_streaming", "supports_tools", "supports_vision", "supports_json_mode"}),
        )

    @staticmethod
    def gpt4_turbo() -> ModelInfo:
        return ModelInfo(
            name="gpt-4-turbo",
            label="GPT-4 Turbo",
            provider=PROVIDER_NAME,
            max_token_allowed=128000,
            capabilities=frozenset({"supports_streaming", "supports_tools", "supports_json_mode"}),
        )

    @staticmethod
    def gpt35_turbo() -> ModelInfo:
        return ModelInfo(
            name="gpt-3.5-turbo",
            label="GPT-3.5 Turbo",
            provider=PROVIDER_NAME,
            max_token_allowed=16385,
            capabilities=frozenset({"supports_streaming", "supports_tools"}),
        )

    @classmethod
    def all(cls) -> List[ModelInfo]:
        return [cls.gpt4o(), cls.gpt4o_mini(), cls.gpt4_turbo(), cls.gpt35_turbo()]
