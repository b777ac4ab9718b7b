"""Anthropic provider configuration."""
from typing import ClassVar, List, Optional

from anthropic import AsyncAnthropic
from pydantic import Field

from llmprovider.config.provider import ProviderConfig
from llmprovider.default_library.defined_providers.anthropic.models import PROVIDER_NAME, AnthropicModels
from llmprovider.llm.base_provider import BaseProvider
from llmprovider.llm.models import ModelHandle, ModelInfo, ResolutionInput

ANTHROPIC_CONFIG = ProviderConfig(
    base_url="https://api.anthropic.com",
    api_token_key="ANTHROPIC_API_KEY",
)


class AnthropicProvider(BaseProvider):
    name: str = PROVIDER_NAME
    static_models: List[ModelInfo] = Field(default_factory=AnthropicModels.all)
    config: ProviderConfig = ANTHROPIC_CONFIG
    get_api_key_link: Optional[str] = "https://console.anthropic.com/settings/keys"
    label_for_get_api_key: Optional[str] = "Get Anthropic API Key"

    default_base_url_key: ClassVar[str] = "ANTHROPIC_API_BASE_URL"
    default_api_token_key: ClassVar[str] = "ANTHROPIC_API_KEY"

    def get_model_instance(self, model: str, resolution_input: ResolutionInput) -> ModelHandle:
        base_url, api_key = self.require_connection(resolution_input)
        client = AsyncAnthropic(api_key=api_key, base_url=base_url)
        return ModelHandle(provider=self.name, model=model, client=client)
