"""OpenAI provider configuration."""
from typing import ClassVar, List, Optional

from pydantic import Field

from llmprovider.config.provider import ProviderConfig
from llmprovider.default_library.defined_providers.openai.models import PROVIDER_NAME, OpenAIModels
from llmprovider.llm.base_provider import BaseProvider, get_openai_like_model
from llmprovider.llm.models import ModelHandle, ModelInfo, ResolutionInput

OPENAI_CONFIG = ProviderConfig(
    base_url="https://api.openai.com/v1",
    api_token_key="OPENAI_API_KEY",
)


class OpenAIProvider(BaseProvider):
    name: str = PROVIDER_NAME
    static_models: List[ModelInfo] = Field(default_factory=OpenAIModels.all)
    config: ProviderConfig = OPENAI_CONFIG
    get_api_key_link: Optional[str] = "https://platform.openai.com/api-keys"
    label_for_get_api_key: Optional[str] = "Get OpenAI API Key"

    default_base_url_key: ClassVar[str] = "OPENAI_API_BASE_URL"
    default_api_token_key: ClassVar[str] = "OPENAI_API_KEY"

    def get_model_instance(self, model: str, resolution_input: ResolutionInput) -> ModelHandle:
        base_url, api_key = self.require_connection(resolution_input)
        return get_openai_like_model(base_url, api_key, model, provider=self.name)
