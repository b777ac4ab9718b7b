"""Provider for any OpenAI-compatible endpoint."""
import logging
from typing import ClassVar, List, Optional

from openai import AsyncOpenAI, OpenAIError

from llmprovider.config.provider import ProviderConfig
from llmprovider.llm.base_provider import BaseProvider, get_openai_like_model
from llmprovider.llm.exceptions import DynamicModelFetchError
from llmprovider.llm.mixins import DynamicModelsMixin
from llmprovider.llm.models import ModelHandle, ModelInfo, ResolutionInput

logger = logging.getLogger(__name__)

OPENAI_LIKE_CONFIG = ProviderConfig(
    base_url_key="OPENAI_LIKE_API_BASE_URL",
    api_token_key="OPENAI_LIKE_API_KEY",
)


class OpenAILikeProvider(BaseProvider, DynamicModelsMixin):
    """OpenAI-compatible server whose models are listed from ``GET /models``."""

    name: str = "OpenAILike"
    config: ProviderConfig = OPENAI_LIKE_CONFIG

    default_base_url_key: ClassVar[str] = "OPENAI_LIKE_API_BASE_URL"
    default_api_token_key: ClassVar[str] = "OPENAI_LIKE_API_KEY"
    requires_api_key: ClassVar[bool] = True
    # Sent when the server takes no key; the SDK refuses to build a client without one
    placeholder_api_key: ClassVar[str] = "not-needed"

    def _client_api_key(self, api_key: Optional[str]) -> str:
        return api_key or self.placeholder_api_key

    async def get_dynamic_models(self, resolution_input: ResolutionInput) -> List[ModelInfo]:
        connection = self.get_base_url_and_key(resolution_input)
        if not connection.base_url or (self.requires_api_key and not connection.api_key):
            logger.debug(f"Skipping model listing for {self.name}: connection not configured")
            return []

        try:
            async with AsyncOpenAI(
                base_url=connection.base_url, api_key=self._client_api_key(connection.api_key)
            ) as client:
                page = await client.models.list()
        except OpenAIError as e:
            raise DynamicModelFetchError(self.name, str(e)) from e

        return [
            ModelInfo(name=model.id, label=model.id, provider=self.name)
            for model in page.data
        ]

    def get_model_instance(self, model: str, resolution_input: ResolutionInput) -> ModelHandle:
        base_url, api_key = self.require_connection(resolution_input, need_api_key=self.requires_api_key)
        return get_openai_like_model(base_url, self._client_api_key(api_key), model, provider=self.name)
