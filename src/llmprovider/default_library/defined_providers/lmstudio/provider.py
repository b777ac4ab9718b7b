"""LM Studio local server provider."""
from typing import ClassVar, Optional

from llmprovider.config.provider import ProviderConfig
from llmprovider.default_library.defined_providers.openai_like.provider import OpenAILikeProvider

LMSTUDIO_CONFIG = ProviderConfig(
    base_url="http://localhost:1234/v1",
    base_url_key="LMSTUDIO_API_BASE_URL",
)


class LMStudioProvider(OpenAILikeProvider):
    """LM Studio speaks the OpenAI protocol locally and does not check keys."""

    name: str = "LMStudio"
    config: ProviderConfig = LMSTUDIO_CONFIG
    get_api_key_link: Optional[str] = "https://lmstudio.ai/"
    label_for_get_api_key: Optional[str] = "Get LMStudio"

    default_base_url_key: ClassVar[str] = "LMSTUDIO_API_BASE_URL"
    default_api_token_key: ClassVar[str] = "LMSTUDIO_API_KEY"
    requires_api_key: ClassVar[bool] = False
    placeholder_api_key: ClassVar[str] = "lm-studio"
