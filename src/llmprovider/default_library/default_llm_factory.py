import logging
from typing import List, Mapping, Optional, Type

from pydantic import BaseModel, Field, ValidationError

from llmprovider.config.system import SystemConfig
from llmprovider.default_library.defined_providers.anthropic.provider import AnthropicProvider
from llmprovider.default_library.defined_providers.lmstudio.provider import LMStudioProvider
from llmprovider.default_library.defined_providers.openai.provider import OpenAIProvider
from llmprovider.default_library.defined_providers.openai_like.provider import OpenAILikeProvider
from llmprovider.llm.base_provider import BaseProvider
from llmprovider.llm.llm_registry import LLMRegistry

logger = logging.getLogger(__name__)

DEFAULT_PROVIDERS: List[Type[BaseProvider]] = [
    OpenAIProvider,
    AnthropicProvider,
    OpenAILikeProvider,
    LMStudioProvider,
]


class LLMDefaultFactory(BaseModel):
    """Default factory for the provider registry."""

    system_config: SystemConfig = Field(default_factory=SystemConfig, description="Static overrides per provider")
    provider_classes: List[Type[BaseProvider]] = Field(
        default_factory=lambda: list(DEFAULT_PROVIDERS), description="Provider classes to register, in order"
    )

    def create_provider(self, provider_class: Type[BaseProvider]) -> BaseProvider:
        """Instantiate a provider and apply its configured override."""
        provider = provider_class()
        override = self.system_config.get_provider_config(provider.name)
        if override is not None:
            provider.config = provider.config.merged_with(override)
            logger.debug(f"Applied config override for provider {provider.name}")
        return provider

    def create_registry(self, env: Optional[Mapping[str, str]] = None) -> LLMRegistry:
        """Create a registry with every default provider registered.

        Args:
            env: Environment snapshot shared by all providers as their last
                lookup tier

        Raises:
            RuntimeError: If no provider could be registered, including a summary of all warnings
        """
        registry = LLMRegistry(env=env or {})
        warnings = []

        for provider_class in self.provider_classes:
            try:
                provider = self.create_provider(provider_class)
            except ValidationError as e:
                warning = f"Provider {provider_class.__name__} has an invalid configuration and will be skipped: {e}"
                logger.warning(warning)
                warnings.append(warning)
                continue
            registry.register_provider(provider)

        if not registry.list_providers():
            summary = "\n".join(warnings) or "no provider classes configured"
            raise RuntimeError(f"No providers were registered:\n{summary}")

        logger.info(f"Registered {len(registry.list_providers())} providers")
        return registry
