"""Process-wide registry of providers and the shared environment snapshot."""
import asyncio
import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, cast

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from .base_provider import BaseProvider
from .exceptions import ProviderNotFoundError
from .mixins import DynamicModelsMixin
from .models import ModelInfo, ResolutionInput

logger = logging.getLogger(__name__)


class LLMRegistry(BaseModel):
    """Registry for providers and the environment they fall back on.

    Created once by the application entry point. ``env`` is copied into a
    read-only mapping at construction and every registered provider reads it
    as its last lookup tier.
    """

    env: Mapping[str, str] = Field(
        default_factory=dict, validate_default=True, description="Environment snapshot shared by all providers"
    )

    _providers: Dict[str, BaseProvider] = PrivateAttr(default_factory=dict)

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @field_validator("env", mode="after")
    @classmethod
    def freeze_env(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    def register_provider(self, provider: BaseProvider) -> None:
        """Register a provider and bind it to this registry's environment."""
        if provider.name in self._providers:
            logger.warning(f"Provider {provider.name} is already registered, replacing it")
        provider.bind_registry(self)
        self._providers[provider.name] = provider
        logger.debug(f"Registered provider {provider.name} (dynamic={provider.supports_dynamic_fetch})")

    def get_provider(self, name: str, strict: bool = False) -> Optional[BaseProvider]:
        """Get a provider by name.

        Raises:
            ProviderNotFoundError: If ``strict`` is set and no provider has that name.
        """
        provider = self._providers.get(name)
        if provider is None and strict:
            raise ProviderNotFoundError(name)
        return provider

    def list_providers(self) -> List[BaseProvider]:
        """Get all registered providers in registration order."""
        return list(self._providers.values())

    def get_static_model_list(self, providers: Optional[Iterable[BaseProvider]] = None) -> List[ModelInfo]:
        """Static models of ``providers``, or of every registered provider."""
        if providers is None:
            providers = self._providers.values()
        return [model for provider in providers for model in provider.static_models]

    def enabled_providers(self, resolution_input: ResolutionInput) -> List[BaseProvider]:
        """Providers not switched off in ``provider_settings``."""
        enabled = []
        for provider in self._providers.values():
            settings = resolution_input.settings_for(provider.name)
            if settings is None or settings.is_enabled:
                enabled.append(provider)
        return enabled

    async def update_model_list(self, resolution_input: ResolutionInput) -> List[ModelInfo]:
        """Collect static models plus dynamic models from enabled providers.

        Dynamic lists come from each provider's cache when the configuration
        is unchanged, otherwise they are fetched concurrently and cached. A
        provider whose fetch fails contributes no dynamic models.
        """
        providers = self.enabled_providers(resolution_input)
        static_models = self.get_static_model_list(providers)

        results = await asyncio.gather(
            *(
                self._dynamic_models_for(provider, resolution_input)
                for provider in providers
                if provider.supports_dynamic_fetch
            )
        )
        dynamic_models = [model for models in results for model in models]

        return static_models + dynamic_models

    async def _dynamic_models_for(self, provider: BaseProvider, resolution_input: ResolutionInput) -> List[ModelInfo]:
        cached = provider.get_cached_models(resolution_input)
        if cached is not None:
            logger.debug(f"Using cached dynamic models for {provider.name}")
            return list(cached)

        try:
            models = await cast(DynamicModelsMixin, provider).get_dynamic_models(resolution_input)
        except Exception as e:
            logger.exception(f"Error getting dynamic models for {provider.name}: {str(e)}")
            return []

        provider.store_dynamic_models(resolution_input, models)
        logger.info(f"Fetched {len(models)} dynamic models for {provider.name}")
        return list(models)
