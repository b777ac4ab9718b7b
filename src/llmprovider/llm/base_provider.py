"""Base class for LLM providers: connection resolution and dynamic model cache."""
import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Iterable, List, Mapping, Optional, Sequence, Tuple

from openai import AsyncOpenAI
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from llmprovider.config.provider import ProviderConfig
from llmprovider.llm.mixins import DynamicModelsMixin
from llmprovider.llm.models import CachedModels, ConnectionParams, ModelHandle, ModelInfo, ResolutionInput

logger = logging.getLogger(__name__)


def _first_non_blank(candidates: Iterable[Tuple[str, Optional[str]]]) -> Tuple[Optional[str], Optional[str]]:
    for source, value in candidates:
        if value and value.strip():
            return source, value
    return None, None


def _first_defined(candidates: Iterable[Tuple[str, Optional[str]]]) -> Tuple[Optional[str], Optional[str]]:
    for source, value in candidates:
        if value is not None:
            return source, value
    return None, None


class BaseProvider(BaseModel, ABC):
    """Base class for a single LLM backend.

    A provider owns its static configuration and the last dynamically fetched
    model list. Connection parameters are resolved per call from layered
    sources, in this order:

    1. user settings (``provider_settings[name].base_url``, base URL only)
    2. request-scoped API keys (``api_keys[name]``, API key only)
    3. ``server_env``
    4. process environment
    5. the registry's environment snapshot
    6. the static ``config.base_url`` (base URL only)
    """

    name: str
    static_models: List[ModelInfo] = Field(default_factory=list)
    config: ProviderConfig = Field(default_factory=ProviderConfig)

    get_api_key_link: Optional[str] = None
    label_for_get_api_key: Optional[str] = None
    icon: Optional[str] = None

    default_base_url_key: ClassVar[str] = ""
    default_api_token_key: ClassVar[str] = ""

    _cached_dynamic_models: Optional[CachedModels] = PrivateAttr(default=None)
    _registry: Any = PrivateAttr(default=None)

    model_config = ConfigDict(validate_assignment=True)

    def bind_registry(self, registry: Any) -> None:
        """Use ``registry``'s environment snapshot as the last lookup tier."""
        self._registry = registry

    @property
    def registry_env(self) -> Mapping[str, str]:
        if self._registry is None:
            return {}
        return self._registry.env

    @property
    def supports_dynamic_fetch(self) -> bool:
        return isinstance(self, DynamicModelsMixin)

    def resolve_connection(
        self,
        resolution_input: ResolutionInput,
        default_base_url_key: str,
        default_api_token_key: str,
    ) -> ConnectionParams:
        """Resolve the effective base URL and API key.

        Never raises; a value no source provides comes back as ``None``.
        """
        settings = resolution_input.settings_for(self.name)
        settings_base_url = settings.base_url.strip() if settings and settings.base_url else None
        server_env = resolution_input.server_env
        registry_env = self.registry_env

        base_url_key = self.config.base_url_key or default_base_url_key
        base_url_source, base_url = _first_non_blank(
            [
                ("provider settings", settings_base_url),
                ("server env", server_env.get(base_url_key)),
                ("process env", os.environ.get(base_url_key)),
                ("registry env", registry_env.get(base_url_key)),
                ("static config", self.config.base_url),
            ]
        )

        # Only one trailing slash is removed
        if base_url is not None and base_url.endswith("/"):
            base_url = base_url[:-1]

        # An empty key from a higher tier still wins here, unlike base_url
        api_token_key = self.config.api_token_key or default_api_token_key
        api_key_source, api_key = _first_defined(
            [
                ("api keys", resolution_input.api_keys.get(self.name)),
                ("server env", server_env.get(api_token_key)),
                ("process env", os.environ.get(api_token_key)),
                ("registry env", registry_env.get(api_token_key)),
            ]
        )

        logger.debug(
            f"Resolved {self.name}: base_url from {base_url_source or 'nowhere'} ({base_url_key}), "
            f"api_key from {api_key_source or 'nowhere'} ({api_token_key})"
        )
        return ConnectionParams(base_url=base_url, api_key=api_key)

    def get_base_url_and_key(self, resolution_input: ResolutionInput) -> ConnectionParams:
        """Resolve using this provider's own default variable names."""
        return self.resolve_connection(
            resolution_input,
            default_base_url_key=self.default_base_url_key,
            default_api_token_key=self.default_api_token_key,
        )

    def require_connection(
        self, resolution_input: ResolutionInput, need_api_key: bool = True
    ) -> Tuple[str, Optional[str]]:
        """Resolve with this provider's defaults and insist on the values a client needs.

        Raises:
            MissingConfigurationError: If the base URL, or a needed API key, is absent.
        """
        connection = self.get_base_url_and_key(resolution_input)
        return connection.require(
            self.name,
            base_url_hint=self.config.base_url_key or self.default_base_url_key or None,
            api_key_hint=self.config.api_token_key or self.default_api_token_key or None,
            need_api_key=need_api_key,
        )

    def dynamic_models_cache_key(self, resolution_input: ResolutionInput) -> str:
        """Fingerprint of the configuration a dynamic model list depends on.

        Keys are sorted so two inputs with the same pairs give the same string
        however their mappings were built.
        """
        settings = resolution_input.settings_for(self.name)
        return json.dumps(
            {
                "api_keys": resolution_input.api_keys.get(self.name),
                "provider_settings": settings.model_dump(exclude_none=True) if settings else None,
                "server_env": resolution_input.server_env,
            },
            sort_keys=True,
            separators=(",", ":"),
        )

    def get_cached_models(self, resolution_input: ResolutionInput) -> Optional[Tuple[ModelInfo, ...]]:
        """Return the cached dynamic models if they were fetched with the same configuration.

        A stale entry is dropped so later calls miss too.
        """
        cached = self._cached_dynamic_models
        if cached is None:
            return None

        if cached.fingerprint != self.dynamic_models_cache_key(resolution_input):
            logger.debug(f"Dynamic model cache for {self.name} is stale, clearing it")
            self._cached_dynamic_models = None
            return None

        return cached.models

    def store_dynamic_models(self, resolution_input: ResolutionInput, models: Sequence[ModelInfo]) -> None:
        """Replace the cache entry with ``models`` for the current configuration."""
        self._cached_dynamic_models = CachedModels(
            fingerprint=self.dynamic_models_cache_key(resolution_input),
            models=tuple(models),
        )
        logger.debug(f"Cached {len(models)} dynamic models for {self.name}")

    @abstractmethod
    def get_model_instance(self, model: str, resolution_input: ResolutionInput) -> ModelHandle:
        """Build a client for ``model``.

        Raises:
            MissingConfigurationError: If the connection cannot be resolved.
        """


def get_openai_like_model(
    base_url: str, api_key: Optional[str], model: str, provider: str = "OpenAILike"
) -> ModelHandle:
    """Wrap an OpenAI-compatible endpoint in a ``ModelHandle``."""
    client: Any = AsyncOpenAI(base_url=base_url, api_key=api_key)
    return ModelHandle(provider=provider, model=model, client=client)
