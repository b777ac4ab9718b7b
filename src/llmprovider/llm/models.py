"""Value types shared by providers, the registry and the CLI."""
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from llmprovider.llm.exceptions import MissingConfigurationError


class ModelInfo(BaseModel):
    """One selectable model exposed by a provider."""

    name: str
    label: str
    provider: str
    max_token_allowed: int = Field(default=8000, gt=0, description="Context window size in tokens")
    capabilities: FrozenSet[str] = Field(default_factory=frozenset)

    model_config = ConfigDict(frozen=True)


class ProviderSetting(BaseModel):
    """User-entered settings for one provider."""

    base_url: Optional[str] = Field(default=None, alias="baseUrl")
    enabled: Optional[bool] = None

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    @property
    def is_enabled(self) -> bool:
        return self.enabled is not False


class ResolutionInput(BaseModel):
    """Per-call configuration sources handed in by the hosting application."""

    api_keys: Dict[str, str] = Field(default_factory=dict, description="API key per provider name")
    provider_settings: Dict[str, ProviderSetting] = Field(
        default_factory=dict, description="User settings per provider name"
    )
    server_env: Dict[str, str] = Field(
        default_factory=dict, description="Environment scoped to the current request or server"
    )

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("api_keys", "server_env", mode="before")
    @classmethod
    def stringify_values(cls, v: Any) -> Any:
        # YAML reads PORT: 8080 as an int
        if isinstance(v, dict):
            return {k: str(val) if val is not None and not isinstance(val, str) else val for k, val in v.items()}
        return v

    def settings_for(self, provider_name: str) -> Optional[ProviderSetting]:
        return self.provider_settings.get(provider_name)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "ResolutionInput":
        """Create an input from a YAML file with ``api_keys``, ``provider_settings`` and ``server_env``."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))


class ConnectionParams(BaseModel):
    """Resolved connection parameters. Either value may be absent."""

    base_url: Optional[str] = None
    api_key: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def require(
        self,
        provider_name: str,
        base_url_hint: Optional[str] = None,
        api_key_hint: Optional[str] = None,
        need_api_key: bool = True,
    ) -> Tuple[str, Optional[str]]:
        """Return ``(base_url, api_key)`` or raise if a needed value is missing.

        Raises:
            MissingConfigurationError: If ``base_url`` is absent, or ``api_key``
                is absent and ``need_api_key`` is set.
        """
        if not self.base_url:
            raise MissingConfigurationError(provider_name, "base URL", base_url_hint)
        if need_api_key and not self.api_key:
            raise MissingConfigurationError(provider_name, "API key", api_key_hint)
        return self.base_url, self.api_key


class CachedModels(BaseModel):
    """A dynamic model list together with the fingerprint that produced it."""

    fingerprint: str
    models: Tuple[ModelInfo, ...]

    model_config = ConfigDict(frozen=True)


class ModelHandle(BaseModel):
    """A ready-to-use SDK client bound to one model."""

    provider: str
    model: str
    client: Any = Field(description="SDK client instance")

    model_config = ConfigDict(arbitrary_types_allowed=True)
