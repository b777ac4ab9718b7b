"""System-wide configuration models."""

from pathlib import Path
from typing import Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field

from llmprovider.config.base import LoggingConfig
from llmprovider.config.provider import ProviderConfig


class SystemConfig(BaseModel):
    """Root system configuration: logging plus per-provider static overrides."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Provider configurations
    providers: Dict[str, ProviderConfig] = Field(
        default_factory=dict, description="Static config overrides keyed by provider name"
    )

    model_config = ConfigDict(validate_assignment=True)

    def get_provider_config(self, provider_name: str) -> Optional[ProviderConfig]:
        """Get the override configured for a specific provider, if any."""
        return self.providers.get(provider_name)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "SystemConfig":
        """Create configuration from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save configuration to a YAML file."""
        with open(path, "w") as f:
            yaml.dump(self.model_dump(exclude_none=True), f, sort_keys=False)
