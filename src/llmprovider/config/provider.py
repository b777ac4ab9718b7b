"""Provider-specific configuration models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProviderConfig(BaseModel):
    """Static configuration a provider ships with.

    ``base_url_key`` and ``api_token_key`` name the environment-style
    variables to look up; when unset the caller's defaults apply.
    """

    base_url: Optional[str] = Field(default=None, description="Default base URL used when no other source sets one")
    base_url_key: Optional[str] = Field(default=None, description="Variable name holding the base URL")
    api_token_key: Optional[str] = Field(default=None, description="Variable name holding the API key")

    model_config = ConfigDict(frozen=True)

    def merged_with(self, override: Optional["ProviderConfig"]) -> "ProviderConfig":
        """Return a copy where fields explicitly set on ``override`` win."""
        if override is None:
            return self
        return self.model_copy(update=override.model_dump(exclude_unset=True))
