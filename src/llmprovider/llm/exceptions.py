"""Exceptions raised by provider collaborators.

Resolution and caching never raise; these are for the code that acts on the
resolved values (model instantiation, dynamic fetches, registry lookups).
"""
from typing import Optional


class ProviderError(Exception):
    """Base class for provider errors."""


class MissingConfigurationError(ProviderError):
    """Raised when a resolved connection value is absent but required."""

    def __init__(self, provider: str, field: str, hint: Optional[str] = None):
        self.provider = provider
        self.field = field
        message = f"Missing {field} for provider '{provider}'"
        if hint:
            message += f" (set {hint})"
        super().__init__(message)


class ProviderNotFoundError(ProviderError, KeyError):
    """Raised when a provider name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Provider '{name}' is not registered")

    def __str__(self) -> str:
        return self.args[0]


class DynamicModelFetchError(ProviderError):
    """Raised when a provider fails to list its models from the backend."""

    def __init__(self, provider: str, reason: str):
        self.provider = provider
        self.reason = reason
        super().__init__(f"Failed to fetch models for provider '{provider}': {reason}")
