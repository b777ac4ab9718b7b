"""LLM module initialization."""
from .base_provider import BaseProvider, get_openai_like_model
from .exceptions import DynamicModelFetchError, MissingConfigurationError, ProviderError, ProviderNotFoundError
from .llm_registry import LLMRegistry
from .mixins import DynamicModelsMixin
from .models import CachedModels, ConnectionParams, ModelHandle, ModelInfo, ProviderSetting, ResolutionInput

__all__ = [
    "BaseProvider",
    "CachedModels",
    "ConnectionParams",
    "DynamicModelFetchError",
    "DynamicModelsMixin",
    "LLMRegistry",
    "MissingConfigurationError",
    "ModelHandle",
    "ModelInfo",
    "ProviderError",
    "ProviderNotFoundError",
    "ProviderSetting",
    "ResolutionInput",
    "get_openai_like_model",
]
