from .config import LoggingConfig, ProviderConfig, SystemConfig, configure_logging
from .llm import BaseProvider, LLMRegistry, ModelInfo, ProviderSetting, ResolutionInput

__version__ = "0.1.0"

__all__ = [
    "BaseProvider",
    "LLMRegistry",
    "LoggingConfig",
    "ModelInfo",
    "ProviderConfig",
    "ProviderSetting",
    "ResolutionInput",
    "SystemConfig",
    "configure_logging",
]
