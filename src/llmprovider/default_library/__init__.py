"""Built-in providers and the factory that registers them."""
from .default_llm_factory import DEFAULT_PROVIDERS, LLMDefaultFactory

__all__ = ["DEFAULT_PROVIDERS", "LLMDefaultFactory"]
