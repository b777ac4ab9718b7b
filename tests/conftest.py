"""Root test configuration and common fixtures."""
import asyncio
import logging
from typing import Any, ClassVar, List

import pytest
from pydantic import Field, PrivateAttr

from llmprovider.config.provider import ProviderConfig
from llmprovider.llm.base_provider import BaseProvider
from llmprovider.llm.exceptions import DynamicModelFetchError
from llmprovider.llm.llm_registry import LLMRegistry
from llmprovider.llm.mixins import DynamicModelsMixin
from llmprovider.llm.models import ModelHandle, ModelInfo, ProviderSetting, ResolutionInput

# Every variable a test provider or a defined provider may read
PROVIDER_ENV_VARS = [
    "STUB_BASE_URL",
    "STUB_API_KEY",
    "CUSTOM_BASE_URL",
    "CUSTOM_API_KEY",
    "OPENAI_API_KEY",
    "OPENAI_API_BASE_URL",
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_API_BASE_URL",
    "OPENAI_LIKE_API_BASE_URL",
    "OPENAI_LIKE_API_KEY",
    "LMSTUDIO_API_BASE_URL",
    "LMSTUDIO_API_KEY",
]


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: fast tests with no network access")


@pytest.fixture(autouse=True)
def clean_provider_env(monkeypatch):
    """Keep the host's environment out of resolution results."""
    for name in PROVIDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers a test installed on the package logger."""
    yield
    logger = logging.getLogger("llmprovider")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class StubProvider(BaseProvider):
    """Concrete provider with no capabilities beyond the base class."""

    name: str = "Stub"
    config: ProviderConfig = ProviderConfig(base_url="https://static.example.com")

    default_base_url_key: ClassVar[str] = "STUB_BASE_URL"
    default_api_token_key: ClassVar[str] = "STUB_API_KEY"

    def get_model_instance(self, model: str, resolution_input: ResolutionInput) -> ModelHandle:
        self.require_connection(resolution_input)
        return ModelHandle(provider=self.name, model=model, client=None)


class StubDynamicProvider(StubProvider, DynamicModelsMixin):
    """Provider whose dynamic listing is served from ``fetched``."""

    name: str = "StubDynamic"
    fetched: List[ModelInfo] = Field(default_factory=list)
    fetch_count: int = 0
    fail: bool = False

    async def get_dynamic_models(self, resolution_input: ResolutionInput) -> List[ModelInfo]:
        self.fetch_count += 1
        if self.fail:
            raise DynamicModelFetchError(self.name, "backend unavailable")
        return list(self.fetched)


class BrokenDynamicProvider(StubDynamicProvider):
    """Provider whose listing fails with an error outside the provider hierarchy."""

    name: str = "Broken"

    async def get_dynamic_models(self, resolution_input: ResolutionInput) -> List[ModelInfo]:
        self.fetch_count += 1
        raise RuntimeError("unexpected payload")


class SignalingDynamicProvider(StubDynamicProvider):
    """Provider that sets ``signal`` and then waits for ``wait_on`` before listing."""

    _signal: Any = PrivateAttr(default=None)
    _wait_on: Any = PrivateAttr(default=None)

    async def get_dynamic_models(self, resolution_input: ResolutionInput) -> List[ModelInfo]:
        if self._signal is not None:
            self._signal.set()
        if self._wait_on is not None:
            await asyncio.wait_for(self._wait_on.wait(), timeout=1)
        return await super().get_dynamic_models(resolution_input)


@pytest.fixture
def registry_env():
    return {"STUB_BASE_URL": "https://registry.example.com", "STUB_API_KEY": "registry-key"}


@pytest.fixture
def registry(registry_env) -> LLMRegistry:
    return LLMRegistry(env=registry_env)


@pytest.fixture
def stub_provider(registry) -> StubProvider:
    provider = StubProvider(
        static_models=[ModelInfo(name="stub-small", label="Stub Small", provider="Stub", max_token_allowed=4096)]
    )
    registry.register_provider(provider)
    return provider


@pytest.fixture
def dynamic_models() -> List[ModelInfo]:
    return [
        ModelInfo(name="dyn-a", label="Dyn A", provider="StubDynamic"),
        ModelInfo(name="dyn-b", label="Dyn B", provider="StubDynamic", max_token_allowed=32000),
    ]


@pytest.fixture
def dynamic_provider(registry, dynamic_models) -> StubDynamicProvider:
    provider = StubDynamicProvider(fetched=dynamic_models)
    registry.register_provider(provider)
    return provider


@pytest.fixture
def resolution_input() -> ResolutionInput:
    return ResolutionInput(
        api_keys={"StubDynamic": "dyn-key", "Other": "other-key"},
        provider_settings={"StubDynamic": ProviderSetting(base_url="https://dyn.example.com/v1")},
        server_env={"REGION": "eu", "TIER": "pro"},
    )


@pytest.fixture
def make_stub_provider(registry):
    """Build a ``StubProvider`` bound to the shared registry."""

    def _make(**kwargs) -> StubProvider:
        provider = StubProvider(**kwargs)
        registry.register_provider(provider)
        return provider

    return _make


@pytest.fixture
def make_unbound_provider():
    """Build a ``StubProvider`` with no registry behind it."""

    def _make(**kwargs) -> StubProvider:
        return StubProvider(**kwargs)

    return _make


@pytest.fixture
def broken_provider(registry) -> BrokenDynamicProvider:
    provider = BrokenDynamicProvider()
    registry.register_provider(provider)
    return provider


@pytest.fixture
def make_signaling_provider(registry):
    """Build a registered ``SignalingDynamicProvider`` listing one model named after it."""

    def _make(name: str) -> SignalingDynamicProvider:
        provider = SignalingDynamicProvider(
            name=name, fetched=[ModelInfo(name=f"{name.lower()}-model", label=name, provider=name)]
        )
        registry.register_provider(provider)
        return provider

    return _make
