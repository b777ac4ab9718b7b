"""Tests for the shared value types."""
from pathlib import Path

import pytest
from pydantic import ValidationError

from llmprovider.llm.exceptions import MissingConfigurationError
from llmprovider.llm.models import ConnectionParams, ModelInfo, ProviderSetting, ResolutionInput


def test_model_info_is_frozen():
    model = ModelInfo(name="m", label="M", provider="P")

    with pytest.raises(ValidationError):
        model.name = "other"


def test_model_info_defaults():
    model = ModelInfo(name="m", label="M", provider="P", capabilities=frozenset({"supports_tools"}))

    assert model.max_token_allowed == 8000
    assert model.capabilities == frozenset({"supports_tools"})


def test_model_info_rejects_non_positive_context():
    with pytest.raises(ValidationError):
        ModelInfo(name="m", label="M", provider="P", max_token_allowed=0)


def test_provider_setting_accepts_camel_case():
    setting = ProviderSetting.model_validate({"baseUrl": "https://x.com", "enabled": True})

    assert setting.base_url == "https://x.com"
    assert setting.is_enabled


def test_provider_setting_enabled_by_default():
    assert ProviderSetting().is_enabled
    assert not ProviderSetting(enabled=False).is_enabled


def test_resolution_input_from_yaml(tmp_path: Path):
    path = tmp_path / "input.yaml"
    path.write_text(
        """
api_keys:
  OpenAI: sk-test
provider_settings:
  OpenAILike:
    baseUrl: http://localhost:8000/v1
  LMStudio:
    enabled: false
server_env:
  OPENAI_LIKE_API_KEY: server-key
""".strip()
    )

    resolution_input = ResolutionInput.from_yaml(path)

    assert resolution_input.api_keys == {"OpenAI": "sk-test"}
    assert resolution_input.settings_for("OpenAILike").base_url == "http://localhost:8000/v1"
    assert not resolution_input.settings_for("LMStudio").is_enabled
    assert resolution_input.server_env == {"OPENAI_LIKE_API_KEY": "server-key"}


def test_resolution_input_stringifies_scalars(tmp_path: Path):
    path = tmp_path / "input.yaml"
    path.write_text("api_keys:\n  OpenAILike: 1234\nserver_env:\n  PORT: 8080\n  DEBUG: true\n")

    resolution_input = ResolutionInput.from_yaml(path)

    assert resolution_input.api_keys == {"OpenAILike": "1234"}
    assert resolution_input.server_env == {"PORT": "8080", "DEBUG": "True"}


def test_resolution_input_rejects_null_values():
    with pytest.raises(ValidationError):
        ResolutionInput(server_env={"PORT": None})


def test_resolution_input_from_empty_yaml(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert ResolutionInput.from_yaml(path) == ResolutionInput()


class TestConnectionParams:
    def test_require_returns_pair(self):
        params = ConnectionParams(base_url="https://x.com", api_key="k")

        assert params.require("P") == ("https://x.com", "k")

    def test_require_missing_base_url(self):
        with pytest.raises(MissingConfigurationError) as exc_info:
            ConnectionParams(api_key="k").require("P", base_url_hint="P_BASE_URL")

        assert exc_info.value.provider == "P"
        assert exc_info.value.field == "base URL"
        assert "P_BASE_URL" in str(exc_info.value)

    def test_require_missing_key(self):
        with pytest.raises(MissingConfigurationError):
            ConnectionParams(base_url="https://x.com").require("P")

    def test_require_empty_key(self):
        with pytest.raises(MissingConfigurationError):
            ConnectionParams(base_url="https://x.com", api_key="").require("P")

    def test_key_optional(self):
        assert ConnectionParams(base_url="https://x.com").require("P", need_api_key=False) == ("https://x.com", None)
