import asyncio
import functools
import json
from typing import Optional

import click
import yaml

from llmprovider.config.base import LoggingConfig, configure_logging
from llmprovider.config.system import SystemConfig
from llmprovider.default_library.default_llm_factory import LLMDefaultFactory
from llmprovider.llm.exceptions import ProviderNotFoundError
from llmprovider.llm.llm_registry import LLMRegistry
from llmprovider.llm.models import ResolutionInput


def coro(f):
    """Turn an async function into a regular function."""

    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def mask_key(key: Optional[str]) -> str:
    if key is None:
        return "(not set)"
    if not key:
        return "(empty)"
    return "*" * 8 + key[-4:] if len(key) > 12 else "*" * len(key)


def load_input(path: Optional[str]) -> ResolutionInput:
    return ResolutionInput.from_yaml(path) if path else ResolutionInput()


@click.group()
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="System config YAML")
@click.option(
    "--env-file",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML mapping used as the shared environment snapshot",
)
@click.option("--log-level", default=None, help="Override the configured log level")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], env_file: Optional[str], log_level: Optional[str]):
    """llmprovider CLI - Inspect provider connections and model lists"""
    system_config = SystemConfig.from_yaml(config_path) if config_path else SystemConfig()
    logging_config = system_config.logging
    if log_level:
        logging_config = LoggingConfig(level=log_level, file=logging_config.file)
    configure_logging(logging_config)

    env = {}
    if env_file:
        with open(env_file) as f:
            env = {str(k): str(v) for k, v in (yaml.safe_load(f) or {}).items()}

    ctx.obj = LLMDefaultFactory(system_config=system_config).create_registry(env=env)


@cli.command()
@click.pass_obj
def providers(registry: LLMRegistry):
    """List registered providers"""
    for provider in registry.list_providers():
        kind = "dynamic" if provider.supports_dynamic_fetch else "static"
        click.echo(f"  - {provider.name} ({kind}, {len(provider.static_models)} static models)")


@cli.command()
@click.argument("provider_name")
@click.option("--input", "input_path", type=click.Path(exists=True, dir_okay=False), help="Resolution input YAML")
@click.pass_obj
def resolve(registry: LLMRegistry, provider_name: str, input_path: Optional[str]):
    """Show the base URL and API key a provider resolves to"""
    try:
        provider = registry.get_provider(provider_name, strict=True)
    except ProviderNotFoundError as e:
        raise click.ClickException(str(e)) from e

    connection = provider.get_base_url_and_key(load_input(input_path))
    click.echo(
        json.dumps(
            {
                "provider": provider.name,
                "base_url": connection.base_url,
                "api_key": mask_key(connection.api_key),
            },
            indent=2,
        )
    )


@cli.command()
@click.option("--input", "input_path", type=click.Path(exists=True, dir_okay=False), help="Resolution input YAML")
@click.pass_obj
@coro
async def models(registry: LLMRegistry, input_path: Optional[str]):
    """List static and dynamically discovered models"""
    model_list = await registry.update_model_list(load_input(input_path))
    if not model_list:
        click.echo("No models available")
        return

    for model in model_list:
        click.echo(f"  - {model.provider}/{model.name} ({model.label}, {model.max_token_allowed} tokens)")


if __name__ == "__main__":
    cli()
