"""Main CLI implementation using Typer."""

from pathlib import Path
from typing import Callable, Any

import typer
from pydantic import ValidationError
from jinja2 import TemplateError
from rich.console import Console

from nimbus.cli.commands import list_providers, show_template, validate_config
from nimbus.config import ConfigManager
from nimbus.errors import NimbusError
from nimbus.models.config import NimbusConfig
from nimbus.providers.registry import ProviderRegistry
from nimbus.utils.logging import setup_logging


# Create Typer app
app = typer.Typer(
    name="nimbusctl",
    help="Nimbus - compute template options for multi-cloud provisioning",
    add_completion=False,
)

# Console for rich output
console = Console()

DEFAULT_CONFIG_DIR = Path("./configs")


def _run_cli_command(handler: Callable[..., Any], config_dir: Path, **kwargs: Any) -> Any:
    """Helper to run a CLI command with loaded configuration and error handling."""
    try:
        manager = ConfigManager(config_dir)
        manager.load()
        registry = ProviderRegistry()
        registry.initialize(manager.config)
        return handler(manager, registry, **kwargs)
    except (NimbusError, ValidationError, TemplateError, FileNotFoundError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "WARNING", "--log-level", "-l", help="Logging level"
    ),
):
    """Configure logging before running a command."""
    setup_logging(log_level)


@app.command("providers")
def providers_command():
    """List provider modules and their options classes."""
    registry = ProviderRegistry()
    registry.initialize(NimbusConfig())
    list_providers(registry)


@app.command("show")
def show_command(
    name: str = typer.Argument(..., help="Template name"),
    config_dir: Path = typer.Option(
        DEFAULT_CONFIG_DIR, "--config-dir", "-c", help="Configuration directory"
    ),
):
    """Show the resolved options of a template."""
    _run_cli_command(show_template, config_dir, name=name)


@app.command("validate")
def validate_command(
    config_dir: Path = typer.Option(
        DEFAULT_CONFIG_DIR, "--config-dir", "-c", help="Configuration directory"
    ),
):
    """Validate configuration and template files."""
    if not _run_cli_command(validate_config, config_dir):
        raise typer.Exit(1)


def main():
    """Main entry point for CLI."""
    app()
