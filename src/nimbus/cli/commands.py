"""Command implementations for CLI."""

from typing import Any

from jinja2 import TemplateError
from rich.console import Console
from rich.table import Table
from rich.progress import Progress, SpinnerColumn, TextColumn

from nimbus.config import ConfigManager
from nimbus.errors import NimbusError
from nimbus.options.base import TemplateOptions
from nimbus.options.payload import Payload
from nimbus.providers.registry import ProviderRegistry


console = Console()

SECRET_FIELDS = {"private_key", "login_private_key"}


def _format_value(name: str, value: Any) -> str:
    """Render an option value for display."""
    if value is None:
        return "[dim]-[/dim]"
    if name in SECRET_FIELDS:
        return "[dim]<redacted>[/dim]"
    if isinstance(value, Payload):
        return f"{len(value)} bytes ({value.content_type})"
    if isinstance(value, bytes):
        return f"{len(value)} bytes"
    if isinstance(value, tuple):
        return ", ".join(str(item) for item in value) or "[dim]-[/dim]"
    if isinstance(value, dict):
        return ", ".join(f"{k}={v}" for k, v in value.items()) or "[dim]-[/dim]"
    if isinstance(value, bool):
        return "[green]yes[/green]" if value else "no"
    return str(value)


def list_providers(registry: ProviderRegistry):
    """List provider modules with formatted output."""
    table = Table(title="Providers")
    table.add_column("Name", style="cyan")
    table.add_column("Options", style="magenta")
    table.add_column("Template Defaults", style="dim")

    for name in registry.list_providers():
        module = registry.get_module(name)
        defaults = ", ".join(f"{k}={v}" for k, v in module.template_defaults.items())
        table.add_row(name, module.options_class.__name__, defaults or "-")

    console.print(table)


def render_options(name: str, options: TemplateOptions):
    """Print a table of resolved options."""
    table = Table(title=f"Template: {name} ({type(options).__name__})")
    table.add_column("Option", style="cyan")
    table.add_column("Value")

    for field, value in options.to_dict().items():
        table.add_row(field, _format_value(field, value))

    console.print(table)


def show_template(manager: ConfigManager, registry: ProviderRegistry, name: str):
    """Show the resolved options of a template."""
    options = manager.build_options(name, registry)
    render_options(name, options)


def validate_config(manager: ConfigManager, registry: ProviderRegistry) -> bool:
    """Validate configuration by building every template."""
    failures = list(manager.errors)
    names = manager.list_templates()

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Validating templates...", total=None)

        for name in names:
            try:
                manager.build_options(name, registry)
            except (NimbusError, ValueError, TemplateError) as e:
                failures.append(f"{name}: {e}")

        progress.update(task, completed=True)

    if not failures:
        console.print("[green]✓[/green] Configuration is valid")
        console.print(f"  Templates: {len(names)}")
        console.print(f"  Providers: {len(registry.list_providers())}")
        return True

    console.print("[red]✗[/red] Configuration is invalid")
    for failure in failures:
        console.print(f"  Error: {failure}")
    return False
