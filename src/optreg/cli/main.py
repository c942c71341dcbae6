"""optreg CLI - Main entry point."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from optreg import __version__
from optreg.errors import OptionError
from optreg.registry import ConfigOptionRegistry

console = Console()
logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"

_existing_file = click.Path(exists=True, dir_okay=False, path_type=Path)


def _setup_logging(verbose: bool) -> None:
    """Configure console logging for the CLI."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)


def _load(definitions: Path, values: Path | None) -> ConfigOptionRegistry:
    """Load declarations and apply a values file, exiting on failure."""
    from optreg.config.loader import ConfigError, load_registry, load_values

    try:
        registry = load_registry(definitions)
        if values is not None:
            registry.update(load_values(values))
    except (ConfigError, OptionError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)
    return registry


def _render_table(registry: ConfigOptionRegistry, title: str) -> None:
    table = Table(title=title)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Kind")
    table.add_column("Default")
    table.add_column("Current")
    table.add_column("Domain")

    for definition in registry.list():
        current = registry.get(definition.name)
        changed = current != definition.default_value
        current_text = escape(definition.display_value(current))
        table.add_row(
            definition.name,
            definition.kind,
            escape(definition.display_value(definition.default_value)),
            f"[bold]{current_text}[/bold]" if changed else current_text,
            escape(definition.describe_domain()),
        )

    console.print(table)


@click.group()
@click.version_option(version=__version__, prog_name="optreg")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """optreg - typed configuration option registry.

    Inspect option declaration files and check submitted values against them.
    """
    _setup_logging(verbose)


@cli.command()
@click.argument("definitions", type=_existing_file)
@click.option("--values", "values_path", type=_existing_file, default=None,
              help="YAML file of submitted values to apply")
def show(definitions, values_path):
    """Show the options declared in DEFINITIONS."""
    registry = _load(definitions, values_path)
    if not len(registry):
        console.print("No options declared.")
        return
    _render_table(registry, title=f"Options ({escape(definitions.name)})")


@cli.command()
@click.argument("definitions", type=_existing_file)
@click.option("--values", "values_path", type=_existing_file, default=None,
              help="YAML file of submitted values to check")
def validate(definitions, values_path):
    """Check DEFINITIONS and, optionally, a values file against them.

    Example: optreg validate options.yaml --values submitted.yaml
    """
    registry = _load(definitions, values_path)
    console.print(f"[green]Valid: {len(registry)} option(s)[/green]")
    for name, value in registry.values().items():
        console.print(f"  {name} = {escape(repr(value))}")


@cli.command()
def builtin():
    """Show the built-in upgrade-check options."""
    from optreg.builtin.upgrade_check import build_upgrade_check_registry

    registry = build_upgrade_check_registry()
    for definition in registry.list():
        console.print(f"[bold]{definition.name}[/bold] ({definition.kind})")
        console.print(f"  Label: {escape(definition.label)}")
        console.print(f"  Description: {escape(definition.description)}")
        if definition.notes:
            console.print(f"  Notes: {escape(definition.notes)}")
        console.print(f"  Choices: {escape(definition.describe_domain())}")
        console.print(
            f"  Default: {escape(definition.display_value(definition.default_value))}"
        )

