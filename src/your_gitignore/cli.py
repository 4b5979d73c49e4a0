"""Command line interface for your-gitignore."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from your_gitignore.cli_modules.commands.config_commands import ConfigCommands
from your_gitignore.cli_modules.commands.template_commands import TemplateCommands
from your_gitignore.cli_modules.utils.cli_utils import configure_logging
from your_gitignore.core.config.config_manager import (
    ConfigError,
    ConfigurationManager,
)
from your_gitignore.core.errors import TemplateError

PROJECT_DIR_OPTION = click.option(
    "--project-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root (defaults to the enclosing git repository)",
)


def _resolved_config(ctx: click.Context) -> ConfigurationManager:
    """Return the context's configuration with settings loaded."""
    config_manager: ConfigurationManager = ctx.obj
    try:
        _ = config_manager.settings
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    return config_manager


def _run_template_command(
    ctx: click.Context, command: Callable[..., Any], *args: Any
) -> None:
    config_manager = _resolved_config(ctx)
    try:
        result = command(config_manager, *args)
    except TemplateError as e:
        raise click.ClickException(str(e)) from e
    if result is not None and not result.success:
        ctx.exit(1)


@click.group()
@click.version_option(package_name="your-gitignore-template")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding config.yaml",
)
@click.option(
    "--store-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the user-defined templates",
)
@click.option(
    "--target",
    "target_filename",
    default=None,
    help="Name of the file templates are applied to (default .gitignore)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    config_dir: Path | None,
    store_dir: Path | None,
    target_filename: str | None,
    verbose: bool,
) -> None:
    """Your gitignore templates - save and reuse your own .gitignore files."""
    configure_logging(verbose)
    ctx.obj = ConfigurationManager(
        config_dir=config_dir,
        store_dir=store_dir,
        target_filename=target_filename,
    )


@cli.command()
@PROJECT_DIR_OPTION
@click.pass_context
def apply(ctx: click.Context, project_dir: Path | None) -> None:
    """Create or overwrite the project's .gitignore from a template."""
    _run_template_command(ctx, TemplateCommands.apply, project_dir)


@cli.command()
@click.argument(
    "source",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.pass_context
def capture(ctx: click.Context, source: Path | None) -> None:
    """Save SOURCE (a .gitignore file) as a user-defined template."""
    _run_template_command(ctx, TemplateCommands.capture, source)


@cli.command("list")
@click.pass_context
def list_templates(ctx: click.Context) -> None:
    """List user-defined templates."""
    _run_template_command(ctx, TemplateCommands.list_templates)


@cli.command()
@click.argument("name")
@click.pass_context
def show(ctx: click.Context, name: str) -> None:
    """Print the content of template NAME."""
    _run_template_command(ctx, TemplateCommands.show_template, name)


@cli.group()
def config() -> None:
    """Configuration management commands."""
    pass


@config.command("init")
@click.pass_context
def config_init(ctx: click.Context) -> None:
    """Write a default config.yaml."""
    ConfigCommands.init_config(_resolved_config(ctx))


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show the resolved configuration."""
    ConfigCommands.show_config(_resolved_config(ctx))


if __name__ == "__main__":
    cli()
