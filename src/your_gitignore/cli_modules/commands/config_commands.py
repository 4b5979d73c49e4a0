"""Configuration management CLI commands."""

import click

from your_gitignore.cli_modules.utils.cli_utils import echo_info, echo_success
from your_gitignore.core.config.config_manager import ConfigurationManager


class ConfigCommands:
    """Configuration management commands."""

    @staticmethod
    def init_config(config_manager: ConfigurationManager) -> None:
        """Write a default configuration file."""
        try:
            path = config_manager.init_config()
        except ValueError as e:
            raise click.ClickException(str(e)) from e
        echo_success(f"Configuration initialized at {path}")
        echo_info(f"Templates will be stored in {config_manager.store_dir}")

    @staticmethod
    def show_config(config_manager: ConfigurationManager) -> None:
        """Print the resolved configuration."""
        status = "present" if config_manager.config_path.exists() else "missing"
        click.echo(f"Config file: {config_manager.config_path} ({status})")
        click.echo(f"Store directory: {config_manager.store_dir}")
        click.echo(f"Target file: {config_manager.target_filename}")
        click.echo(f"Encoding: {config_manager.settings.encoding}")
