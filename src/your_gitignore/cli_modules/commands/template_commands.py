"""Template apply/capture/list CLI commands."""

import asyncio
from pathlib import Path

import click

from your_gitignore.cli_modules.console_host import ConsoleHost
from your_gitignore.cli_modules.utils.cli_utils import echo_info
from your_gitignore.core.apply import ApplyResult, apply_template
from your_gitignore.core.capture import CaptureResult, capture_template
from your_gitignore.core.config.config_manager import ConfigurationManager
from your_gitignore.core.errors import TemplateError


class TemplateCommands:
    """Template store commands."""

    @staticmethod
    def apply(
        config_manager: ConfigurationManager, project_dir: Path | None
    ) -> ApplyResult:
        """Pick a stored template and write it into the project."""
        store = config_manager.create_store()
        host = ConsoleHost(project_dir=project_dir, encoding=store.encoding)
        return asyncio.run(
            apply_template(store, host, config_manager.target_filename)
        )

    @staticmethod
    def capture(
        config_manager: ConfigurationManager, source: Path | None
    ) -> CaptureResult:
        """Save *source* into the store under a name read from the terminal."""
        store = config_manager.create_store()
        host = ConsoleHost(document_path=source, encoding=store.encoding)
        return asyncio.run(
            capture_template(store, host, config_manager.target_filename)
        )

    @staticmethod
    def list_templates(config_manager: ConfigurationManager) -> None:
        """Print the names of all stored templates."""
        store = config_manager.create_store()
        names = store.list()
        if not names:
            echo_info(f"No templates in {store.directory}")
            return
        click.echo(f"Templates in {store.directory}:")
        for name in names:
            click.echo(f"  {name}")

    @staticmethod
    def show_template(config_manager: ConfigurationManager, name: str) -> None:
        """Print the content of one template exactly as stored."""
        store = config_manager.create_store()
        try:
            content = store.read(name)
        except TemplateError as e:
            raise click.ClickException(str(e)) from e
        click.echo(content, nl=False)
