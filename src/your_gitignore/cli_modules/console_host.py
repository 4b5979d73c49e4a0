"""Terminal implementation of the procedure host."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from your_gitignore.cli_modules.utils.cli_utils import (
    echo_error,
    echo_info,
    echo_warning,
)
from your_gitignore.core.errors import StoreIOError, TextEncodingError
from your_gitignore.core.file_ops import read_text_exact
from your_gitignore.core.host import (
    Document,
    NotifyLevel,
    SelectionOption,
    Validator,
)

PROJECT_MARKERS = (".git",)


def find_project_root(start: Path) -> Path | None:
    """Nearest directory at or above *start* holding a project marker."""
    start = start.resolve()
    for candidate in (start, *start.parents):
        if any((candidate / marker).exists() for marker in PROJECT_MARKERS):
            return candidate
    return None


class ConsoleHost:
    """Drives apply and capture from an interactive terminal.

    Ctrl-C or end of input at any prompt dismisses it.
    """

    def __init__(
        self,
        project_dir: Path | None = None,
        document_path: Path | None = None,
        console: Console | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self.project_dir = project_dir
        self.document_path = document_path
        self.console = console or Console()
        self.encoding = encoding

    async def pick_one(
        self, options: Sequence[SelectionOption], placeholder: str
    ) -> str | None:
        table = Table(title=placeholder, show_header=True)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Template", style="bold")
        table.add_column("Description", style="dim")
        for index, option in enumerate(options, start=1):
            table.add_row(str(index), option.label, option.description)
        self.console.print(table)

        try:
            choice = click.prompt(
                "Template number", type=click.IntRange(1, len(options))
            )
        except click.Abort:
            return None
        return options[choice - 1].label

    async def confirm(self, message: str, choices: Sequence[str]) -> str | None:
        echo_warning(message)
        try:
            answer: str = click.prompt(
                "Answer",
                type=click.Choice(list(choices), case_sensitive=False),
            )
        except click.Abort:
            return None
        return answer

    async def prompt_text(
        self, message: str, placeholder: str, validate: Validator
    ) -> str | None:
        click.echo(message)
        while True:
            try:
                value: str = click.prompt(
                    f"Name ({placeholder})", default="", show_default=False
                )
            except click.Abort:
                return None
            error = validate(value)
            if error is None:
                return value
            echo_error(error)

    def notify(self, level: NotifyLevel, message: str) -> None:
        if level is NotifyLevel.ERROR:
            echo_error(message)
        elif level is NotifyLevel.WARNING:
            echo_warning(message)
        else:
            echo_info(message)

    def current_project_root(self) -> Path | None:
        if self.project_dir is not None:
            return self.project_dir.resolve()
        return find_project_root(Path.cwd())

    def current_document(self) -> Document | None:
        if self.document_path is None:
            return None
        try:
            text = read_text_exact(self.document_path, encoding=self.encoding)
        except OSError as e:
            raise StoreIOError("read", self.document_path, e) from e
        except UnicodeDecodeError as e:
            raise TextEncodingError("decode", self.document_path, e) from e
        return Document(identifier=str(self.document_path), text=text)
