"""Host capabilities consumed by the apply and capture procedures."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

Validator = Callable[[str], str | None]


class NotifyLevel(str, Enum):
    """Severity of a user-facing notification."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class SelectionOption:
    """One entry offered to the single-choice picker."""

    label: str
    description: str


@dataclass(frozen=True)
class Document:
    """The document the host currently has open."""

    identifier: str
    text: str


class Host(Protocol):
    """Interactive environment that drives a procedure.

    The three prompt methods are the only suspension points of a
    procedure. Each returns ``None`` when the user dismisses the prompt.
    """

    async def pick_one(
        self, options: Sequence[SelectionOption], placeholder: str
    ) -> str | None:
        """Let the user choose one option; return its label."""
        ...

    async def confirm(self, message: str, choices: Sequence[str]) -> str | None:
        """Ask a question answered by one of *choices*."""
        ...

    async def prompt_text(
        self, message: str, placeholder: str, validate: Validator
    ) -> str | None:
        """Read one line of text.

        Implementations keep prompting while *validate* returns an error
        message, so a returned string always passed validation.
        """
        ...

    def notify(self, level: NotifyLevel, message: str) -> None:
        """Show a message without waiting for the user."""
        ...

    def current_project_root(self) -> Path | None:
        """Return the active project root, if any."""
        ...

    def current_document(self) -> Document | None:
        """Return the current document, if any."""
        ...
