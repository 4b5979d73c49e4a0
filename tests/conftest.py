"""Shared test fixtures and configuration."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from your_gitignore.core.config.config_manager import (
    ENV_CONFIG_DIR,
    ENV_STORE_DIR,
    ENV_TARGET,
)
from your_gitignore.core.host import Document, NotifyLevel, SelectionOption, Validator
from your_gitignore.core.store import TemplateStore


@dataclass
class FakeHost:
    """Scripted host that answers prompts from canned values.

    ``names`` feeds ``prompt_text`` one entry per attempt; invalid entries
    are rejected the way an interactive host keeps its input box open.
    Running out of entries behaves like a dismissed prompt.
    """

    project_root: Path | None = None
    document: Document | None = None
    pick: str | None = None
    answer: str | None = None
    names: list[str] = field(default_factory=list)

    offered: list[SelectionOption] = field(default_factory=list)
    confirmations: list[str] = field(default_factory=list)
    validation_errors: list[str] = field(default_factory=list)
    notifications: list[tuple[NotifyLevel, str]] = field(default_factory=list)

    async def pick_one(
        self, options: Sequence[SelectionOption], placeholder: str
    ) -> str | None:
        self.offered = list(options)
        return self.pick

    async def confirm(self, message: str, choices: Sequence[str]) -> str | None:
        self.confirmations.append(message)
        return self.answer

    async def prompt_text(
        self, message: str, placeholder: str, validate: Validator
    ) -> str | None:
        while self.names:
            candidate = self.names.pop(0)
            error = validate(candidate)
            if error is None:
                return candidate
            self.validation_errors.append(error)
        return None

    def notify(self, level: NotifyLevel, message: str) -> None:
        self.notifications.append((level, message))

    def current_project_root(self) -> Path | None:
        return self.project_root

    def current_document(self) -> Document | None:
        return self.document

    @property
    def levels(self) -> list[NotifyLevel]:
        return [level for level, _ in self.notifications]

    @property
    def messages(self) -> list[str]:
        return [message for _, message in self.notifications]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's configuration out of every test."""
    for name in (ENV_CONFIG_DIR, ENV_STORE_DIR, ENV_TARGET, "XDG_CONFIG_HOME"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def store_dir(tmp_path: Path) -> Path:
    return tmp_path / "user-gitignore"


@pytest.fixture
def store(store_dir: Path) -> TemplateStore:
    """An empty, ready template store."""
    template_store = TemplateStore(store_dir)
    template_store.ensure_ready()
    return template_store


@pytest.fixture
def seeded_store(store: TemplateStore) -> TemplateStore:
    """Store holding the node and python templates."""
    (store.directory / "node.gitignore").write_text("node_modules/\n")
    (store.directory / "python.gitignore").write_text("__pycache__/\n")
    return store


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root
