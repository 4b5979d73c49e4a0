"""Tests for applying templates to the project target file."""

from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from conftest import FakeHost
from your_gitignore.core.apply import (
    ApplyStatus,
    apply_template,
    build_options,
)
from your_gitignore.core.host import NotifyLevel
from your_gitignore.core.store import TemplateStore


class TestBuildOptions:
    """Test picker option construction."""

    def test_one_option_per_name_in_order(self) -> None:
        options = build_options(["b.gitignore", "a.gitignore"])
        assert [o.label for o in options] == ["b.gitignore", "a.gitignore"]
        assert options[0].description == "Use b.gitignore as .gitignore template"

    def test_description_names_custom_target(self) -> None:
        (option,) = build_options(["base"], ".dockerignore")
        assert option.description == "Use base as .dockerignore template"


class TestApplyPreconditions:
    """Test failures reported before any prompt."""

    @pytest.mark.asyncio
    async def test_no_workspace_touches_nothing(self) -> None:
        store = Mock(spec=TemplateStore)
        host = FakeHost(project_root=None, pick="node.gitignore")

        result = await apply_template(store, host)

        assert result.success is False
        assert result.status == ApplyStatus.FAILED
        assert result.error == "no_workspace"
        assert store.mock_calls == []
        assert host.notifications == [
            (NotifyLevel.ERROR, "No workspace folder is open.")
        ]

    @pytest.mark.asyncio
    async def test_empty_store_reports_no_templates(
        self, store: TemplateStore, project_root: Path
    ) -> None:
        host = FakeHost(project_root=project_root, pick="anything")

        result = await apply_template(store, host)

        assert result.error == "no_templates"
        assert host.offered == []
        assert list(project_root.iterdir()) == []
        assert host.notifications == [
            (NotifyLevel.ERROR, "No user-defined gitignore file is found.")
        ]


class TestApplyFlow:
    """Test the pick, confirm and write sequence."""

    @pytest.mark.asyncio
    async def test_creates_missing_target(
        self, seeded_store: TemplateStore, project_root: Path
    ) -> None:
        host = FakeHost(project_root=project_root, pick="node.gitignore")

        result = await apply_template(seeded_store, host)

        target = project_root / ".gitignore"
        assert target.read_text() == "node_modules/\n"
        assert result.status == ApplyStatus.CREATED
        assert result.success is True
        assert result.template == "node.gitignore"
        assert result.path == str(target)
        assert result.bytes_written == len("node_modules/\n")
        assert host.confirmations == []
        assert host.notifications == [
            (NotifyLevel.INFO, "A new .gitignore file has been created.")
        ]
        assert [o.label for o in host.offered] == [
            "node.gitignore",
            "python.gitignore",
        ]

    @pytest.mark.asyncio
    async def test_decline_keeps_existing_target(
        self, seeded_store: TemplateStore, project_root: Path
    ) -> None:
        target = project_root / ".gitignore"
        target.write_text("old\n")
        host = FakeHost(project_root=project_root, pick="python.gitignore", answer="No")

        result = await apply_template(seeded_store, host)

        assert target.read_text() == "old\n"
        assert result.status == ApplyStatus.UNCHANGED
        assert len(host.confirmations) == 1
        assert "already exists" in host.confirmations[0]
        assert host.notifications == [
            (NotifyLevel.INFO, "The .gitignore file has not been changed.")
        ]

    @pytest.mark.asyncio
    async def test_dismissed_confirmation_counts_as_no(
        self, seeded_store: TemplateStore, project_root: Path
    ) -> None:
        target = project_root / ".gitignore"
        target.write_text("old\n")
        host = FakeHost(project_root=project_root, pick="python.gitignore", answer=None)

        result = await apply_template(seeded_store, host)

        assert target.read_text() == "old\n"
        assert result.status == ApplyStatus.UNCHANGED
        assert result.success is True

    @pytest.mark.asyncio
    async def test_confirm_overwrites(
        self, seeded_store: TemplateStore, project_root: Path
    ) -> None:
        target = project_root / ".gitignore"
        target.write_text("old\nlonger content than the template\n")
        host = FakeHost(
            project_root=project_root, pick="python.gitignore", answer="Yes"
        )

        result = await apply_template(seeded_store, host)

        assert target.read_text() == "__pycache__/\n"
        assert result.status == ApplyStatus.OVERWRITTEN
        assert host.messages == ["The .gitignore file has been overwritten."]

    @pytest.mark.asyncio
    async def test_repeated_confirmed_apply_is_idempotent(
        self, seeded_store: TemplateStore, project_root: Path
    ) -> None:
        target = project_root / ".gitignore"
        target.write_text("old\n")

        for _ in range(2):
            host = FakeHost(
                project_root=project_root, pick="node.gitignore", answer="Yes"
            )
            result = await apply_template(seeded_store, host)
            assert result.status == ApplyStatus.OVERWRITTEN
            assert target.read_text() == seeded_store.read("node.gitignore")

    @pytest.mark.asyncio
    async def test_cancelled_pick_is_silent(
        self, seeded_store: TemplateStore, project_root: Path
    ) -> None:
        host = FakeHost(project_root=project_root, pick=None)

        result = await apply_template(seeded_store, host)

        assert result.success is True
        assert result.status == ApplyStatus.CANCELLED
        assert host.notifications == []
        assert not (project_root / ".gitignore").exists()

    @pytest.mark.asyncio
    async def test_template_removed_after_listing(
        self, seeded_store: TemplateStore, project_root: Path
    ) -> None:
        host = FakeHost(project_root=project_root, pick="node.gitignore")
        (seeded_store.directory / "node.gitignore").unlink()

        result = await apply_template(seeded_store, host)

        assert result.error == "not_found"
        assert host.levels == [NotifyLevel.ERROR]
        assert not (project_root / ".gitignore").exists()

    @pytest.mark.asyncio
    async def test_custom_target_filename(
        self, seeded_store: TemplateStore, project_root: Path
    ) -> None:
        host = FakeHost(project_root=project_root, pick="node.gitignore")

        result = await apply_template(seeded_store, host, ".dockerignore")

        assert (project_root / ".dockerignore").read_text() == "node_modules/\n"
        assert not (project_root / ".gitignore").exists()
        assert result.message == "A new .dockerignore file has been created."

    @pytest.mark.asyncio
    async def test_write_failure_is_reported(
        self, seeded_store: TemplateStore, project_root: Path
    ) -> None:
        target = project_root / ".gitignore"
        target.write_text("old\n")
        host = FakeHost(project_root=project_root, pick="node.gitignore", answer="Yes")

        with patch(
            "your_gitignore.core.apply.write_text_atomic",
            side_effect=PermissionError(13, "Permission denied"),
        ):
            result = await apply_template(seeded_store, host)

        assert result.success is False
        assert result.error == "io_error"
        assert target.read_text() == "old\n"
        assert host.levels == [NotifyLevel.ERROR]
        assert "Permission denied" in host.messages[0]

    @pytest.mark.asyncio
    async def test_applies_template_placed_by_hand(
        self, store: TemplateStore, project_root: Path
    ) -> None:
        (store.directory / "c++ project").write_text("*.o\n")
        host = FakeHost(project_root=project_root, pick="c++ project")

        result = await apply_template(store, host)

        assert [o.label for o in host.offered] == ["c++ project"]
        assert result.status == ApplyStatus.CREATED
        assert (project_root / ".gitignore").read_text() == "*.o\n"

    @pytest.mark.asyncio
    async def test_undecodable_template_is_reported(
        self, store: TemplateStore, project_root: Path
    ) -> None:
        (store.directory / "legacy.gitignore").write_bytes(b"# caf\xe9\n*.o\n")
        host = FakeHost(project_root=project_root, pick="legacy.gitignore")

        result = await apply_template(store, host)

        assert result.success is False
        assert result.status == ApplyStatus.FAILED
        assert result.error == "encoding_error"
        assert host.levels == [NotifyLevel.ERROR]
        assert "legacy.gitignore" in host.messages[0]
        assert not (project_root / ".gitignore").exists()
