"""Apply a stored template to the project's target file."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel

from your_gitignore.core.errors import (
    NoTemplatesError,
    NoWorkspaceError,
    StoreIOError,
    TemplateError,
    TextEncodingError,
)
from your_gitignore.core.file_ops import write_text_atomic
from your_gitignore.core.host import Host, NotifyLevel, SelectionOption
from your_gitignore.core.store import TemplateStore

logger = logging.getLogger(__name__)

DEFAULT_TARGET_FILENAME = ".gitignore"

YES = "Yes"
NO = "No"


class ApplyStatus(str, Enum):
    """How an apply run ended."""

    CREATED = "created"
    OVERWRITTEN = "overwritten"
    UNCHANGED = "unchanged"
    CANCELLED = "cancelled"
    FAILED = "failed"


class ApplyResult(BaseModel):
    """Outcome of :func:`apply_template`."""

    success: bool
    status: ApplyStatus
    template: str | None = None
    path: str | None = None
    bytes_written: int = 0
    error: str | None = None
    message: str | None = None


def build_options(
    names: list[str], target_filename: str = DEFAULT_TARGET_FILENAME
) -> list[SelectionOption]:
    """One picker option per template name, in listing order."""
    return [
        SelectionOption(
            label=name, description=f"Use {name} as {target_filename} template"
        )
        for name in names
    ]


async def apply_template(
    store: TemplateStore,
    host: Host,
    target_filename: str = DEFAULT_TARGET_FILENAME,
) -> ApplyResult:
    """Let the user pick a template and write it to the target file.

    Failures are reported through ``host.notify`` and returned as a failed
    result; dismissing a prompt is not a failure.
    """
    try:
        return await _apply(store, host, target_filename)
    except TemplateError as e:
        logger.warning("Apply failed: %s", e)
        host.notify(NotifyLevel.ERROR, str(e))
        return ApplyResult(
            success=False, status=ApplyStatus.FAILED, error=e.code, message=str(e)
        )


async def _apply(store: TemplateStore, host: Host, target_filename: str) -> ApplyResult:
    project_root = host.current_project_root()
    if project_root is None:
        raise NoWorkspaceError()

    names = store.list()
    if not names:
        raise NoTemplatesError(target_filename)
    logger.debug("Offering %d templates from %s", len(names), store.directory)

    selected = await host.pick_one(
        build_options(names, target_filename),
        f"Select a user-defined {target_filename.lstrip('.')} file",
    )
    if selected is None:
        logger.debug("Template selection cancelled")
        return ApplyResult(success=True, status=ApplyStatus.CANCELLED)

    content = store.read(selected)
    target = project_root / target_filename

    if target.exists():
        answer = await host.confirm(
            f"A {target_filename} file already exists in the workspace folder. "
            "Do you want to overwrite it?",
            (YES, NO),
        )
        if answer != YES:
            # A dismissed dialog counts as "No".
            message = f"The {target_filename} file has not been changed."
            host.notify(NotifyLevel.INFO, message)
            return ApplyResult(
                success=True,
                status=ApplyStatus.UNCHANGED,
                template=selected,
                path=str(target),
                message=message,
            )
        status = ApplyStatus.OVERWRITTEN
        message = f"The {target_filename} file has been overwritten."
    else:
        status = ApplyStatus.CREATED
        message = f"A new {target_filename} file has been created."

    try:
        written = write_text_atomic(target, content, encoding=store.encoding)
    except OSError as e:
        raise StoreIOError("write", target, e) from e
    except UnicodeEncodeError as e:
        raise TextEncodingError("encode", target, e) from e

    logger.debug("Wrote template %s to %s", selected, target)
    host.notify(NotifyLevel.INFO, message)
    return ApplyResult(
        success=True,
        status=status,
        template=selected,
        path=str(target),
        bytes_written=written,
        message=message,
    )
