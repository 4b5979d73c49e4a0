"""Save the current document as a named template."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import PurePath, PureWindowsPath

from pydantic import BaseModel

from your_gitignore.core.apply import DEFAULT_TARGET_FILENAME
from your_gitignore.core.errors import (
    NoDocumentError,
    TemplateError,
    WrongDocumentTypeError,
)
from your_gitignore.core.host import Document, Host, NotifyLevel
from your_gitignore.core.store import TemplateStore, validate_template_name

logger = logging.getLogger(__name__)

NAME_PLACEHOLDER = "e.g. node.gitignore"


class CaptureStatus(str, Enum):
    """How a capture run ended."""

    SAVED = "saved"
    CANCELLED = "cancelled"
    FAILED = "failed"


class CaptureResult(BaseModel):
    """Outcome of :func:`capture_template`."""

    success: bool
    status: CaptureStatus
    name: str | None = None
    path: str | None = None
    error: str | None = None
    message: str | None = None


def document_base_name(identifier: str) -> str:
    """Final path component of a document identifier, for either separator."""
    return PureWindowsPath(PurePath(identifier).name).name


def is_target_document(document: Document, target_filename: str) -> bool:
    return document_base_name(document.identifier) == target_filename


async def capture_template(
    store: TemplateStore,
    host: Host,
    target_filename: str = DEFAULT_TARGET_FILENAME,
) -> CaptureResult:
    """Prompt for a name and store the current document under it."""
    try:
        return await _capture(store, host, target_filename)
    except TemplateError as e:
        logger.warning("Capture failed: %s", e)
        host.notify(NotifyLevel.ERROR, str(e))
        return CaptureResult(
            success=False, status=CaptureStatus.FAILED, error=e.code, message=str(e)
        )


async def _capture(
    store: TemplateStore, host: Host, target_filename: str
) -> CaptureResult:
    document = host.current_document()
    if document is None:
        raise NoDocumentError()
    if not is_target_document(document, target_filename):
        raise WrongDocumentTypeError(document.identifier, target_filename)

    content = document.text

    name = await host.prompt_text(
        f"Enter the file name to save the {target_filename} file as "
        "user-defined template",
        NAME_PLACEHOLDER,
        validate_template_name,
    )
    if not name:
        logger.debug("Template name prompt cancelled")
        return CaptureResult(success=True, status=CaptureStatus.CANCELLED)

    path = store.write(name, content)
    message = (
        f"The {target_filename} file has been saved as {name} in "
        f"{store.directory.name} directory."
    )
    host.notify(NotifyLevel.INFO, message)
    return CaptureResult(
        success=True,
        status=CaptureStatus.SAVED,
        name=name,
        path=str(path),
        message=message,
    )
