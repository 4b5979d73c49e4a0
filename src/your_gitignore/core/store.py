"""Directory-backed template store.

Each template is one file in the store directory: the file name is the
template name and the file content is the template text.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from your_gitignore.core.errors import (
    InvalidTemplateNameError,
    StoreIOError,
    TemplateNotFoundError,
    TextEncodingError,
)
from your_gitignore.core.file_ops import read_text_exact, write_text_atomic

logger = logging.getLogger(__name__)

TEMPLATE_NAME_PATTERN = re.compile(r"[a-zA-Z0-9_.-]+")

EMPTY_NAME_MESSAGE = "The file name cannot be empty."
INVALID_CHARACTERS_MESSAGE = "The file name contains invalid characters."
RESERVED_NAME_MESSAGE = "The file name cannot be '.' or '..'."

TemplateNames = list[str]

SEPARATORS = frozenset("/\\\0")


def validate_template_name(name: str) -> str | None:
    """Return an error message for an unusable template name, else None."""
    if not name:
        return EMPTY_NAME_MESSAGE
    if not TEMPLATE_NAME_PATTERN.fullmatch(name):
        return INVALID_CHARACTERS_MESSAGE
    if name in (".", ".."):
        return RESERVED_NAME_MESSAGE
    return None


def is_store_entry_name(name: str) -> bool:
    """True when *name* names a file directly inside the store directory.

    Files placed in the store by hand need not follow the capture naming
    rules; only separators and directory references are refused.
    """
    return bool(name) and name not in (".", "..") and not SEPARATORS & set(name)


class TemplateStore:
    """Flat name-to-text mapping kept in a single directory."""

    def __init__(self, directory: Path | str, encoding: str = "utf-8") -> None:
        self.directory = Path(directory)
        self.encoding = encoding

    def ensure_ready(self) -> None:
        """Create the store directory if it does not exist yet."""
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreIOError("create", self.directory, e) from e

    def list(self) -> TemplateNames:
        """Return the template names, sorted.

        A missing or unreadable directory lists as empty.
        """
        try:
            entries = [p.name for p in self.directory.iterdir() if p.is_file()]
        except FileNotFoundError:
            return []
        except OSError:
            logger.debug("Cannot list store %s", self.directory, exc_info=True)
            return []
        return sorted(entries)

    def path_for(self, name: str) -> Path:
        """Return the file path backing *name*.

        Raises:
            InvalidTemplateNameError: If *name* is not a safe file name.
        """
        error = validate_template_name(name)
        if error is not None:
            raise InvalidTemplateNameError(f"{error} ({name!r})")
        return self.directory / name

    def read(self, name: str) -> str:
        """Return the full text of template *name*, unmodified.

        Raises:
            TemplateNotFoundError: If no such template exists.
            StoreIOError: If the file exists but cannot be read.
            TextEncodingError: If the content is not valid in the store encoding.
        """
        if not is_store_entry_name(name):
            raise TemplateNotFoundError(name)
        path = self.directory / name
        try:
            return read_text_exact(path, encoding=self.encoding)
        except (FileNotFoundError, IsADirectoryError) as e:
            raise TemplateNotFoundError(name) from e
        except OSError as e:
            raise StoreIOError("read", path, e) from e
        except UnicodeDecodeError as e:
            raise TextEncodingError("decode", path, e) from e

    def write(self, name: str, content: str) -> Path:
        """Create or replace template *name*. The last write wins.

        Raises:
            InvalidTemplateNameError: If *name* is not a safe file name.
            StoreIOError: If the file cannot be written.
            TextEncodingError: If *content* cannot be encoded.
        """
        path = self.path_for(name)
        try:
            size = write_text_atomic(path, content, encoding=self.encoding)
        except OSError as e:
            raise StoreIOError("write", path, e) from e
        except UnicodeEncodeError as e:
            raise TextEncodingError("encode", path, e) from e
        logger.debug("Stored template %s (%d bytes)", name, size)
        return path
