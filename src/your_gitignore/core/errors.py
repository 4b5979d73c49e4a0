"""Error taxonomy for template storage and the apply/capture procedures."""

from __future__ import annotations


class TemplateError(Exception):
    """Base class for every failure reported to the user.

    Each subclass carries a stable ``code`` so results and tests can refer
    to a failure without matching on message text.
    """

    code = "template_error"


class NoWorkspaceError(TemplateError):
    """No project root is available to apply a template into."""

    code = "no_workspace"

    def __init__(self) -> None:
        super().__init__("No workspace folder is open.")


class NoTemplatesError(TemplateError):
    """The template store holds no entries."""

    code = "no_templates"

    def __init__(self, target_filename: str = ".gitignore") -> None:
        label = target_filename.lstrip(".") or target_filename
        super().__init__(f"No user-defined {label} file is found.")


class TemplateNotFoundError(TemplateError):
    """A named template does not exist in the store."""

    code = "not_found"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


class NoDocumentError(TemplateError):
    """The host has no current document to capture."""

    code = "no_document"

    def __init__(self) -> None:
        super().__init__("No document is open.")


class WrongDocumentTypeError(TemplateError):
    """The current document is not the target file."""

    code = "wrong_document_type"

    def __init__(self, identifier: str, target_filename: str = ".gitignore") -> None:
        self.identifier = identifier
        super().__init__(f"The current document is not a {target_filename} file.")


class InvalidTemplateNameError(TemplateError, ValueError):
    """A template name is empty or contains characters outside the safe set."""

    code = "invalid_name"


class TextEncodingError(TemplateError):
    """File bytes and text do not fit the configured encoding."""

    code = "encoding_error"

    def __init__(
        self,
        action: str,
        path: object,
        cause: UnicodeDecodeError | UnicodeEncodeError,
    ) -> None:
        self.path = path
        super().__init__(
            f"Failed to {action} {path} as {cause.encoding}: {cause.reason}"
        )


class StoreIOError(TemplateError):
    """An operating-system level failure while reading or writing a file."""

    code = "io_error"

    def __init__(self, action: str, path: object, cause: OSError) -> None:
        self.path = path
        super().__init__(f"Failed to {action} {path}: {cause.strerror or cause}")
