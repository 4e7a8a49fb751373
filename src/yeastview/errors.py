"""Fatal error taxonomy for yeast byte-code conversion.

Every error aborts the run; the command-line front end prints ``str(exc)``
as a single diagnostic line and exits non-zero.
"""
from __future__ import annotations


class YeastError(Exception):
    """Base class for all conversion failures."""


class ConfigurationError(YeastError):
    """Raised when options are missing, ambiguous or contradictory."""


class InputFormatError(YeastError):
    """Raised when a line is not a valid byte-code record."""

    def __init__(self, message: str, *, line_number: int, code: str | None = None) -> None:
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number
        self.code = code


class StructureError(YeastError):
    """Raised when an end marker does not match the innermost open begin marker."""

    def __init__(
        self,
        *,
        line_number: int,
        code: str,
        title: str,
        open_line_number: int,
        open_code: str,
        open_title: str,
    ) -> None:
        super().__init__(
            f"line {line_number}: end code {code!r} ({title}) does not match "
            f"begin code {open_code!r} ({open_title}) opened at line {open_line_number}"
        )
        self.line_number = line_number
        self.code = code
        self.title = title
        self.open_line_number = open_line_number
        self.open_code = open_code
        self.open_title = open_title


class YeastIOError(YeastError, OSError):
    """Raised when an input, output or stylesheet file cannot be used."""
