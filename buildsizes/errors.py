"""Structured error taxonomy for build-size computation.

Every failure raised by the core carries an ``ErrorKind`` tag plus the path
and operation involved, so callers can branch on ``error.kind`` instead of
inspecting message strings.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ErrorKind(Enum):
    """Failure categories surfaced by the core."""

    NOT_FOUND = "not_found"
    IO = "io"
    PARSE = "parse"


class BuildSizeError(Exception):
    """Error raised by build-size operations.

    ``path`` is the filesystem location being read when the failure happened.
    ``operation`` names what was being attempted (``"finding build files"``,
    ``"gzip compression"``...). ``details`` holds extra context such as the
    requested bundle file type.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        path: Path | str | None = None,
        operation: str | None = None,
        details: dict[str, object] | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.path = Path(path) if path is not None else None
        self.operation = operation
        self.details: dict[str, object] = dict(details or {})

    @classmethod
    def not_found(cls, path: Path | str, operation: str) -> BuildSizeError:
        return cls(
            ErrorKind.NOT_FOUND,
            f"Could not find build at specified path: {path}",
            path=path,
            operation=operation,
        )

    @classmethod
    def io_error(cls, path: Path | str, operation: str, cause: BaseException | None = None) -> BuildSizeError:
        reason = f": {cause}" if cause is not None else ""
        return cls(
            ErrorKind.IO,
            f"I/O failure while {operation} at {path}{reason}",
            path=path,
            operation=operation,
        )

    @classmethod
    def parse_error(cls, path: Path | str, operation: str, raw_output: str) -> BuildSizeError:
        return cls(
            ErrorKind.PARSE,
            f"Unexpected output while {operation} for {path}: {raw_output!r}",
            path=path,
            operation=operation,
            details={"output": raw_output},
        )

    def with_context(self, operation: str, **details: object) -> BuildSizeError:
        """Return a copy of this error annotated with an outer operation."""
        merged = dict(self.details)
        merged.update(details)
        return BuildSizeError(
            self.kind,
            f"{self.message} (while {operation})",
            path=self.path,
            operation=self.operation,
            details=merged,
        )

    def __str__(self) -> str:
        lines = [self.message]
        for key, value in self.details.items():
            if key == "output":
                continue
            lines.append(f"    {key.replace('_', ' ')}: {value}")
        return "\n".join(lines)


__all__ = [
    "ErrorKind",
    "BuildSizeError",
]
