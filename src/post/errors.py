"""Typed failures raised by the note store and its sinks.

Every error is a ``PostError``; the CLI turns them into ``click.ClickException``.
"""

from __future__ import annotations


class PostError(Exception):
    """Base class for all post failures."""


class StoreIOError(PostError, OSError):
    """Reading or writing the backing file failed."""


class DecodeError(PostError, ValueError):
    """A stored line is malformed."""

    def __init__(self, message: str, *, line: str = "", lineno: int | None = None) -> None:
        self.line = line
        self.lineno = lineno
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)


class IndexOutOfRange(PostError, IndexError):
    """Requested index is past the end of the stack."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        if length == 0:
            msg = f"requested index {index} but the stack is empty"
        else:
            msg = f"requested index too large for stack, wanted: {index} but max is: {length - 1}"
        super().__init__(msg)


class ClipboardUnavailable(PostError):
    """No clipboard command could be run."""


class DestinationInvalid(PostError):
    """Backup target is not an existing directory."""
