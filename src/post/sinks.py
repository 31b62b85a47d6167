"""Clipboard and backup collaborators for yank, pop and backup."""

from __future__ import annotations

import logging
import shutil
import subprocess
import time
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from post.errors import ClipboardUnavailable, DestinationInvalid

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("post.sinks")

# Tried in order; the first one that exits 0 wins.
DEFAULT_CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("pbcopy",),
    ("clip",),
)


class Clipboard(Protocol):
    def copy(self, text: str) -> None: ...


class SystemClipboard:
    """Copies text by piping it into a clipboard command."""

    def __init__(self, commands: Sequence[Sequence[str]] | None = None, timeout: float = 1.0) -> None:
        self.commands = [tuple(c) for c in commands] if commands else list(DEFAULT_CLIPBOARD_COMMANDS)
        self.timeout = timeout

    def copy(self, text: str) -> None:
        failures: list[str] = []
        for cmd in self.commands:
            try:
                subprocess.run(cmd, input=text.encode("utf-8"), check=True, timeout=self.timeout)
            except (OSError, subprocess.SubprocessError) as exc:
                logger.debug("clipboard command %s failed: %s", cmd[0], exc)
                failures.append(f"{cmd[0]}: {exc}")
                continue
            logger.debug("copied %d chars with %s", len(text), cmd[0])
            return
        tried = ", ".join(c[0] for c in self.commands)
        msg = f"no usable clipboard command (tried {tried})"
        raise ClipboardUnavailable(msg)


def _timestamp(now: float | None = None) -> str:
    return time.strftime("%Y%m%d-%H%M%S", time.localtime(now))


def backup_name(source: Path, now: float | None = None) -> str:
    """backup-<YYYYmmdd-HHMMSS>-<original filename>"""
    return f"backup-{_timestamp(now)}-{source.name}"


def backup_file(source: Path, dest_dir: Path | str, now: float | None = None) -> Path:
    """Byte-copy source into dest_dir under a timestamped name."""
    dest_dir = Path(dest_dir)
    if not dest_dir.is_dir():
        msg = f"backup destination is not an existing directory: {dest_dir}"
        raise DestinationInvalid(msg)
    target = dest_dir / backup_name(source, now)
    shutil.copyfile(source, target)
    return target
