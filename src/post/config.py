"""PostConfig: where the note stack lives and how the CLI behaves.

Default layout:

    ~/.config/post/       # or $POST_HOME
        post.toml         # optional config
        notes             # the note stack, one note per line

post.toml example:

    [post]
    file = "notes"

    [view]
    default_top = 10

    [clipboard]
    command = ["xclip", "-selection", "clipboard"]   # empty = auto-detect
    timeout = 1.0
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger("post.config")

_CONFIG_FILENAME = "post.toml"
_DEFAULT_HOME = "~/.config/post"
_DEFAULT_FILE = "notes"
_HOME_ENV = "POST_HOME"


@dataclass
class ViewConfig:
    default_top: int = 10


@dataclass
class ClipboardConfig:
    command: list[str] = field(default_factory=list)   # empty = try the known commands in order
    timeout: float = 1.0


@dataclass
class PostConfig:
    """Resolved configuration, built once and passed to the store."""

    home: Path
    file: str = _DEFAULT_FILE
    view: ViewConfig = field(default_factory=ViewConfig)
    clipboard: ClipboardConfig = field(default_factory=ClipboardConfig)

    @property
    def notes_path(self) -> Path:
        return self.home / self.file

    @property
    def config_path(self) -> Path:
        return self.home / _CONFIG_FILENAME


def resolve_home(home: Path | str | None = None) -> Path:
    """Explicit argument, then $POST_HOME, then ~/.config/post."""
    if home:
        return Path(home).expanduser()
    env_home = os.environ.get(_HOME_ENV)
    if env_home:
        return Path(env_home).expanduser()
    return Path(_DEFAULT_HOME).expanduser()


def load_config(home: Path | str | None = None) -> PostConfig:
    """Load post.toml from the storage directory (defaults when absent)."""
    home_path = resolve_home(home)
    config_path = home_path / _CONFIG_FILENAME

    raw: dict[str, Any] = {}
    if config_path.exists():
        with config_path.open("rb") as f:
            raw = tomllib.load(f)
        logger.debug("loaded %s", config_path)

    post_section = raw.get("post", {})
    view_section = raw.get("view", {})
    clip_section = raw.get("clipboard", {})

    file_name = str(post_section.get("file", _DEFAULT_FILE))
    if not file_name or Path(file_name).name != file_name:
        msg = f"[post] file must be a plain file name, got {file_name!r}"
        raise ValueError(msg)

    default_top = int(view_section.get("default_top", 10))
    if default_top < 0:
        msg = f"[view] default_top must be non-negative, got {default_top}"
        raise ValueError(msg)

    return PostConfig(
        home=home_path,
        file=file_name,
        view=ViewConfig(default_top=default_top),
        clipboard=ClipboardConfig(
            command=[str(part) for part in clip_section.get("command", [])],
            timeout=float(clip_section.get("timeout", 1.0)),
        ),
    )


def init_config(home: Path) -> Path:
    """Write a default post.toml into home. Raises if it already exists."""
    config_path = home / _CONFIG_FILENAME
    if config_path.exists():
        msg = f"post.toml already exists at {config_path}"
        raise FileExistsError(msg)

    home.mkdir(parents=True, exist_ok=True)
    content = f"""\
[post]
file = "{_DEFAULT_FILE}"

# [view]
# default_top = 10   # notes shown by `post view` with no range flag

# [clipboard]
# command = ["xclip", "-selection", "clipboard"]   # default: first of wl-copy, xclip, xsel, pbcopy, clip
# timeout = 1.0
"""
    config_path.write_text(content)
    return config_path
