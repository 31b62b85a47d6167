"""Note stack kept in one flat file, one note per line.

Layout:
    ~/.config/post/           # or $POST_HOME
        notes                 # the stack, oldest note first
        post.toml             # optional config

notes line format:
    <index>|<content>[??<comment>]

Indices are positions: they are reassigned on every load and after every
delete or clear, so the stack never has gaps or duplicates.

Every command rewrites the whole file (tmp file + rename). Concurrent writers
are not coordinated; the last rewrite wins.
"""

from post.config import PostConfig, init_config, load_config
from post.errors import (
    ClipboardUnavailable,
    DecodeError,
    DestinationInvalid,
    IndexOutOfRange,
    PostError,
    StoreIOError,
)
from post.models import Record, decode, encode
from post.selector import All, Index, Tail, Top
from post.store import NoteStore

__all__ = [
    "All",
    "ClipboardUnavailable",
    "DecodeError",
    "DestinationInvalid",
    "Index",
    "IndexOutOfRange",
    "NoteStore",
    "PostConfig",
    "PostError",
    "Record",
    "StoreIOError",
    "Tail",
    "Top",
    "decode",
    "encode",
    "init_config",
    "load_config",
]
