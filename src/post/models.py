"""Record model and the one-line-per-record file codec.

Line format:
    <index>|<content>[??<comment>]

The index is everything before the first ``|``. The remainder is split on the
first ``??``: text before it is the content, text after it is the comment.
There is no escaping, so content containing ``??`` reads back as a comment.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from post.errors import DecodeError

INDEX_SEP = "|"
COMMENT_SEP = "??"
MAX_INDEX = 65535

_INDEX_RE = re.compile(r"[0-9]+")

# Everything str.splitlines() breaks on.
LINE_BREAKS = frozenset("\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029")


@dataclass
class Record:
    """A single note in the stack."""

    index: int
    content: str
    comment: str | None = None

    def __str__(self) -> str:
        if self.comment is None:
            return f"{self.index} | {self.content}"
        return f"{self.index} | {self.content}  {COMMENT_SEP} {self.comment}"


def has_line_break(value: str) -> bool:
    return not LINE_BREAKS.isdisjoint(value)


def encode(record: Record) -> str:
    """Render a record as one line (no trailing newline)."""
    if has_line_break(record.content) or (record.comment and has_line_break(record.comment)):
        msg = f"note {record.index} contains a line break and cannot be stored"
        raise ValueError(msg)
    line = f"{record.index}{INDEX_SEP}{record.content}"
    if record.comment is not None:
        line += f"{COMMENT_SEP}{record.comment}"
    return line


def decode(line: str) -> Record:
    """Parse one stored line. Raises DecodeError on a malformed line."""
    index_str, sep, rest = line.partition(INDEX_SEP)
    if not sep:
        raise DecodeError(f"missing '{INDEX_SEP}' separator", line=line)
    if not _INDEX_RE.fullmatch(index_str):
        raise DecodeError(f"bad index number: {index_str!r}", line=line)
    index = int(index_str)
    if index > MAX_INDEX:
        raise DecodeError(f"index {index} out of range (max {MAX_INDEX})", line=line)

    content, sep, comment = rest.partition(COMMENT_SEP)
    return Record(index=index, content=content, comment=comment if sep else None)


def decode_lines(text: str) -> list[Record]:
    """Decode a whole file. Blank lines are skipped; the first bad line raises."""
    records: list[Record] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            records.append(decode(line))
        except DecodeError as exc:
            raise DecodeError(str(exc), line=line, lineno=lineno) from exc
    return records


def encode_lines(records: list[Record]) -> str:
    """Encode a whole file. An empty sequence is the empty string."""
    if not records:
        return ""
    return "\n".join(encode(r) for r in records) + "\n"
