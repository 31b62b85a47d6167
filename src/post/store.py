"""Read and rewrite the note stack file.

NoteStore is the public API:
    store = NoteStore(cfg.notes_path)
    i = store.append("buy milk", comment="today")
    store.view(Top(5))
    store.pop(i, SystemClipboard())

Every operation loads the whole file, works on the list in memory and, if it
mutates, rewrites the whole file (tmp file + rename). There is no locking:
two processes mutating the same file race and the last rewrite wins.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from post import selector
from post.errors import DecodeError, IndexOutOfRange, StoreIOError
from post.models import MAX_INDEX, Record, decode_lines, encode_lines
from post.selector import RangeSpec, Tail, Top
from post.sinks import backup_file

if TYPE_CHECKING:
    from post.sinks import Clipboard

logger = logging.getLogger("post.store")


class NoteStore:
    """Line-per-note stack backed by a single file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def _read_bytes(self) -> bytes | None:
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StoreIOError(f"cannot read {self.path}: {exc}") from exc

    def _decode(self, data: bytes) -> list[Record]:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"{self.path} is not valid UTF-8: {exc}") from exc
        return decode_lines(text)

    def load(self) -> list[Record]:
        """Load every note, renumbered by position. A missing file is an empty stack."""
        data = self._read_bytes()
        if data is None:
            return []
        records = self._decode(data)
        renumbered = selector.renumber(records)
        if renumbered != records:
            logger.debug("renumbered out-of-sequence indices in %s", self.path)
        logger.debug("loaded %d notes from %s", len(renumbered), self.path)
        return renumbered

    def _resolve(self, records: list[Record], index: int | None) -> int:
        """None means the latest note."""
        if index is None:
            if not records:
                raise IndexOutOfRange(0, 0)
            return len(records) - 1
        if index < 0 or index >= len(records):
            raise IndexOutOfRange(index, len(records))
        return index

    def get(self, index: int | None = None) -> Record:
        records = self.load()
        return records[self._resolve(records, index)]

    def view(self, spec: RangeSpec = selector.DEFAULT_VIEW) -> list[Record]:
        return selector.select(self.load(), spec)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def _write(self, records: list[Record]) -> None:
        """Atomically replace the file with records."""
        text = encode_lines(records)
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(text.encode("utf-8"))
            tmp.replace(self.path)
        except OSError as exc:
            tmp.unlink(missing_ok=True)
            raise StoreIOError(f"cannot write {self.path}: {exc}") from exc

    def append(self, content: str, comment: str | None = None) -> int:
        """Add a note at the end. Returns its index."""
        records = self.load()
        index = len(records)
        if index > MAX_INDEX:
            raise IndexOutOfRange(index, MAX_INDEX + 1)
        records.append(Record(index=index, content=content, comment=comment))
        self._write(records)
        logger.info("added note %d", index)
        return index

    def delete_at(self, index: int | None = None) -> Record:
        """Remove one note and shift every later note down."""
        records = self.load()
        pos = self._resolve(records, index)
        removed = records.pop(pos)
        self._write(selector.renumber(records))
        logger.info("deleted note %d (%d left)", pos, len(records))
        return removed

    def clear_all(self) -> int:
        """Empty the stack. Works even when the file does not decode."""
        data = self._read_bytes()
        if data is None:
            return 0
        try:
            count = len(self._decode(data))
        except DecodeError as exc:
            count = sum(1 for line in data.splitlines() if line.strip())
            logger.warning("discarding undecodable note file %s (%s)", self.path, exc)
            self._write([])
            return count
        if count == 0:
            return 0
        self._write([])
        logger.info("cleared all %d notes", count)
        return count

    def clear_range(self, spec: Top | Tail) -> int:
        """Remove up to n notes from one end. Returns how many were removed."""
        records = self.load()
        removed, remaining = selector.split(records, spec)
        if not removed:
            return 0
        self._write(selector.renumber(remaining))
        logger.info("cleared %d notes (%s)", len(removed), spec)
        return len(removed)

    # ------------------------------------------------------------------
    # Compound
    # ------------------------------------------------------------------

    def yank(self, index: int | None, clipboard: Clipboard) -> Record:
        """Copy a note's content to the clipboard. The file is not touched."""
        record = self.get(index)
        clipboard.copy(record.content)
        return record

    def pop(self, index: int | None, clipboard: Clipboard) -> Record:
        """Yank, then delete. A failed yank leaves the note in place."""
        records = self.load()
        pos = self._resolve(records, index)
        record = records[pos]
        clipboard.copy(record.content)
        del records[pos]
        self._write(selector.renumber(records))
        logger.info("popped note %d", pos)
        return record

    def backup(self, dest_dir: Path | str, now: float | None = None) -> Path | None:
        """Copy the note file into dest_dir. None when there is nothing to copy."""
        if not self.path.exists():
            return None
        try:
            target = backup_file(self.path, dest_dir, now)
        except OSError as exc:
            raise StoreIOError(f"cannot back up {self.path}: {exc}") from exc
        logger.info("backed up %s to %s", self.path, target)
        return target
