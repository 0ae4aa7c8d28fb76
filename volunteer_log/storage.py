"""JSON file storage.

The whole entry log lives in a single JSON file inside a data directory
supplied by the host. There is no database or cache — every operation
loads the file, mutates the list and writes it back in full.

Directory layout:

    {base}/
      volunteer_log.json      ← JSON array of Entry objects, in insertion order

A missing file reads as an empty log. A file that cannot be read or
decoded also reads as an empty log (a warning is logged); the next
mutation overwrites it. Write errors are never swallowed.
"""

from __future__ import annotations

import json
import logging
import random
import time
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from volunteer_log.models import Entry

logger = logging.getLogger(__name__)

DATA_FILENAME = "volunteer_log.json"


def new_entry_id() -> str:
    """Build an entry id from a nanosecond timestamp and a random 32-bit value.

    "17a2f0c9b3d4e5-1a2b3c4d" — both parts lowercase hex, unpadded.
    """
    return f"{time.time_ns():x}-{random.getrandbits(32):x}"


def encode_entries(entries: list[Entry]) -> str:
    return json.dumps([e.model_dump() for e in entries], indent=2)


def decode_entries(text: str) -> list[Entry]:
    """Parse file contents. Raises ValueError on anything but a list of entries.

    Field types are checked strictly: "hours" must be a JSON number.
    """
    data: Any = json.loads(text)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    return [Entry.model_validate(e, strict=True) for e in data]


class EntryStore:
    """Whole-file CRUD over the entry log in ``data_dir``.

    The directory is created on construction; an OSError here means the
    host handed us an unusable location and is left to propagate.
    """

    def __init__(self, data_dir: Path) -> None:
        self._base = data_dir
        self._base.mkdir(parents=True, exist_ok=True)
        self._path = data_dir / DATA_FILENAME

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Load / save
    # ------------------------------------------------------------------

    def _load(self) -> list[Entry]:
        if not self._path.exists():
            return []
        try:
            return decode_entries(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError, RecursionError, ValidationError) as e:
            logger.warning(f"Could not load {self._path}, starting from an empty log: {e}")
            return []

    def _save(self, entries: list[Entry]) -> None:
        self._path.write_text(encode_entries(entries), encoding="utf-8")
        logger.debug(f"Saved {len(entries)} entries to {self._path}")

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def list(self) -> list[Entry]:
        """Return every stored entry, or [] if there is nothing readable."""
        return self._load()

    def add(self, place: str, date: str, hours: float, notes: str) -> list[Entry]:
        """Append a new entry with a fresh id. Returns the updated log."""
        entries = self._load()
        entries.append(
            Entry(id=new_entry_id(), place=place, date=date, hours=hours, notes=notes)
        )
        self._save(entries)
        return entries

    def delete(self, entry_id: str) -> list[Entry]:
        """Drop every entry with this id. Unknown ids are a no-op."""
        entries = [e for e in self._load() if e.id != entry_id]
        self._save(entries)
        return entries

    def update(
        self, entry_id: str, place: str, date: str, hours: float, notes: str
    ) -> list[Entry]:
        """Replace the mutable fields of the entry with this id, keeping its position.

        Unknown ids are a no-op; the file is rewritten either way.
        """
        entries = self._load()
        for entry in entries:
            if entry.id == entry_id:
                entry.place = place
                entry.date = date
                entry.hours = hours
                entry.notes = notes
                break
        self._save(entries)
        return entries
