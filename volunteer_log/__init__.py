"""File-backed record keeper for volunteer activity entries."""

from volunteer_log.models import Entry
from volunteer_log.storage import DATA_FILENAME, EntryStore, new_entry_id

__all__ = ["DATA_FILENAME", "Entry", "EntryStore", "new_entry_id"]
