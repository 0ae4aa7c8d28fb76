"""FastMCP server exposing the entry log as MCP tools.

Tools:
  - get_entries()                                  — list all entries
  - add_entry(place, date, hours, notes)           — append a new entry
  - delete_entry(id)                               — remove an entry by id
  - update_entry(id, place, date, hours, notes)    — replace an entry's fields

Every tool returns the full entry list after the operation.

The store is replaced via set_store() for tests, or built from DATA_DIR
(see backend.app.resolve_data_dir) when run as __main__.

Usage:
    uv run python -m backend.mcp_server
"""

from mcp.server.fastmcp import FastMCP

from volunteer_log import EntryStore

mcp = FastMCP("volunteer-log")

_store: EntryStore | None = None


def set_store(store: EntryStore) -> None:
    """Replace the active store (used in tests)."""
    global _store
    _store = store


def get_store() -> EntryStore:
    assert _store is not None, "Call set_store() before using the MCP tools"
    return _store


@mcp.tool()
def get_entries() -> list[dict]:
    """Return every volunteer entry in insertion order."""
    return [e.model_dump() for e in get_store().list()]


@mcp.tool()
def add_entry(place: str, date: str, hours: float, notes: str = "") -> list[dict]:
    """Record a new volunteer entry. Returns all entries."""
    return [e.model_dump() for e in get_store().add(place, date, hours, notes)]


@mcp.tool()
def delete_entry(id: str) -> list[dict]:
    """Delete the entry with this id (no-op if unknown). Returns all entries."""
    return [e.model_dump() for e in get_store().delete(id)]


@mcp.tool()
def update_entry(id: str, place: str, date: str, hours: float, notes: str = "") -> list[dict]:
    """Replace the fields of the entry with this id (no-op if unknown). Returns all entries."""
    return [e.model_dump() for e in get_store().update(id, place, date, hours, notes)]


if __name__ == "__main__":
    from backend.app import resolve_data_dir
    set_store(EntryStore(resolve_data_dir()))
    mcp.run()
