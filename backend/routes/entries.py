"""Entry CRUD endpoints.

Every endpoint returns the full entry list after the operation so the
caller can redraw without a second request.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from volunteer_log import Entry, EntryStore

from .models import EntryBody

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(request: Request) -> EntryStore:
    return request.app.state.store


@router.get("/entries")
async def get_entries(store: EntryStore = Depends(get_store)) -> list[Entry]:
    """List all entries in insertion order."""
    return store.list()


@router.post("/entries", status_code=201)
async def add_entry(body: EntryBody, store: EntryStore = Depends(get_store)) -> list[Entry]:
    """Create a new entry."""
    try:
        return store.add(body.place, body.date, body.hours, body.notes)
    except OSError as e:
        logger.error(f"Failed to save new entry: {e}")
        raise HTTPException(500, "Failed to save entries")


@router.put("/entries/{entry_id}")
async def update_entry(
    entry_id: str, body: EntryBody, store: EntryStore = Depends(get_store)
) -> list[Entry]:
    """Replace an entry's fields. Unknown ids leave the list unchanged."""
    try:
        return store.update(entry_id, body.place, body.date, body.hours, body.notes)
    except OSError as e:
        logger.error(f"Failed to save entry {entry_id}: {e}")
        raise HTTPException(500, "Failed to save entries")


@router.delete("/entries/{entry_id}")
async def delete_entry(entry_id: str, store: EntryStore = Depends(get_store)) -> list[Entry]:
    """Delete an entry. Unknown ids leave the list unchanged."""
    try:
        return store.delete(entry_id)
    except OSError as e:
        logger.error(f"Failed to delete entry {entry_id}: {e}")
        raise HTTPException(500, "Failed to save entries")
