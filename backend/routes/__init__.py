"""FastAPI API endpoints under /api.

The four entry commands (list, add, update, delete) live in entries.py.
"""

from fastapi import APIRouter

from .entries import router as entries_router

router = APIRouter()
router.include_router(entries_router)
