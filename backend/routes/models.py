"""Pydantic request models for API endpoints."""

from pydantic import BaseModel


class EntryBody(BaseModel):
    place: str
    date: str
    hours: float
    notes: str = ""
