"""Core domain models.

The store and both command surfaces operate on these types.
Pydantic is used for validation and serialisation at every data boundary.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Entry(BaseModel):
    """A single volunteer-activity record.

    `id` is fixed at creation; the other four fields are replaced by updates.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(frozen=True)
    place: str
    date: str  # free-form; not validated
    hours: float
    notes: str
