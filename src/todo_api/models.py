from __future__ import annotations

from datetime import datetime
from typing import TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A lightweight domain model representing a stored Todo item.

    Fields:
    - id: UUID4 string identifier, immutable
    - title: Short title (1..200 chars, trimmed by the service layer)
    - completed: Boolean completion flag, False at creation
    - created_at: UTC creation timestamp, set once
    - updated_at: UTC last update timestamp, never earlier than created_at
    """

    id: str
    title: str
    completed: bool
    created_at: datetime
    updated_at: datetime


class TodoChanges(TypedDict, total=False):
    """Partial field set applied by an update; absent keys are left untouched."""

    title: str
    completed: bool
