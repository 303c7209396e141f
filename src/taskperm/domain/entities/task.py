"""Task entity - the leaf of the hierarchy."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Task:
    """Task as seen by authorization: its list and current assignee."""

    id: str
    list_id: str
    assignee_id: str | None = None
