"""Location of a resource in the Workspace > Space > Folder > List hierarchy."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Ancestors of a resource. ``folder_id`` is None for lists attached directly to a space."""

    workspace_id: str
    space_id: str | None = None
    folder_id: str | None = None
    list_id: str | None = None
