"""Principal entity - the user an authorization decision is made for."""

from dataclasses import dataclass

from taskperm.domain.value_objects import WorkspaceRole


@dataclass(frozen=True)
class Principal:
    """User and the role they hold in the workspace being acted on.

    ``workspace_role`` accepts raw strings and coerces them into
    :class:`WorkspaceRole`. Unrecognized values become ``None`` so the
    resolver denies them instead of matching an unintended branch.
    """

    user_id: str
    workspace_role: WorkspaceRole | None

    def __post_init__(self) -> None:
        object.__setattr__(self, "workspace_role", WorkspaceRole.coerce(self.workspace_role))

    @property
    def is_owner(self) -> bool:
        return self.workspace_role is WorkspaceRole.OWNER

    @property
    def is_admin(self) -> bool:
        """ADMIN or OWNER."""
        return self.workspace_role in (WorkspaceRole.ADMIN, WorkspaceRole.OWNER)

    @property
    def is_member(self) -> bool:
        """MEMBER or higher."""
        return self.workspace_role in (
            WorkspaceRole.MEMBER,
            WorkspaceRole.ADMIN,
            WorkspaceRole.OWNER,
        )

    @property
    def is_guest(self) -> bool:
        return self.workspace_role is WorkspaceRole.GUEST
