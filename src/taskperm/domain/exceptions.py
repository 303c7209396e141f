"""Domain exceptions."""


class TaskPermError(Exception):
    """Base exception for TaskPerm."""

    pass


class PermissionDenied(TaskPermError):
    """Actor does not have permission for the requested operation."""

    pass


class NotFound(TaskPermError):
    """Requested resource was not found."""

    pass


class ValidationError(TaskPermError):
    """Validation failed for input data."""

    pass


class EntitlementDenied(TaskPermError):
    """Plan tier does not allow assigning the requested override level."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class EntitlementCheckFailure(TaskPermError):
    """Entitlement service timed out or failed. The assignment was not written."""

    retryable = True
