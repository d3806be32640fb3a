"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (e.g. empty or over-length content)."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidParentError(DomainError):
    """Raised when a reply's parent is dangling, foreign or too deep."""

    def __init__(self, parent_id: str, reason: str):
        self.parent_id = parent_id
        self.reason = reason
        super().__init__(f"Invalid parent comment {parent_id}: {reason}")


class UnauthenticatedError(DomainError):
    """Raised when an operation requires an identity and none was supplied."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")


class PermissionDeniedError(DomainError):
    """Raised when an authenticated user may not perform an action."""

    def __init__(self, action: str, user_id: str):
        super().__init__(f"User {user_id} is not allowed to {action}")
