"""Custom exception classes for the MLS ProAdmin API.

This module defines application-specific exceptions following Google Python
Style Guide. Managers raise them; route handlers translate them into HTTP
responses.
"""


class ProAdminError(Exception):
    """Base exception for all MLS ProAdmin errors."""

    pass


class EntityNotFoundError(ProAdminError):
    """Raised when a requested entity cannot be found."""

    def __init__(self, entity_name: str, entity_id: str):
        """Initialize the exception.

        Args:
            entity_name: The entity type that was searched.
            entity_id: The ID of the entity that was not found.
        """
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"{entity_name} '{entity_id}' not found")


class PermissionDeniedError(ProAdminError):
    """Raised when the caller's role does not allow an action."""

    pass


class ValidationError(ProAdminError):
    """Raised when data validation fails."""

    pass


class UserAlreadyExistsError(ProAdminError):
    """Raised when a username is already taken."""

    pass


class ProtectedEntityError(ProAdminError):
    """Raised when trying to remove a record that must always exist."""

    pass
