"""Exceptions raised across IVOR core."""


class IvorError(Exception):
    """Base class for IVOR core errors."""
    pass


class InvalidInputError(IvorError):
    """Raised when a turn is rejected before entering the pipeline."""
    pass


class RegistryIntegrityError(IvorError):
    """Raised when provider data breaks registry invariants (e.g. duplicate ids)."""
    pass


class CollaboratorError(IvorError):
    """Raised when an external collaborator (reply generation, memory store) fails."""

    def __init__(self, collaborator: str, message: str):
        super().__init__(f"{collaborator}: {message}")
        self.collaborator = collaborator
