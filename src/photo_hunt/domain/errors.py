"""Domain errors."""


class PhotoHuntError(Exception):
    """Base class for domain errors."""


class EntityNotFoundError(PhotoHuntError, LookupError):
    """Raised when a caller resolves an identifier that does not exist."""

    def __init__(self, kind: str, entity_id: object) -> None:
        super().__init__(f"{kind} {entity_id} not found")
        self.kind = kind
        self.entity_id = entity_id


class NoCurrentThemeError(PhotoHuntError):
    """Raised when a photo is submitted and no theme is active today."""
