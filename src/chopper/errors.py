"""Domain errors surfaced to API callers."""

from __future__ import annotations


class ChopperError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500


class NotFoundError(ChopperError, LookupError):
    """A referenced row does not exist."""

    status_code = 404

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")


class ConstraintViolationError(ChopperError):
    """The store rejected a write, e.g. a duplicate username or email."""

    status_code = 409


class StorageUnavailableError(ChopperError):
    """The backing store cannot be reached."""

    status_code = 503
