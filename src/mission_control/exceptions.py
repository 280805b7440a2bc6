"""Exceptions for mission-control."""


class MissionControlError(Exception):
    """Base exception for mission-control errors."""

    pass


class ValidationError(MissionControlError):
    """Raised when input is missing a required field or holds an invalid value."""

    pass


class NotFoundError(MissionControlError):
    """Raised when a record id is unknown to the store."""

    def __init__(self, table: str, record_id: str) -> None:
        super().__init__(f"{table} record not found: {record_id}")
        self.table = table
        self.record_id = record_id


class TransportError(MissionControlError):
    """Raised when the underlying document store cannot be reached."""

    pass
