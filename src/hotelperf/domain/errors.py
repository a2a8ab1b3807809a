"""Typed failures raised by the analytics engine and its repository."""

import uuid


class AnalyticsError(Exception):
    """Base class for analytics failures."""


class DataIntegrityError(AnalyticsError):
    """A record violates an invariant the calculators rely on."""

    def __init__(self, message: str, reservation_id: uuid.UUID | None = None) -> None:
        super().__init__(message)
        self.reservation_id = reservation_id


class DataUnavailableError(AnalyticsError):
    """Source records could not be fetched; no report must be built from partial data."""
