"""Errors raised by a ReservationLedger. All of them are recoverable."""

from enum import Enum


class ReservationErrorKind(Enum):
    DUPLICATE_CLIENT = "duplicate_client"
    DUPLICATE_ID = "duplicate_id"
    RESERVATION_NOT_FOUND = "reservation_not_found"
    INVALID_DURATION = "invalid_duration"
    EMPTY_CLIENT_LIST = "empty_client_list"


class ReservationError(Exception):
    """Base class for every ledger failure; `kind` tells them apart."""

    kind: ReservationErrorKind

    def __init__(self, kind: ReservationErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


class DuplicateClientError(ReservationError):
    """The client is already booked in an active reservation."""

    def __init__(self, client_name: str):
        super().__init__(
            ReservationErrorKind.DUPLICATE_CLIENT,
            f"Client {client_name!r} is already booked in another reservation",
        )
        self.client_name = client_name


class DuplicateIdError(ReservationError):
    """A freshly allocated id collides with one already issued."""

    def __init__(self, reservation_id: int):
        super().__init__(
            ReservationErrorKind.DUPLICATE_ID,
            f"Reservation id {reservation_id} is already used",
        )
        self.reservation_id = reservation_id


class ReservationNotFoundError(ReservationError):
    def __init__(self, reservation_id: int):
        super().__init__(
            ReservationErrorKind.RESERVATION_NOT_FOUND,
            f"Reservation {reservation_id} not found",
        )
        self.reservation_id = reservation_id


class InvalidStayError(ReservationError):
    """Rejected by strict validation: empty client list or non-positive duration."""
