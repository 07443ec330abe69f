"""
ReservationLedger port — create, list and cancel hotel reservations.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from luchadores.domain.reservation import Client, Reservation


class ReservationLedger(ABC):
    """
    Port: own the active reservations and the id counter.

    Ids only ever grow and are never handed out twice, even after the
    reservation holding them is cancelled.  A client name may be booked
    in at most one active reservation at a time.
    """

    @abstractmethod
    def add_reservation(
        self,
        clients: Sequence[Client],
        duration: int,
        breakfast_option: bool,
    ) -> Reservation:
        """
        Book the clients for `duration` nights and return the new reservation.

        Raises DuplicateClientError if any client is already booked,
        DuplicateIdError if the allocated id was already issued, and
        InvalidStayError when validation rejects the stay.  Nothing is
        changed when an error is raised.
        """
        ...

    @abstractmethod
    def cancel_reservation(self, reservation_id: int) -> None:
        """Remove a reservation; raise ReservationNotFoundError if absent."""
        ...

    @abstractmethod
    def get_all_reservations(self) -> list[Reservation]:
        """Snapshot of the active reservations, oldest first."""
        ...

    @abstractmethod
    def get_reservation(self, reservation_id: int) -> Reservation | None:
        """Return the active reservation with this id, or None."""
        ...

    @abstractmethod
    def is_client_booked(self, name: str) -> bool:
        """True if a client with this name is in an active reservation."""
        ...
