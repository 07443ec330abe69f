"""
In-memory reservation manager for Hotel Luchadores.

Holds the active reservations in booking order together with the id
counter.  Every public call takes the same lock, so the history seen by
add/cancel/list is serialized even if a manager is shared across threads.

Duplicate checks go through two indexes instead of scanning:
  - booked client name -> reservation id
  - every id ever issued (cancelled ones included)
"""

import logging
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from luchadores.domain.errors import (
    DuplicateClientError,
    DuplicateIdError,
    InvalidStayError,
    ReservationErrorKind,
    ReservationNotFoundError,
)
from luchadores.domain.ledger import ReservationLedger
from luchadores.domain.reservation import HOTEL_NAME, Client, Reservation, compute_price

log = logging.getLogger(__name__)

VALIDATION_MODES = ("strict", "permissive")


@dataclass
class ManagerConfig:
    # "strict" rejects empty client lists and non-positive durations,
    # "permissive" accepts them and prices them with the usual formula.
    validation: Literal["strict", "permissive"] = "strict"


class ReservationManager(ReservationLedger):

    def __init__(self, config: ManagerConfig | None = None):
        self._cfg = config or ManagerConfig()
        if self._cfg.validation not in VALIDATION_MODES:
            raise ValueError(f"Unknown validation mode: {self._cfg.validation!r}")

        self._lock = threading.Lock()
        self._reservations: list[Reservation] = []
        self._next_id = 1
        self._booked: dict[str, int] = {}
        self._issued_ids: set[int] = set()

    @property
    def config(self) -> ManagerConfig:
        return self._cfg

    def __len__(self) -> int:
        with self._lock:
            return len(self._reservations)

    # -- commands ------------------------------------------------------------

    def add_reservation(
        self,
        clients: Sequence[Client],
        duration: int,
        breakfast_option: bool,
    ) -> Reservation:
        clients = tuple(clients)

        with self._lock:
            try:
                self._validate_stay(clients, duration)
                self._check_clients(clients)
                reservation_id = self._next_id
                if reservation_id in self._issued_ids:
                    raise DuplicateIdError(reservation_id)
            except (InvalidStayError, DuplicateClientError, DuplicateIdError) as exc:
                log.warning("add rejected kind=%s: %s", exc.kind.value, exc)
                raise

            reservation = Reservation(
                id=reservation_id,
                hotel_name=HOTEL_NAME,
                clients=clients,
                duration=duration,
                breakfast_option=breakfast_option,
                price=compute_price(len(clients), duration, breakfast_option),
            )

            self._next_id = reservation_id + 1
            self._issued_ids.add(reservation_id)
            self._reservations.append(reservation)
            for client in clients:
                self._booked[client.name] = reservation_id

        log.info(
            "res=%d added: clients=%s nights=%d breakfast=%s price=%.2f",
            reservation.id, ",".join(reservation.client_names),
            duration, breakfast_option, reservation.price,
        )
        return reservation

    def cancel_reservation(self, reservation_id: int) -> None:
        with self._lock:
            index = next(
                (i for i, r in enumerate(self._reservations) if r.id == reservation_id),
                None,
            )
            if index is None:
                log.warning("cancel rejected: res=%d not found", reservation_id)
                raise ReservationNotFoundError(reservation_id)

            reservation = self._reservations.pop(index)
            for client in reservation.clients:
                self._booked.pop(client.name, None)

        log.info("res=%d cancelled", reservation_id)

    # -- queries -------------------------------------------------------------

    def get_all_reservations(self) -> list[Reservation]:
        with self._lock:
            return list(self._reservations)

    def get_reservation(self, reservation_id: int) -> Reservation | None:
        with self._lock:
            return self._find(reservation_id)

    def find_reservation_for_client(self, name: str) -> Reservation | None:
        with self._lock:
            reservation_id = self._booked.get(name)
            if reservation_id is None:
                return None
            return self._find(reservation_id)

    def is_client_booked(self, name: str) -> bool:
        with self._lock:
            return name in self._booked

    def is_reservation_id_used(self, reservation_id: int) -> bool:
        """True for any id this manager has issued, cancelled or not."""
        with self._lock:
            return reservation_id in self._issued_ids

    # -- helpers (caller holds the lock) -------------------------------------

    def _find(self, reservation_id: int) -> Reservation | None:
        return next((r for r in self._reservations if r.id == reservation_id), None)

    def _validate_stay(self, clients: tuple[Client, ...], duration: int) -> None:
        if self._cfg.validation == "permissive":
            return
        if not clients:
            raise InvalidStayError(
                ReservationErrorKind.EMPTY_CLIENT_LIST,
                "A reservation needs at least one client",
            )
        if duration <= 0:
            raise InvalidStayError(
                ReservationErrorKind.INVALID_DURATION,
                f"Duration must be a positive number of nights, got {duration}",
            )

    def _check_clients(self, clients: tuple[Client, ...]) -> None:
        # A name repeated inside the request counts as a duplicate too.
        seen: set[str] = set()
        for client in clients:
            if client.name in self._booked or client.name in seen:
                raise DuplicateClientError(client.name)
            seen.add(client.name)
