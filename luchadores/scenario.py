"""
Demo booking scenario for the reservation ledger.

Extracted from scripts/demo.py so it can be imported and tested.
Each step runs on its own fresh ledger:

  1. book Goku + Piccolo, then Vegeta, then Freezer
  2. book all four together, then cancel that reservation
  3. book Goku and Piccolo separately with the same stay, compare prices,
     then try to book both of them again (rejected as duplicates)
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from luchadores.domain.errors import ReservationError
from luchadores.domain.ledger import ReservationLedger
from luchadores.domain.reservation import Client, Reservation

log = logging.getLogger(__name__)

GOKU = Client(name="Goku", age=44, height=175)
PICCOLO = Client(name="Piccolo", age=27, height=236)
VEGETA = Client(name="Vegeta", age=48, height=165)
FREEZER = Client(name="Freezer", age=70, height=158)


@dataclass
class ScenarioResult:
    added: list[Reservation] = field(default_factory=list)
    cancelled_ids: list[int] = field(default_factory=list)
    rejected: list[ReservationError] = field(default_factory=list)
    prices_match: bool = False


def run_scenario(create_ledger: Callable[[], ReservationLedger]) -> ScenarioResult:
    result = ScenarioResult()
    _add_reservations(create_ledger(), result)
    _cancel_reservation(create_ledger(), result)
    _compare_prices(create_ledger(), result)
    log.info(
        "Scenario done: %d added, %d cancelled, %d rejected, prices_match=%s",
        len(result.added), len(result.cancelled_ids),
        len(result.rejected), result.prices_match,
    )
    return result


def _try_add(
    ledger: ReservationLedger,
    result: ScenarioResult,
    clients: list[Client],
    duration: int,
    breakfast_option: bool,
) -> Reservation | None:
    try:
        reservation = ledger.add_reservation(clients, duration, breakfast_option)
    except ReservationError as exc:
        log.debug("Booking rejected (%s): %s", exc.kind.value, exc)
        result.rejected.append(exc)
        return None
    result.added.append(reservation)
    return reservation


def _add_reservations(ledger: ReservationLedger, result: ScenarioResult) -> None:
    _try_add(ledger, result, [GOKU, PICCOLO], 3, True)
    _try_add(ledger, result, [VEGETA], 5, False)
    _try_add(ledger, result, [FREEZER], 2, True)


def _cancel_reservation(ledger: ReservationLedger, result: ScenarioResult) -> None:
    reservation = _try_add(ledger, result, [GOKU, PICCOLO, VEGETA, FREEZER], 3, True)
    if reservation is None:
        return
    try:
        ledger.cancel_reservation(reservation.id)
    except ReservationError as exc:
        result.rejected.append(exc)
        return
    result.cancelled_ids.append(reservation.id)


def _compare_prices(ledger: ReservationLedger, result: ScenarioResult) -> None:
    first = _try_add(ledger, result, [GOKU], 3, True)
    second = _try_add(ledger, result, [PICCOLO], 3, True)
    # Both clients are still booked: these two are expected to be rejected.
    _try_add(ledger, result, [GOKU, PICCOLO], 3, True)
    _try_add(ledger, result, [GOKU, PICCOLO], 3, False)

    result.prices_match = (
        first is not None and second is not None and first.price == second.price
    )
