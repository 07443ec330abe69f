"""
Demo scenario tests — fresh in-memory managers, no I/O.
"""

from luchadores.domain.errors import ReservationErrorKind
from luchadores.factory import create_reservation_manager
from luchadores.manager import ReservationManager
from luchadores.scenario import run_scenario


def test_scenario_with_strict_managers():
    result = run_scenario(ReservationManager)

    # 3 in step one, 1 in step two, 2 in step three
    assert len(result.added) == 6
    assert result.cancelled_ids == [1]
    assert result.prices_match is True


def test_duplicate_bookings_are_reported_not_raised():
    result = run_scenario(ReservationManager)
    assert len(result.rejected) == 2
    assert all(e.kind is ReservationErrorKind.DUPLICATE_CLIENT for e in result.rejected)


def test_step_one_prices():
    result = run_scenario(ReservationManager)
    assert [r.price for r in result.added[:3]] == [150.0, 100.0, 50.0]
    assert [r.id for r in result.added[:3]] == [1, 2, 3]


def test_every_reservation_is_at_the_same_hotel():
    result = run_scenario(ReservationManager)
    assert {r.hotel_name for r in result.added} == {"Hotel Luchadores"}


def test_scenario_through_factory(monkeypatch):
    monkeypatch.setenv("RESERVATION_VALIDATION", "permissive")
    result = run_scenario(create_reservation_manager)
    assert result.prices_match is True
