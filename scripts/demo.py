"""
Local runner for the Hotel Luchadores reservation ledger.

Replays the demo booking scenario against fresh in-memory managers and
logs every reservation added, cancelled or rejected.

Usage:
    python scripts/demo.py

Environment variables (optional):
    RESERVATION_VALIDATION  - "strict" or "permissive" (default: strict)
    LOG_LEVEL               - logging level (default: INFO)
"""

import logging
import os
import sys

# Make sure project root is on sys.path when run as a script
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from luchadores.factory import create_reservation_manager
from luchadores.scenario import run_scenario

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
log = logging.getLogger(__name__)


def main() -> int:
    try:
        result = run_scenario(create_reservation_manager)
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    for reservation in result.added:
        log.info(
            "Reservation %d at %s: %s, %d night(s), breakfast=%s → %.2f",
            reservation.id,
            reservation.hotel_name,
            ", ".join(reservation.client_names),
            reservation.duration,
            reservation.breakfast_option,
            reservation.price,
        )
    for exc in result.rejected:
        log.info("Rejected (%s): %s", exc.kind.value, exc)

    if not result.prices_match:
        log.error("Equally-shaped reservations ended up with different prices")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
