"""
Reservation records and pricing.

Both records are immutable once built: the manager hands them out
directly instead of copying them.
"""

from dataclasses import dataclass

HOTEL_NAME = "Hotel Luchadores"
NIGHTLY_RATE_PER_CLIENT = 20.0
BREAKFAST_MULTIPLIER = 1.25


@dataclass(frozen=True)
class Client:
    """A guest. The name is the identity key across the whole ledger."""

    name: str
    age: int
    height: float


@dataclass(frozen=True)
class Reservation:
    """A booking linking one or more clients to a stay."""

    id: int
    hotel_name: str
    clients: tuple[Client, ...]
    duration: int           # nights
    breakfast_option: bool
    price: float

    @property
    def client_names(self) -> list[str]:
        return [c.name for c in self.clients]


def compute_price(client_count: int, duration: int, breakfast_option: bool) -> float:
    """clients x 20 x nights, plus 25% when breakfast is included."""
    multiplier = BREAKFAST_MULTIPLIER if breakfast_option else 1.0
    return client_count * NIGHTLY_RATE_PER_CLIENT * duration * multiplier
