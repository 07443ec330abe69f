import os

from .manager import VALIDATION_MODES, ManagerConfig, ReservationManager


def create_reservation_manager(validation: str | None = None) -> ReservationManager:
    """
    Factory: build a fresh manager based on config.

    The validation mode can be passed explicitly or read from the
    RESERVATION_VALIDATION env var. Defaults to "strict".
    Every call returns an independent manager with its own counter.
    """
    validation = validation or os.environ.get("RESERVATION_VALIDATION", "strict")

    if validation not in VALIDATION_MODES:
        raise ValueError(f"Unknown reservation validation mode: {validation!r}")

    return ReservationManager(ManagerConfig(validation=validation))
