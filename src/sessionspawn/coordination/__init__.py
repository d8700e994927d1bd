"""Session start coordination."""

from sessionspawn.coordination.coordinator import (
    MEMBERSHIP_EVENTS,
    CanStartListener,
    SessionStartCoordinator,
    StartResult,
)

__all__ = [
    "SessionStartCoordinator",
    "StartResult",
    "CanStartListener",
    "MEMBERSHIP_EVENTS",
]
