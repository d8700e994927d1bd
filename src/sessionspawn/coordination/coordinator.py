"""SessionStartCoordinator: leader-only session start.

Usage:
    coordinator = SessionStartCoordinator(session)
    coordinator.add_listener(lambda can_start: button.set_enabled(can_start))
    coordinator.attach(dispatcher)

    # From the UI, or programmatically
    coordinator.request_session_start()
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import structlog

from sessionspawn.config import SessionStartSettings
from sessionspawn.core.errors import AuthorizationDenied, Diagnostic, ErrorKind
from sessionspawn.session.dispatcher import EventDispatcher
from sessionspawn.session.models import SessionEvent
from sessionspawn.session.protocol import SessionService

logger = structlog.get_logger(__name__)

MEMBERSHIP_EVENTS = (
    SessionEvent.LEADER_CHANGED,
    SessionEvent.PARTICIPANT_JOINED,
    SessionEvent.PARTICIPANT_LEFT,
)

CanStartListener = Callable[[bool], Any]


@dataclass(slots=True)
class StartResult:
    """Outcome of request_session_start()."""

    started: bool
    identifier: str | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)


class SessionStartCoordinator:
    """Gates the session start action to the current leader.

    Leadership is the only authorization and is evaluated at call time. The
    cached can_start value only drives listeners such as a start button.

    Args:
        session: Session service.
        settings: Session identifier and property key. Loaded from the
            environment if omitted.
        session_identifier: Overrides settings.session_identifier.
    """

    def __init__(
        self,
        session: SessionService,
        settings: SessionStartSettings | None = None,
        session_identifier: str | None = None,
    ):
        self._session = session
        self._settings = settings or SessionStartSettings()
        self._identifier = (
            session_identifier
            if session_identifier is not None
            else self._settings.session_identifier
        )
        self._can_start = False
        self._listeners: list[CanStartListener] = []

    @property
    def can_start(self) -> bool:
        """Leadership as of the last recompute."""
        return self._can_start

    @property
    def session_identifier(self) -> str:
        return self._identifier

    def add_listener(self, listener: CanStartListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: CanStartListener) -> bool:
        if listener not in self._listeners:
            return False
        self._listeners.remove(listener)
        return True

    # Event wiring

    def attach(self, dispatcher: EventDispatcher) -> None:
        """Subscribe to membership events and compute the initial can_start."""
        for event in MEMBERSHIP_EVENTS:
            dispatcher.subscribe(event, self._on_membership_changed)
        self.refresh(notify=True)

    def detach(self, dispatcher: EventDispatcher) -> None:
        for event in MEMBERSHIP_EVENTS:
            dispatcher.unsubscribe(event, self._on_membership_changed)

    def _on_membership_changed(self, *_args: Any) -> None:
        self.refresh()

    def refresh(self, notify: bool = False) -> bool:
        """Recompute can_start from the session.

        Args:
            notify: Call listeners even if the value did not change.

        Returns:
            The new can_start value.
        """
        previous = self._can_start
        self._can_start = self._session.is_local_participant_leader()
        if notify or self._can_start != previous:
            for listener in tuple(self._listeners):
                listener(self._can_start)
        return self._can_start

    def request_session_start(self) -> StartResult:
        """Write the session identifier and tell every participant to load it.

        Non-leaders get an AUTHORIZATION_DENIED diagnostic and no session calls
        are made. For the leader, the property write is not awaited before the
        load instruction; the session service's ordering covers that. A write
        that raises is logged and reported, and the load is still issued.

        Returns:
            StartResult describing what was requested.
        """
        if not self._session.is_local_participant_leader():
            denied = AuthorizationDenied(
                "only the session leader can start the session",
                identifier=self._identifier,
            )
            logger.warning(denied.message, error_kind=denied.kind.value, **denied.context)
            return StartResult(started=False, diagnostics=[denied.to_diagnostic()])

        key = self._settings.identifier_property_key
        diagnostics: list[Diagnostic] = []
        try:
            self._session.set_replicated_properties({key: self._identifier})
        except Exception as e:
            logger.exception(
                "session identifier write failed", identifier=self._identifier, property_key=key
            )
            diagnostics.append(
                Diagnostic(
                    kind=ErrorKind.DIAGNOSTIC_ONLY,
                    message="session identifier write failed",
                    context={
                        "identifier": self._identifier,
                        "property_key": key,
                        "error": f"{type(e).__name__}: {e}",
                    },
                )
            )
        self._session.load_shared_context(self._identifier)
        logger.info("session start requested", identifier=self._identifier, property_key=key)
        return StartResult(started=True, identifier=self._identifier, diagnostics=diagnostics)
