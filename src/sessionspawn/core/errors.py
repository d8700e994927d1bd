"""Error taxonomy shared by the spawn resolver and the start coordinator.

Nothing here escapes a public operation. Components convert conditions into
Diagnostic records (returned to the caller) and structlog events.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Classification of reported conditions."""

    CONFIGURATION = "configuration"
    SELECTION_WARNING = "selection_warning"
    AUTHORIZATION_DENIED = "authorization_denied"
    INSTANTIATION_FAILURE = "instantiation_failure"
    DIAGNOSTIC_ONLY = "diagnostic_only"

    @property
    def is_fatal(self) -> bool:
        """True for kinds that end the current attempt."""
        return self in (ErrorKind.CONFIGURATION, ErrorKind.INSTANTIATION_FAILURE)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single reported condition.

    Attributes:
        kind: What class of condition this is.
        message: Human readable summary.
        context: Offending identifiers/indices, also emitted as log keys.
    """

    kind: ErrorKind
    message: str
    context: dict[str, Any] = field(default_factory=dict)


class SessionSpawnError(Exception):
    """Base class for failures detected by sessionspawn components."""

    kind: ErrorKind = ErrorKind.CONFIGURATION

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(kind=self.kind, message=self.message, context=dict(self.context))


class ConfigurationError(SessionSpawnError):
    """Resolved descriptor identifier is empty, or a catalog entry has no name."""

    kind = ErrorKind.CONFIGURATION


class AuthorizationDenied(SessionSpawnError):
    """A leader-only action was requested by a non-leader."""

    kind = ErrorKind.AUTHORIZATION_DENIED


class InstantiationFailure(SessionSpawnError):
    """The session service raised or returned no handle.

    Args:
        message: Summary of the failure.
        transient: True when a later attempt with unchanged inputs may succeed
            (transport errors). False for configuration-class failures such as an
            unknown descriptor.
        **context: Offending identifiers.
    """

    kind = ErrorKind.INSTANTIATION_FAILURE

    def __init__(self, message: str, *, transient: bool, **context: Any) -> None:
        super().__init__(message, transient=transient, **context)
        self.transient = transient
