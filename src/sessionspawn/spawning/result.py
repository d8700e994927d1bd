"""Spawn decisions and attempt outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from sessionspawn.core.catalog import SpawnableDescriptor
from sessionspawn.core.errors import Diagnostic, ErrorKind
from sessionspawn.core.placement import Quaternion, Vector3
from sessionspawn.core.selection import ResolvedSelection
from sessionspawn.core.types import UNSET_INDEX, Payload

if TYPE_CHECKING:
    from sessionspawn.session.models import EntityHandle


@dataclass(frozen=True, slots=True)
class SpawnDecision:
    """Resolved spawn input, consumed by one instantiation call."""

    descriptor: SpawnableDescriptor
    chosen_index: int = UNSET_INDEX
    position: Vector3 = Vector3()
    orientation: Quaternion = Quaternion()

    @property
    def payload(self) -> Payload:
        return (self.chosen_index,)


class SpawnStatus(Enum):
    """How an attempt_spawn() call ended."""

    SPAWNED = auto()
    ALREADY_SPAWNED = auto()  # guard committed earlier, no-op
    IN_PROGRESS = auto()  # re-entrant call during a pending attempt, no-op
    NOT_READY = auto()  # not in a session yet, no-op
    SESSION_ERROR = auto()  # a collaborator read failed before instantiation
    CONFIGURATION_ERROR = auto()
    INSTANTIATION_FAILED = auto()


@dataclass(slots=True)
class SpawnOutcome:
    """Result of one attempt_spawn() call.

    Attributes:
        status: How the attempt ended.
        selection: Resolved selection, None if the pipeline did not get that far.
        decision: Spawn decision, None if resolution failed or never ran.
        handle: Handle of the spawned entity on SPAWNED.
        diagnostics: Everything reported during the attempt, in order.
        transient: For INSTANTIATION_FAILED and SESSION_ERROR, whether the
            failure may clear up without a configuration change.
    """

    status: SpawnStatus
    selection: ResolvedSelection | None = None
    decision: SpawnDecision | None = None
    handle: EntityHandle | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)
    transient: bool | None = None

    @property
    def spawned(self) -> bool:
        return self.status is SpawnStatus.SPAWNED

    def diagnostics_of(self, kind: ErrorKind) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.kind is kind]
