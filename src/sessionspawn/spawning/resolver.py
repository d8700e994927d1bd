"""PlayerSpawnResolver: resolve and spawn the local participant exactly once.

Usage:
    session = InMemorySessionService(ordinal=2)
    resolver = PlayerSpawnResolver(
        session,
        SpawnableCatalog.from_names(["Knight", "Mage"]),
        preferences=InMemoryPreferenceStore({"character_index": 1}),
        spawn_points=SpawnPointSet.of([SpawnPoint(Vector3(0, 0, 0)), SpawnPoint(Vector3(5, 0, 0))]),
    )

    dispatcher = EventDispatcher()
    resolver.attach(dispatcher)
    dispatcher.dispatch(SessionEvent.PROCESS_READY)
    dispatcher.dispatch(SessionEvent.JOINED_SESSION)  # no-op, already spawned
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog

from sessionspawn.config import SpawnSettings
from sessionspawn.core.catalog import (
    DEFAULT_TIERS,
    DescriptorRequest,
    DescriptorTier,
    SpawnableCatalog,
    SpawnableDescriptor,
    resolve_descriptor,
)
from sessionspawn.core.errors import Diagnostic, ErrorKind, InstantiationFailure
from sessionspawn.core.placement import SpawnPointSet, compute_spawn_transform
from sessionspawn.core.selection import ResolvedSelection, resolve_selection
from sessionspawn.session.dispatcher import EventDispatcher
from sessionspawn.session.models import EntityHandle, SessionEvent
from sessionspawn.session.protocol import AssetCatalog, PreferenceStore, SessionService
from sessionspawn.spawning.guard import GuardState, SpawnGuard
from sessionspawn.spawning.result import SpawnDecision, SpawnOutcome, SpawnStatus

logger = structlog.get_logger(__name__)

TRIGGER_EVENTS = (SessionEvent.PROCESS_READY, SessionEvent.JOINED_SESSION)


class PlayerSpawnResolver:
    """Resolves character, descriptor and transform for the local participant.

    Holds the spawn guard for this process instance: at most one instantiation
    request ever succeeds, no matter how many triggers fire or in what order.

    Args:
        session: Session service used for membership, properties, and instantiation.
        catalog: Index -> descriptor mapping. Defaults to an empty catalog.
        preferences: Local preference store consulted when no replicated
            preference is present.
        spawn_points: Points distributed across participants by ordinal.
        inspector_default: Statically configured descriptor, ranked above the
            default name.
        default_spawnable_name: Terminal fallback name. Defaults to the value in
            settings.
        asset_catalog: Used for pre-flight diagnostics only.
        settings: Key names and defaults. Loaded from the environment if omitted.
        tiers: Descriptor tier chain, in priority order.
    """

    def __init__(
        self,
        session: SessionService,
        catalog: SpawnableCatalog | None = None,
        *,
        preferences: PreferenceStore | None = None,
        spawn_points: SpawnPointSet | None = None,
        inspector_default: SpawnableDescriptor | None = None,
        default_spawnable_name: str | None = None,
        asset_catalog: AssetCatalog | None = None,
        settings: SpawnSettings | None = None,
        tiers: Sequence[DescriptorTier] = DEFAULT_TIERS,
    ):
        self._settings = settings or SpawnSettings()
        self._session = session
        self._catalog = catalog if catalog is not None else SpawnableCatalog()
        self._preferences = preferences
        self._spawn_points = spawn_points or SpawnPointSet()
        self._inspector_default = inspector_default
        self._default_name = (
            default_spawnable_name
            if default_spawnable_name is not None
            else self._settings.default_spawnable_name
        )
        self._asset_catalog = asset_catalog
        self._tiers = tuple(tiers)
        self._guard = SpawnGuard()
        self._handle: EntityHandle | None = None

    @classmethod
    def from_settings(
        cls,
        session: SessionService,
        settings: SpawnSettings | None = None,
        **kwargs: Any,
    ) -> PlayerSpawnResolver:
        """Create a resolver whose catalog and defaults come from SpawnSettings.

        A ``catalog=`` keyword overrides the catalog built from settings; other
        keywords are passed through to the constructor.
        """
        settings = settings or SpawnSettings()
        catalog = kwargs.pop("catalog", None)
        if catalog is None:
            catalog = settings.build_catalog()
        return cls(session, catalog, settings=settings, **kwargs)

    @property
    def has_spawned(self) -> bool:
        return self._guard.is_set

    @property
    def guard(self) -> SpawnGuard:
        return self._guard

    @property
    def handle(self) -> EntityHandle | None:
        """Handle of the spawned entity, None until a spawn succeeds."""
        return self._handle

    # Event wiring

    def attach(self, dispatcher: EventDispatcher) -> None:
        """Subscribe to the spawn triggers."""
        for event in TRIGGER_EVENTS:
            dispatcher.subscribe(event, self._on_trigger)

    def detach(self, dispatcher: EventDispatcher) -> None:
        for event in TRIGGER_EVENTS:
            dispatcher.unsubscribe(event, self._on_trigger)

    def _on_trigger(self, *_args: Any) -> None:
        self.attempt_spawn()

    # Pipeline

    def resolve_selection(self) -> ResolvedSelection:
        """Resolve the chosen character index from replicated then local preference."""
        key = self._settings.character_index_key
        return resolve_selection(
            replicated=self._session.get_replicated_property(key),
            local_store=self._preferences,
            key=key,
        )

    def resolve(self) -> tuple[ResolvedSelection, SpawnDecision | None, list[Diagnostic]]:
        """Run selection, descriptor, and transform resolution without spawning.

        Returns:
            (selection, decision, diagnostics). decision is None when descriptor
            resolution hit a configuration error.
        """
        selection = self.resolve_selection()
        resolution = resolve_descriptor(
            DescriptorRequest(
                selection=selection,
                catalog=self._catalog,
                inspector_default=self._inspector_default,
                default_name=self._default_name,
            ),
            self._tiers,
        )
        diagnostics = list(resolution.diagnostics)
        if resolution.descriptor is None:
            return selection, None, diagnostics

        descriptor = resolution.descriptor
        missing = self._check_asset(
            descriptor.name, "descriptor not found in asset catalog, instantiation may fail"
        )
        if missing is not None:
            diagnostics.append(missing)

        transform = compute_spawn_transform(self._spawn_points, self._session.get_local_ordinal())
        decision = SpawnDecision(
            descriptor=descriptor,
            chosen_index=selection.index,
            position=transform.position,
            orientation=transform.orientation,
        )
        return selection, decision, diagnostics

    def attempt_spawn(self) -> SpawnOutcome:
        """Resolve and spawn the local participant, at most once per resolver.

        Safe to call from every trigger, in any order, any number of times. Only
        one call ever issues a successful instantiation request; later calls are
        no-ops. Failures, including errors raised by the session service or the
        preference store, are reported and leave the guard unset. Nothing is
        retried automatically.

        Returns:
            SpawnOutcome describing what this call did.
        """
        prior = self._guard.acquire()
        if prior is GuardState.COMMITTED:
            return SpawnOutcome(status=SpawnStatus.ALREADY_SPAWNED)
        if prior is GuardState.PENDING:
            logger.debug("spawn already in progress, ignoring trigger")
            return SpawnOutcome(status=SpawnStatus.IN_PROGRESS)

        try:
            outcome = self._run_attempt()
        except Exception as e:
            self._guard.release()
            logger.exception("spawn attempt aborted by a collaborator error")
            failure = InstantiationFailure(
                "spawn attempt aborted before instantiation",
                transient=True,
                error=f"{type(e).__name__}: {e}",
            )
            return SpawnOutcome(
                status=SpawnStatus.SESSION_ERROR,
                diagnostics=[failure.to_diagnostic()],
                transient=True,
            )
        except BaseException:
            self._guard.release()
            raise

        if outcome.spawned:
            self._guard.commit()
        else:
            self._guard.release()
        return outcome

    def _run_attempt(self) -> SpawnOutcome:
        if not self._session.is_session_member():
            return SpawnOutcome(status=SpawnStatus.NOT_READY)

        selection, decision, diagnostics = self.resolve()
        for diagnostic in diagnostics:
            self._report(diagnostic)

        if decision is None:
            return SpawnOutcome(
                status=SpawnStatus.CONFIGURATION_ERROR,
                selection=selection,
                diagnostics=diagnostics,
            )

        handle = self._instantiate(decision)
        if isinstance(handle, InstantiationFailure):
            failure = handle
            diagnostic = failure.to_diagnostic()
            self._report(diagnostic)
            diagnostics.append(diagnostic)
            return SpawnOutcome(
                status=SpawnStatus.INSTANTIATION_FAILED,
                selection=selection,
                decision=decision,
                diagnostics=diagnostics,
                transient=failure.transient,
            )

        self._handle = handle
        logger.info(
            "spawned local player",
            descriptor=decision.descriptor.name,
            chosen_index=decision.chosen_index,
            selection_source=selection.source.name,
            handle_id=handle.handle_id,
        )
        return SpawnOutcome(
            status=SpawnStatus.SPAWNED,
            selection=selection,
            decision=decision,
            handle=handle,
            diagnostics=diagnostics,
        )

    def _instantiate(self, decision: SpawnDecision) -> EntityHandle | InstantiationFailure:
        """Issue the single instantiation request and classify any failure."""
        name = decision.descriptor.name
        try:
            handle = self._session.instantiate(
                name,
                decision.position,
                decision.orientation,
                decision.payload,
            )
        except LookupError as e:
            return InstantiationFailure(
                "descriptor is not instantiable by the session service",
                transient=False,
                descriptor=name,
                error=str(e),
            )
        except Exception as e:
            return InstantiationFailure(
                "instantiation request failed",
                transient=True,
                descriptor=name,
                error=f"{type(e).__name__}: {e}",
            )

        if handle is None:
            return InstantiationFailure(
                "instantiation returned no handle",
                transient=False,
                descriptor=name,
            )
        return handle

    def _check_asset(self, name: str, message: str, **context: Any) -> Diagnostic | None:
        """DIAGNOSTIC_ONLY record when the asset catalog does not know ``name``.

        A failing catalog lookup is reported the same way and never blocks.
        """
        if self._asset_catalog is None:
            return None
        try:
            known = self._asset_catalog.exists(name)
        except Exception as e:
            logger.exception("asset catalog check failed", descriptor=name)
            return Diagnostic(
                kind=ErrorKind.DIAGNOSTIC_ONLY,
                message="asset catalog check failed",
                context={**context, "descriptor": name, "error": f"{type(e).__name__}: {e}"},
            )
        if known:
            return None
        return Diagnostic(
            kind=ErrorKind.DIAGNOSTIC_ONLY,
            message=message,
            context={**context, "descriptor": name},
        )

    # Diagnostics

    def validate(self) -> list[Diagnostic]:
        """Pre-flight check of configured descriptors against the asset catalog.

        Reports catalog entries and the inspector default that the asset catalog
        does not know, plus empty catalog entries. Changes no state.

        Returns:
            Diagnostics found, empty when configuration looks consistent.
        """
        diagnostics: list[Diagnostic] = []
        for index, descriptor in self._catalog.items():
            if descriptor.is_empty:
                diagnostics.append(
                    Diagnostic(
                        kind=ErrorKind.CONFIGURATION,
                        message="catalog entry has an empty descriptor name",
                        context={"chosen_index": index},
                    )
                )
            else:
                missing = self._check_asset(
                    descriptor.name,
                    "catalog descriptor not found in asset catalog",
                    chosen_index=index,
                )
                if missing is not None:
                    diagnostics.append(missing)

        inspector = self._inspector_default
        if inspector is not None and not inspector.is_empty:
            missing = self._check_asset(
                inspector.name, "inspector default descriptor not found in asset catalog"
            )
            if missing is not None:
                diagnostics.append(missing)

        for diagnostic in diagnostics:
            self._report(diagnostic)
        return diagnostics

    def _report(self, diagnostic: Diagnostic) -> None:
        log = logger.error if diagnostic.kind.is_fatal else logger.warning
        log(diagnostic.message, error_kind=diagnostic.kind.value, **diagnostic.context)
