"""End-to-end session lifecycle: lobby start, then per-participant spawn."""

from sessionspawn import (
    EventDispatcher,
    InMemoryPreferenceStore,
    InMemorySessionService,
    PlayerSpawnResolver,
    SessionEvent,
    SessionStartCoordinator,
    SessionStartSettings,
    SpawnableCatalog,
    SpawnPoint,
    SpawnPointSet,
    SpawnSettings,
    Vector3,
)

KEY = "character_index"
CATALOG = SpawnableCatalog.from_names(["Knight", "Mage", "Rogue"])
POINTS = SpawnPointSet.of(SpawnPoint(Vector3(float(i) * 10, 0.0, 0.0)) for i in range(2))


def _participant(ordinal: int, leader: bool, replicated=None, local=None):
    properties = {KEY: replicated} if replicated is not None else {}
    session = InMemorySessionService(
        member=False, ordinal=ordinal, leader=leader, player_properties=properties
    )
    preferences = InMemoryPreferenceStore({KEY: local} if local is not None else {})
    dispatcher = EventDispatcher()
    resolver = PlayerSpawnResolver(
        session,
        CATALOG,
        preferences=preferences,
        spawn_points=POINTS,
        settings=SpawnSettings(_env_file=None, character_index_key=KEY),
    )
    coordinator = SessionStartCoordinator(
        session, SessionStartSettings(_env_file=None, session_identifier="Arena")
    )
    resolver.attach(dispatcher)
    coordinator.attach(dispatcher)
    return session, dispatcher, resolver, coordinator


def test_three_participants_start_and_spawn_once_each():
    participants = [
        _participant(1, leader=True, replicated=1),
        _participant(2, leader=False, local=2),
        _participant(3, leader=False),
    ]

    # Process ready before joining: nothing happens yet
    for session, dispatcher, _, _ in participants:
        dispatcher.dispatch(SessionEvent.PROCESS_READY)
        assert session.calls == []

    # Only the leader may start
    assert not participants[1][3].request_session_start().started
    assert participants[0][3].request_session_start().started
    assert participants[0][0].loaded_contexts == ["Arena"]

    # Everyone joins; triggers fire twice each
    for session, dispatcher, _, _ in participants:
        session.join()
        dispatcher.dispatch(SessionEvent.JOINED_SESSION)
        dispatcher.dispatch(SessionEvent.PROCESS_READY)

    spawned = [session.instantiated for session, _, _, _ in participants]
    assert [len(handles) for handles in spawned] == [1, 1, 1]
    assert [handles[0].descriptor_id for handles in spawned] == ["Mage", "Rogue", "PlayerPrefab"]

    positions = [
        session.calls_to("instantiate")[0].args[1].x for session, _, _, _ in participants
    ]
    # Two points, three participants: the third wraps to the first point
    assert positions == [0.0, 10.0, 0.0]


def test_leader_handover_moves_start_availability():
    old_session, old_dispatcher, _, old_coordinator = _participant(1, leader=True)
    new_session, new_dispatcher, _, new_coordinator = _participant(2, leader=False)
    assert old_coordinator.can_start and not new_coordinator.can_start

    old_session.set_leader(False)
    new_session.set_leader(True)
    old_dispatcher.dispatch(SessionEvent.LEADER_CHANGED, 2)
    new_dispatcher.dispatch(SessionEvent.LEADER_CHANGED, 2)

    assert not old_coordinator.can_start
    assert new_coordinator.can_start
    assert not old_coordinator.request_session_start().started
    assert new_coordinator.request_session_start().started
