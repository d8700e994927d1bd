"""Tests for the in-memory collaborators."""

import pytest

from sessionspawn.core.placement import Quaternion, Vector3
from sessionspawn.session import (
    AssetCatalog,
    InMemoryAssetCatalog,
    InMemoryPreferenceStore,
    InMemorySessionService,
    PreferenceStore,
    SessionService,
)


def test_in_memory_implementations_satisfy_protocols():
    assert isinstance(InMemorySessionService(), SessionService)
    assert isinstance(InMemoryPreferenceStore(), PreferenceStore)
    assert isinstance(InMemoryAssetCatalog(), AssetCatalog)


def test_instantiate_allocates_increasing_handles():
    session = InMemorySessionService(ordinal=4)

    first = session.instantiate("A", Vector3(), Quaternion(), (0,))
    second = session.instantiate("B", Vector3(), Quaternion(), (1,))

    assert first is not None and second is not None
    assert second.handle_id == first.handle_id + 1
    assert first.owner_ordinal == 4
    assert [h.descriptor_id for h in session.instantiated] == ["A", "B"]


def test_instantiate_unknown_descriptor_raises_lookup_error():
    session = InMemorySessionService(known_descriptors=["A"])

    with pytest.raises(LookupError, match="not instantiable"):
        session.instantiate("Z", Vector3(), Quaternion(), (-1,))

    assert len(session.calls_to("instantiate")) == 1
    assert session.instantiated == []


def test_scripted_failures():
    session = InMemorySessionService()
    session.instantiate_returns_none = True
    assert session.instantiate("A", Vector3(), Quaternion(), (0,)) is None

    session.instantiate_error = ConnectionError("link down")
    with pytest.raises(ConnectionError):
        session.instantiate("A", Vector3(), Quaternion(), (0,))


def test_room_writes_and_context_loads_are_recorded_in_order():
    session = InMemorySessionService()

    session.set_replicated_properties({"scene": "Arena"})
    session.load_shared_context("Arena")

    assert [call.method for call in session.calls] == [
        "set_replicated_properties",
        "load_shared_context",
    ]
    assert session.room_properties == {"scene": "Arena"}
    assert session.loaded_contexts == ["Arena"]


def test_player_properties_are_read_back():
    session = InMemorySessionService(player_properties={"character_index": 2})

    assert session.get_replicated_property("character_index") == 2
    assert session.get_replicated_property("missing") is None


def test_membership_and_leadership_scripting():
    session = InMemorySessionService(member=False)
    assert not session.is_session_member()

    session.join(ordinal=3)
    session.set_leader(True)

    assert session.is_session_member()
    assert session.get_local_ordinal() == 3
    assert session.is_local_participant_leader()

    session.leave()
    assert not session.is_session_member()


def test_preference_store():
    store = InMemoryPreferenceStore()

    assert not store.has_key("character_index")
    assert store.get_int("character_index", -1) == -1

    store.set_int("character_index", 2)

    assert store.has_key("character_index")
    assert store.get_int("character_index", -1) == 2
    assert store.delete_key("character_index")
    assert not store.delete_key("character_index")
