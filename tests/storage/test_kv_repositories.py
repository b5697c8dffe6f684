from __future__ import annotations

import json
from datetime import date

import pytest

from ngo_attendance.container import build_container
from ngo_attendance.core.constants import PARTICIPANTS_KEY, SESSIONS_KEY
from ngo_attendance.core.exceptions import PersistenceError
from ngo_attendance.participants.kv_participant_repository import KVParticipantRepository
from ngo_attendance.participants.model import Participant
from ngo_attendance.sessions.kv_session_repository import KVSessionRepository
from ngo_attendance.sessions.model import Session
from ngo_attendance.storage.connection import JsonFileStorage, MemoryStorage, StorageConfig, open_storage


def test_participants_round_trip_keeps_order_and_optional_fields():
    storage = MemoryStorage()
    repo = KVParticipantRepository(storage)
    participants = [
        Participant(id="b", name="Bo", phone="555"),
        Participant(id="a", name="Ann", email="ann@example.org"),
    ]

    repo.save_all(participants)

    assert list(KVParticipantRepository(storage).load_all()) == participants
    assert json.loads(storage.get_item(PARTICIPANTS_KEY)) == [
        {"id": "b", "name": "Bo", "phone": "555"},
        {"id": "a", "name": "Ann", "email": "ann@example.org"},
    ]


def test_sessions_round_trip_keeps_sparse_attendance():
    storage = MemoryStorage()
    repo = KVSessionRepository(storage)
    sessions = [
        Session(
            id="s1",
            name="Intake",
            date=date(2026, 4, 1),
            start_time="09:00",
            end_time="10:00",
            location="Office",
            description="First visit",
            attendance={"a": True, "b": False},
        ),
        Session(id="s2", name="Follow-up", date=date(2026, 4, 8), start_time="", end_time="", location="Office"),
    ]

    repo.save_all(sessions)

    assert list(KVSessionRepository(storage).load_all()) == sessions
    stored = json.loads(storage.get_item(SESSIONS_KEY))
    assert stored[0]["startTime"] == "09:00"
    assert stored[0]["attendance"] == {"a": True, "b": False}
    assert stored[1]["attendance"] == {}
    assert "description" not in stored[1]


def test_missing_key_loads_as_empty():
    assert list(KVSessionRepository(MemoryStorage()).load_all()) == []


@pytest.mark.parametrize("raw", ["{not json", '{"id": "x"}', '[{"name": "no id"}]'])
def test_malformed_participants_blob_raises_persistence_error(raw):
    storage = MemoryStorage({PARTICIPANTS_KEY: raw})

    with pytest.raises(PersistenceError):
        KVParticipantRepository(storage).load_all()


def test_session_with_bad_date_raises_persistence_error():
    raw = json.dumps([{"id": "s1", "name": "x", "date": "soon", "location": "y"}])

    with pytest.raises(PersistenceError):
        KVSessionRepository(MemoryStorage({SESSIONS_KEY: raw})).load_all()


def test_json_file_storage_writes_one_file_per_key(tmp_path):
    storage = JsonFileStorage(tmp_path / "data")

    assert storage.get_item("ngo-participants") is None
    storage.set_item("ngo-participants", "[]")

    assert (tmp_path / "data" / "ngo-participants.json").read_text(encoding="utf-8") == "[]"
    assert storage.get_item("ngo-participants") == "[]"
    assert [p.name for p in (tmp_path / "data").iterdir()] == ["ngo-participants.json"]


def test_json_file_storage_quota(tmp_path):
    storage = JsonFileStorage(tmp_path, quota_bytes=4)
    storage.set_item("k", "[]")

    with pytest.raises(PersistenceError):
        storage.set_item("k", "[1, 2, 3]")

    assert storage.get_item("k") == "[]"


def test_json_file_storage_write_failure_is_persistence_error(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(PersistenceError):
        JsonFileStorage(blocker).set_item("k", "[]")


def test_open_storage_rejects_unknown_backend():
    assert isinstance(open_storage(StorageConfig(backend="memory")), MemoryStorage)
    with pytest.raises(ValueError):
        open_storage(StorageConfig(backend="redis"))


def test_container_reloads_what_was_written(tmp_path):
    config = {"backend": "file", "directory": str(tmp_path)}

    first = build_container(storage_config=config)
    ann = first.participant_service.add("Ann")
    s = first.session_service.add("Intake", "2026-04-01", "09:00", "10:00", "Office")
    first.session_service.toggle_attendance(s.id, ann.id)

    second = build_container(storage_config=config)

    assert second.participant_service.list() == first.participant_service.list()
    assert second.session_service.list() == first.session_service.list()


def test_deleting_last_item_is_persisted(tmp_path):
    config = {"backend": "file", "directory": str(tmp_path)}

    first = build_container(storage_config=config)
    ann = first.participant_service.add("Ann")
    first.participant_service.remove(ann.id)

    assert build_container(storage_config=config).participant_service.list() == []


def test_container_tolerates_corrupt_blob():
    storage = MemoryStorage({SESSIONS_KEY: "oops"})

    container = build_container(storage=storage)

    assert container.session_service.list() == []


def test_quota_failure_is_reported_not_raised():
    container = build_container(storage=MemoryStorage(quota_bytes=10))

    p = container.participant_service.add("A participant with a long name")

    assert container.participant_service.list() == [p]
    assert container.warnings
    assert container.warnings.drain()


def test_session_write_failure_reaches_container_warnings():
    container = build_container(storage=MemoryStorage(quota_bytes=10))

    s = container.session_service.add("Intake", "2026-04-01", "09:00", "10:00", "Office")
    container.warnings.drain()
    container.session_service.toggle_attendance(s.id, "p1")

    assert container.warnings.drain() == [
        "Sessions were changed but could not be saved; changes may be lost on restart."
    ]
    assert container.session_service.get(s.id).is_present("p1")
