import json

import pytest

from config.constants import STORAGE_KEY
from database.db_connection import DatabaseConnection
from models.update import UpdateRecord
from services import tabular_codec
from services.record_store import (
    DuckDBStorage,
    JsonFileStorage,
    MemoryStorage,
    RecordStore,
    create_backend,
)
from services.sample_data import SAMPLE_UPDATES


HEADER = "Team Member\tTitle\tDate\tPriority/Goal\tInitiative\tDescription\tHealth\tStatus\tDue Date\tFeedback"


class CountingStorage(MemoryStorage):
    def __init__(self, initial=None):
        super().__init__(initial)
        self.writes = 0

    def set(self, key, value):
        self.writes += 1
        super().set(key, value)


def _imported():
    return tabular_codec.parse("\n".join([
        HEADER,
        "Ana\tPM\t2026-02-01\tGrowth\tLaunch\tOn track\t1\t50%\t2026-03-01\t",
        "Bo\tEng\t2026-02-01\tTech\tAPI\tBlocked\t-1\t10%\t2026-03-01\t",
    ]))


def test_load_without_stored_data_returns_sample():
    store = RecordStore(MemoryStorage())

    records = store.load()

    assert records == SAMPLE_UPDATES
    assert store.records == SAMPLE_UPDATES


@pytest.mark.parametrize("payload", [
    "not json",
    "{\"id\": \"1\"}",
    "[1, 2, 3]",
    "[{\"teamMember\": \"no id\"}]",
    "[{\"id\": \"1\"}, {\"id\": \"1\"}]",
    "[{\"id\": \"1\", \"health\": 1e400}]",
    "[{\"id\": \"1\", \"health\": Infinity}]",
    "[" * 100000 + "]" * 100000,
])
def test_load_corrupt_payload_falls_back_and_rewrites(payload):
    backend = MemoryStorage({STORAGE_KEY: payload})
    store = RecordStore(backend)

    records = store.load()

    assert records == SAMPLE_UPDATES
    assert json.loads(backend.get(STORAGE_KEY))[0]["teamMember"] == "ManagerA"


def test_load_older_payload_fills_missing_fields():
    payload = json.dumps([{
        "id": "7",
        "teamMember": "Ana",
        "title": "PM",
        "date": "2026-01-01",
        "priorityGoal": "Growth",
        "initiative": "Launch",
        "description": "x",
        "health": 1,
        "status": "40%",
        "dueDate": "",
        "somethingNew": True,
    }])
    store = RecordStore(MemoryStorage({STORAGE_KEY: payload}))

    (record,) = store.load()

    assert record.feedback == ""
    assert record.progress == 40


def test_replace_all_persists_and_survives_reload():
    backend = MemoryStorage()
    store = RecordStore(backend)
    store.load()

    imported = _imported()
    snapshot = store.replace_all(imported)

    assert [r.team_member for r in snapshot] == ["Ana", "Bo"]
    reloaded = RecordStore(backend).load()
    assert reloaded == tuple(imported)


def test_replace_all_rejects_duplicate_ids_and_wrong_types():
    store = RecordStore(MemoryStorage())
    record = SAMPLE_UPDATES[0]

    with pytest.raises(ValueError):
        store.replace_all([record, record])
    with pytest.raises(TypeError):
        store.replace_all([{"id": "1"}])


def test_replace_all_with_empty_list():
    backend = MemoryStorage()
    store = RecordStore(backend)

    assert store.replace_all([]) == ()
    assert RecordStore(backend).load() == ()


def test_update_feedback_changes_one_record_and_persists():
    backend = CountingStorage()
    store = RecordStore(backend)
    store.load()

    records = store.update_feedback("3", "Escalate to legal")

    assert store.get("3").feedback == "Escalate to legal"
    assert [r.feedback for r in records if r.id != "3"] == [""] * 9
    assert backend.writes == 1
    assert RecordStore(backend).load()[2].feedback == "Escalate to legal"


def test_update_feedback_unknown_id_is_noop():
    backend = CountingStorage()
    store = RecordStore(backend)
    before = store.load()

    after = store.update_feedback("nonexistent-id", "note")

    assert after == before
    assert backend.writes == 0


def test_snapshots_do_not_change_after_mutation():
    store = RecordStore(MemoryStorage())
    snapshot = store.load()

    store.update_feedback("1", "changed")

    assert snapshot[0].feedback == ""
    assert store.records[0].feedback == "changed"


def test_load_sample_overwrites_current_data():
    backend = MemoryStorage()
    store = RecordStore(backend)
    store.replace_all(_imported())

    assert store.load_sample() == SAMPLE_UPDATES
    assert RecordStore(backend).load() == SAMPLE_UPDATES


def test_custom_fallback():
    fallback = _imported()
    store = RecordStore(MemoryStorage(), fallback=fallback)
    assert store.load() == tuple(fallback)


def test_json_file_storage_roundtrip(tmp_path):
    backend = JsonFileStorage(tmp_path / "state")
    assert backend.get("missing") is None

    store = RecordStore(backend)
    store.replace_all(_imported())

    assert (tmp_path / "state" / f"{STORAGE_KEY}.json").exists()
    assert [r.team_member for r in RecordStore(JsonFileStorage(tmp_path / "state")).load()] == ["Ana", "Bo"]


def test_duckdb_storage_roundtrip(tmp_path):
    db = DatabaseConnection(tmp_path / "ppa.duckdb")
    backend = DuckDBStorage(db)
    assert backend.get(STORAGE_KEY) is None

    store = RecordStore(backend)
    store.load()
    store.update_feedback("1", "first")
    store.update_feedback("1", "second")

    reloaded = RecordStore(DuckDBStorage(db)).load()
    assert isinstance(reloaded[0], UpdateRecord)
    assert reloaded[0].feedback == "second"
    db.close()


def test_create_backend_rejects_unknown_kind():
    assert isinstance(create_backend("memory"), MemoryStorage)
    with pytest.raises(ValueError):
        create_backend("redis")


def test_json_file_storage_non_utf8_file_falls_back(tmp_path):
    (tmp_path / f"{STORAGE_KEY}.json").write_bytes(b"\xff\xfe[{\"id\": \"1\"}]")
    backend = JsonFileStorage(tmp_path)

    assert RecordStore(backend).load() == SAMPLE_UPDATES
    assert json.loads(backend.get(STORAGE_KEY))[0]["id"] == "1"


class FailingStorage(MemoryStorage):
    def __init__(self, initial=None):
        super().__init__(initial)
        self.fail = False

    def set(self, key, value):
        if self.fail:
            raise OSError("No space left on device")
        super().set(key, value)


def test_failed_write_leaves_records_unchanged():
    backend = FailingStorage()
    store = RecordStore(backend)
    before = store.load()
    backend.fail = True

    with pytest.raises(OSError):
        store.replace_all(_imported())
    with pytest.raises(OSError):
        store.update_feedback("1", "lost")

    assert store.records == before
    assert store.get("1").feedback == ""
