"""
Record store for team updates.

Owns the ordered list of update records and mirrors it to a key/value
storage backend after every change. Readers get tuple snapshots.
"""

from __future__ import annotations
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Tuple, Union

from config.constants import CONFIG_DIR, STATE_TABLE, STORAGE_KEY
from database.db_connection import DatabaseConnection, get_db
from models.exceptions import PersistenceCorruption
from models.update import UpdateRecord, find_record
from services.sample_data import sample_updates


logger = logging.getLogger(__name__)


class StorageBackend(Protocol):
    """Get/set a string value by key."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStorage:
    """In-process storage, used for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStorage:
    """One JSON file per key in a directory."""

    def __init__(self, directory: Union[str, Path] = CONFIG_DIR):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise PersistenceCorruption(f"{path.name} is not UTF-8 text: {e}") from e

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(value, encoding="utf-8")
        tmp_path.replace(path)


class DuckDBStorage:
    """Key/value rows in the app_state table of a DuckDB database."""

    def __init__(self, db: DatabaseConnection):
        self.db = db
        self.db.ensure_state_table()

    def get(self, key: str) -> Optional[str]:
        row = self.db.fetch_one(f"SELECT value FROM {STATE_TABLE} WHERE key = ?", (key,))
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        with self.db.transaction() as conn:
            conn.execute(
                f"INSERT OR REPLACE INTO {STATE_TABLE} (key, value, updated_at) "
                "VALUES (?, ?, current_timestamp)",
                (key, value),
            )


def decode_payload(payload: str) -> List[UpdateRecord]:
    """
    Decode the stored JSON list of records.

    Raises PersistenceCorruption when the payload is not a JSON list of
    record objects with unique ids.
    """
    try:
        items = json.loads(payload)
    except (TypeError, ValueError, RecursionError) as e:
        raise PersistenceCorruption(f"Stored payload is not valid JSON: {type(e).__name__}") from e

    if not isinstance(items, list):
        raise PersistenceCorruption(f"Stored payload is a {type(items).__name__}, expected a list")

    try:
        records = [UpdateRecord.from_dict(item) for item in items]
    except (ValueError, RecursionError) as e:
        raise PersistenceCorruption(f"Stored record is malformed: {type(e).__name__}") from e

    if len({record.id for record in records}) != len(records):
        raise PersistenceCorruption("Stored records contain duplicate ids")
    return records


def encode_payload(records: Iterable[UpdateRecord]) -> str:
    return json.dumps([record.to_dict() for record in records], ensure_ascii=False)


class RecordStore:
    """Ordered list of update records, persisted on every mutation."""

    def __init__(
        self,
        backend: StorageBackend,
        key: str = STORAGE_KEY,
        fallback: Optional[Sequence[UpdateRecord]] = None,
    ):
        self.backend = backend
        self.key = key
        self._fallback = list(fallback) if fallback is not None else sample_updates()
        self._records: List[UpdateRecord] = []

    @property
    def records(self) -> Tuple[UpdateRecord, ...]:
        """Snapshot of the current records."""
        return tuple(self._records)

    def load(self) -> Tuple[UpdateRecord, ...]:
        """
        Load the persisted records.

        Falls back to the sample set when nothing is stored or the stored
        payload is unreadable; a corrupt payload is overwritten with it.
        """
        try:
            payload = self.backend.get(self.key)
            if payload is None:
                logger.info("No stored team data, using sample data")
                self._records = list(self._fallback)
                return self.records
            records = decode_payload(payload)
        except PersistenceCorruption as e:
            logger.warning(f"Stored team data unreadable, replacing with sample data: {e}")
            records = list(self._fallback)
            self._persist(records)
        self._records = records
        return self.records

    def replace_all(self, records: Iterable[UpdateRecord]) -> Tuple[UpdateRecord, ...]:
        """Replace the whole list and persist it."""
        new_records = list(records)
        for record in new_records:
            if not isinstance(record, UpdateRecord):
                raise TypeError(f"Expected UpdateRecord, got {type(record).__name__}")
        if len({record.id for record in new_records}) != len(new_records):
            raise ValueError("Record ids must be unique")

        self._persist(new_records)
        self._records = new_records
        logger.info(f"Replaced team data with {len(new_records)} update(s)")
        return self.records

    def load_sample(self) -> Tuple[UpdateRecord, ...]:
        """Overwrite the current list with the sample data."""
        return self.replace_all(self._fallback)

    def update_feedback(self, record_id: str, text: str) -> Tuple[UpdateRecord, ...]:
        """Set the feedback of one record. Unknown ids are ignored."""
        for index, record in enumerate(self._records):
            if record.id == record_id:
                if record.feedback == text:
                    return self.records
                new_records = list(self._records)
                new_records[index] = replace(record, feedback=text)
                self._persist(new_records)
                self._records = new_records
                return self.records

        logger.debug(f"Feedback update for unknown record id {record_id!r} ignored")
        return self.records

    def get(self, record_id: str) -> Optional[UpdateRecord]:
        return find_record(self._records, record_id)

    def _persist(self, records: Sequence[UpdateRecord]):
        """Write the given list to the backend."""
        self.backend.set(self.key, encode_payload(records))


def create_backend(kind: str, database_path: Union[str, Path, None] = None,
                   storage_dir: Union[str, Path, None] = None) -> StorageBackend:
    """Build the storage backend named in the settings."""
    if kind == "memory":
        return MemoryStorage()
    if kind == "file":
        return JsonFileStorage(storage_dir or CONFIG_DIR)
    if kind == "duckdb":
        return DuckDBStorage(get_db(database_path))
    raise ValueError(f"Unsupported storage backend: {kind}")
