"""
Local File Repository - JSON file-backed implementation

Each collection lives in one JSON file (array of objects) under the
configured db directory. Every mutation is a read-modify-write of the
whole file, serialized by a lock per file and published with an atomic
replace so concurrent readers never see a partial write.
"""

import logging
import threading
import uuid
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from recordstore.exceptions import NotFoundError, ValidationError
from recordstore.io.readers import read_collection
from recordstore.io.writers import atomic_write_json
from recordstore.resources import Predicate, ResourceConfig, missing_required_fields
from recordstore.settings import Settings, get_settings
from recordstore.utils.dates import canonicalize_date
from recordstore.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

# One lock per backing file, shared by every repository pointing at it
_file_locks: Dict[Path, threading.Lock] = {}
_file_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    key = path.resolve()
    with _file_locks_guard:
        lock = _file_locks.get(key)
        if lock is None:
            lock = _file_locks[key] = threading.Lock()
        return lock


class LocalFileRepository(BaseRepository):
    """Repository implementation using one local JSON file per collection"""

    def __init__(
        self,
        resource: ResourceConfig,
        settings: Optional[Settings] = None,
        path: Optional[Path] = None
    ):
        self.resource = resource
        self.settings = settings or get_settings()
        self.path = Path(path) if path is not None else self.settings.db_dir / resource.filename
        self._write_lock = _lock_for(self.path)

        logger.info(f"LocalFileRepository[{resource.name}] initialized with store: {self.path}")

    # ---- reads ----

    def list_records(self) -> List[Dict[str, Any]]:
        """Load the whole collection from disk (no caching)"""
        return read_collection(self.path)

    def get_by_id(self, record_id: str) -> Dict[str, Any]:
        _, record = self._locate(self.list_records(), record_id)
        return record

    def find(self, predicate: Predicate) -> Iterator[Dict[str, Any]]:
        # list_records() runs now, so storage errors surface at call time
        return (record for record in self.list_records() if predicate(record))

    # ---- writes ----

    def create(
        self,
        fields: Mapping[str, Any],
        required_fields: Optional[Sequence[str]] = None
    ) -> Dict[str, Any]:
        required = tuple(required_fields) if required_fields is not None else self.resource.required_fields
        missing = missing_required_fields(fields, required)
        if missing:
            logger.debug(f"{self.resource.label} rejected, missing fields: {missing}")
            raise ValidationError(missing, resource=self.resource.name)

        with self._write_lock:
            records = self.list_records()
            existing_ids = {r.get("id") for r in records}

            new_id = str(uuid.uuid4())
            while new_id in existing_ids:
                new_id = str(uuid.uuid4())

            # id first; a caller-supplied id is ignored
            record: Dict[str, Any] = {"id": new_id}
            record.update((k, v) for k, v in fields.items() if k != "id")
            self._normalize_dates(record, record.keys())

            records.append(record)
            atomic_write_json(records, self.path)

        logger.info(f"{self.resource.label} created: {new_id} ({len(records)} records)")
        return record

    def update(self, record_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
        with self._write_lock:
            records = self.list_records()
            index, current = self._locate(records, record_id)

            if not fields:
                logger.debug(f"{self.resource.label} {record_id}: empty update, nothing to do")
                return current

            merged = {**current, **fields}
            merged["id"] = current["id"]
            self._normalize_dates(merged, fields.keys())

            if merged == current:
                logger.debug(f"{self.resource.label} {record_id}: update changes nothing")
                return current

            records[index] = merged
            atomic_write_json(records, self.path)

        logger.info(f"{self.resource.label} updated: {record_id} (fields: {sorted(fields)})")
        return merged

    def delete(self, record_id: str) -> Dict[str, Any]:
        with self._write_lock:
            records = self.list_records()
            index, _ = self._locate(records, record_id)
            removed = records.pop(index)
            atomic_write_json(records, self.path)

        logger.info(f"{self.resource.label} deleted: {record_id} ({len(records)} records left)")
        return removed

    # ---- helpers ----

    def _locate(self, records: List[Dict[str, Any]], record_id: str) -> Tuple[int, Dict[str, Any]]:
        for index, record in enumerate(records):
            if record.get("id") == record_id:
                return index, record
        logger.debug(f"{self.resource.label} not found: {record_id}")
        raise NotFoundError(self.resource.label, record_id)

    def _normalize_dates(self, record: Dict[str, Any], touched) -> None:
        """Canonicalize configured date fields that the caller supplied"""
        for name in self.resource.date_fields:
            if name in touched:
                record[name] = canonicalize_date(record.get(name))
