# services/record_store.py
from dataclasses import replace
from typing import Any, List, Optional
from uuid import uuid4

from data.repository import DataRepository
from utils.logger import get_logger


class RecordStore:
    """
    In-memory collection of one record type, persisted as a whole.

    Subclasses set `slot` (storage key) and `record_type` (a dataclass with
    `id`, `to_dict()` and `from_dict()`).

    - The collection is loaded once, at construction.
    - Every add/update/delete writes the full collection back via the
      repository before returning.
    - Records are held by value: callers get copies, so editing a returned
      record does nothing until it is passed to update().
    """

    slot: str = ""
    record_type: Any = None

    def __init__(self, repo: DataRepository):
        self.repo = repo
        self.logger = get_logger(f"store.{self.slot}")
        self._records: List[Any] = self._load()

    # persistence

    def _load(self) -> List[Any]:
        raw = self.repo.load(self.slot)
        try:
            records = [self.record_type.from_dict(item) for item in raw]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            # One bad record means the stored schema is not ours: start empty
            self.logger.warning(
                f"Could not decode slot '{self.slot}' ({e!r}); starting with an empty collection"
            )
            return []
        self._reassign_duplicate_ids(records)
        self.logger.info(f"Loaded {len(records)} record(s) from slot '{self.slot}'")
        return records

    def _reassign_duplicate_ids(self, records: List[Any]) -> None:
        # Ids must be unique (list views key rows by id); later copies get a new one
        seen = set()
        for r in records:
            if not r.id or r.id in seen:
                old_id = r.id
                r.id = str(uuid4())
                self.logger.warning(
                    f"Duplicate id {old_id!r} in slot '{self.slot}'; reassigned to {r.id}"
                )
            seen.add(r.id)

    def _commit(self, records: List[Any]) -> None:
        # Save first; memory only changes once the whole collection is on disk
        self.repo.save(self.slot, [r.to_dict() for r in records])
        self._records = records

    def _index_of(self, record_id: str) -> Optional[int]:
        for i, r in enumerate(self._records):
            if r.id == record_id:
                return i
        return None

    # queries

    def list(self) -> List[Any]:
        return [replace(r) for r in self._records]

    def find(self, record_id: str) -> Optional[Any]:
        idx = self._index_of(record_id)
        if idx is None:
            return None
        return replace(self._records[idx])

    def get(self, record_id: str) -> Any:
        # For callers that already know the id exists; a miss is a bug upstream
        record = self.find(record_id)
        if record is None:
            raise KeyError(f"No {self.slot} record with id {record_id!r}")
        return record

    def __len__(self) -> int:
        return len(self._records)

    # mutations

    def add(self, record: Any) -> Any:
        stored = self._prepare_add(replace(record))
        if not stored.id or self._index_of(stored.id) is not None:
            stored.id = str(uuid4())
        self._commit(self._records + [stored])
        self.logger.info(f"Added {self.slot} record {stored.id}")
        return replace(stored)

    def update(self, record: Any) -> bool:
        idx = self._index_of(record.id)
        if idx is None:
            self.logger.info(f"Update ignored: no {self.slot} record {record.id}")
            return False
        records = self._records[:]
        records[idx] = self._prepare_update(self._records[idx], replace(record))
        self._commit(records)
        self.logger.info(f"Updated {self.slot} record {record.id}")
        return True

    def _prepare_add(self, record: Any) -> Any:
        # Hooks for stores that derive or protect fields
        return record

    def _prepare_update(self, current: Any, incoming: Any) -> Any:
        return incoming

    def delete(self, record_id: str) -> bool:
        idx = self._index_of(record_id)
        if idx is None:
            self.logger.info(f"Delete ignored: no {self.slot} record {record_id}")
            return False
        self._commit(self._records[:idx] + self._records[idx + 1:])
        self.logger.info(f"Deleted {self.slot} record {record_id}")
        return True

    def delete_at(self, index: int) -> bool:
        # Position in list() order, as shown in the list view
        if index < 0 or index >= len(self._records):
            self.logger.info(f"Delete ignored: no {self.slot} record at position {index}")
            return False
        removed = self._records[index]
        self._commit(self._records[:index] + self._records[index + 1:])
        self.logger.info(f"Deleted {self.slot} record {removed.id} at position {index}")
        return True
