# data/repository.py
import json
import os
from pathlib import Path

from config import Config
from utils.logger import get_logger

logger = get_logger(__name__)

# Named slots used by the three stores
SERVICES_SLOT = "services"
CUSTOMERS_SLOT = "customers"
ORDERS_SLOT = "orders"


class DataRepository:
    # Key-value storage: each slot is one JSON file holding a whole collection.
    # Stores only talk to load()/save(), so the file layout can change freely.

    def __init__(self, storage_dir: Path | str | None = None):
        # base folder where all JSON data lives
        self.storage_dir = Path(storage_dir) if storage_dir is not None else Config.STORAGE_DIR
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def _file_path(self, slot: str) -> Path:
        return self.storage_dir / f"{slot}.json"

    def _read_json(self, slot: str):
        # Load JSON from disk. Missing, empty or unreadable files come back
        # as None so the caller can fall back to an empty collection.
        path = self._file_path(slot)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read().strip()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read slot '{slot}' from {path}: {e}")
            return None
        if text == "":
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning(f"Slot '{slot}' is not valid JSON, ignoring it: {e}")
            return None

    def _write_json(self, slot: str, data) -> None:
        # Serialize fully before touching disk, then swap the file in whole,
        # so a failed save leaves the previous contents readable.
        text = json.dumps(data, indent=2, ensure_ascii=False)
        path = self._file_path(slot)
        tmp_path = path.with_name(path.name + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_path, path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

    def load(self, slot: str) -> list[dict]:
        data = self._read_json(slot)
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning(f"Slot '{slot}' does not hold a list, treating it as empty")
            return []
        return data

    def save(self, slot: str, records: list[dict]) -> None:
        # Always the full collection, never a diff
        self._write_json(slot, records)
        logger.debug(f"Saved {len(records)} record(s) to slot '{slot}'")
