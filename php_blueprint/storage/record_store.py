"""
PHP Blueprint Durable Record Storage

Namespaced key/value storage for the two durable records (spec, history).
Stores speak plain text (the JSON document); parsing and validation belong
to the ConfigStore / HistoryLedger that own each record.

Implementations:
- JsonFileRecordStore: one ``<key>.json`` file per record under a data
  directory, written atomically (write-then-rename)
- InMemoryRecordStore: dict-backed, for tests and ephemeral sessions

Contract:
    read(key)  -> text, or None when the record does not exist
                  raises PersistenceReadError if it exists but can't be read
    write(key, text)
                  raises PersistenceWriteError on failure
"""

import logging
import re
from pathlib import Path
from typing import Dict, Optional, Protocol

from php_blueprint.core.errors import PersistenceReadError, PersistenceWriteError

logger = logging.getLogger("blueprint.storage")

_SAFE_KEY = re.compile(r"[^A-Za-z0-9_.-]")


class RecordStore(Protocol):
    """Port for durable, namespaced records."""

    def read(self, key: str) -> Optional[str]:
        ...

    def write(self, key: str, text: str) -> None:
        ...


class JsonFileRecordStore:
    """
    File-backed record store.

    Usage:
        store = JsonFileRecordStore(".blueprint")
        store.write("ai-php-project-spec", json.dumps(data))
        text = store.read("ai-php-project-spec")
    """

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def path_for(self, key: str) -> Path:
        """Get the file path for a record key (unsafe characters replaced)."""
        return self.root / f"{_SAFE_KEY.sub('_', key)}.json"

    def read(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceReadError(key, f"Failed to read {path}: {e}") from e

    def write(self, key: str, text: str) -> None:
        path = self.path_for(key)
        temp_path = path.with_suffix(".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(text, encoding="utf-8")
            # Atomic rename (works on most filesystems)
            temp_path.replace(path)
        except OSError as e:
            if temp_path.exists():
                temp_path.unlink()
            raise PersistenceWriteError(key, f"Failed to write {path}: {e}") from e
        logger.debug(f"[STORAGE] Wrote {key} ({len(text)} chars)")


class InMemoryRecordStore:
    """Dict-backed record store. Nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.records: Dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self.records.get(key)

    def write(self, key: str, text: str) -> None:
        self.records[key] = text
