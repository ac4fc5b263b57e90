"""
PHP Blueprint HistoryLedger

Append-only, size-bounded log of successful generations, persisted as one
JSON array (most recent first) in its own storage namespace.

Record ids are the ISO-8601 UTC instant of insertion, matching the format
browsers produce (``2025-01-31T09:15:02.123Z``). Should two appends land on
the same millisecond, the later id is bumped forward one millisecond at a
time until it is unique.
"""

import json
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterator, List, Optional

from pydantic import ValidationError

from php_blueprint.core.config import HISTORY_MAX_ENTRIES, HISTORY_NAMESPACE
from php_blueprint.core.errors import (
    PersistenceCorruptError,
    PersistenceReadError,
    PersistenceWriteError,
)
from php_blueprint.models.generation import GenerationRecord
from php_blueprint.models.spec import ProjectSpec
from php_blueprint.storage.record_store import RecordStore

logger = logging.getLogger("blueprint.history")

Clock = Callable[[], datetime]
ConfirmPredicate = Callable[[], bool]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def refuse() -> bool:
    """Default confirmation: destructive actions need an explicit yes."""
    return False


def to_iso_millis(instant: datetime) -> str:
    """Format as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    instant = instant.astimezone(timezone.utc)
    return instant.strftime("%Y-%m-%dT%H:%M:%S.") + f"{instant.microsecond // 1000:03d}Z"


class HistoryLedger:
    """
    Durable generation history.

    Usage:
        ledger = HistoryLedger(JsonFileRecordStore(".blueprint"))
        record = ledger.append(spec, plan_markdown)
        ledger.remove(record.id)
        ledger.clear(confirm=lambda: True)
    """

    def __init__(
        self,
        storage: RecordStore,
        namespace: str = HISTORY_NAMESPACE,
        max_entries: int = HISTORY_MAX_ENTRIES,
        clock: Clock = utc_now,
        confirm: ConfirmPredicate = refuse,
    ):
        self._storage = storage
        self.namespace = namespace
        self.max_entries = max_entries
        self._clock = clock
        self._confirm = confirm
        self._records: List[GenerationRecord] = self.load_all()

    # =========================================================================
    # READ
    # =========================================================================

    @property
    def records(self) -> List[GenerationRecord]:
        """Current entries, most recent first (a copy of the list)."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[GenerationRecord]:
        return iter(list(self._records))

    def get(self, record_id: str) -> Optional[GenerationRecord]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def load_all(self) -> List[GenerationRecord]:
        """
        Read the persisted history.

        Missing, unreadable or corrupt data yields an empty list. Individual
        entries that fail validation are skipped.
        """
        try:
            text = self._storage.read(self.namespace)
            if text is None:
                return []
            try:
                raw = json.loads(text)
            except json.JSONDecodeError as e:
                raise PersistenceCorruptError(self.namespace, f"Invalid JSON: {e}") from e
            if not isinstance(raw, list):
                raise PersistenceCorruptError(self.namespace, "History record is not a JSON array")
        except (PersistenceReadError, PersistenceCorruptError) as e:
            logger.warning(f"[HISTORY] Failed to load history, starting empty: {e}")
            return []

        records: List[GenerationRecord] = []
        for entry in raw:
            try:
                records.append(GenerationRecord.model_validate(entry))
            except ValidationError as e:
                logger.warning(f"[HISTORY] Skipping invalid history entry: {e.error_count()} error(s)")
        return records[: self.max_entries]

    # =========================================================================
    # WRITE
    # =========================================================================

    def _persist(self) -> None:
        payload = [record.to_record() for record in self._records]
        try:
            self._storage.write(self.namespace, json.dumps(payload))
        except PersistenceWriteError as e:
            logger.error(f"[HISTORY] Failed to persist history: {e}")

    def _next_id(self) -> str:
        instant = self._clock()
        taken = {record.id for record in self._records}
        record_id = to_iso_millis(instant)
        while record_id in taken:
            instant += timedelta(milliseconds=1)
            record_id = to_iso_millis(instant)
        return record_id

    def append(self, spec: ProjectSpec, plan: str) -> GenerationRecord:
        """
        Record a successful generation.

        Prepends the record, keeps only the most recent ``max_entries`` and
        persists.
        """
        record_id = self._next_id()
        record = GenerationRecord(
            id=record_id,
            spec=spec.model_copy(deep=True),
            plan=plan,
            timestamp=record_id,
        )
        self._records = [record, *self._records][: self.max_entries]
        self._persist()
        logger.info(f"[HISTORY] Appended {record.id} ('{spec.project_name}'), {len(self._records)} entries")
        return record

    def remove(self, record_id: str) -> None:
        """Delete one entry. Unknown ids are ignored."""
        remaining = [record for record in self._records if record.id != record_id]
        if len(remaining) == len(self._records):
            logger.debug(f"[HISTORY] Remove ignored, no entry {record_id}")
            return
        self._records = remaining
        self._persist()

    def clear(self, confirm: Optional[ConfirmPredicate] = None) -> bool:
        """
        Delete every entry once the confirmation predicate agrees.

        Args:
            confirm: Predicate asked before clearing; defaults to the one
                given at construction (which refuses unless overridden)

        Returns:
            True if the ledger was cleared
        """
        predicate = confirm or self._confirm
        if not predicate():
            logger.info("[HISTORY] Clear not confirmed, history kept")
            return False
        self._records = []
        self._persist()
        logger.info("[HISTORY] History cleared")
        return True
