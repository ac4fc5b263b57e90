"""
Blueprint session.

One session owns the ConfigStore, HistoryLedger and GenerationOrchestrator
for a user. The web app builds exactly one at startup; tests build their
own over an in-memory store and a fake generator.
"""

import logging
from pathlib import Path
from typing import Optional

from php_blueprint.core.config import (
    DATA_DIR,
    HISTORY_MAX_ENTRIES,
    HISTORY_NAMESPACE,
    SPEC_NAMESPACE,
)
from php_blueprint.core.errors import HistoryRecordNotFoundError
from php_blueprint.models.generation import GenerationRecord
from php_blueprint.services.config_store import ConfigStore
from php_blueprint.services.gemini_client import GeminiPlanClient, PlanGenerator
from php_blueprint.services.generation import GenerationOrchestrator, GenerationOutcome
from php_blueprint.services.history_ledger import HistoryLedger
from php_blueprint.storage.record_store import JsonFileRecordStore, RecordStore

logger = logging.getLogger("blueprint.session")


class BlueprintSession:
    """Wires the spec store, history and generation together."""

    def __init__(
        self,
        storage: RecordStore,
        generator: PlanGenerator,
        spec_namespace: str = SPEC_NAMESPACE,
        history_namespace: str = HISTORY_NAMESPACE,
        max_history: int = HISTORY_MAX_ENTRIES,
    ):
        self.config = ConfigStore(storage, namespace=spec_namespace)
        self.history = HistoryLedger(storage, namespace=history_namespace, max_entries=max_history)
        self.generation = GenerationOrchestrator(generator, self.history)

    async def generate(self) -> GenerationOutcome:
        """Generate a plan from the current spec."""
        return await self.generation.generate(self.config.snapshot())

    def load_history_item(self, record_id: str) -> GenerationRecord:
        """
        Restore a past generation: its spec becomes the current spec and its
        plan becomes the displayed plan.

        Raises:
            HistoryRecordNotFoundError: no entry with that id
        """
        record = self.history.get(record_id)
        if record is None:
            raise HistoryRecordNotFoundError(record_id)
        self.generation.show_history_item(record)
        self.config.replace(record.spec)
        logger.info(f"[SESSION] Loaded history item {record_id}")
        return record


def create_session(
    data_dir: str | Path = DATA_DIR,
    generator: Optional[PlanGenerator] = None,
) -> BlueprintSession:
    """Build a session over JSON files in ``data_dir`` and Gemini."""
    logger.info(f"[SESSION] Using data directory {Path(data_dir).resolve()}")
    return BlueprintSession(
        storage=JsonFileRecordStore(data_dir),
        generator=generator or GeminiPlanClient(),
    )
