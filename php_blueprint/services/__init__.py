"""
PHP Blueprint Services

Spec store, presets, history, generation and import/export.
"""

from php_blueprint.services.config_store import ConfigStore
from php_blueprint.services.history_ledger import HistoryLedger, to_iso_millis
from php_blueprint.services.gemini_client import (
    PlanGenerator,
    GeminiPlanClient,
    build_generate_config,
)
from php_blueprint.services.generation import (
    GenerationState,
    GenerationOutcome,
    GenerationOrchestrator,
)
from php_blueprint.services.spec_transfer import (
    parse_import,
    export_filename,
    export_document,
    export_content_disposition,
)
from php_blueprint.services.session import BlueprintSession, create_session

__all__ = [
    "ConfigStore",
    "HistoryLedger",
    "to_iso_millis",
    "PlanGenerator",
    "GeminiPlanClient",
    "build_generate_config",
    "GenerationState",
    "GenerationOutcome",
    "GenerationOrchestrator",
    "parse_import",
    "export_filename",
    "export_document",
    "export_content_disposition",
    "BlueprintSession",
    "create_session",
]
