"""
PHP Blueprint Core Module

Provides centralized configuration, logging and the error taxonomy.
"""

from php_blueprint.core.logger import (
    setup_logging,
    get_logger,
    dev_log,
    truncate_for_log,
    log_timing,
    SensitiveDataFilter,
)
from php_blueprint.core.config import IS_DEV
from php_blueprint.core.errors import (
    BlueprintError,
    PersistenceError,
    PersistenceWriteError,
    PersistenceReadError,
    PersistenceCorruptError,
    UnknownSpecFieldError,
    SpecValidationError,
    ImportFormatInvalidError,
    GenerationFailedError,
    GenerationInProgressError,
    HistoryRecordNotFoundError,
    GENERATION_FAILED_MESSAGE,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "dev_log",
    "truncate_for_log",
    "log_timing",
    "SensitiveDataFilter",
    "IS_DEV",
    # Errors
    "BlueprintError",
    "PersistenceError",
    "PersistenceWriteError",
    "PersistenceReadError",
    "PersistenceCorruptError",
    "UnknownSpecFieldError",
    "SpecValidationError",
    "ImportFormatInvalidError",
    "GenerationFailedError",
    "GenerationInProgressError",
    "HistoryRecordNotFoundError",
    "GENERATION_FAILED_MESSAGE",
]
