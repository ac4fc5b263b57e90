"""
PHP Blueprint error taxonomy.

Storage errors are contained by the stores that hit them. Only
ImportFormatInvalidError and GenerationFailedError are meant to reach a user.
"""

from typing import Optional


class BlueprintError(Exception):
    """Base class for all PHP Blueprint errors."""


# ============================================================================
# PERSISTENCE
# ============================================================================

class PersistenceError(BlueprintError):
    """Durable storage problem."""

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(f"[{key}] {message}")


class PersistenceWriteError(PersistenceError):
    """Writing a record failed (quota, permissions, disabled storage)."""


class PersistenceReadError(PersistenceError):
    """Reading a record failed."""


class PersistenceCorruptError(PersistenceError):
    """A record was read but is not valid JSON of the expected shape."""


# ============================================================================
# SPEC EDITING
# ============================================================================

class UnknownSpecFieldError(BlueprintError):
    """A field name that does not exist (or has the wrong kind) on ProjectSpec."""

    def __init__(self, field: str, expected: str = "field"):
        self.field = field
        super().__init__(f"Unknown spec {expected}: {field}")


class SpecValidationError(BlueprintError):
    """A patch produced a value ProjectSpec does not accept."""


class ImportFormatInvalidError(BlueprintError):
    """Imported document is not JSON or lacks projectName/framework."""

    INVALID_FORMAT = "Invalid spec file format."
    PARSE_FAILED = "Failed to parse the spec file."

    def __init__(self, message: str = INVALID_FORMAT, detail: Optional[str] = None):
        self.user_message = message
        self.detail = detail
        super().__init__(message if not detail else f"{message} ({detail})")


# ============================================================================
# GENERATION / HISTORY
# ============================================================================

GENERATION_FAILED_MESSAGE = (
    "Failed to generate plan. Please ensure your API key is configured "
    "correctly and try again."
)


class GenerationFailedError(BlueprintError):
    """The generation collaborator failed (network, auth, quota, bad response)."""


class GenerationInProgressError(BlueprintError):
    """A generation is already outstanding for this session."""

    def __init__(self):
        super().__init__("A plan generation is already in progress.")


class HistoryRecordNotFoundError(BlueprintError):
    """No history record with the requested id."""

    def __init__(self, record_id: str):
        self.record_id = record_id
        super().__init__(f"History record not found: {record_id}")
