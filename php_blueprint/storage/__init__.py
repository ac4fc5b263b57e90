"""
PHP Blueprint Storage

Durable record stores used by the ConfigStore and HistoryLedger.
"""

from php_blueprint.storage.record_store import (
    RecordStore,
    JsonFileRecordStore,
    InMemoryRecordStore,
)

__all__ = [
    "RecordStore",
    "JsonFileRecordStore",
    "InMemoryRecordStore",
]
