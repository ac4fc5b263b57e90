"""
PHP Blueprint Models

Pydantic models for the project spec, generation requests and history records.
"""

from php_blueprint.models.spec import (
    ProjectSpec,
    SPEC_FIELD_ALIASES,
    LIST_FIELDS,
    NUMERIC_FIELDS,
    DEFAULT_SPEC_DATA,
    spec_field_name,
    merge_spec_fields,
    default_spec,
)
from php_blueprint.models.generation import (
    GenerationRequest,
    DebugSnapshot,
    GenerationRecord,
)
from php_blueprint.models.options import get_option_catalog

__all__ = [
    "ProjectSpec",
    "SPEC_FIELD_ALIASES",
    "LIST_FIELDS",
    "NUMERIC_FIELDS",
    "DEFAULT_SPEC_DATA",
    "spec_field_name",
    "merge_spec_fields",
    "default_spec",
    "GenerationRequest",
    "DebugSnapshot",
    "GenerationRecord",
    "get_option_catalog",
]
