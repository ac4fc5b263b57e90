"""
PHP Blueprint ConfigStore

Holds the session's ProjectSpec and mirrors it to durable storage after
every mutation.

Merge precedence (lowest to highest):
    defaults < persisted record < imported document < live edits

Storage failures never abort a mutation: the in-memory spec stays
authoritative for the session and the failure is logged.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from php_blueprint.core.config import SPEC_NAMESPACE
from php_blueprint.core.errors import (
    ImportFormatInvalidError,
    PersistenceCorruptError,
    PersistenceReadError,
    PersistenceWriteError,
    SpecValidationError,
    UnknownSpecFieldError,
)
from php_blueprint.models.spec import (
    LIST_FIELDS,
    NUMERIC_FIELDS,
    SPEC_FIELD_ALIASES,
    ProjectSpec,
    default_spec,
    merge_spec_fields,
    spec_field_name,
)
from php_blueprint.prompts.framework_presets import apply_preset
from php_blueprint.services.spec_transfer import parse_import
from php_blueprint.storage.record_store import RecordStore

logger = logging.getLogger("blueprint.config_store")


class ConfigStore:
    """
    Session-owned project spec with write-through persistence.

    Usage:
        store = ConfigStore(JsonFileRecordStore(".blueprint"))
        store.update({"projectName": "Shop API"})
        store.toggle_set_membership("webServer", "Apache", present=True)
        store.change_framework("Symfony")
    """

    def __init__(
        self,
        storage: RecordStore,
        namespace: str = SPEC_NAMESPACE,
        defaults: Optional[ProjectSpec] = None,
    ):
        self._storage = storage
        self.namespace = namespace
        self._defaults = defaults or default_spec()
        self._spec = self.load()

    @property
    def spec(self) -> ProjectSpec:
        """Snapshot of the current spec (a copy; mutate through the store)."""
        return self._spec.model_copy(deep=True)

    def snapshot(self) -> ProjectSpec:
        return self.spec

    # =========================================================================
    # LOADING
    # =========================================================================

    def _read_persisted(self) -> Optional[Dict[str, Any]]:
        text = self._storage.read(self.namespace)
        if text is None:
            return None
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise PersistenceCorruptError(self.namespace, f"Invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceCorruptError(self.namespace, "Spec record is not a JSON object")
        return data

    def load(self) -> ProjectSpec:
        """
        Read the persisted spec, merged over the defaults.

        Missing or corrupt data yields the defaults. Fields present in the
        record override defaults; fields absent from it (e.g. added after the
        record was written) keep their default value. A persisted value that
        no longer validates falls back to its default.
        """
        defaults = self._defaults.to_record()
        try:
            persisted = self._read_persisted()
        except (PersistenceReadError, PersistenceCorruptError) as e:
            logger.warning(f"[CONFIG] Failed to load spec, using defaults: {e}")
            return self._defaults.model_copy(deep=True)

        if persisted is None:
            logger.debug("[CONFIG] No persisted spec, using defaults")
            return self._defaults.model_copy(deep=True)

        merged = merge_spec_fields(defaults, persisted)
        try:
            return ProjectSpec.model_validate(merged)
        except ValidationError as e:
            bad_fields = {str(err["loc"][0]) for err in e.errors() if err.get("loc")}
            logger.warning(f"[CONFIG] Persisted spec has invalid fields {sorted(bad_fields)}, using defaults for them")
            for key in bad_fields:
                name = spec_field_name(key)
                if name is not None:
                    alias = SPEC_FIELD_ALIASES[name]
                    merged[alias] = defaults[alias]
            return ProjectSpec.model_validate(merged)

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def _commit(self, spec: ProjectSpec) -> ProjectSpec:
        self._spec = spec
        self._persist()
        return self.spec

    def _persist(self) -> None:
        try:
            self._storage.write(self.namespace, json.dumps(self._spec.to_record()))
        except PersistenceWriteError as e:
            # In-memory state remains the source of truth for this session
            logger.error(f"[CONFIG] Failed to persist spec: {e}")

    def _validated(self, record: Dict[str, Any]) -> ProjectSpec:
        try:
            return ProjectSpec.model_validate(record)
        except ValidationError as e:
            raise SpecValidationError(str(e)) from e

    def update(self, patch: Dict[str, Any]) -> ProjectSpec:
        """
        Shallow-merge a partial spec over the current one.

        Keys may be wire aliases (``projectName``) or python names
        (``project_name``). ``temperature``/``topP`` given as text are
        parsed as floats first.

        Raises:
            UnknownSpecFieldError: patch names a field ProjectSpec lacks
            SpecValidationError: merged spec is invalid (nothing changes)
        """
        normalized: Dict[str, Any] = {}
        for key, value in patch.items():
            name = spec_field_name(key)
            if name is None:
                raise UnknownSpecFieldError(key)
            if name in NUMERIC_FIELDS and isinstance(value, str):
                try:
                    value = float(value)
                except ValueError as e:
                    raise SpecValidationError(f"{key} must be a number, got {value!r}") from e
            normalized[SPEC_FIELD_ALIASES[name]] = value

        spec = self._validated(merge_spec_fields(self._spec.to_record(), normalized))
        return self._commit(spec)

    def _list_field(self, field: str) -> str:
        name = spec_field_name(field)
        if name is None or name not in LIST_FIELDS:
            raise UnknownSpecFieldError(field, expected="list field")
        return name

    def set_list_field(self, field: str, values: List[str]) -> ProjectSpec:
        """Replace a whole list field (order preserved, duplicates allowed)."""
        name = self._list_field(field)
        return self.update({name: list(values)})

    def toggle_set_membership(self, field: str, value: str, present: bool) -> ProjectSpec:
        """
        Add or remove a value in a checkbox-driven list field.

        present=True appends the value if it is absent; present=False removes
        every occurrence.
        """
        name = self._list_field(field)
        current: List[str] = list(getattr(self._spec, name))
        if present:
            if value not in current:
                current.append(value)
        else:
            current = [item for item in current if item != value]
        return self.update({name: current})

    def change_framework(self, framework: str) -> ProjectSpec:
        """Select a framework and merge its preset (if any)."""
        return self._commit(apply_preset(self._spec, framework))

    def import_spec(self, document: str | bytes) -> ProjectSpec:
        """
        Merge an imported JSON document over the current spec.

        Only fields present in the document change. Unknown keys are
        ignored.

        Raises:
            ImportFormatInvalidError: invalid document (nothing changes)
        """
        data = parse_import(document)
        try:
            spec = ProjectSpec.model_validate(merge_spec_fields(self._spec.to_record(), data))
        except ValidationError as e:
            raise ImportFormatInvalidError(detail=str(e)) from e
        logger.info(f"[CONFIG] Imported spec '{spec.project_name}'")
        return self._commit(spec)

    def replace(self, spec: ProjectSpec) -> ProjectSpec:
        """Replace the whole spec (used when restoring a history item)."""
        return self._commit(spec.model_copy(deep=True))

    def reset(self) -> ProjectSpec:
        """Go back to the default spec."""
        return self._commit(self._defaults.model_copy(deep=True))
