"""
Spec import / export.

Import accepts a user-supplied JSON document. It is valid only if it is an
object with non-empty string ``projectName`` and ``framework`` fields.
Export produces the pretty-printed spec and its download filename.
"""

import json
import re
from urllib.parse import quote
from typing import Any, Dict

from php_blueprint.core.errors import ImportFormatInvalidError
from php_blueprint.models.spec import ProjectSpec

REQUIRED_IMPORT_FIELDS = ("projectName", "framework")

_WHITESPACE_RUN = re.compile(r"\s+")


def parse_import(document: str | bytes) -> Dict[str, Any]:
    """
    Parse and validate an imported spec document.

    Args:
        document: Raw JSON text (or bytes) as uploaded by the user

    Returns:
        The parsed JSON object

    Raises:
        ImportFormatInvalidError: not JSON, not an object, or missing the
            required string fields
    """
    try:
        if isinstance(document, bytes):
            document = document.decode("utf-8")
        data = json.loads(document)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ImportFormatInvalidError(ImportFormatInvalidError.PARSE_FAILED, detail=str(e)) from e

    if not isinstance(data, dict):
        raise ImportFormatInvalidError(detail="document is not a JSON object")

    for field in REQUIRED_IMPORT_FIELDS:
        value = data.get(field)
        if not isinstance(value, str) or not value:
            raise ImportFormatInvalidError(detail=f"missing or empty '{field}'")

    return data


def export_filename(spec: ProjectSpec) -> str:
    """``My  Cool API`` -> ``My_Cool_API_spec.json``"""
    return f"{_WHITESPACE_RUN.sub('_', spec.project_name)}_spec.json"


def export_document(spec: ProjectSpec) -> str:
    """Serialize the spec as the JSON document users download."""
    return json.dumps(spec.to_record(), indent=2, ensure_ascii=False)


def export_content_disposition(spec: ProjectSpec) -> str:
    """
    ``Content-Disposition`` value for the export download.

    HTTP headers are latin-1, so the plain ``filename`` carries an ASCII
    fallback (non-ASCII characters become ``_``, quotes and backslashes are
    escaped) and ``filename*`` carries the exact UTF-8 name (RFC 6266).
    """
    filename = export_filename(spec)
    fallback = "".join(char if " " <= char <= "~" else "_" for char in filename)
    fallback = fallback.replace("\\", "\\\\").replace('"', '\\"')
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"
