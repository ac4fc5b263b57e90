"""
Tests for spec import/export documents
"""

import json

import pytest

from php_blueprint.core.errors import ImportFormatInvalidError
from php_blueprint.models.spec import default_spec
from php_blueprint.services.spec_transfer import (
    export_content_disposition,
    export_document,
    export_filename,
    parse_import,
)


class TestParseImport:
    """Tests for import validation."""

    def test_valid_document(self):
        data = parse_import('{"projectName": "Shop", "framework": "Symfony", "extra": 1}')

        assert data == {"projectName": "Shop", "framework": "Symfony", "extra": 1}

    @pytest.mark.parametrize("document", [
        '{"projectName": "Shop"}',
        '{"framework": "Laravel"}',
        '{"projectName": "", "framework": "Laravel"}',
        '{"projectName": 5, "framework": "Laravel"}',
        '["projectName", "framework"]',
        '"just a string"',
    ])
    def test_invalid_format(self, document):
        with pytest.raises(ImportFormatInvalidError) as exc_info:
            parse_import(document)

        assert exc_info.value.user_message == "Invalid spec file format."

    @pytest.mark.parametrize("document", ["{oops", b"\xff\xfe\x00", ""])
    def test_unparseable(self, document):
        with pytest.raises(ImportFormatInvalidError) as exc_info:
            parse_import(document)

        assert exc_info.value.user_message == "Failed to parse the spec file."


class TestExport:
    """Tests for export documents."""

    def test_filename_collapses_whitespace(self):
        spec = default_spec().model_copy(update={"project_name": "My  Cool\tAPI"})

        assert export_filename(spec) == "My_Cool_API_spec.json"

    def test_document_is_pretty_camel_case_json(self):
        spec = default_spec()

        document = export_document(spec)

        assert document.startswith('{\n  "projectName"')
        assert json.loads(document) == spec.to_record()

    def test_export_then_import_round_trip(self):
        spec = default_spec()

        data = parse_import(export_document(spec))

        assert data["projectName"] == spec.project_name
        assert data["framework"] == spec.framework


class TestContentDisposition:
    """Tests for the export download header."""

    def test_ascii_name(self):
        spec = default_spec().model_copy(update={"project_name": "Shop API"})

        assert export_content_disposition(spec) == (
            "attachment; filename=\"Shop_API_spec.json\"; filename*=UTF-8''Shop_API_spec.json"
        )

    def test_non_ascii_name_has_ascii_fallback(self):
        spec = default_spec().model_copy(update={"project_name": "Café 🚀"})

        value = export_content_disposition(spec)

        assert 'filename="Caf____spec.json"' in value
        assert "filename*=UTF-8''Caf%C3%A9_%F0%9F%9A%80_spec.json" in value
        value.encode("latin-1")

    def test_quotes_and_backslashes_escaped(self):
        spec = default_spec().model_copy(update={"project_name": 'a"b\\c'})

        value = export_content_disposition(spec)

        assert 'filename="a\\"b\\\\c_spec.json"' in value
        assert "filename*=UTF-8''a%22b%5Cc_spec.json" in value
