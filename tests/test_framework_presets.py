"""
Tests for framework presets

Tests cover:
- Union vs replace semantics when switching framework
- Frameworks without a preset
- Idempotence and monotonicity of the unioned lists
"""

import pytest

from php_blueprint.models.spec import default_spec
from php_blueprint.prompts.framework_presets import (
    FRAMEWORK_PRESETS,
    apply_preset,
    list_presets,
    resolve,
)


class TestResolve:
    """Tests for preset lookup."""

    def test_known_frameworks(self):
        assert set(FRAMEWORK_PRESETS) == {"Laravel", "Symfony", "Custom / Vanilla PHP"}
        assert resolve("Symfony").database_layer == "Doctrine"

    def test_unknown_framework_has_no_preset(self):
        assert resolve("CodeIgniter") is None
        assert resolve("") is None

    def test_list_presets_wire_shape(self):
        presets = list_presets()
        laravel = presets["Laravel"]

        assert laravel["authMethod"] == "Laravel Sanctum"
        assert laravel["keyCommands"][0] == "composer install"
        assert isinstance(laravel["composerPackages"], list)


class TestApplyPreset:
    """Tests for switching framework."""

    def test_custom_to_laravel(self):
        """Switching from Custom to Laravel unions lists and replaces the rest."""
        spec = default_spec().model_copy(update={
            "framework": "Custom / Vanilla PHP",
            "composer_packages": ["monolog/monolog"],
            "psr_standards": ["PSR-12"],
            "design_patterns": ["Middleware"],
            "key_commands": ["make run"],
            "database_layer": "Plain PDO",
            "auth_method": "Session-based",
        })

        result = apply_preset(spec, "Laravel")

        assert result.framework == "Laravel"
        assert result.database_layer == "Eloquent ORM"
        assert result.auth_method == "Laravel Sanctum"
        assert result.key_commands == [
            "composer install",
            "php artisan serve",
            "php artisan migrate --seed",
            "./vendor/bin/pest",
            "php artisan horizon",
        ]
        assert result.composer_packages == ["monolog/monolog", *FRAMEWORK_PRESETS["Laravel"].composer_packages]
        assert result.psr_standards == ["PSR-12", "PSR-4"]
        assert result.design_patterns == [
            "Middleware",
            "Repository Pattern",
            "Service Container (DI)",
            "API Resources",
            "DTOs",
        ]

    def test_union_has_no_duplicates(self):
        spec = default_spec().model_copy(update={"psr_standards": ["PSR-4", "PSR-7"]})

        result = apply_preset(spec, "Symfony")

        assert result.psr_standards == ["PSR-4", "PSR-7", "PSR-12", "PSR-11"]
        assert len(result.psr_standards) == len(set(result.psr_standards))

    def test_unknown_framework_only_changes_framework(self):
        spec = default_spec()

        result = apply_preset(spec, "CodeIgniter")

        assert result.framework == "CodeIgniter"
        assert result.model_dump(exclude={"framework"}) == spec.model_dump(exclude={"framework"})

    @pytest.mark.parametrize("framework", sorted(FRAMEWORK_PRESETS))
    def test_unioned_lists_only_grow(self, framework):
        spec = default_spec()

        result = apply_preset(spec, framework)

        for field in ("composer_packages", "psr_standards", "design_patterns"):
            assert set(getattr(spec, field)) <= set(getattr(result, field))

    @pytest.mark.parametrize("framework", sorted(FRAMEWORK_PRESETS))
    def test_applying_twice_is_idempotent(self, framework):
        once = apply_preset(default_spec(), framework)
        twice = apply_preset(once, framework)

        assert twice == once

    def test_input_spec_is_not_mutated(self):
        spec = default_spec()
        before = spec.model_dump()

        apply_preset(spec, "Custom / Vanilla PHP")

        assert spec.model_dump() == before
