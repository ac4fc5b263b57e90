"""
Framework Presets

Static, per-framework recommendations applied when the user switches
framework. Each preset carries:
- composer_packages: packages recommended for the framework
- key_commands: the framework's everyday commands
- database_layer: its native DB layer / ORM
- auth_method: its idiomatic authentication
- psr_standards: PSRs the framework follows
- design_patterns: patterns the framework encourages

Applying a preset is asymmetric. Packages, PSRs and patterns are additive
recommendations, so they are unioned into the spec. Commands, DB layer and
auth are framework-exclusive facts, so they replace what was there.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from php_blueprint.models.spec import ProjectSpec

logger = logging.getLogger("blueprint.presets")


@dataclass(frozen=True)
class FrameworkPreset:
    """Immutable patch of spec fields associated with one framework."""
    composer_packages: tuple
    key_commands: tuple
    database_layer: str
    auth_method: str
    psr_standards: tuple
    design_patterns: tuple

    def to_record(self) -> Dict[str, object]:
        return {
            "composerPackages": list(self.composer_packages),
            "keyCommands": list(self.key_commands),
            "databaseLayer": self.database_layer,
            "authMethod": self.auth_method,
            "psrStandards": list(self.psr_standards),
            "designPatterns": list(self.design_patterns),
        }


# =============================================================================
# PRESETS
# =============================================================================

FRAMEWORK_PRESETS: Dict[str, FrameworkPreset] = {
    "Laravel": FrameworkPreset(
        composer_packages=(
            "laravel/sanctum",
            "spatie/laravel-query-builder",
            "pestphp/pest-plugin-laravel",
            "spatie/laravel-permission",
            "laravel/horizon",
        ),
        key_commands=(
            "composer install",
            "php artisan serve",
            "php artisan migrate --seed",
            "./vendor/bin/pest",
            "php artisan horizon",
        ),
        database_layer="Eloquent ORM",
        auth_method="Laravel Sanctum",
        psr_standards=("PSR-12", "PSR-4"),
        design_patterns=("Repository Pattern", "Service Container (DI)", "API Resources", "DTOs"),
    ),
    "Symfony": FrameworkPreset(
        composer_packages=(
            "symfony/orm-pack",
            "symfony/maker-bundle",
            "symfony/security-bundle",
            "lexik/jwt-authentication-bundle",
            "api-platform/core",
        ),
        key_commands=(
            "composer install",
            "symfony server:start",
            "php bin/console doctrine:migrations:migrate",
            "./bin/phpunit",
        ),
        database_layer="Doctrine",
        auth_method="JWT (JSON Web Tokens)",
        psr_standards=("PSR-12", "PSR-4", "PSR-7", "PSR-11"),
        design_patterns=("Service Container (DI)", "Repository Pattern", "DTOs", "Middleware"),
    ),
    "Custom / Vanilla PHP": FrameworkPreset(
        composer_packages=(
            "vlucas/phpdotenv",
            "monolog/monolog",
            "league/route",
            "php-di/php-di",
            "illuminate/database",
        ),
        key_commands=(
            "composer install",
            "php -S localhost:8000 -t public",
            "vendor/bin/phinx migrate",
            "vendor/bin/phpunit",
        ),
        database_layer="Plain PDO",
        auth_method="JWT (JSON Web Tokens)",
        psr_standards=("PSR-12", "PSR-4", "PSR-7", "PSR-15"),
        design_patterns=("Service Container (DI)", "Middleware", "Factory Pattern"),
    ),
}


def resolve(framework: str) -> Optional[FrameworkPreset]:
    """Get the preset for a framework, or None if it has none."""
    return FRAMEWORK_PRESETS.get(framework)


def _union(current: Iterable[str], additions: Iterable[str]) -> List[str]:
    # Keeps first-seen order: current entries, then new preset entries
    return list(dict.fromkeys([*current, *additions]))


def apply_preset(current: ProjectSpec, framework: str) -> ProjectSpec:
    """
    Switch framework and merge its preset into the spec.

    Args:
        current: Spec before the switch (left untouched)
        framework: Newly selected framework name

    Returns:
        New ProjectSpec. ``framework`` is always updated; other fields only
        change when the framework has a preset.
    """
    preset = resolve(framework)
    update: Dict[str, object] = {"framework": framework}

    if preset is None:
        logger.debug(f"[PRESET] No preset for '{framework}', only the framework field changes")
        return current.model_copy(update=update, deep=True)

    update.update({
        "composer_packages": _union(current.composer_packages, preset.composer_packages),
        "psr_standards": _union(current.psr_standards, preset.psr_standards),
        "design_patterns": _union(current.design_patterns, preset.design_patterns),
        "key_commands": list(preset.key_commands),
        "database_layer": preset.database_layer,
        "auth_method": preset.auth_method,
    })
    logger.info(f"[PRESET] Applied '{framework}' preset")
    return current.model_copy(update=update, deep=True)


def list_presets() -> Dict[str, Dict[str, object]]:
    """All presets in their wire shape, keyed by framework name."""
    return {name: preset.to_record() for name, preset in FRAMEWORK_PRESETS.items()}
