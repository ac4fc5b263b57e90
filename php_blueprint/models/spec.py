"""
PHP Blueprint - Project Spec Model

ProjectSpec is the structured record of everything the user chose for their
PHP project, plus the generation parameters. Field names are snake_case in
Python and camelCase on the wire / on disk (the browser format).
"""

import copy
import logging
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger("blueprint.models.spec")

ProjectType = Literal["API", "Marketplace", "CMS-based Website", "Internal Tool", "Library", "Custom"]


class ProjectSpec(BaseModel):
    """
    Full project/generation configuration.

    Lists edited through repeatable inputs (coreFeatures, frontendStack,
    composerPackages, monologChannels, keyCommands) are ordered. Lists edited
    through checkboxes (webServer, psrStandards, designPatterns) are
    treated as sets by the UI but stored as lists.
    """

    model_config = ConfigDict(populate_by_name=True)

    # Identity
    project_name: str = Field(alias="projectName", min_length=1)
    project_type: ProjectType = Field(alias="projectType")
    goal: str = ""
    core_features: List[str] = Field(default_factory=list, alias="coreFeatures")

    # Tech Stack Breakdown
    php_version: str = Field(alias="phpVersion")
    framework: str
    web_server: List[str] = Field(default_factory=list, alias="webServer")
    database: str
    frontend_stack: List[str] = Field(default_factory=list, alias="frontendStack")

    # PHP Specifics
    composer_packages: List[str] = Field(default_factory=list, alias="composerPackages")
    psr_standards: List[str] = Field(default_factory=list, alias="psrStandards")

    # Architecture
    database_layer: str = Field(alias="databaseLayer")
    use_migrations: bool = Field(alias="useMigrations")
    auth_method: str = Field(alias="authMethod")
    design_patterns: List[str] = Field(default_factory=list, alias="designPatterns")

    # Advanced Architecture
    caching_layer: str = Field(alias="cachingLayer")
    queue_system: str = Field(alias="queueSystem")
    monolog_channels: List[str] = Field(default_factory=list, alias="monologChannels")
    use_api_rate_limiting: bool = Field(alias="useApiRateLimiting")
    is_api_first: bool = Field(alias="isApiFirst")

    # Development
    key_commands: List[str] = Field(default_factory=list, alias="keyCommands")

    # AI Generation Settings
    model: str
    temperature: float = Field(ge=0.0, le=1.0)
    top_p: float = Field(alias="topP", ge=0.01, le=1.0)
    enable_thinking: bool = Field(alias="enableThinking")

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the camelCase JSON shape used on disk and over HTTP."""
        return self.model_dump(mode="json", by_alias=True)


# =============================================================================
# FIELD METADATA
# =============================================================================

# python name -> wire alias
SPEC_FIELD_ALIASES: Dict[str, str] = {
    name: (info.alias or name) for name, info in ProjectSpec.model_fields.items()
}

# wire alias -> python name
_ALIAS_TO_NAME: Dict[str, str] = {alias: name for name, alias in SPEC_FIELD_ALIASES.items()}

LIST_FIELDS = frozenset({
    "core_features",
    "web_server",
    "frontend_stack",
    "composer_packages",
    "psr_standards",
    "design_patterns",
    "monolog_channels",
    "key_commands",
})

# Fields that arrive as text from range inputs and must be parsed as floats
NUMERIC_FIELDS = frozenset({"temperature", "top_p"})


def spec_field_name(key: str) -> Optional[str]:
    """Resolve a wire alias or python name to the python field name."""
    if key in SPEC_FIELD_ALIASES:
        return key
    return _ALIAS_TO_NAME.get(key)


def merge_spec_fields(base: Dict[str, Any], *layers: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge spec records field by field.

    Precedence is positional: ``base`` is overridden by each layer in turn,
    so callers pass layers as defaults < persisted < imported patch < live
    edits. Keys may be wire aliases or python names; the result is keyed by
    wire alias. Keys that are not spec fields are dropped.

    Args:
        base: Lowest-precedence record (normally the defaults)
        *layers: Higher-precedence partial records

    Returns:
        New dict keyed by wire alias
    """
    merged: Dict[str, Any] = {}
    for record in (base, *layers):
        for key, value in record.items():
            name = spec_field_name(key)
            if name is None:
                logger.debug(f"[SPEC] Dropping unknown field during merge: {key}")
                continue
            merged[SPEC_FIELD_ALIASES[name]] = copy.deepcopy(value)
    return merged


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_SPEC_DATA: Dict[str, Any] = {
    "projectName": "Modern Laravel API with Redis",
    "projectType": "API",
    "goal": (
        "To create a robust and scalable API backend for a SaaS product, "
        "focusing on performance and maintainability."
    ),
    "coreFeatures": [
        "User Authentication (JWT/Sanctum)",
        "Team & Subscription Management",
        "CRUD endpoints for Products",
        "Background Job Processing",
    ],
    "phpVersion": "8.3",
    "framework": "Laravel",
    "webServer": ["Nginx"],
    "database": "PostgreSQL",
    "frontendStack": ["Vue.js with Inertia.js"],
    "composerPackages": [
        "laravel/sanctum",
        "spatie/laravel-query-builder",
        "pestphp/pest-plugin-laravel",
        "spatie/laravel-permission",
        "laravel/horizon",
    ],
    "psrStandards": ["PSR-12", "PSR-4", "PSR-7"],
    "databaseLayer": "Eloquent ORM",
    "useMigrations": True,
    "authMethod": "Laravel Sanctum",
    "designPatterns": ["Repository Pattern", "Service Container (DI)", "API Resources", "DTOs"],
    "cachingLayer": "Redis",
    "queueSystem": "Redis (Horizon)",
    "monologChannels": ["daily", "slack"],
    "useApiRateLimiting": True,
    "isApiFirst": True,
    "keyCommands": [
        "composer install",
        "php artisan serve",
        "php artisan migrate --seed",
        "./vendor/bin/pest",
        "php artisan horizon",
    ],
    "model": "gemini-2.5-pro",
    "temperature": 0.1,
    "topP": 0.95,
    "enableThinking": True,
}


def default_spec() -> ProjectSpec:
    """Return a fresh copy of the built-in starting spec."""
    return ProjectSpec.model_validate(copy.deepcopy(DEFAULT_SPEC_DATA))
