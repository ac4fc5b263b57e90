"""
Option catalogs offered by the project form.

These populate the selects/checkbox groups of the UI. Only the project type
is enforced on stored specs; the other fields accept free text, as imported
documents may carry values outside these lists.
"""

from typing import Dict, List, get_args

from php_blueprint.models.spec import ProjectType

AVAILABLE_MODELS = ["gemini-2.5-pro", "gemini-2.5-flash"]

PROJECT_TYPES = list(get_args(ProjectType))

PHP_VERSIONS = ["8.3", "8.2", "8.1", "8.0"]

# CodeIgniter is selectable but has no preset
FRAMEWORKS = ["Laravel", "Symfony", "CodeIgniter", "Custom / Vanilla PHP"]

DATABASES = ["PostgreSQL", "MySQL", "MariaDB", "SQLite"]

WEB_SERVERS = ["Nginx", "Apache", "LiteSpeed"]

CACHING_LAYERS = ["Redis", "Memcached", "File", "None"]

QUEUE_SYSTEMS = ["Redis (Horizon)", "RabbitMQ", "Database", "Sync (None)"]

DATABASE_LAYERS = ["Eloquent ORM", "Doctrine", "Plain PDO", "RedBeanPHP"]

AUTH_METHODS = ["Laravel Sanctum", "JWT (JSON Web Tokens)", "Session-based", "None"]

PSR_STANDARDS = ["PSR-12", "PSR-4", "PSR-7", "PSR-11", "PSR-15", "PSR-3"]

DESIGN_PATTERNS = [
    "Repository Pattern",
    "Service Container (DI)",
    "DTOs (Data Transfer Objects)",
    "API Resources",
    "Middleware",
    "Factory Pattern",
    "Strategy Pattern",
    "Observer Pattern",
]

CORE_COMPOSER_PACKAGES = [
    "monolog/monolog",
    "vlucas/phpdotenv",
    "ramsey/uuid",
    "league/flysystem",
    "phpunit/phpunit",
]


def get_option_catalog() -> Dict[str, List[str]]:
    """All catalogs keyed by the spec field (or purpose) they feed."""
    return {
        "model": list(AVAILABLE_MODELS),
        "projectType": list(PROJECT_TYPES),
        "phpVersion": list(PHP_VERSIONS),
        "framework": list(FRAMEWORKS),
        "database": list(DATABASES),
        "webServer": list(WEB_SERVERS),
        "cachingLayer": list(CACHING_LAYERS),
        "queueSystem": list(QUEUE_SYSTEMS),
        "databaseLayer": list(DATABASE_LAYERS),
        "authMethod": list(AUTH_METHODS),
        "psrStandards": list(PSR_STANDARDS),
        "designPatterns": list(DESIGN_PATTERNS),
        "coreComposerPackages": list(CORE_COMPOSER_PACKAGES),
    }
