"""
PHP Blueprint Configuration

All settings come from environment variables (a local .env file is loaded
by main.py before this module is imported).

Variables:
- PHP_BLUEPRINT_ENV: development | production (controls log verbosity)
- PHP_BLUEPRINT_DATA_DIR: directory holding the durable JSON records
- GEMINI_API_KEY: Gemini key (GOOGLE_API_KEY / API_KEY accepted as fallbacks)
- PHP_BLUEPRINT_CORS_ORIGINS: comma-separated list of allowed origins
- HISTORY_MAX_ENTRIES: size bound of the generation history
"""

import os
from typing import List


def is_dev_mode() -> bool:
    """Check if running in development mode."""
    env = os.getenv("PHP_BLUEPRINT_ENV", "development").lower()
    return env in ("development", "dev", "local")


IS_DEV = is_dev_mode()

DATA_DIR = os.getenv("PHP_BLUEPRINT_DATA_DIR", ".blueprint")

GEMINI_API_KEY = (
    os.getenv("GEMINI_API_KEY")
    or os.getenv("GOOGLE_API_KEY")
    or os.getenv("API_KEY")
)

# Durable record namespaces (kept identical to the browser storage keys so
# exported browser data can be dropped into the data directory as-is)
SPEC_NAMESPACE = os.getenv("PHP_BLUEPRINT_SPEC_NAMESPACE", "ai-php-project-spec")
HISTORY_NAMESPACE = os.getenv("PHP_BLUEPRINT_HISTORY_NAMESPACE", "ai-php-project-spec-history")

HISTORY_MAX_ENTRIES = int(os.getenv("HISTORY_MAX_ENTRIES", "50"))


def _parse_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


CORS_ORIGINS = _parse_origins(
    os.getenv(
        "PHP_BLUEPRINT_CORS_ORIGINS",
        "http://localhost:5173,http://localhost:3000",
    )
)
