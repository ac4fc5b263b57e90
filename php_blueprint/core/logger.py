"""
PHP Blueprint Centralized Logging Configuration

Provides:
- Environment-based log levels (dev=DEBUG, prod=INFO)
- Namespaced loggers under 'blueprint.*'
- Dev-only logging utilities
- Third-party log silencing

Usage:
    from php_blueprint.core.logger import get_logger, dev_log

    logger = get_logger("history")
    logger.info("Always visible")
    dev_log(logger, "Only in dev mode: %s", some_data)
"""

import asyncio
import logging
import sys
import time
from functools import wraps

from php_blueprint.core.config import IS_DEV

ROOT_LOGGER_NAME = "blueprint"


# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

class SensitiveDataFilter(logging.Filter):
    """
    Filter to prevent sensitive data from appearing in production logs.
    Redacts any record that mentions API keys, tokens or similar secrets.
    """

    SENSITIVE_PATTERNS = [
        "api_key",
        "secret",
        "password",
        "token",
        "bearer",
        "authorization",
    ]

    def __init__(self, enabled: bool = not IS_DEV):
        super().__init__()
        self.enabled = enabled

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.enabled:
            return True

        msg = record.getMessage().lower()
        for pattern in self.SENSITIVE_PATTERNS:
            if pattern in msg:
                record.msg = "[REDACTED - contains sensitive data]"
                record.args = ()
                return True

        return True


def setup_logging(dev_mode: bool = IS_DEV) -> logging.Logger:
    """
    Configure centralized logging for PHP Blueprint.

    Call this ONCE at application startup (in main.py).

    Args:
        dev_mode: DEBUG level and no redaction when True

    Returns:
        Root blueprint logger
    """
    level = logging.DEBUG if dev_mode else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    if not dev_mode:
        # Handler filters also see records propagated from blueprint.* children
        redactor = SensitiveDataFilter(enabled=True)
        for handler in logging.getLogger().handlers:
            handler.addFilter(redactor)

    # ================================================================
    # SILENCE NOISY THIRD-PARTY LOGGERS
    # ================================================================
    noisy_loggers = [
        ("httpx", logging.WARNING),
        ("httpcore", logging.WARNING),
        ("google_genai", logging.WARNING),
        ("google_genai.models", logging.WARNING),
        ("urllib3", logging.WARNING),
        ("asyncio", logging.WARNING),
    ]

    for logger_name, log_level in noisy_loggers:
        logging.getLogger(logger_name).setLevel(log_level)

    mode = "DEVELOPMENT" if dev_mode else "PRODUCTION"
    root.info(f"🔧 Logging initialized ({mode} mode, level={logging.getLevelName(level)})")

    return root


def get_logger(name: str) -> logging.Logger:
    """
    Get a namespaced logger under blueprint.*.

    Example:
        logger = get_logger("ledger")
        logger.info("[LEDGER] Appended record")
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


# ============================================================================
# DEV-ONLY LOGGING UTILITIES
# ============================================================================

def dev_log(logger: logging.Logger, message: str, *args, level: int = logging.DEBUG):
    """
    Log a message ONLY in development mode.

    Use this for verbose output (full prompts, raw responses) that should
    never appear in production logs.
    """
    if IS_DEV:
        logger.log(level, message, *args)


def truncate_for_log(content: str, max_length: int = 100) -> str:
    """Truncate content for safe logging, adding a ... suffix if needed."""
    if len(content) <= max_length:
        return content
    return content[:max_length] + "..."


# ============================================================================
# TIMING DECORATOR (Dev only)
# ============================================================================

def log_timing(logger: logging.Logger):
    """
    Decorator to log function execution time (dev mode only).

    Example:
        @log_timing(logger)
        async def generate(...):
            ...
    """
    def decorator(func):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            if not IS_DEV:
                return await func(*args, **kwargs)

            start = time.perf_counter()
            result = await func(*args, **kwargs)
            duration = (time.perf_counter() - start) * 1000
            logger.debug(f"⏱️ {func.__name__} completed in {duration:.2f}ms")
            return result

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            if not IS_DEV:
                return func(*args, **kwargs)

            start = time.perf_counter()
            result = func(*args, **kwargs)
            duration = (time.perf_counter() - start) * 1000
            logger.debug(f"⏱️ {func.__name__} completed in {duration:.2f}ms")
            return result

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
