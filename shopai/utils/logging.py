"""
Logging utilities for the ShopAI backend.

Provides standardized logger configuration following privacy rules.

SECURITY RULES:
- NEVER log the GOOGLE_API_KEY or the full request URL (it carries the key)
- NEVER log a user's query text in full (truncate to 50 characters)
- NEVER put transport details (status codes, raw payloads) into user-facing state

Acceptable logging:
- High-level events (e.g., "Recommendation cycle #3 started")
- Non-sensitive metadata (e.g., "catalog_size=12", "recommended_ids=[3]")
- Error classes and sanitized error messages for diagnostics
"""

import logging
from typing import Optional


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to INFO)

    Returns:
        Configured logger instance

    Usage:
        >>> from shopai.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.INFO

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def preview(text: str, limit: int = 50) -> str:
    """Truncate free text for log lines."""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."
