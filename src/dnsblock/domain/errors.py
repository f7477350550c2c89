"""Domain constants and error types."""

from __future__ import annotations

DEFAULT_TABLE_SIZE = 1873
MIN_TABLE_SIZE = 3


class ConfigurationError(ValueError):
    """Raised when the index is built with an unusable configuration."""
