"""Custom exception classes for textcore errors.

Line-level transforms never raise; these cover the edges (config, payloads).
"""

from __future__ import annotations


class TextCoreError(Exception):
    """Base exception for textcore failures."""

    def __init__(self, message: str, transient: bool = False):
        super().__init__(message)
        self.transient = transient


class ConfigError(TextCoreError):
    """Raised when runtime configuration cannot be loaded or validated."""

    def __init__(self, source: str, message: str):
        super().__init__(f"Failed to load config from {source}: {message}", transient=False)
        self.source = source


class InputTooLargeError(TextCoreError):
    """Raised when a submitted text blob exceeds the configured size limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(f"Input of {size} characters exceeds limit of {limit}", transient=False)
        self.size = size
        self.limit = limit
