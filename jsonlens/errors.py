from __future__ import annotations


class JsonLensError(Exception):
    """Base exception for jsonlens failures."""


class InputLimitError(JsonLensError):
    """Raised when input text exceeds the configured character cap."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"input is {length} characters, limit is {limit}")
        self.length = length
        self.limit = limit
