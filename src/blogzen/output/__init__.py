"""Output subsystem: writes and validates Markdown drafts."""

from blogzen.output.validator import DraftValidator, ValidationResult
from blogzen.output.writer import DraftWriter

__all__ = [
    "DraftValidator",
    "DraftWriter",
    "ValidationResult",
]
