"""Blog Zen: AI-generated Markdown blog drafts from a topic and an optional reference blog."""

from blogzen.drafter import (
    DraftError,
    DraftResult,
    EmptyGeneration,
    GenerationFailure,
    InvalidCredential,
    InvalidTopic,
    MissingCredential,
    generate_draft,
)

__version__ = "0.1.0"

__all__ = [
    "DraftError",
    "DraftResult",
    "EmptyGeneration",
    "GenerationFailure",
    "InvalidCredential",
    "InvalidTopic",
    "MissingCredential",
    "__version__",
    "generate_draft",
]
