"""Draft synthesizer: topic + credential + optional reference URL to a Markdown draft."""

from blogzen.drafter.drafter import Drafter, generate_draft, validate_request
from blogzen.drafter.errors import (
    DraftError,
    EmptyGeneration,
    GenerationFailure,
    InvalidCredential,
    InvalidTopic,
    MissingCredential,
)
from blogzen.drafter.models import MIN_TOPIC_LENGTH, DraftRequest, DraftResult, PromptPayload
from blogzen.drafter.prompts import PromptTemplate

__all__ = [
    "DraftError",
    "DraftRequest",
    "DraftResult",
    "Drafter",
    "EmptyGeneration",
    "GenerationFailure",
    "InvalidCredential",
    "InvalidTopic",
    "MIN_TOPIC_LENGTH",
    "MissingCredential",
    "PromptPayload",
    "PromptTemplate",
    "generate_draft",
    "validate_request",
]
