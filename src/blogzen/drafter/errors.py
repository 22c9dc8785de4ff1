"""Errors raised by the draft pipeline. Messages are shown to users as-is."""

from __future__ import annotations


class DraftError(Exception):
    """Base class for every failure generate_draft() can raise."""


class InvalidTopic(DraftError):
    def __init__(self, min_length: int = 2) -> None:
        super().__init__(f"Topic must be at least {min_length} characters long.")
        self.min_length = min_length


class MissingCredential(DraftError):
    def __init__(self) -> None:
        super().__init__("An API key is required. Register one in your settings first.")


class InvalidCredential(DraftError):
    def __init__(self, provider: str) -> None:
        super().__init__(
            f"The {provider} API key was rejected. Check that the key is correct and active."
        )
        self.provider = provider


class EmptyGeneration(DraftError):
    def __init__(self, provider: str) -> None:
        super().__init__(f"The {provider} service returned an empty draft. Please try again.")
        self.provider = provider


class GenerationFailure(DraftError):
    """Any other fault from the generation service, with its message attached."""

    def __init__(self, provider: str, cause_message: str, retryable: bool = False) -> None:
        super().__init__(f"Draft generation via {provider} failed: {cause_message}")
        self.provider = provider
        self.cause_message = cause_message
        self.retryable = retryable
