"""Abstract generation capability for Blog Zen."""

from __future__ import annotations

from abc import ABC, abstractmethod

from blogzen.llm.models import LLMConfig, LLMResponse


class LLMProvider(ABC):
    """Provider-agnostic interface: submit a prompt, receive text or a fault.

    Adapters raise LLMError for anything the remote service rejects, with
    ``unauthorized`` set when the credential itself was refused.
    """

    def __init__(self, config: LLMConfig) -> None:
        self.config = config

    @abstractmethod
    async def generate(
        self,
        system: str,
        user: str,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        """Generate a complete response (one-shot)."""
        ...
