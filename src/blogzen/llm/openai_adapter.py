"""OpenAI adapter for Blog Zen."""

from __future__ import annotations

from openai import (
    APIError,
    AsyncOpenAI,
    AuthenticationError,
    PermissionDeniedError,
    RateLimitError,
)

from blogzen.llm.base import LLMProvider
from blogzen.llm.models import LLMConfig, LLMError, LLMResponse, TokenUsage


class OpenAIProvider(LLMProvider):
    """OpenAI adapter using the async SDK."""

    def __init__(self, config: LLMConfig) -> None:
        super().__init__(config)
        self._client = AsyncOpenAI(
            api_key=config.api_key,
            max_retries=0,
        )

    async def generate(
        self,
        system: str,
        user: str,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        try:
            response = await self._client.chat.completions.create(
                model=self.config.model,
                max_tokens=max_tokens,
                temperature=self.config.temperature,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
            )
        except APIError as e:
            raise LLMError(
                "openai",
                "generate",
                e,
                retryable=isinstance(e, RateLimitError),
                unauthorized=isinstance(e, (AuthenticationError, PermissionDeniedError)),
            ) from e

        content = ""
        if response.choices:
            content = response.choices[0].message.content or ""
        usage = None
        if response.usage:
            usage = TokenUsage(
                input_tokens=response.usage.prompt_tokens,
                output_tokens=response.usage.completion_tokens,
            )
        return LLMResponse(content=content, usage=usage, model=response.model)
