"""Google Gemini adapter for Blog Zen."""

from __future__ import annotations

from google import genai
from google.genai import types

from blogzen.llm.base import LLMProvider
from blogzen.llm.models import LLMConfig, LLMError, LLMResponse, TokenUsage

# Gemini reports a bad key as 400 INVALID_ARGUMENT rather than 401.
_AUTH_MARKERS = ("API_KEY_INVALID", "API key not valid", "PERMISSION_DENIED", "UNAUTHENTICATED")


def _status_code(exc: Exception) -> int | None:
    code = getattr(exc, "code", None)
    return code if isinstance(code, int) else None


def _is_auth_error(exc: Exception) -> bool:
    if _status_code(exc) in (401, 403):
        return True
    message = str(exc)
    return any(marker in message for marker in _AUTH_MARKERS)


def _is_rate_limited(exc: Exception) -> bool:
    if _status_code(exc) == 429:
        return True
    return "RESOURCE_EXHAUSTED" in str(exc)


class GeminiProvider(LLMProvider):
    """Gemini adapter using the google-genai async client."""

    def __init__(self, config: LLMConfig) -> None:
        super().__init__(config)
        self._client = genai.Client(api_key=config.api_key)

    async def generate(
        self,
        system: str,
        user: str,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        try:
            response = await self._client.aio.models.generate_content(
                model=self.config.model,
                contents=user,
                config=types.GenerateContentConfig(
                    system_instruction=system,
                    max_output_tokens=max_tokens,
                    temperature=self.config.temperature,
                ),
            )
        except Exception as e:
            raise LLMError(
                "gemini",
                "generate",
                e,
                retryable=_is_rate_limited(e),
                unauthorized=_is_auth_error(e),
            ) from e

        usage = None
        meta = response.usage_metadata
        if meta is not None:
            usage = TokenUsage(
                input_tokens=meta.prompt_token_count or 0,
                output_tokens=meta.candidates_token_count or 0,
            )
        return LLMResponse(
            content=response.text or "",
            usage=usage,
            model=self.config.model,
        )
