"""Generation capability: provider abstraction and adapters."""

from blogzen.config.models import LLMSettings
from blogzen.llm.base import LLMProvider
from blogzen.llm.detect import detect_provider
from blogzen.llm.gemini import GeminiProvider
from blogzen.llm.models import LLMConfig, LLMError, LLMResponse, TokenUsage
from blogzen.llm.openai_adapter import OpenAIProvider
from blogzen.llm.simulated import SimulatedProvider

_PROVIDER_MAP: dict[str, type[LLMProvider]] = {
    "openai": OpenAIProvider,
    "google": GeminiProvider,
    "simulated": SimulatedProvider,
}


def create_llm_provider(
    settings: LLMSettings,
    credential: str,
    provider: str | None = None,
) -> LLMProvider:
    """Create an LLM provider for one request.

    ``provider`` overrides ``settings.provider``; one of the two must name a
    provider. "auto" infers it from the credential prefix via detect_provider().
    """
    name = provider or settings.provider
    if name is None:
        raise ValueError(
            "No LLM provider selected. Pass a provider or set llm.provider "
            f"to one of: auto, {', '.join(_PROVIDER_MAP)}"
        )
    if name == "auto":
        name = detect_provider(credential)

    cls = _PROVIDER_MAP.get(name)
    if cls is None:
        raise ValueError(
            f"Unsupported LLM provider: {name!r}. "
            f"Supported: auto, {', '.join(_PROVIDER_MAP)}"
        )

    model = settings.gemini_model if name == "google" else settings.openai_model
    if name == "simulated":
        model = "simulated"
    llm_config = LLMConfig(
        provider=name,
        model=model,
        max_tokens=settings.max_tokens,
        temperature=settings.temperature,
        api_key=credential,
    )
    if name == "simulated":
        return SimulatedProvider(llm_config, delay=settings.simulated_delay)
    return cls(llm_config)


__all__ = [
    "GeminiProvider",
    "LLMConfig",
    "LLMError",
    "LLMProvider",
    "LLMResponse",
    "OpenAIProvider",
    "SimulatedProvider",
    "TokenUsage",
    "create_llm_provider",
    "detect_provider",
]
