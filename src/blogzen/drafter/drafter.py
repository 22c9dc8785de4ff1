"""Drafter orchestrator: validates a request, gathers context and produces a draft."""

from __future__ import annotations

import logging

from blogzen.config import BlogZenConfig
from blogzen.drafter.errors import (
    EmptyGeneration,
    GenerationFailure,
    InvalidCredential,
    InvalidTopic,
    MissingCredential,
)
from blogzen.drafter.models import MIN_TOPIC_LENGTH, DraftRequest, DraftResult
from blogzen.drafter.prompts import PromptTemplate
from blogzen.extractor import ContextExtractor
from blogzen.llm import LLMError, LLMProvider, create_llm_provider

logger = logging.getLogger(__name__)


def validate_request(topic: str | None, credential: str | None) -> None:
    """Local precondition checks. Raise before any network activity."""
    if not credential or not credential.strip():
        raise MissingCredential()
    if not topic or len(topic.strip()) < MIN_TOPIC_LENGTH:
        raise InvalidTopic(MIN_TOPIC_LENGTH)


class Drafter:
    """Turns a DraftRequest into a DraftResult.

    Pipeline:
        DraftRequest → ContextExtractor (optional) → PromptTemplate → LLMProvider → DraftResult
    """

    def __init__(
        self,
        llm: LLMProvider,
        config: BlogZenConfig | None = None,
        extractor: ContextExtractor | None = None,
    ) -> None:
        self.llm = llm
        self.config = config or BlogZenConfig()
        self.extractor = extractor or ContextExtractor(self.config.extractor)
        self.template = PromptTemplate(self.config.draft)

    async def draft(self, request: DraftRequest) -> DraftResult:
        """Generate a Markdown draft.

        Steps:
            1. Validate credential and topic (no I/O)
            2. Extract style context from the reference URL, if any
            3. Render the prompt payload
            4. Call the generation capability once
            5. Return its text verbatim
        """
        validate_request(request.topic, request.credential)

        style = None
        if request.reference_url:
            style = await self.extractor.extract(request.reference_url)

        payload = self.template.render(request.topic, style)

        provider = self.llm.config.provider
        try:
            response = await self.llm.generate(
                system=payload.system,
                user=payload.user,
                max_tokens=self.config.llm.max_tokens,
            )
        except LLMError as e:
            if e.unauthorized:
                logger.warning("%s rejected the credential: %s", provider, e)
                raise InvalidCredential(provider) from e
            logger.error("Generation via %s failed: %s", provider, e)
            raise GenerationFailure(provider, str(e.__cause__ or e), retryable=e.retryable) from e
        except Exception as e:
            logger.exception("Unexpected error from %s", provider)
            raise GenerationFailure(provider, str(e)) from e

        if not response.content.strip():
            logger.warning("%s returned no text for the draft", provider)
            raise EmptyGeneration(provider)

        return DraftResult(
            content=response.content,
            provider=provider,
            model=response.model,
            usage=response.usage,
            style_context=style,
        )


async def generate_draft(
    topic: str,
    credential: str,
    reference_url: str | None = None,
    *,
    provider: str | None = None,
    config: BlogZenConfig | None = None,
    llm: LLMProvider | None = None,
    extractor: ContextExtractor | None = None,
) -> DraftResult:
    """Generate a blog draft for ``topic`` using the caller's ``credential``.

    ``provider`` is one of "openai", "google", "simulated" or "auto" and
    defaults to ``config.llm.provider``; "auto" guesses from the credential
    prefix. Pass ``llm`` to supply the generation capability directly
    (``provider`` is then ignored).

    Raises MissingCredential, InvalidTopic, InvalidCredential, EmptyGeneration
    or GenerationFailure. Raises ValueError when no provider is selected at
    all. An unreachable reference URL is not an error.
    """
    validate_request(topic, credential)
    cfg = config or BlogZenConfig()
    request = DraftRequest(
        topic=topic,
        credential=credential,
        reference_url=reference_url,
        provider=provider or cfg.llm.provider,
    )
    if llm is None:
        llm = create_llm_provider(cfg.llm, credential.strip(), request.provider)
    drafter = Drafter(llm, cfg, extractor=extractor)
    return await drafter.draft(request)
