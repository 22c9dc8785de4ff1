"""Pydantic models for the draft pipeline."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from blogzen.config.models import ProviderName
from blogzen.extractor.models import StyleContext
from blogzen.llm.models import TokenUsage

MIN_TOPIC_LENGTH = 2


class DraftRequest(BaseModel):
    """One invocation's inputs. Never stored."""

    topic: str
    credential: str = Field(repr=False)
    reference_url: str | None = None
    provider: ProviderName | None = None


class PromptPayload(BaseModel):
    """Rendered instructions for a single generation call."""

    system: str
    user: str


class DraftResult(BaseModel):
    """A successfully generated Markdown draft."""

    content: str
    provider: str
    model: str
    usage: TokenUsage | None = None
    style_context: StyleContext | None = None

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("content cannot be empty or whitespace")
        return v
