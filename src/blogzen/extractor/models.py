"""Pydantic models for the context extractor."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

# Substituted for the excerpt whenever the reference page cannot be retrieved.
FETCH_FAILED_PLACEHOLDER = "(The reference blog could not be retrieved. No style sample is available.)"


class FetchFailure(Exception):
    """Raised inside the extractor when a reference page is unusable.

    Never escapes ContextExtractor.extract().
    """


class StyleContext(BaseModel):
    """Plain-text excerpt of a reference page, scoped to one request."""

    raw_excerpt: str
    source_url: str
    status: Literal["fetched", "failed"]

    @property
    def fetched(self) -> bool:
        return self.status == "fetched"
