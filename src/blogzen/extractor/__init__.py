"""Context extractor: reference blog URL to plain-text style excerpt."""

from blogzen.extractor.extractor import ContextExtractor
from blogzen.extractor.html import html_to_text
from blogzen.extractor.models import FETCH_FAILED_PLACEHOLDER, FetchFailure, StyleContext

__all__ = [
    "ContextExtractor",
    "FETCH_FAILED_PLACEHOLDER",
    "FetchFailure",
    "StyleContext",
    "html_to_text",
]
