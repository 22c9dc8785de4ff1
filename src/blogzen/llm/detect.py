"""Guess the generation provider from a credential's prefix."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# Best effort only; callers that know their provider should pass it explicitly.
_PREFIXES: list[tuple[str, str]] = [
    ("sk-", "openai"),
    ("AIza", "google"),
]

_FALLBACK = "openai"


def detect_provider(credential: str) -> str:
    """Return "openai" or "google" based on the credential prefix.

    Unknown formats fall back to OpenAI, which will reject a bad key with an
    authorization error the caller can act on.
    """
    key = credential.strip()
    for prefix, provider in _PREFIXES:
        if key.startswith(prefix):
            return provider
    logger.debug("Unrecognised key format, defaulting to %s", _FALLBACK)
    return _FALLBACK
