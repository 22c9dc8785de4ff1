from .loader import load_config
from .models import (
    BlogZenConfig,
    DraftSettings,
    ExtractorSettings,
    LLMSettings,
    OutputSettings,
    ProviderName,
)

__all__ = [
    "BlogZenConfig",
    "DraftSettings",
    "ExtractorSettings",
    "LLMSettings",
    "OutputSettings",
    "ProviderName",
    "load_config",
]
