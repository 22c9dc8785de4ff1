from pydantic import BaseModel, Field
from typing import Literal

ProviderName = Literal["auto", "openai", "google", "simulated"]


class LLMSettings(BaseModel):
    provider: ProviderName | None = None
    openai_model: str = "gpt-4o-mini"
    gemini_model: str = "gemini-2.0-flash"
    max_tokens: int = Field(default=4096, gt=0)
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    simulated_delay: float = Field(default=0.0, ge=0.0)


class ExtractorSettings(BaseModel):
    max_excerpt_chars: int = Field(default=30_000, gt=0)
    user_agent: str = "Mozilla/5.0 (compatible; BlogZenBot/0.1; +https://github.com/blogzen/blogzen)"
    follow_redirects: bool = True


class DraftSettings(BaseModel):
    language: str = "Korean"
    tone: str = "friendly, clear and professional"
    min_sections: int = Field(default=3, gt=0)


class OutputSettings(BaseModel):
    base_dir: str = "drafts"
    create_index: bool = True
    frontmatter: bool = True
    validation: Literal["strict", "warn", "off"] = "strict"


class BlogZenConfig(BaseModel):
    llm: LLMSettings = Field(default_factory=LLMSettings)
    extractor: ExtractorSettings = Field(default_factory=ExtractorSettings)
    draft: DraftSettings = Field(default_factory=DraftSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
