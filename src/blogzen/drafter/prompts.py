"""Prompt templates for blog draft generation."""

from __future__ import annotations

from blogzen.config.models import DraftSettings
from blogzen.drafter.models import PromptPayload
from blogzen.extractor.models import StyleContext

SYSTEM_PROMPT = """\
You are Blog Zen, a professional blog writer. Your task is to write a complete, \
publish-ready blog post draft in Markdown for the topic the user gives you.

## Output Format

Return ONLY the Markdown document, with exactly this structure:
1. **Title**: a single `# ` heading that is specific and engaging
2. **Introduction**: 1-2 paragraphs explaining why the topic matters now
3. **Body**: at least {min_sections} `## ` sections, each with concrete, practical content
4. **Conclusion**: a `## ` section that summarizes the key takeaways
5. **Tags**: a final line in the form `Tags: #tag1 #tag2 #tag3` (3-7 tags)

## Writing Rules

1. **Language**: write the whole post in {language}
2. **Tone**: {tone}
3. **Concrete** - prefer examples, numbers and actionable tips over generalities
4. **Scannable** - use short paragraphs, bullet lists and bold key phrases
5. Do NOT wrap the output in a code fence and do NOT add commentary before or after the post
6. When a reference style sample is provided, imitate its voice, sentence length and \
structure, but never copy its sentences or facts\
"""

USER_PROMPT_TEMPLATE = """\
Write a blog post draft for the following request:

## Request
- **Topic:** {topic}\
"""

_STYLE_SECTION = """
## Reference Style Sample
The author's existing blog ({source_url}) reads like this:
```
{excerpt}
```"""

_NO_STYLE_SECTION = """
## Reference Style Sample
None supplied. Use the default tone described in the writing rules."""


class PromptTemplate:
    """Renders the system/user prompt pair for one draft request."""

    def __init__(self, settings: DraftSettings | None = None) -> None:
        self.settings = settings or DraftSettings()

    def render(self, topic: str, style: StyleContext | None = None) -> PromptPayload:
        """Render system and user prompts.

        A failed StyleContext still contributes its placeholder text so the
        model knows a reference was requested but unavailable.
        """
        system = SYSTEM_PROMPT.format(
            min_sections=self.settings.min_sections,
            language=self.settings.language,
            tone=self.settings.tone,
        )
        return PromptPayload(system=system, user=self._build_user_prompt(topic.strip(), style))

    @staticmethod
    def _build_user_prompt(topic: str, style: StyleContext | None) -> str:
        parts = [USER_PROMPT_TEMPLATE.format(topic=topic)]
        if style is not None and style.raw_excerpt:
            parts.append(
                _STYLE_SECTION.format(source_url=style.source_url, excerpt=style.raw_excerpt)
            )
        else:
            parts.append(_NO_STYLE_SECTION)
        return "\n".join(parts)
