"""Markdown shape validator for generated blog drafts."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

_H1_RE = re.compile(r"^#\s+\S", re.MULTILINE)
_H2_RE = re.compile(r"^##\s+\S", re.MULTILINE)
_TAGS_RE = re.compile(r"^\s*(?:\*\*)?tags(?:\*\*)?\s*:?(?:\*\*)?\s*#\S+", re.MULTILINE | re.IGNORECASE)
_FENCE_RE = re.compile(r"^```.*?^```", re.MULTILINE | re.DOTALL)


class ValidationResult(BaseModel):
    """Result of validating a single draft."""

    valid: bool = True
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    path: str = ""


def split_frontmatter(content: str) -> tuple[str | None, str]:
    """Split a draft file into YAML frontmatter and body.

    Returns (yaml_str, body). yaml_str is None if no frontmatter found.
    """
    if not content.startswith("---"):
        return None, content

    end = content.find("\n---", 3)
    if end == -1:
        return None, content

    yaml_str = content[3:end].strip()
    body = content[end + 4:]
    return yaml_str, body


class DraftValidator:
    """Checks that a draft has the structure the prompt asks for.

    Supports three modes:
      - "strict": structural problems → invalid
      - "warn": log warnings but still return valid
      - "off": skip validation, always return valid
    """

    def __init__(self, mode: str = "strict", min_sections: int = 3) -> None:
        if mode not in ("strict", "warn", "off"):
            raise ValueError(f"Unknown validation mode: {mode!r}")
        self.mode = mode
        self.min_sections = min_sections

    def validate_file(self, path: str | Path) -> ValidationResult:
        """Validate a single Markdown draft file."""
        path = Path(path)
        result = ValidationResult(path=str(path))

        if self.mode == "off":
            return result

        if not path.exists():
            result.errors.append(f"File not found: {path}")
            result.valid = False
            return result

        content = path.read_text(encoding="utf-8")
        return self._validate_content(content, result)

    def validate_content(self, content: str, source: str = "<string>") -> ValidationResult:
        """Validate draft content from a string."""
        result = ValidationResult(path=source)

        if self.mode == "off":
            return result

        return self._validate_content(content, result)

    def validate_directory(self, path: str | Path) -> list[ValidationResult]:
        """Validate all Markdown drafts in a directory."""
        path = Path(path)
        results: list[ValidationResult] = []

        if not path.is_dir():
            r = ValidationResult(path=str(path), valid=False)
            r.errors.append(f"Not a directory: {path}")
            results.append(r)
            return results

        for md_file in sorted(path.rglob("*.md")):
            results.append(self.validate_file(md_file))

        return results

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _validate_content(self, content: str, result: ValidationResult) -> ValidationResult:
        _yaml, body = split_frontmatter(content)
        # Headings inside code blocks don't count.
        body = _FENCE_RE.sub("", body)

        if not body.strip():
            self._add_issue(result, "Draft is empty")
            return result

        titles = _H1_RE.findall(body)
        if not titles:
            self._add_issue(result, "Missing title (no '# ' heading)")
        elif len(titles) > 1:
            self._add_issue(result, f"Expected one title, found {len(titles)} '# ' headings", warning=True)

        sections = len(_H2_RE.findall(body))
        if sections < self.min_sections:
            self._add_issue(
                result,
                f"Expected at least {self.min_sections} '## ' sections, found {sections}",
            )

        if not _TAGS_RE.search(body):
            self._add_issue(result, "Missing tag line (e.g. 'Tags: #topic')", warning=True)

        return result

    def _add_issue(self, result: ValidationResult, message: str, *, warning: bool = False) -> None:
        """Add an error or warning depending on mode."""
        if self.mode == "strict":
            if warning:
                result.warnings.append(message)
            else:
                result.errors.append(message)
                result.valid = False
        elif self.mode == "warn":
            # Everything becomes a warning; draft stays valid
            result.warnings.append(message)
            logger.warning("%s: %s", result.path, message)
