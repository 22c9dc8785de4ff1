"""DraftWriter: writes DraftResult models to Markdown files on disk."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from pathlib import Path

import yaml

from blogzen.config.models import OutputSettings
from blogzen.drafter.models import DraftResult

logger = logging.getLogger(__name__)


def slugify_topic(topic: str) -> str:
    """Make a topic safe for use as a filename.

    Keeps Unicode word characters (Hangul included), turns whitespace into
    dashes and drops path separators and traversal segments.
    """
    name = topic.strip().replace("/", "-").replace("\\", "-")
    name = name.replace("..", "")
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"[^\w\-]", "", name)
    name = re.sub(r"-{2,}", "-", name).strip("-").lower()
    if not name:
        name = "_untitled"
    return name[:80]


def render_frontmatter(result: DraftResult, topic: str, created_at: str) -> str:
    meta = {
        "topic": topic.strip(),
        "provider": result.provider,
        "model": result.model,
        "reference_url": result.style_context.source_url if result.style_context else None,
        "created_at": created_at,
        "status": "ai_draft",
    }
    yaml_block = yaml.safe_dump(meta, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return f"---\n{yaml_block}---\n\n"


class DraftWriter:
    """Writes drafts to disk as ``<slug>.md`` with optional YAML frontmatter.

    Handles filename sanitization, directory creation, optional index
    maintenance, and dry-run mode.
    """

    def __init__(self, config: OutputSettings) -> None:
        self.config = config
        self.base_dir = Path(config.base_dir)

    def write(self, result: DraftResult, topic: str, *, dry_run: bool = False) -> Path:
        """Write a single draft to disk.

        Returns the Path of the written (or would-be) file.
        """
        slug = slugify_topic(topic)
        dest = self.base_dir / f"{slug}.md"

        if dry_run:
            logger.debug("dry-run: would write %s", dest)
            return dest

        created_at = datetime.now(timezone.utc).isoformat()
        body = result.content
        if self.config.frontmatter:
            body = render_frontmatter(result, topic, created_at) + body
        if not body.endswith("\n"):
            body += "\n"

        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(body, encoding="utf-8")
        except OSError as e:
            logger.error("Failed to write draft %s: %s", dest, e)
            raise
        logger.info("wrote %s (%d bytes)", dest, len(body.encode("utf-8")))

        if self.config.create_index:
            self._update_index(slug, topic, dest, created_at)

        return dest

    # -- index management --------------------------------------------------

    def _update_index(self, slug: str, topic: str, path: Path, created_at: str) -> None:
        """Upsert an entry in _index.yaml for the written file."""
        index_path = self.base_dir / "_index.yaml"

        entries: list[dict] = []
        if index_path.exists():
            raw = index_path.read_text(encoding="utf-8")
            try:
                loaded = yaml.safe_load(raw)
            except yaml.YAMLError as e:
                logger.warning("Ignoring corrupt index %s: %s", index_path, e)
                loaded = None
            if isinstance(loaded, list):
                entries = loaded

        # Upsert: replace existing entry for same slug
        entries = [e for e in entries if isinstance(e, dict) and e.get("slug") != slug]
        entries.append({
            "slug": slug,
            "topic": topic.strip(),
            "path": str(path),
            "timestamp": created_at,
        })

        index_path.write_text(
            yaml.safe_dump(entries, default_flow_style=False, sort_keys=False, allow_unicode=True),
            encoding="utf-8",
        )
        logger.debug("updated index %s (%d entries)", index_path, len(entries))
