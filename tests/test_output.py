"""Tests for the output subsystem: writer and validator."""

import pytest
import yaml

from blogzen.config.models import OutputSettings
from blogzen.drafter.models import DraftResult
from blogzen.extractor import StyleContext
from blogzen.output.writer import DraftWriter, slugify_topic
from blogzen.output.validator import DraftValidator, ValidationResult, split_frontmatter


def _result(content, url=None):
    style = None
    if url:
        style = StyleContext(raw_excerpt="sample", source_url=url, status="fetched")
    return DraftResult(content=content, provider="openai", model="gpt-4o-mini", style_context=style)


# ---------------------------------------------------------------------------
# slugify_topic
# ---------------------------------------------------------------------------


class TestSlugifyTopic:
    def test_keeps_hangul(self):
        assert slugify_topic("건강한 식습관") == "건강한-식습관"

    def test_punctuation_dropped_and_lowercased(self):
        assert slugify_topic("AI: 2026 Trends?") == "ai-2026-trends"

    def test_strips_traversal(self):
        result = slugify_topic("../../etc/passwd")
        assert ".." not in result
        assert "/" not in result

    def test_dots_only_becomes_untitled(self):
        assert slugify_topic("...") == "_untitled"

    def test_length_capped(self):
        assert len(slugify_topic("x" * 200)) == 80


# ---------------------------------------------------------------------------
# DraftWriter
# ---------------------------------------------------------------------------


class TestDraftWriter:
    def test_writes_markdown_with_frontmatter(self, tmp_path, sample_draft):
        writer = DraftWriter(OutputSettings(base_dir=str(tmp_path)))

        dest = writer.write(_result(sample_draft, url="https://myblog.example"), " 건강한 식습관 ")

        assert dest == tmp_path / "건강한-식습관.md"
        text = dest.read_text(encoding="utf-8")
        yaml_str, body = split_frontmatter(text)
        meta = yaml.safe_load(yaml_str)
        assert meta["topic"] == "건강한 식습관"
        assert meta["provider"] == "openai"
        assert meta["model"] == "gpt-4o-mini"
        assert meta["reference_url"] == "https://myblog.example"
        assert meta["status"] == "ai_draft"
        assert "created_at" in meta
        assert sample_draft.strip() in body

    def test_without_frontmatter(self, tmp_path, sample_draft):
        writer = DraftWriter(OutputSettings(base_dir=str(tmp_path), frontmatter=False))
        dest = writer.write(_result(sample_draft), "여행 팁")
        assert dest.read_text(encoding="utf-8") == sample_draft

    def test_creates_nested_directory(self, tmp_path, sample_draft):
        base = tmp_path / "a" / "b"
        writer = DraftWriter(OutputSettings(base_dir=str(base)))
        dest = writer.write(_result(sample_draft), "여행 팁")
        assert dest.exists()

    def test_dry_run_writes_nothing(self, tmp_path, sample_draft):
        writer = DraftWriter(OutputSettings(base_dir=str(tmp_path / "out")))
        dest = writer.write(_result(sample_draft), "여행 팁", dry_run=True)
        assert dest == tmp_path / "out" / "여행-팁.md"
        assert not (tmp_path / "out").exists()

    def test_index_upserted_by_slug(self, tmp_path, sample_draft):
        writer = DraftWriter(OutputSettings(base_dir=str(tmp_path)))
        writer.write(_result(sample_draft), "여행 팁")
        writer.write(_result(sample_draft), "코딩 공부법")
        writer.write(_result(sample_draft), "여행 팁")

        entries = yaml.safe_load((tmp_path / "_index.yaml").read_text(encoding="utf-8"))
        assert [e["slug"] for e in entries] == ["코딩-공부법", "여행-팁"]
        assert entries[1]["topic"] == "여행 팁"

    def test_index_disabled(self, tmp_path, sample_draft):
        writer = DraftWriter(OutputSettings(base_dir=str(tmp_path), create_index=False))
        writer.write(_result(sample_draft), "여행 팁")
        assert not (tmp_path / "_index.yaml").exists()

    def test_corrupt_index_replaced(self, tmp_path, sample_draft, caplog):
        (tmp_path / "_index.yaml").write_text("[unterminated", encoding="utf-8")
        writer = DraftWriter(OutputSettings(base_dir=str(tmp_path)))

        with caplog.at_level("WARNING", logger="blogzen.output.writer"):
            writer.write(_result(sample_draft), "여행 팁")

        entries = yaml.safe_load((tmp_path / "_index.yaml").read_text(encoding="utf-8"))
        assert len(entries) == 1
        assert "corrupt index" in caplog.text

    def test_unwritable_target_raises(self, tmp_path, sample_draft):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        writer = DraftWriter(OutputSettings(base_dir=str(blocker / "sub")))
        with pytest.raises(OSError):
            writer.write(_result(sample_draft), "여행 팁")


# ---------------------------------------------------------------------------
# split_frontmatter
# ---------------------------------------------------------------------------


class TestSplitFrontmatter:
    def test_with_frontmatter(self):
        yaml_str, body = split_frontmatter("---\ntopic: x\n---\n# Title\n")
        assert yaml_str == "topic: x"
        assert body.strip() == "# Title"

    def test_without_frontmatter(self):
        assert split_frontmatter("# Title") == (None, "# Title")

    def test_unterminated(self):
        assert split_frontmatter("---\ntopic: x\n# Title") == (None, "---\ntopic: x\n# Title")


# ---------------------------------------------------------------------------
# DraftValidator
# ---------------------------------------------------------------------------


class TestDraftValidator:
    def test_valid_draft(self, sample_draft):
        result = DraftValidator().validate_content(sample_draft)
        assert isinstance(result, ValidationResult)
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    def test_empty_draft(self):
        result = DraftValidator().validate_content("  \n")
        assert not result.valid
        assert "Draft is empty" in result.errors

    def test_missing_title(self):
        content = "## A\nx\n## B\ny\n## C\nz\nTags: #a"
        result = DraftValidator().validate_content(content)
        assert not result.valid
        assert any("title" in e for e in result.errors)

    def test_multiple_titles_warn(self, sample_draft):
        result = DraftValidator().validate_content(sample_draft + "\n# Another title\n")
        assert result.valid
        assert any("one title" in w for w in result.warnings)

    def test_too_few_sections(self):
        content = "# Title\n\n## Only one\ntext\n\nTags: #a"
        result = DraftValidator(min_sections=3).validate_content(content)
        assert not result.valid
        assert any("at least 3" in e for e in result.errors)

    def test_missing_tags_is_warning(self):
        content = "# Title\n## A\n## B\n## C\n"
        result = DraftValidator().validate_content(content)
        assert result.valid
        assert any("tag line" in w for w in result.warnings)

    def test_headings_in_code_fence_ignored(self):
        content = "# Title\n## A\n```\n## fake\n## fake\n```\nTags: #a"
        result = DraftValidator(min_sections=2).validate_content(content)
        assert not result.valid

    def test_frontmatter_ignored(self, sample_draft):
        content = "---\ntopic: x\n---\n\n" + sample_draft
        assert DraftValidator().validate_content(content).valid

    def test_warn_mode_never_invalid(self, caplog):
        validator = DraftValidator(mode="warn")
        with caplog.at_level("WARNING", logger="blogzen.output.validator"):
            result = validator.validate_content("no structure at all", source="x.md")
        assert result.valid
        assert result.errors == []
        assert len(result.warnings) >= 2
        assert "x.md" in caplog.text

    def test_off_mode(self):
        assert DraftValidator(mode="off").validate_content("").valid

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            DraftValidator(mode="lenient")

    def test_validate_file_missing(self, tmp_path):
        result = DraftValidator().validate_file(tmp_path / "nope.md")
        assert not result.valid

    def test_validate_directory(self, tmp_path, sample_draft):
        (tmp_path / "good.md").write_text(sample_draft, encoding="utf-8")
        (tmp_path / "nested").mkdir()
        (tmp_path / "nested" / "bad.md").write_text("plain text", encoding="utf-8")
        (tmp_path / "_index.yaml").write_text("[]", encoding="utf-8")

        results = DraftValidator().validate_directory(tmp_path)

        assert len(results) == 2
        by_name = {r.path.rsplit("/", 1)[-1]: r for r in results}
        assert by_name["good.md"].valid
        assert not by_name["bad.md"].valid

    def test_validate_directory_not_a_dir(self, tmp_path):
        results = DraftValidator().validate_directory(tmp_path / "missing")
        assert len(results) == 1
        assert not results[0].valid

    def test_written_draft_validates(self, tmp_path, sample_draft):
        dest = DraftWriter(OutputSettings(base_dir=str(tmp_path))).write(_result(sample_draft), "여행 팁")
        assert DraftValidator().validate_file(dest).valid
