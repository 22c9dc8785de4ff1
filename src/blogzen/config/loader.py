"""Locate, read and validate blogzen.yaml."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import BlogZenConfig

PROJECT_CONFIG = Path("blogzen.yaml")

_ENV_REF_RE = re.compile(r"\$\{(\w+)\}")

# Settings that may reference environment variables; everything else is literal.
_EXPANDABLE_FIELDS = (
    ("llm", "openai_model"),
    ("llm", "gemini_model"),
    ("extractor", "user_agent"),
    ("output", "base_dir"),
)

# API keys are passed per call, never read from a config file.
_CREDENTIAL_KEYS = {"api_key", "apikey", "credential", "token", "secret"}


def user_config_path() -> Path:
    return Path.home() / ".blogzen" / "config.yaml"


def load_config(cli_path: str | None = None) -> BlogZenConfig:
    """Load settings for this run.

    An explicit ``cli_path`` must exist and be non-empty; nothing else is
    consulted. Otherwise the first non-empty file of ./blogzen.yaml and
    ~/.blogzen/config.yaml wins, falling back to defaults.

    Raises ValueError for missing or empty explicit files, YAML syntax
    errors, credential-like keys and settings that fail validation.
    """
    if cli_path:
        path = Path(cli_path)
        if not path.is_file():
            raise ValueError(f"Config file not found: {path}")
        raw = _read_yaml(path)
        if raw is None:
            raise ValueError(f"Config file is empty: {path}")
        return _build_config(raw, path)

    for path in (PROJECT_CONFIG, user_config_path()):
        if not path.is_file():
            continue
        raw = _read_yaml(path)
        if raw is not None:
            return _build_config(raw, path)

    return BlogZenConfig()


def _read_yaml(path: Path) -> object:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def _build_config(raw: object, path: Path) -> BlogZenConfig:
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping, got {type(raw).__name__}")
    _reject_credentials(raw, path)
    try:
        return BlogZenConfig(**_expand_env_refs(raw))
    except ValidationError as e:
        raise ValueError(f"Invalid config in {path}: {e}") from e


def _reject_credentials(obj: object, path: Path, trail: tuple[str, ...] = ()) -> None:
    if not isinstance(obj, dict):
        return
    for key, value in obj.items():
        dotted = (*trail, str(key))
        if str(key).lower() in _CREDENTIAL_KEYS:
            raise ValueError(
                f"Invalid config in {path}: '{'.'.join(dotted)}' looks like a credential. "
                "Pass API keys with --api-key or BLOGZEN_API_KEY instead."
            )
        _reject_credentials(value, path, dotted)


def _expand_env_refs(raw: dict) -> dict:
    """Return a copy of ``raw`` with ${VAR} expanded in _EXPANDABLE_FIELDS only.

    Unset variables expand to the empty string.
    """
    expanded = {k: dict(v) if isinstance(v, dict) else v for k, v in raw.items()}
    for section, field in _EXPANDABLE_FIELDS:
        block = expanded.get(section)
        if isinstance(block, dict) and isinstance(block.get(field), str):
            block[field] = _ENV_REF_RE.sub(lambda m: os.environ.get(m.group(1), ""), block[field])
    return expanded


# Default YAML template for `blogzen config init`
DEFAULT_CONFIG_TEMPLATE = """\
# blogzen.yaml
# API keys are never read from this file. Pass --api-key or set BLOGZEN_API_KEY.

# Generation provider
llm:
  provider: "openai"           # openai | google | simulated | auto (guess from key prefix)
  openai_model: "gpt-4o-mini"
  gemini_model: "gemini-2.0-flash"
  max_tokens: 4096
  temperature: 0.7
  simulated_delay: 0.0         # seconds, simulated provider only

# Reference blog extraction
extractor:
  max_excerpt_chars: 30000
  # user_agent: "Mozilla/5.0 (compatible; BlogZenBot/0.1)"
  follow_redirects: true

# Draft instructions
draft:
  language: "Korean"
  tone: "friendly, clear and professional"
  min_sections: 3

# Output
output:
  base_dir: "drafts"
  create_index: true
  frontmatter: true
  validation: "strict"         # strict | warn | off

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
