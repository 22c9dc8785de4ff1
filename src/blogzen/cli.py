"""CLI entry point for Blog Zen."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from blogzen.config import BlogZenConfig, load_config
from blogzen.config.loader import DEFAULT_CONFIG_TEMPLATE
from blogzen.drafter import DraftError, GenerationFailure, generate_draft
from blogzen.output import DraftValidator, DraftWriter

app = typer.Typer(
    name="blogzen",
    help="Blog Zen: AI-powered blog draft generator.",
)

config_app = typer.Typer(help="Manage Blog Zen configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: BlogZenConfig | None = None

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def _get_config() -> BlogZenConfig:
    if _config is None:
        return load_config()
    return _config


class JsonLogFormatter(logging.Formatter):
    """One JSON object per line: time, level, logger, message and any traceback."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _configure_logging(cfg: BlogZenConfig) -> None:
    level = _LOG_LEVELS[cfg.log_level]
    if cfg.log_format == "json":
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(JsonLogFormatter())
    else:
        handler = RichHandler(show_path=False)
    logging.basicConfig(level=level, handlers=[handler], format="%(message)s", force=True)


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to blogzen.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    _configure_logging(_config)


@app.command()
def draft(
    topic: str = typer.Argument(..., help="Blog topic or key phrase"),
    url: Annotated[
        str | None, typer.Option("--url", "-u", help="Your blog URL, used as a style reference")
    ] = None,
    api_key: Annotated[
        str | None,
        typer.Option(
            "--api-key",
            "-k",
            envvar="BLOGZEN_API_KEY",
            help="OpenAI or Gemini API key",
            show_default=False,
        ),
    ] = None,
    provider: Annotated[
        str | None,
        typer.Option("--provider", "-p", help="auto, openai, google or simulated"),
    ] = None,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Override output directory")
    ] = None,
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the draft without writing"),
) -> None:
    """Generate a Markdown blog draft."""
    cfg = _get_config()

    if provider is not None and provider not in ("auto", "openai", "google", "simulated"):
        rprint(f"[red]Error:[/red] Invalid provider '{escape(provider)}'. Choose auto, openai, google or simulated.")
        raise typer.Exit(1)
    if (provider or cfg.llm.provider) is None:
        rprint(
            "[red]Error:[/red] No provider selected. "
            "Pass --provider or set llm.provider in blogzen.yaml."
        )
        raise typer.Exit(1)

    rprint(f"[bold]Drafting[/bold] '{escape(topic.strip())}' (llm: {provider or cfg.llm.provider})...")
    if url:
        rprint(f"[dim]Reference blog:[/dim] {escape(url)}")

    try:
        result = asyncio.run(
            generate_draft(topic, api_key or "", url, provider=provider, config=cfg)
        )
    except DraftError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        if isinstance(e, GenerationFailure) and e.retryable:
            rprint("[yellow]The service is rate limiting requests; try again shortly.[/yellow]")
        raise typer.Exit(1)

    if result.style_context is not None and not result.style_context.fetched:
        rprint("[yellow]Reference blog could not be read; drafted without a style sample.[/yellow]")

    rprint(Panel(Markdown(result.content), title="Draft Output", border_style="blue"))

    if dry_run:
        return

    out_cfg = cfg.output
    if output:
        out_cfg = out_cfg.model_copy(update={"base_dir": output})
    writer = DraftWriter(out_cfg)
    try:
        dest = writer.write(result, topic)
    except OSError as e:
        rprint(f"[red]Error:[/red] Could not write draft: {escape(str(e))}")
        raise typer.Exit(1)

    usage = f"{result.usage.input_tokens} in / {result.usage.output_tokens} out" if result.usage else "n/a"
    rprint(Panel(
        f"[dim]File:[/dim]      {dest}\n"
        f"[dim]Provider:[/dim]  {result.provider} ({result.model})\n"
        f"[dim]Tokens:[/dim]    {usage}\n"
        f"[dim]Size:[/dim]      {len(result.content)} chars",
        title="Draft Complete",
        border_style="green",
    ))


@app.command()
def validate(
    path: str | None = typer.Argument(None, help="Draft file or directory (default: output.base_dir)"),
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: table or json")
    ] = "table",
) -> None:
    """Validate the Markdown structure of generated drafts."""
    cfg = _get_config()
    path = path or cfg.output.base_dir
    if format != "json":
        rprint(f"[bold]Validating[/bold] {escape(path)}...")

    validator = DraftValidator(mode=cfg.output.validation, min_sections=cfg.draft.min_sections)
    target = Path(path)
    if target.is_file():
        results = [validator.validate_file(target)]
    else:
        results = validator.validate_directory(target)

    if not results:
        rprint("[yellow]No drafts found.[/yellow]")
        raise typer.Exit(0)

    any_invalid = any(not r.valid for r in results)

    if format == "json":
        typer.echo(json.dumps([r.model_dump() for r in results], indent=2, ensure_ascii=False))
    else:
        table = Table(title=f"Validation Results ({len(results)} files)")
        table.add_column("Path", style="cyan")
        table.add_column("Status", justify="center")
        table.add_column("Errors", justify="right", style="red")
        table.add_column("Warnings", justify="right", style="yellow")

        for r in results:
            status = "[green]PASS[/green]" if r.valid else "[red]FAIL[/red]"
            table.add_row(escape(r.path), status, str(len(r.errors)), str(len(r.warnings)))
        rprint(table)

        for r in results:
            if r.errors or r.warnings:
                rprint(f"\n[bold]{escape(r.path)}[/bold]")
                for err in r.errors:
                    rprint(f"  [red]error:[/red] {escape(err)}")
                for warn in r.warnings:
                    rprint(f"  [yellow]warn:[/yellow] {escape(warn)}")

    if any_invalid and cfg.output.validation == "strict":
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False, allow_unicode=True), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default blogzen.yaml in current directory."""
    target = Path("blogzen.yaml")
    if target.exists() and not force:
        rprint("[yellow]blogzen.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    rprint(f"[green]Created[/green] {target}")
