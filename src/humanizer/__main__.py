"""CLI entry point for Humanizer."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path

import click

from humanizer import __version__
from humanizer.config import SUPPORTED_LOCALES, Config, ConfigError, load_config
from humanizer.engine.client import LanguageModelClient
from humanizer.engine.orchestrator import Orchestrator, validate_input
from humanizer.events.bus import EventBus, EventLogger
from humanizer.exceptions import ValidationError
from humanizer.messages import message
from humanizer.models import ModelProvider, create_provider
from humanizer.state.run_state import HumanizedOutput, Options, RunState, RunStatus
from humanizer.tui.widgets.score_gauge import gauge_percent

LOG_FILE_NAME = "humanizer.log"


def _configure_logging(config: Config) -> None:
    """Send logs to a file; the TUI owns the terminal."""
    level = getattr(logging, config.logging.level, logging.INFO)
    log_file = config.log_dir / LOG_FILE_NAME
    try:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as e:
        click.echo(f"Warning: cannot write log file {log_file}: {e}", err=True)
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
    ))
    logging.basicConfig(level=level, handlers=[handler], force=True)


def _build_orchestrator(config: Config, locale: str) -> tuple[Orchestrator, ModelProvider]:
    provider = create_provider(config.model)
    client = LanguageModelClient(
        provider,
        rewrite_temperature=config.model.rewrite_temperature,
    )
    events = EventBus()
    EventLogger().attach(events)
    return Orchestrator(client, event_bus=events, locale=locale), provider


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="humanizer")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to humanizer.toml configuration file.",
)
@click.option(
    "--locale",
    type=click.Choice(SUPPORTED_LOCALES),
    default=None,
    help="Language of user-facing messages. Overrides ui.locale.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, locale: str | None) -> None:
    """Humanizer: score AI-written text, rewrite it, and compare.

    When invoked without a subcommand, launches the interactive TUI.
    """
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    _configure_logging(config)
    ctx.obj["config"] = config
    ctx.obj["locale"] = locale or config.ui.locale

    if ctx.invoked_subcommand is None:
        _launch_tui(config, ctx.obj["locale"])


def _launch_tui(config: Config, locale: str) -> None:
    """Launch the Humanizer TUI."""
    from humanizer.tui.app import HumanizerApp

    try:
        orchestrator, provider = _build_orchestrator(config, locale)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    app = HumanizerApp(orchestrator, provider=provider, locale=locale)
    app.run()


def _format_report(result: HumanizedOutput, locale: str) -> str:
    """Plain-text before/after comparison for the terminal."""
    lines: list[str] = []
    for title_key, analysis in (
        ("before", result.original_analysis),
        ("after", result.transformed_analysis),
    ):
        lines.append(f"== {message(title_key, locale)} ==")
        lines.append(
            f"{message('ai_score', locale)}: {gauge_percent(analysis.ai_score)}%   "
            f"{message('human_score', locale)}: {gauge_percent(analysis.human_score)}%"
        )
        if analysis.readability:
            lines.append(f"{message('readability', locale)}: {analysis.readability}")
        lines.extend(f"  - {reason}" for reason in analysis.reasons)
        lines.append("")
    lines.append(f"== {message('final_text', locale)} ==")
    lines.append(result.transformed_text)
    return "\n".join(lines)


async def _run_once(config: Config, locale: str, text: str, options: Options) -> RunState:
    orchestrator, provider = _build_orchestrator(config, locale)
    try:
        return await orchestrator.submit(text, options)
    finally:
        await provider.close()


@cli.command()
@click.argument("text", required=False)
@click.option(
    "--file", "-f", "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read the input text from a file.",
)
@click.option("--audience", default="", help="Target audience hint for the rewrite.")
@click.option("--tone", default="", help="Tone/style hint for the rewrite.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
@click.pass_context
def run(
    ctx: click.Context,
    text: str | None,
    file_path: Path | None,
    audience: str,
    tone: str,
    as_json: bool,
) -> None:
    """Run one analysis/rewrite cycle without the TUI.

    TEXT may be omitted, in which case it is read from --file or stdin.
    """
    config: Config = ctx.obj["config"]
    locale: str = ctx.obj["locale"]

    if file_path is not None:
        try:
            text = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            click.echo(f"Error: {file_path} is not valid UTF-8 text.", err=True)
            sys.exit(1)
        except OSError as e:
            click.echo(f"Error: cannot read {file_path}: {e}", err=True)
            sys.exit(1)
    elif text is None:
        stdin = click.get_text_stream("stdin")
        text = "" if stdin.isatty() else stdin.read()

    try:
        validate_input(text or "")
    except ValidationError:
        click.echo("Error: input text is empty.", err=True)
        sys.exit(1)

    try:
        state = asyncio.run(
            _run_once(config, locale, text, Options(audience=audience, tone=tone)),
        )
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    if state.status != RunStatus.COMPLETED or state.result is None:
        click.echo(state.error or message("run_error", locale), err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(state.result.to_dict(), ensure_ascii=False, indent=2))
    else:
        click.echo(_format_report(state.result, locale))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
