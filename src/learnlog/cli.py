"""CLI entry point for learnlog."""

import logging
import sys
from datetime import datetime

import click

from .classifier import classify, heading_for, load_rules
from .config import PROVIDERS, load_config
from .exceptions import ConfigError, GitError, LLMError
from .index import init_index
from .llm import get_llm_provider
from .pipeline import run_daily


def setup_logging(verbose: bool = False) -> None:
    """Configure timestamped logging for scheduled runs."""
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        level=logging.DEBUG if verbose else logging.INFO,
    )
    # Reduce noise from libraries
    for name in ("httpx", "openai", "anthropic", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)


def _parse_date(ctx, param, value):
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise click.BadParameter(f"Invalid date: {value}. Use YYYY-MM-DD.")


@click.group()
def main():
    """Generate a daily learning note and file it in the notes index."""


@main.command()
@click.option(
    "--date",
    "run_date",
    callback=_parse_date,
    default=None,
    help="Date to file the note under (default: today, YYYY-MM-DD)",
)
@click.option(
    "--provider",
    type=click.Choice(PROVIDERS),
    default=None,
    help="LLM provider (default: claude-cli, or LLM_PROVIDER env var)",
)
@click.option(
    "--model",
    type=str,
    default=None,
    help="LLM model to use (default: provider default, or LLM_MODEL env var)",
)
@click.option(
    "--repo-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Notes repository (default: REPO_DIR env var or current directory)",
)
@click.option("--no-commit", is_flag=True, default=False, help="Skip git commit and push")
@click.option("--no-push", is_flag=True, default=False, help="Commit but do not push")
@click.option("--no-notify", is_flag=True, default=False, help="Skip webhook and email")
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
def run(run_date, provider, model, repo_dir, no_commit, no_push, no_notify, verbose):
    """Generate, save, index, commit and announce today's note."""
    setup_logging(verbose)

    try:
        config = load_config(
            repo_dir=repo_dir,
            provider=provider,
            model=model,
            commit=not no_commit,
            push=not no_push,
            notify=not no_notify,
            verbose=verbose,
        )
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    if verbose:
        click.echo(f"Provider: {config.llm_provider} ({config.default_model or 'default'})")
        click.echo(f"Notes directory: {config.notes_dir}")

    try:
        llm = get_llm_provider(config)
    except Exception as e:
        click.echo(f"Failed to initialize LLM provider: {e}", err=True)
        sys.exit(2)

    try:
        result = run_daily(config, llm, today=run_date)
    except LLMError as e:
        click.echo(f"Note generation failed: {e}", err=True)
        sys.exit(2)
    except GitError as e:
        click.echo(f"Git failed: {e}", err=True)
        sys.exit(2)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    click.echo(f"Saved: {result.note_path}")
    click.echo(f"Category: {result.heading}")
    if result.warnings:
        click.echo(f"Finished with {len(result.warnings)} warning(s)")
    else:
        click.echo("Done!")


@main.command("init-index")
@click.option(
    "--repo-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Notes repository (default: REPO_DIR env var or current directory)",
)
def init_index_command(repo_dir):
    """Create learning-notes/README.md with an empty section per category."""
    try:
        config = load_config(repo_dir=repo_dir, validate_llm=False)
        rules = load_rules(config.rules_file)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    try:
        path = init_index(config.index_path, rules)
    except FileExistsError as e:
        click.echo(str(e), err=True)
        sys.exit(1)
    click.echo(f"Created index: {path}")


@main.command("classify")
@click.argument("title")
def classify_command(title):
    """Print the index section a note TITLE would be filed under."""
    try:
        config = load_config(validate_llm=False)
        rules = load_rules(config.rules_file)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)
    click.echo(heading_for(classify(title, rules), rules))
