"""CLI entrypoint for mean-linter."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, NoReturn

import click
import typer

from mean_linter import __version__
from mean_linter.config import CONFIG_FILENAME, load_config
from mean_linter.git import GitError, get_staged_diff
from mean_linter.installer import InstallerError, init_project
from mean_linter.logging_config import setup_logging
from mean_linter.output import render_human, render_json
from mean_linter.rules import build_rules, list_rule_info
from mean_linter.scanning import scan_diff_text

app = typer.Typer(
    name="mean-linter",
    help="Scan staged changes for suspicious patterns and reject the commit if any turn up.",
)

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Print version and exit when --version is provided."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    repo: Annotated[Path, typer.Option(help="Repository path.")] = Path("."),
    diff_file: Annotated[
        Path | None, typer.Option(help="Scan a unified diff file instead of staged changes.")
    ] = None,
    stdin: Annotated[bool, typer.Option(help="Read unified diff from stdin.")] = False,
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version", help="Show version and exit.", callback=version_callback, is_eager=True
        ),
    ] = False,
) -> None:
    """Scan the staged diff when no command is given."""
    _ = version
    setup_logging(verbose)
    if ctx.invoked_subcommand is not None:
        return

    output_format = format.lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")
    if diff_file and stdin:
        raise typer.BadParameter("Use either --diff-file or --stdin, not both.")

    config = load_config(repo)
    rules = build_rules(config.disable_rules)

    try:
        diff_text = _resolve_diff_input(diff_file=diff_file, stdin=stdin, repo=repo)
    except (GitError, OSError) as exc:
        _fail("❌ Error running mean-linter:", str(exc))

    verdict = scan_diff_text(diff_text, rules)
    if output_format == "json":
        typer.echo(render_json(verdict))
    else:
        typer.echo(render_human(verdict))

    if not verdict.ok:
        raise typer.Exit(code=1)


@app.command("init")
def init_command(
    repo: Annotated[Path, typer.Option(help="Project path.")] = Path("."),
) -> None:
    """Install mean-linter as a Husky pre-commit hook."""
    typer.echo(
        click.style("\n🛠 Setting up mean-linter pre-commit hook using Husky...", fg="cyan")
    )
    try:
        report = init_project(repo)
    except InstallerError as exc:
        _fail("❌ Failed to set up Husky hook:", str(exc))

    for step in report.steps:
        typer.echo(click.style(f"✅ {step}", fg="green"))
    if not report.config_created:
        typer.echo(
            click.style(
                f"⚠️ {CONFIG_FILENAME} already exists. Skipping config creation.", fg="yellow"
            )
        )

    typer.echo(click.style("\n✅ mean-linter hook installed successfully!", fg="green"))
    typer.echo(
        click.style("\nFrom now on, your commits will be checked by the mean-linter.", fg="blue")
    )


@app.command("rules")
def rules_command(
    repo: Annotated[Path, typer.Option(help="Repository path.")] = Path("."),
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
) -> None:
    """List available rules and whether the project config enables them."""
    output_format = format.lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    config = load_config(repo)
    rule_info = list_rule_info(config.disable_rules)

    if output_format == "json":
        payload = {
            "rules": [
                {
                    "rule_id": item.rule_id,
                    "pattern": item.pattern,
                    "message": item.message,
                    "enabled": item.enabled,
                }
                for item in rule_info
            ],
            "meta": {"config_source": config.source},
        }
        typer.echo(json.dumps(payload, sort_keys=True))
        return

    lines = ["Available rules:"]
    for item in rule_info:
        status = "enabled" if item.enabled else "disabled"
        lines.append(f"- {item.rule_id} [{status}] - {item.message}")
    typer.echo("\n".join(lines))


def main() -> None:
    """Console script entrypoint."""
    app()


def _resolve_diff_input(*, diff_file: Path | None, stdin: bool, repo: Path) -> str:
    if diff_file is not None:
        logger.debug("Reading diff from %s", diff_file)
        return diff_file.read_text(encoding="utf-8", errors="replace")

    if stdin:
        logger.debug("Reading diff from stdin")
        return sys.stdin.buffer.read().decode("utf-8", errors="replace")

    logger.debug("Reading staged diff in %s", repo)
    return get_staged_diff(repo)


def _fail(headline: str, detail: str) -> NoReturn:
    typer.echo(click.style(headline, fg="red"), err=True)
    typer.echo(click.style(detail, fg="red"), err=True)
    raise typer.Exit(code=1)
