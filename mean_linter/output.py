"""Output rendering."""

from __future__ import annotations

import json
from typing import Any

import click

from mean_linter import __version__
from mean_linter.rules.base import Finding
from mean_linter.scanning import Verdict, group_by_file


def render_human(verdict: Verdict) -> str:
    """Render the colorized report."""
    if verdict.ok:
        return click.style(
            "\n✅ Your code passed the mean-linter... this time. 😈\n", fg="green"
        )

    lines: list[str] = [click.style("\n🚨 MEAN LINTER REPORT 🚨\n", fg="red", bold=True)]
    for path, findings in group_by_file(verdict.issues).items():
        lines.append(click.style(f"\nFile: {path}", fg="yellow", bold=True))
        for finding in findings:
            lines.append(
                click.style(f"  Line {finding.line_number}: {finding.code}", fg="bright_black")
            )
            lines.append(click.style(f"  ❌ {finding.message}", fg="red"))
            if finding.matched_text:
                lines.append(click.style(f'     Found: "{finding.matched_text}"', fg="red"))
            lines.append("")

    lines.append(
        click.style(
            "\n😬 Nice try. But no. Clean your code and come back stronger. Commit rejected.\n",
            fg="red",
            bold=True,
        )
    )
    return "\n".join(lines)


def render_json(verdict: Verdict) -> str:
    """Render stable JSON output for CI and automation."""
    return json.dumps(build_json_payload(verdict), sort_keys=True)


def build_json_payload(verdict: Verdict) -> dict[str, Any]:
    """Build the JSON payload for a verdict."""
    return {
        "ok": verdict.ok,
        "issues": [_serialize_finding(item) for item in verdict.issues],
        "files": [
            {"path": path, "issues": [_serialize_finding(item) for item in findings]}
            for path, findings in group_by_file(verdict.issues).items()
        ],
        "meta": {"version": __version__},
    }


def _serialize_finding(finding: Finding) -> dict[str, Any]:
    return {
        "rule_id": finding.rule_id,
        "file": finding.file,
        "line_number": finding.line_number,
        "code": finding.code,
        "message": finding.message,
        "match": finding.matched_text,
    }
