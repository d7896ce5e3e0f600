"""Scan orchestration: evaluate rules against added lines and aggregate findings."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from mean_linter.diff_parser import AddedLine, iter_added_lines
from mean_linter.rules import build_rules
from mean_linter.rules.base import Finding, Rule

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Verdict:
    """Pass/fail outcome of a scan."""

    issues: list[Finding] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


def evaluate_line(added_line: AddedLine, rules: Sequence[Rule]) -> list[Finding]:
    """Test every rule against one added line.

    Each matching rule yields one finding built from its first match, in rule
    order. Rules never short-circuit each other.
    """
    findings: list[Finding] = []
    for rule in rules:
        matched = rule.first_match(added_line.text)
        if matched is None:
            continue
        findings.append(
            Finding(
                rule_id=rule.rule_id,
                file=added_line.file,
                line_number=added_line.line_number,
                code=added_line.text.strip(),
                message=rule.message,
                matched_text=matched.strip(),
            )
        )
    return findings


def scan_diff_text(diff_text: str, rules: Sequence[Rule] | None = None) -> Verdict:
    """Parse unified diff text and evaluate every added line."""
    active_rules = rules if rules is not None else build_rules()
    issues: list[Finding] = []
    scanned = 0
    for added_line in iter_added_lines(diff_text):
        scanned += 1
        issues.extend(evaluate_line(added_line, active_rules))

    logger.debug(
        "Scanned %d added line(s) with %d rule(s): %d finding(s)",
        scanned,
        len(active_rules),
        len(issues),
    )
    return Verdict(issues=issues)


def group_by_file(findings: Sequence[Finding]) -> dict[str, list[Finding]]:
    """Group findings by file, keeping first-seen file order."""
    grouped: dict[str, list[Finding]] = {}
    for finding in findings:
        grouped.setdefault(finding.file, []).append(finding)
    return grouped
