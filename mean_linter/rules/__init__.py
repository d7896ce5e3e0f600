"""Rule catalog."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from mean_linter.rules.base import Finding, Rule

__all__ = [
    "RULE_CATALOG",
    "Finding",
    "Rule",
    "RuleInfo",
    "build_rules",
    "list_rule_info",
    "unknown_rule_ids",
]


@dataclass(frozen=True, slots=True)
class RuleInfo:
    """Rule metadata for listing."""

    rule_id: str
    pattern: str
    message: str
    enabled: bool


def _rule(rule_id: str, pattern: str, message: str, flags: int = 0) -> Rule:
    return Rule(rule_id=rule_id, pattern=re.compile(pattern, re.ASCII | flags), message=message)


# Ids are referenced from users' .meanlintrc files; renaming one breaks their config.
RULE_CATALOG: tuple[Rule, ...] = (
    _rule(
        "console",
        r"console\.(log|warn|error|info|debug)\(",
        "Busted! Console statements left behind. Clean up your mess before going to prod.",
    ),
    _rule(
        "var",
        r"var\s+",
        "'var'? Really? It's 2025. Use 'let' or 'const' like a grown-up.",
    ),
    _rule(
        "empty-catch",
        r"catch\s*\([^)]*\)\s*\{(?:/\*(?:[^*]|\*+[^*/])*\*+/|\s)*(?://[^\n]*)?\}",
        "Empty catch block spotted. Just ignoring errors, huh? Bold strategy.",
    ),
    _rule(
        "long-lines",
        r"[^\n]{120,}",
        "Whoa there! Line's too long. Code isn't a bedtime story: break it up.",
    ),
    _rule(
        "single-letter-vars",
        r"\b(?:let|const|var)\s+(a|b|c|x|y|z)\b",
        "Single-letter variables? What is this, algebra class? Be descriptive.",
    ),
    _rule(
        "todo-comment",
        r"//\s*(TODO|FIXME|HACK)",
        "Found a TODO/FIXME. Future you is judging you already.",
        flags=re.IGNORECASE,
    ),
    _rule(
        "loose-eq",
        r"(?<![=!])==(?![=])",
        "Loose equality? That's how bugs sneak in. Use `===` and stay sharp.",
    ),
    _rule(
        "eval",
        r"eval\(",
        "`eval()`? Are you trying to summon demons? Don't.",
    ),
    _rule(
        "for-loop",
        r"[^\w]for\([^;]*;[^;]*;[^)]*\)",
        "Classic for-loop detected. Are we stuck in 2009? Use modern methods.",
    ),
    _rule(
        "while-true",
        r"[^\w]while\(true\)",
        "Infinite loop? Better have snacks. Or better yet, a break condition.",
    ),
    _rule(
        "alert",
        r"[^\w]alert\(",
        "alert() detected. This isn't 1999.",
    ),
    _rule(
        "document-write",
        r"[^\w]document\.write\(",
        "document.write() detected. This is considered harmful.",
    ),
    _rule(
        "new-array",
        r"\bnew\s+Array\(\)",
        "`new Array()`? Nah. Use `[]` and move on with your life.",
    ),
    _rule(
        "new-object",
        r"\bnew\s+Object\(\)",
        "`new Object()` spotted. Use `{}` like everyone else.",
    ),
)

_KNOWN_IDS = frozenset(rule.rule_id for rule in RULE_CATALOG)


def build_rules(disabled_rule_ids: Iterable[str] | None = None) -> list[Rule]:
    """Return catalog rules minus the disabled ids, in catalog order."""
    disabled = set(disabled_rule_ids or ())
    return [rule for rule in RULE_CATALOG if rule.rule_id not in disabled]


def unknown_rule_ids(rule_ids: Iterable[str]) -> list[str]:
    """Return the ids that are not part of the catalog."""
    return sorted(set(rule_ids) - _KNOWN_IDS)


def list_rule_info(disabled_rule_ids: Iterable[str] | None = None) -> list[RuleInfo]:
    """Return metadata for every catalog rule with its enabled state."""
    active_ids = {rule.rule_id for rule in build_rules(disabled_rule_ids)}
    return [
        RuleInfo(
            rule_id=rule.rule_id,
            pattern=rule.pattern.pattern,
            message=rule.message,
            enabled=rule.rule_id in active_ids,
        )
        for rule in RULE_CATALOG
    ]
