"""Configuration loading for mean-linter."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from mean_linter.rules import unknown_rule_ids

CONFIG_FILENAME = ".meanlintrc"

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LinterConfig:
    """Project settings resolved from ``.meanlintrc``."""

    disable_rules: frozenset[str] = field(default_factory=frozenset)
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "disableRules": sorted(self.disable_rules),
            "source": self.source,
        }


def load_config(repo: Path) -> LinterConfig:
    """Load ``.meanlintrc`` from ``repo``.

    A missing file yields the defaults silently. An unreadable or malformed
    file is reported as a warning and also yields the defaults, so a broken
    config never blocks a scan.
    """
    path = repo / CONFIG_FILENAME
    if not path.exists():
        return LinterConfig()

    try:
        loaded = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Could not parse %s, using defaults (%s).", path, exc)
        return LinterConfig()

    if not isinstance(loaded, dict):
        logger.warning("Could not parse %s, using defaults (expected a JSON object).", path)
        return LinterConfig()

    disabled = _as_str_list(loaded.get("disableRules", []))
    if disabled is None:
        logger.warning(
            "Ignoring disableRules in %s: expected a list of rule ids.",
            path,
        )
        return LinterConfig(source=str(path))

    unknown = unknown_rule_ids(disabled)
    if unknown:
        logger.warning("Unknown rule ids in %s: %s", path, ", ".join(unknown))

    return LinterConfig(disable_rules=frozenset(disabled), source=str(path))


def default_config_template() -> str:
    """Return the content written by ``mean-linter init``."""
    return json.dumps({"disableRules": []}, indent=2)


def _as_str_list(value: Any) -> list[str] | None:
    if not isinstance(value, list):
        return None
    if not all(isinstance(item, str) for item in value):
        return None
    return list(value)
