"""Husky pre-commit hook installation."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from subprocess import CalledProcessError, run
from typing import Any

from mean_linter.config import CONFIG_FILENAME, default_config_template

PACKAGE_JSON = "package.json"
HOOKS_DIRNAME = ".husky"
HOOK_FILENAME = "pre-commit"
HOOK_COMMAND = "mean-linter"
PREPARE_SCRIPT = "husky install"

logger = logging.getLogger(__name__)


class InstallerError(RuntimeError):
    """Raised when a setup step fails."""


@dataclass(slots=True)
class InstallReport:
    """What ``init_project`` did."""

    hook_path: Path
    husky_installed: bool = False
    prepare_added: bool = False
    config_created: bool = False
    steps: list[str] = field(default_factory=list)


def init_project(repo: Path) -> InstallReport:
    """Wire mean-linter into a Node.js project as a Husky pre-commit hook.

    Steps run in order and stop at the first failure; completed steps are not
    rolled back.
    """
    repo = repo.resolve()
    package_json = repo / PACKAGE_JSON
    if not package_json.exists():
        raise InstallerError(
            f"No {PACKAGE_JSON} found in {repo}. Please run this in a Node.js project directory."
        )

    hooks_dir = repo / HOOKS_DIRNAME
    report = InstallReport(hook_path=hooks_dir / HOOK_FILENAME)

    if not _declares_husky(_read_package_json(package_json)):
        _run_command(repo, ["npm", "install", "husky", "--save-dev"])
        report.husky_installed = True
        report.steps.append("Installed husky as a dev dependency.")

    _run_command(repo, ["npx", "husky", "install"])
    report.steps.append("Ran husky install.")

    try:
        hooks_dir.mkdir(parents=True, exist_ok=True)
        report.hook_path.write_text(f"{HOOK_COMMAND}\n", encoding="utf-8")
        report.hook_path.chmod(0o755)
    except OSError as exc:
        raise InstallerError(f"Could not write {report.hook_path}: {exc}") from exc
    report.steps.append(f"Wrote {report.hook_path.relative_to(repo)}.")

    # npm install may have rewritten package.json.
    package = _read_package_json(package_json)
    scripts = package.setdefault("scripts", {})
    if not isinstance(scripts, dict):
        raise InstallerError(f"'scripts' in {package_json} must be an object.")
    if not scripts.get("prepare"):
        scripts["prepare"] = PREPARE_SCRIPT
        _write_text(package_json, json.dumps(package, indent=2, ensure_ascii=False))
        report.prepare_added = True
        report.steps.append(f"Added prepare script to {PACKAGE_JSON}.")

    config_path = repo / CONFIG_FILENAME
    if not config_path.exists():
        _write_text(config_path, default_config_template())
        report.config_created = True
        report.steps.append(f"Created default {CONFIG_FILENAME} config file.")

    logger.debug("Installer finished: %s", report.steps)
    return report


def _declares_husky(package: dict[str, Any]) -> bool:
    for section in ("devDependencies", "dependencies"):
        deps = package.get(section)
        if isinstance(deps, dict) and "husky" in deps:
            return True
    return False


def _read_package_json(path: Path) -> dict[str, Any]:
    try:
        loaded = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InstallerError(f"Could not read {path}: {exc}") from exc
    if not isinstance(loaded, dict):
        raise InstallerError(f"{path} must contain a JSON object.")
    return loaded


def _run_command(repo: Path, args: list[str]) -> None:
    logger.debug("Running %s", " ".join(args))
    try:
        run(args, cwd=repo, check=True, capture_output=True, text=True)
    except OSError as exc:
        raise InstallerError(f"could not run {args[0]}: {exc}") from exc
    except CalledProcessError as exc:
        stderr = (exc.stderr or "").strip()
        raise InstallerError(stderr or f"{' '.join(args)} failed") from exc


def _write_text(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise InstallerError(f"Could not write {path}: {exc}") from exc
