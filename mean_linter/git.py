"""Git subprocess helpers."""

from __future__ import annotations

from pathlib import Path
from subprocess import CalledProcessError, run

# Pinned prefixes keep the "+++ b/<path>" header form whatever diff.* config says.
STAGED_DIFF_ARGS = [
    "diff",
    "--cached",
    "--unified=0",
    "--no-color",
    "--no-ext-diff",
    "--src-prefix=a/",
    "--dst-prefix=b/",
]


class GitError(RuntimeError):
    """Raised when git command execution fails."""


def get_staged_diff(repo: Path) -> str:
    """Return the zero-context diff of staged changes."""
    return _run_git(repo, STAGED_DIFF_ARGS)


def _run_git(repo: Path, args: list[str]) -> str:
    try:
        completed = run(
            ["git", *args],
            cwd=repo,
            check=True,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        raise GitError(f"could not run git: {exc}") from exc
    except CalledProcessError as exc:
        stderr = (exc.stderr or "").strip()
        raise GitError(stderr or f"git {' '.join(args)} failed") from exc

    return completed.stdout
