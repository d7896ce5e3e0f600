"""Throwaway git repositories for staged-diff tests."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class StagedRepo:
    """A scratch repository whose index the tests fill before scanning."""

    root: Path

    @classmethod
    def create(cls, parent: Path, name: str = "repo") -> StagedRepo:
        root = parent / name
        root.mkdir()
        repo = cls(root)
        repo.git("init", "-q")
        repo.git("config", "user.email", "linter@example.com")
        repo.git("config", "user.name", "Mean Linter Tests")
        return repo

    def git(self, *args: str) -> str:
        return subprocess.run(
            ["git", *args], cwd=self.root, check=True, capture_output=True, text=True
        ).stdout

    def write(self, rel_path: str, *lines: str) -> Path:
        target = self.root / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return target

    def stage(self, *paths: str) -> None:
        self.git("add", "-A", *paths)

    def commit(self, message: str = "baseline") -> None:
        self.stage()
        self.git("commit", "-q", "-m", message)
