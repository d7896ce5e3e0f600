"""Added-line extraction from zero-context unified diffs."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, replace
from re import Pattern, compile

FILE_HEADER_PREFIX = "+++ b/"
HUNK_NEW_START_RE = compile(r"\+(\d+)")
UNKNOWN_FILE = "<unknown>"

SKIP_FILE_PATTERNS: tuple[Pattern[str], ...] = (
    compile(r"package\.json$"),
    compile(r"package-lock\.json$"),
    compile(r"yarn\.lock$"),
    compile(r"pnpm-lock\.yaml$"),
    compile(r"\.husky/"),
)


@dataclass(frozen=True, slots=True)
class AddedLine:
    """A line present in the new file version."""

    file: str
    line_number: int
    text: str


@dataclass(frozen=True, slots=True)
class ScanState:
    """Parser position carried from one diff line to the next."""

    current_file: str | None = None
    line_number: int = 0
    skip_file: bool = False


def iter_added_lines(
    diff_text: str, skip_patterns: Sequence[Pattern[str]] = SKIP_FILE_PATTERNS
) -> Iterator[AddedLine]:
    """Yield every added line of ``diff_text`` outside skip-listed files."""
    state = ScanState()
    for raw_line in diff_text.split("\n"):
        state, added = advance(state, raw_line, skip_patterns)
        if added is not None:
            yield added


def advance(
    state: ScanState, raw_line: str, skip_patterns: Sequence[Pattern[str]] = SKIP_FILE_PATTERNS
) -> tuple[ScanState, AddedLine | None]:
    """Consume one diff line, returning the next state and any added line."""
    if raw_line.startswith(FILE_HEADER_PREFIX):
        path = raw_line[len(FILE_HEADER_PREFIX) :]
        return (
            replace(state, current_file=path, skip_file=is_skipped_path(path, skip_patterns)),
            None,
        )

    if state.skip_file:
        return (state, None)

    if raw_line.startswith("@@"):
        match = HUNK_NEW_START_RE.search(raw_line)
        if match is None:
            return (state, None)
        return (replace(state, line_number=int(match.group(1))), None)

    if not raw_line.startswith("+") or raw_line.startswith("+++"):
        return (state, None)

    added = AddedLine(
        file=state.current_file if state.current_file is not None else UNKNOWN_FILE,
        line_number=state.line_number,
        text=raw_line[1:],
    )
    return (replace(state, line_number=state.line_number + 1), added)


def is_skipped_path(path: str, skip_patterns: Sequence[Pattern[str]] = SKIP_FILE_PATTERNS) -> bool:
    return any(pattern.search(path) for pattern in skip_patterns)
