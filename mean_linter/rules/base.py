"""Rule record and finding model."""

from __future__ import annotations

from dataclasses import dataclass
from re import Pattern


@dataclass(frozen=True, slots=True)
class Rule:
    """A named pattern applied to a single added line."""

    rule_id: str
    pattern: Pattern[str]
    message: str

    def first_match(self, text: str) -> str | None:
        """Return the text of the first match in ``text``, if any."""
        match = self.pattern.search(text)
        if match is None:
            return None
        return match.group(0)


@dataclass(frozen=True, slots=True)
class Finding:
    """A single rule match against one added line."""

    rule_id: str
    file: str
    line_number: int
    code: str
    message: str
    matched_text: str
