"""mean-linter: a pre-commit gate for suspicious patterns in staged diffs."""

__version__ = "0.1.0"
