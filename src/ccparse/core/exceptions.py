"""
ccparse.core.exceptions - Parse failures.

Each failure is its own type so callers can branch on the kind of
problem; ``code`` gives the same tag as a stable string for tooling.
"""

from __future__ import annotations


class CommitParseError(ValueError):
    """Base class for all commit message parse failures."""

    code = "parse-error"


class EmptyMessage(CommitParseError):
    """The message has no lines at all."""

    code = "empty-message"

    def __init__(self) -> None:
        super().__init__("empty message")


class MissingBlankLineAfterHeader(CommitParseError):
    """The line following the header is not empty."""

    code = "missing-blank-line"

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"no empty line after header (found {line!r})")


class MalformedHeader(CommitParseError):
    """The first line does not match ``type(scope)!: message``."""

    code = "malformed-header"

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"header does not match 'type(scope)!: message': {line!r}")
