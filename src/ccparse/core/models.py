"""
ccparse.core.models - Data models for parsed commit messages.

Provides immutable dataclasses for the header, footers and the
assembled commit message document.
"""

from __future__ import annotations

from dataclasses import dataclass, field

BREAKING_CHANGE_TOKENS = ("BREAKING CHANGE", "BREAKING-CHANGE")


@dataclass(frozen=True)
class Header:
    """
    The summary line of a commit.

    Attributes:
        type: Commit type (e.g., "feat", "fix")
        scope: Parenthesized scope, or "" when absent
        breaking: True when the header carries the "!" marker
        message: Subject text after ": " (may be empty)
    """

    type: str
    scope: str = ""
    breaking: bool = False
    message: str = ""

    def __str__(self) -> str:
        scope = f"({self.scope})" if self.scope else ""
        bang = "!" if self.breaking else ""
        return f"{self.type}{scope}{bang}: {self.message}"


@dataclass(frozen=True)
class Footer:
    """
    A trailing metadata entry such as ``Reviewed-by: Z`` or ``Refs #133``.

    Attributes:
        token: Footer token (e.g., "Reviewed-by", "BREAKING CHANGE")
        separator: Either ": " or " #", kept verbatim
        value: Footer value; continuation lines are joined with "\\n"
    """

    token: str
    separator: str
    value: str

    @property
    def is_breaking_change(self) -> bool:
        return self.token in BREAKING_CHANGE_TOKENS

    def __str__(self) -> str:
        return f"{self.token}{self.separator}{self.value}"


@dataclass(frozen=True)
class CommitMessage:
    """
    A fully parsed commit message.

    Attributes:
        header: The parsed header line
        body: Free text between the header and the first footer
        footers: Footers in the order they appear in the message
    """

    header: Header
    body: str = ""
    footers: tuple[Footer, ...] = field(default_factory=tuple)

    @property
    def is_breaking(self) -> bool:
        """True if the header has "!" or any footer is a BREAKING CHANGE."""
        return self.header.breaking or any(f.is_breaking_change for f in self.footers)

    def footer_values(self, token: str) -> list[str]:
        """Return the values of every footer with the given token, in order."""
        return [f.value for f in self.footers if f.token == token]
