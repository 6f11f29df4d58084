"""
ccparse.core.parser - Assemble a commit message from its lines.

The header is line 0 and line 1 must be blank. Every later line is
either body text or footer text:

- Lines are body text until the first line matching the footer grammar.
- From then on every line belongs to the footer block. A matching line
  starts a new footer; any other line (blank lines included) continues
  the value of the footer before it. The block never switches back to
  body text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from ccparse.core.exceptions import EmptyMessage, MissingBlankLineAfterHeader
from ccparse.core.grammar import match_footer, parse_header
from ccparse.core.lines import split_lines
from ccparse.core.models import CommitMessage, Footer, Header


class AssemblerState(Enum):
    ACCUMULATING_BODY = "body"
    ACCUMULATING_FOOTER = "footer"


def _join(lines: Sequence[str]) -> str:
    return "\n".join(lines).rstrip("\r\n")


@dataclass
class _PendingFooter:
    token: str
    separator: str
    value_lines: list[str] = field(default_factory=list)

    def finalize(self) -> Footer:
        return Footer(token=self.token, separator=self.separator, value=_join(self.value_lines))


class MessageAssembler:
    """Two-state machine splitting post-header lines into body and footers.

    An instance holds the accumulators for a single parse; create a new
    one for each message.
    """

    def __init__(self) -> None:
        self.state = AssemblerState.ACCUMULATING_BODY
        self._body_lines: list[str] = []
        self._footers: list[Footer] = []
        self._pending: Optional[_PendingFooter] = None

    def feed(self, line: str) -> None:
        """Classify one line as body, a new footer, or a footer continuation."""
        parsed = match_footer(line)
        if parsed is not None:
            if self.state is AssemblerState.ACCUMULATING_FOOTER:
                self._flush_pending()
            else:
                self.state = AssemblerState.ACCUMULATING_FOOTER
            self._pending = _PendingFooter(parsed.token, parsed.separator, [parsed.value])
        elif self.state is AssemblerState.ACCUMULATING_FOOTER:
            assert self._pending is not None
            self._pending.value_lines.append(line)
        else:
            self._body_lines.append(line)

    def finish(self, header: Header) -> CommitMessage:
        """Flush any pending footer and build the message."""
        self._flush_pending()
        return CommitMessage(
            header=header,
            body=_join(self._body_lines),
            footers=tuple(self._footers),
        )

    def _flush_pending(self) -> None:
        if self._pending is not None:
            self._footers.append(self._pending.finalize())
            self._pending = None


def parse_lines(lines: Sequence[str]) -> CommitMessage:
    """Parse a commit message that has already been split into lines.

    Args:
        lines: Message lines, header first.

    Returns:
        The parsed CommitMessage.

    Raises:
        EmptyMessage: If there are no lines.
        MalformedHeader: If the first line is not a valid header.
        MissingBlankLineAfterHeader: If the second line is not empty.
    """
    if not lines:
        raise EmptyMessage()

    header = parse_header(lines[0])

    if len(lines) > 1 and lines[1] != "":
        raise MissingBlankLineAfterHeader(lines[1])

    assembler = MessageAssembler()
    for line in lines[2:]:
        assembler.feed(line)
    return assembler.finish(header)


def parse_message(text: str) -> CommitMessage:
    """Parse raw commit message text.

    Args:
        text: Full message; ``\\n`` and ``\\r\\n`` endings are both accepted.

    Returns:
        The parsed CommitMessage.
    """
    return parse_lines(split_lines(text))
