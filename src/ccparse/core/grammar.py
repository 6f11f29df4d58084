"""
ccparse.core.grammar - Header and footer line grammars.

Header:  <type>(<scope>)?!?: <message>
Footer:  <token><separator><value>, separator is ": " or " #"

Both patterns match the whole line. ``\\w`` is restricted to ASCII
letters, digits and underscore.
"""

from __future__ import annotations

import re
from typing import Optional

from ccparse.core.exceptions import MalformedHeader
from ccparse.core.models import Footer, Header

HEADER_PATTERN = re.compile(
    r"(?P<type>\w+)"
    r"(?:\((?P<scope>[\w$.\-*/ ]*)\))?"
    r"(?P<breaking>!)?"
    r": "
    r"(?P<message>.*)",
    re.ASCII,
)

FOOTER_PATTERN = re.compile(
    r"(?P<token>BREAKING CHANGE|[\w\-]+)"
    r"(?P<separator>: | #)"
    r"(?P<value>.+)",
    re.ASCII,
)


def parse_header(line: str) -> Header:
    """Parse a header line.

    Args:
        line: First line of the commit message.

    Returns:
        Parsed Header.

    Raises:
        MalformedHeader: If the line does not match the header grammar.
    """
    match = HEADER_PATTERN.fullmatch(line)
    if match is None:
        raise MalformedHeader(line)
    return Header(
        type=match.group("type"),
        scope=match.group("scope") or "",
        breaking=match.group("breaking") == "!",
        message=match.group("message"),
    )


def match_footer(line: str) -> Optional[Footer]:
    """Match a line against the footer grammar.

    A non-matching line is not an error; the caller decides whether it
    is body text or a footer continuation.

    Args:
        line: A single message line.

    Returns:
        Footer if the line starts a footer, None otherwise.
    """
    match = FOOTER_PATTERN.fullmatch(line)
    if match is None:
        return None
    return Footer(
        token=match.group("token"),
        separator=match.group("separator"),
        value=match.group("value"),
    )
