"""
ccparse - Conventional Commits message parser

ccparse turns a commit message written in the Conventional Commits
style into a typed document: a header (type, scope, breaking flag,
subject), a free-text body, and an ordered list of footers.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ccparse")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from ccparse.core.exceptions import (
    CommitParseError,
    EmptyMessage,
    MalformedHeader,
    MissingBlankLineAfterHeader,
)
from ccparse.core.models import CommitMessage, Footer, Header
from ccparse.core.parser import parse_lines, parse_message

__all__ = [
    "__version__",
    "CommitMessage",
    "CommitParseError",
    "EmptyMessage",
    "Footer",
    "Header",
    "MalformedHeader",
    "MissingBlankLineAfterHeader",
    "parse_lines",
    "parse_message",
]
