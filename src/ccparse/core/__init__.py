"""
ccparse.core - Line splitting, grammars and the message assembler.
"""

from ccparse.core.grammar import match_footer, parse_header
from ccparse.core.lines import split_lines
from ccparse.core.parser import AssemblerState, MessageAssembler, parse_lines, parse_message

__all__ = [
    "AssemblerState",
    "MessageAssembler",
    "match_footer",
    "parse_header",
    "parse_lines",
    "parse_message",
    "split_lines",
]
