"""
ccparse.core.lines - Split raw message text into logical lines.
"""

from __future__ import annotations


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n`` and drop one trailing ``\\r`` from each line.

    Both ``\\n`` and ``\\r\\n`` endings are accepted. Nothing is dropped:
    a final newline leaves a trailing empty string, and empty text
    yields ``[""]``.

    Args:
        text: Raw message text.

    Returns:
        List of lines in source order.
    """
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
