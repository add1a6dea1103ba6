"""
Display width measurement for cell contents.

Widths are approximated per codepoint with wcwidth. This is not grapheme
cluster aware: a base character followed by a combining mark counts as the
base alone, but emoji ZWJ sequences count every visible component.
"""

from __future__ import annotations

from wcwidth import wcwidth


def char_width(char: str) -> int:
    """
    Return the number of terminal columns a single codepoint occupies.

    Non-printable control codepoints, for which wcwidth reports -1,
    contribute nothing.
    """
    w = wcwidth(char)
    return w if w > 0 else 0


def display_columns(data: bytes) -> int:
    """
    Guess the number of display columns used by a run of bytes.

    Args:
        data: Raw cell contents

    Returns:
        Sum of codepoint widths if the bytes are valid UTF-8, otherwise
        the byte length (one column per byte).
    """
    try:
        text = bytes(data).decode("utf-8")
    except UnicodeDecodeError:
        return len(data)
    return sum(char_width(ch) for ch in text)
