"""Line probing helpers over an archive string."""

from typing import Optional


def next_line(text: str, pos: int) -> Optional[int]:
    """
    Return the offset of the line following the one containing `pos`.

    Args:
        text: Archive text
        pos: Any offset inside the current line

    Returns:
        Start offset of the next line, or None if `pos` is on the last line

    Examples:
        >>> next_line("a\\nb", 0)
        2
        >>> next_line("a\\nb", 2) is None
        True
    """
    newline = text.find("\n", pos)
    if newline == -1:
        return None
    return newline + 1


def line_at(text: str, pos: int) -> str:
    """Return the line starting at `pos`, without its line terminator."""
    newline = text.find("\n", pos)
    if newline == -1:
        return text[pos:]
    return text[pos:newline]


def is_blank(line: str) -> bool:
    return not line.strip()
