import re

from .errors import ConversionError

_INT_RE = re.compile(r"[+-]?[0-9]+")

INT_MIN = -(1 << 63)
INT_MAX = (1 << 63) - 1


def parse_int(text: str | None, *, key: str | None = None) -> int:
    """Parses a base-10 integer literal (optional sign, ASCII digits, 64-bit)."""
    s = "" if text is None else str(text)
    if not _INT_RE.fullmatch(s):
        raise ConversionError(s, "invalid syntax", key=key)
    n = int(s)
    if n < INT_MIN or n > INT_MAX:
        raise ConversionError(s, "value out of range", key=key)
    return n

