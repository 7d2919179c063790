from __future__ import annotations

import math
import re
from typing import Optional

# Plain ASCII decimal notation: optional sign, digits with an optional
# fraction, optional exponent. No digit separators.
_FLOAT_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


def parse_float(text: str) -> Optional[float]:
    """Parse a user-typed real number, ``None`` when the text is not one.

    NaN, infinities and values that overflow are treated as malformed input.
    A negative zero is returned as ``0.0``.
    """
    if text is None:
        return None
    text = text.strip()
    if not _FLOAT_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value + 0.0


def parse_int(text: str) -> Optional[int]:
    if text is None:
        return None
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)
