"""Split an SVG path ``d`` string into command letters and number literals."""

from __future__ import annotations

import re
from decimal import Decimal

from app.svg.errors import MalformedPathError

# Both "1.5e3" and "1.e3" are legal SVG numbers
_SCIENTIFIC_RE = re.compile(r"(?:\d+\.?\d*|\.\d+)[eE][-+]?\d+")
_LETTER_RE = re.compile(r"([A-Za-z])")
_SEPARATOR_RE = re.compile(r"[\s,]+")

# Beyond this a double is infinite (or indistinguishable from zero)
_MAX_EXPONENT = 308


def _plain_decimal(match: re.Match[str]) -> str:
    number = Decimal(match.group(0))
    if not number or number.adjusted() < -_MAX_EXPONENT:
        return "0"
    if number.adjusted() > _MAX_EXPONENT:
        raise MalformedPathError(f"Number out of range: {match.group(0)!r}")
    text = format(number, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def tokenize(d: str) -> list[str]:
    """Return the flat token list for a path string.

    ``"l10-5"`` becomes ``["l", "10", "-5"]``. A blank string returns ``[""]``,
    which callers read as "no path".
    """
    text = _SCIENTIFIC_RE.sub(_plain_decimal, d or "")
    # Letters act as separators in SVG, so give them room on both sides
    text = _LETTER_RE.sub(r" \1 ", text)
    text = text.replace("-", " -")
    return _SEPARATOR_RE.split(text.strip())


def is_command(token: str) -> bool:
    return len(token) == 1 and token.isalpha()
