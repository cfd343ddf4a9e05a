"""SVG path interpreter — path string → flat absolute array for map rendering.

Two stages:

1. ``desugar`` rewrites horizontal/vertical lines into two-value line commands
   and rejects directives this format cannot carry.
2. ``resolve`` walks the canonical stream with an explicit ``ParserState``,
   turning relative values into absolute ones, applying the optional group
   translation and rounding every value to two decimals.

The result mixes directive letters and floats, e.g. ``["M", 10.0, 10.0, "L", 15.0, 15.0]``.
Only ``M``, ``L`` and ``C`` appear in the output.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from app.svg.errors import MalformedPathError, UnsupportedCommandError
from app.svg.tokenizer import is_command, tokenize
from app.utils.math_helpers import MAX_COORDINATE, round_half_up

PathValue = str | float
ParsedPath = list[PathValue]
Translate = Sequence[float]

# Values consumed per invocation of each directive
ARITY = {"M": 2, "L": 2, "C": 6}

_RELATIVE = {"m", "l", "c"}
_ABSOLUTE = {"M", "L", "C"}
_HORIZONTAL_VERTICAL = {"H", "h", "V", "v"}
_UNSUPPORTED = set("AaQqTtSsZz")


@dataclass(frozen=True)
class Carry:
    """Placeholder for a coordinate copied from the fixed point (0 = x, 1 = y)."""

    axis: int


CanonicalToken = str | Carry


@dataclass
class ParserState:
    """Walk state for one ``resolve`` call."""

    is_relative: bool = False
    operator: str | None = None
    position: int = 0
    fixed_point: tuple[float, float] = (0.0, 0.0)
    # Becomes True once the first coordinate group has been resolved
    anchored: bool = False

    @property
    def arity(self) -> int:
        return ARITY[self.operator.upper()] if self.operator else 2


def desugar(tokens: Sequence[str]) -> list[CanonicalToken]:
    """Rewrite H/h/V/v into L/l pairs; pass M, L, C (either case) and numbers through.

    ``H x`` becomes ``L x <carry y>``, ``h dx`` becomes ``l dx 0``. Repeated
    arguments (``H 10 20``) produce one pair per argument.
    """
    out: list[CanonicalToken] = []
    shorthand: str | None = None

    for index, token in enumerate(tokens):
        if token == "":
            continue

        if is_command(token):
            if token in _UNSUPPORTED:
                raise UnsupportedCommandError(token, index)
            if token in _HORIZONTAL_VERTICAL:
                shorthand = token
                out.append("L" if token.isupper() else "l")
            elif token in _ABSOLUTE or token in _RELATIVE:
                shorthand = None
                out.append(token)
            else:
                raise MalformedPathError(f"Unknown path command {token!r} at token {index}")
            continue

        if shorthand == "H":
            out.extend([token, Carry(1)])
        elif shorthand == "V":
            out.extend([Carry(0), token])
        elif shorthand == "h":
            out.extend([token, "0"])
        elif shorthand == "v":
            out.extend(["0", token])
        else:
            out.append(token)

    return out


def _parse_number(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise MalformedPathError(f"Expected a number, got {token!r}") from None


def resolve(stream: Sequence[CanonicalToken], translate: Translate | None = None) -> ParsedPath:
    """Resolve a canonical stream to absolute, translated, rounded values."""
    state = ParserState()
    path: ParsedPath = []

    for token in stream:
        if isinstance(token, str) and is_command(token):
            if state.position != 0:
                raise MalformedPathError(
                    f"Incomplete coordinate group before {token!r}: "
                    f"{state.operator!r} expects {state.arity} values"
                )
            state.operator = token
            state.is_relative = token in _RELATIVE
            path.append(token.upper())
            continue

        if state.operator is None:
            raise MalformedPathError("Path data must start with a command")

        axis = state.position % 2
        if isinstance(token, Carry):
            value = state.fixed_point[token.axis]
        else:
            value = _parse_number(token)
            if state.is_relative:
                value += state.fixed_point[axis]
            # Group translation lands once: on absolute values, or on the
            # anchor of a path that opens with a relative move.
            if translate is not None and (
                not state.is_relative or (state.operator == "m" and not state.anchored)
            ):
                value += translate[axis]
        if not math.isfinite(value) or abs(value) > MAX_COORDINATE:
            raise MalformedPathError(f"Coordinate out of range: {value!r}")
        value = round_half_up(value)
        path.append(value)

        if state.position == state.arity - 1:
            state.fixed_point = (path[-2], path[-1])
            state.anchored = True
            state.position = 0
        else:
            state.position += 1

    if state.position != 0:
        raise MalformedPathError(
            f"Path ends inside a coordinate group: {state.operator!r} expects {state.arity} values"
        )
    return path


def path_to_array(d: str | None, translate: Translate | None = None) -> ParsedPath:
    """Parse an SVG path string into the simplified array map series consume.

    ``translate`` is an optional ``(tx, ty)`` pair from the owning element's
    ``transform="translate(...)"``. Blank input returns ``[]``.
    """
    tokens = tokenize(d or "")
    if len(tokens) == 1:
        # A lone token is either blank input or a bare letter with no values
        if tokens[0] and not is_command(tokens[0]):
            raise MalformedPathError("Path data must start with a command")
        return []

    if translate is not None and (
        len(translate) != 2 or not all(math.isfinite(t) for t in translate)
    ):
        raise MalformedPathError(f"translate must be a finite (x, y) pair, got {translate!r}")

    return resolve(desugar(tokens), translate)
