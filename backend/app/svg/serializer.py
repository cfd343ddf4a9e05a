"""Write parsed paths back out as compact path strings."""

from __future__ import annotations

import re
from typing import Sequence

from app.models.records import PathRecord, SerializedPathRecord
from app.svg.interpreter import PathValue
from app.utils.math_helpers import format_number

# Letters already separate tokens, so commas beside them are redundant
_COMMA_AROUND_LETTER_RE = re.compile(r",?([a-zA-Z]),?")


def join_path(path: Sequence[PathValue]) -> str:
    """``["M", 10.0, 10.0, "L", 20.5, 20.0]`` → ``"M10,10L20.5,20"``."""
    text = ",".join(v if isinstance(v, str) else format_number(v) for v in path)
    return _COMMA_AROUND_LETTER_RE.sub(r"\1", text)


def path_to_string(records: Sequence[PathRecord]) -> list[SerializedPathRecord]:
    """Return a copy of each record with its path joined into a string."""
    return [
        SerializedPathRecord(name=r.name, path=join_path(r.path), has_fill=r.has_fill)
        for r in records
    ]
