"""Named path records — one per traced SVG shape or group."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

_DIRECTIVES = {"M", "L", "C"}


class PathRecord(BaseModel):
    name: str | None = None
    # Directive letters (M, L, C) interleaved with absolute coordinates
    path: list[str | float] = Field(default_factory=list)
    has_fill: bool = False

    @field_validator("path")
    @classmethod
    def _only_absolute_directives(cls, path: list[str | float]) -> list[str | float]:
        for value in path:
            if isinstance(value, str) and value not in _DIRECTIVES:
                raise ValueError(f"path may only contain M, L, C directives, got {value!r}")
        return path

    def coordinates(self) -> list[float]:
        return [v for v in self.path if not isinstance(v, str)]


class SerializedPathRecord(BaseModel):
    name: str | None = None
    path: str = ""
    has_fill: bool = False
