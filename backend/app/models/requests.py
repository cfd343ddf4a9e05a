"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.models.records import PathRecord


class ParsePathRequest(BaseModel):
    d: str = Field(..., description="SVG path data (the d attribute)")
    translate: tuple[float, float] | None = Field(
        default=None,
        description="Optional (x, y) offset from a translate() transform",
    )


class SerializeRequest(BaseModel):
    records: list[PathRecord] = Field(..., description="Parsed path records")


class NormalizeRequest(BaseModel):
    records: list[PathRecord] = Field(..., description="Parsed path records")
    scale: float | None = Field(default=None, gt=0, description="Target box size")


class ConvertRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    scale: float | None = Field(default=None, gt=0, description="Target box size")
    serialize: bool = Field(default=False, description="Return paths as compact strings")
