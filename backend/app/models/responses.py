"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.models.records import PathRecord, SerializedPathRecord


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class ParsePathResponse(BaseModel):
    path: list[str | float] = Field(default_factory=list)


class SerializeResponse(BaseModel):
    records: list[SerializedPathRecord] = Field(default_factory=list)


class NormalizeResponse(BaseModel):
    records: list[PathRecord] = Field(default_factory=list)


class Series(BaseModel):
    data: list[SerializedPathRecord | PathRecord] = Field(default_factory=list)


class ConvertResponse(BaseModel):
    series: list[Series] = Field(default_factory=list)
    processing_time_ms: float = 0.0
    shapes_converted: int = 0
    shapes_failed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)
