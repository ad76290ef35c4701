"""API response models."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    converters_registered: int = 0


class ConvertResponse(BaseModel):
    svg: str
    converted: int = 0
    processing_time_ms: float = 0.0
