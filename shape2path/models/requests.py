"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Conversion overrides (e.g. circleAlgorithm='CubicBezier')",
    )
