"""POST /api/convert — replace basic shapes in an SVG with paths."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from shape2path.config import Settings
from shape2path.dependencies import get_settings
from shape2path.engine.dispatcher import convert
from shape2path.models.options import ConversionOptions
from shape2path.models.requests import ConvertRequest
from shape2path.models.responses import ConvertResponse
from shape2path.svg.document import SvgParseError, parse_svg, serialize_svg

router = APIRouter()


@router.post("/convert", response_model=ConvertResponse)
def convert_svg(req: ConvertRequest, settings: Settings = Depends(get_settings)) -> ConvertResponse:
    start = time.perf_counter()

    try:
        options = ConversionOptions.from_settings(settings, req.options)
    except ValidationError as e:
        detail = e.errors(include_url=False, include_context=False, include_input=False)
        raise HTTPException(status_code=422, detail=detail) from e

    try:
        root = parse_svg(req.svg)
    except SvgParseError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    converted = convert(root, options=options)
    elapsed = (time.perf_counter() - start) * 1000

    return ConvertResponse(
        svg=serialize_svg(root),
        converted=converted,
        processing_time_ms=round(elapsed, 3),
    )
