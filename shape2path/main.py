"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI

from shape2path import __version__
from shape2path.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="shape2path",
        description="Convert SVG basic shapes into equivalent path elements",
        version=__version__,
    )

    from shape2path.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
