"""
Product catalog - FastAPI application.

The lifespan awaits repository initialisation, so the products file exists
before the first request is served.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from catalog.core.config import get_settings
from catalog.core.logging_setup import setup_logging
from catalog.repositories.json_storage import PathLike
from catalog.repositories.product_repository import ProductRepository
from catalog.routers import products as products_router

logger = logging.getLogger(__name__)


def create_app(products_file: Optional[PathLike] = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``uvicorn catalog.app:app``)."""
    settings = get_settings()
    setup_logging(settings.log_level)
    path = products_file or settings.products_file

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.product_repository = await ProductRepository.open(path)
        logger.info("Serving products from %s (env=%s)", path, settings.app_env)
        yield

    app = FastAPI(title="Product Catalog API", lifespan=lifespan)
    app.include_router(products_router.router)
    return app


app = create_app()
