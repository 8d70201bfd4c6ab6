"""FastAPI application entrypoint with Lambda handler."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum

from . import __version__
from .config import settings
from .routes import alexa, health

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.debug else logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown events."""
    logger.info(f"Starting {settings.service_name} {__version__} in {settings.environment} mode")
    logger.info(f"Serving skill: {settings.skill_name}")
    yield
    logger.info(f"Shutting down {settings.service_name}")


app = FastAPI(
    title=f"{settings.skill_name} Alexa Skill",
    description="Alexa skill webhook built on typed request/response envelopes",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS for the webhook (POST) and health check (GET)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

# Include routers
app.include_router(health.router)
app.include_router(alexa.router)

# Lambda handler via Mangum
handler = Mangum(app, lifespan="off")
