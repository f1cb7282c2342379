import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.routers import reply, validation

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load settings on startup so missing DashScope credentials fail fast."""
    settings = get_settings()
    logger.info(
        "Startup complete | app_id=%s | base_url=%s | timeout=%.0fs",
        settings.dashscope_app_id,
        settings.dashscope_base_url,
        settings.request_timeout,
    )
    yield
    logger.info("Shutting down.")


app = FastAPI(
    title="Review Reply Drafter",
    description=(
        "Validates merchant details and a customer review, then drafts a reply "
        "through a hosted DashScope application."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(validation.router)
app.include_router(reply.router)


@app.get("/health", tags=["health"])
async def health_check():
    return {"status": "ok", "version": "1.0.0"}
