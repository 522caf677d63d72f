"""
KitchenMate Web - FastAPI application.

Serves the wizard API. Everything lives in memory; restarting the process
drops all sessions.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kitchenmate import __version__
from kitchenmate.config import configure_logging, get_settings
from kitchenmate.wizard.api import router as wizard_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log configuration on startup."""
    from kitchenmate.llm.prompt_logger import is_enabled

    settings = get_settings()
    configure_logging()
    logger.info("KitchenMate starting up...")
    logger.info(f"  Environment: {settings.kitchenmate_env}")
    logger.info(f"  Model: {settings.kitchenmate_model}")
    logger.info(f"  OpenAI key configured: {settings.has_openai_key}")
    logger.info(f"  Prompt file logging: {is_enabled()}")
    yield


app = FastAPI(title="KitchenMate", version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(wizard_router)


@app.get("/health")
async def health():
    """Health check."""
    return {"status": "healthy", "version": __version__, "service": "kitchenmate"}
