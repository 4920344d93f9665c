"""
FastAPI application exposing the line-editing tools over HTTP.
"""

import logging

from fastapi import FastAPI

from file_editor.api.routers import router as api_router
from file_editor.config.settings import settings

# Create FastAPI app
app = FastAPI(title="File Editor Tools API")
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
