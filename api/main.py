"""Entrypoint for the file vault API"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.errors import register_error_handlers
from api.routes import files, urls
from core.config import settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.getLogger("core").setLevel(settings.LOG_LEVEL)
    yield


app = FastAPI(
    title="File Vault API",
    version="0.1.0",
    description="Validates untrusted paths, file content, identifiers and URLs",
    lifespan=lifespan,
)

register_error_handlers(app)
app.include_router(files.router)
app.include_router(urls.router)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}
