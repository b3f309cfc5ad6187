"""
gateway/main.py

FastAPI application entry point for the alert HTTP gateway.
Registers routers, allows cross-origin calls, and renders every error as a
JSON body of the form {"error": ...}.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from gateway.routers.alerts import router as alerts_router
from gateway.routers.interactions import router as interactions_router
from gateway.routers.tokens import router as tokens_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifecycle: startup and shutdown."""
    logger.info("gateway_starting", cors_allow_origins=settings.cors_allow_origins)
    yield
    logger.info("gateway_shutting_down")


app = FastAPI(
    title="RescueTN Alert Gateway",
    description="Token registration, click tracking and manual alert broadcast",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == 405:
        return JSONResponse(status_code=405, content={"error": "Method not allowed"})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(
        "request_body_invalid",
        path=request.url.path,
        errors=len(exc.errors()),
    )
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


app.include_router(tokens_router)
app.include_router(interactions_router)
app.include_router(alerts_router)
