"""
FastAPI application for the video digest service.
"""

import time
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from video_digest.config import config
from video_digest.api.routes import router
from video_digest.utils.error_handling import (
    GENERIC_FAILURE_MESSAGE,
    InvalidInputError,
    ProcessingFailed,
)
from video_digest.utils.logger import logging

# FastAPI application
app = FastAPI(
    title=config.APP_NAME,
    version=config.APP_VERSION,
    description="An API for transcribing and summarizing YouTube videos",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Middleware to add processing time header to responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    """Rejected requests: 400 with the validation message."""
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(ProcessingFailed)
async def processing_failed_handler(request: Request, exc: ProcessingFailed):
    """Stage failures: 500 with the generic message only."""
    return JSONResponse(status_code=500, content={"error": exc.message})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled exceptions."""
    logging.exception(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": GENERIC_FAILURE_MESSAGE})


# Include API router
app.include_router(router)


# Root
@app.get("/")
async def root():
    """Root endpoint returning basic API information."""
    return {
        "name": config.APP_NAME,
        "version": config.APP_VERSION,
        "description": "Video Digest API",
    }
