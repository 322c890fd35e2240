"""
Description:
Module for adding CORS middleware to FastAPI application.

Arguments:
- app: FastAPI application instance to which CORS middleware will be added.
- origins: Allowed origins, taken from the CORS_ORIGINS setting when omitted.

Returns:
- None, but modifies the app to allow cross-origin requests from specified origins.

Dependencies:
- fastapi: For creating the FastAPI application and adding middleware.
- fastapi.middleware.cors: For CORS middleware functionality.
- loguru: For logging information about the middleware setup.

Author: @kcaparas1630
"""
from typing import List, Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from ortho_coach.core.config import get_settings


def add_cors_middleware(app: FastAPI, origins: Optional[List[str]] = None):
    allowed = origins if origins is not None else get_settings().cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info(f"CORS middleware added for {len(allowed)} origin(s)")
