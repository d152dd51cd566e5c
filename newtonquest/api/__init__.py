"""
API Module - HTTP interface.

Exposes the engine via REST API. A front end:
1. Fetches the current scene
2. Posts the chosen index
3. Redraws from the response

All state belongs to the single play-through held by the service.
"""

from .schemas import (
    # Requests
    ChooseRequest,
    # Responses
    SceneResponse,
    ErrorResponse,
    HealthResponse,
    # Shared
    ChoiceInfo,
    ErrorCode,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "ChooseRequest",
    # Responses
    "SceneResponse",
    "ErrorResponse",
    "HealthResponse",
    # Shared
    "ChoiceInfo",
    "ErrorCode",
    # Service
    "APIService",
    "create_app",
]
