"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between a front end and the engine.

Error Codes:
- CHOICE_UNAVAILABLE: The chosen link is hidden or does not exist
- VALIDATION_ERROR: The request body is malformed
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    CHOICE_UNAVAILABLE = "CHOICE_UNAVAILABLE"
    VALIDATION_ERROR = "VALIDATION_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class ChoiceInfo(BaseModel):
    """A visible choice in the active scene."""
    index: int = Field(description="Declaration index of the link; send back to choose it")
    text: str

    model_config = {"from_attributes": True}


# =============================================================================
# Request Models
# =============================================================================

class ChooseRequest(BaseModel):
    """Request to pick a choice in the active scene."""
    index: int = Field(ge=0, description="Index from SceneResponse.choices")


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error body."""
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None


class SceneResponse(BaseModel):
    """The active scene as the player sees it."""
    api_version: str = "v1"
    scene_id: str
    title: str
    body: str
    health: int = Field(ge=0)
    inventory: list[str] = Field(default_factory=list)
    choices: list[ChoiceInfo] = Field(default_factory=list)
    is_terminal: bool = False
    is_dead: bool = False
    changes: list[str] = Field(
        default_factory=list, description="Effects of the choice that led here"
    )

    model_config = {"from_attributes": True}


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
    environment: str
