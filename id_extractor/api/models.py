"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class Vertex(BaseModel):
    """Bounding polygon corner."""
    x: float = 0
    y: float = 0


class BoundingBox(BaseModel):
    """Token position as sent by the scanning client.

    When x or y is omitted the first vertex is used.
    """
    x: Optional[float] = None
    y: Optional[float] = None
    vertices: List[Vertex] = Field(default_factory=list)


class TokenModel(BaseModel):
    """One recognized word with its position."""
    model_config = ConfigDict(populate_by_name=True)

    text: str
    bounding_box: BoundingBox = Field(default_factory=BoundingBox, alias='boundingBox')


class ExtractionRequest(BaseModel):
    """Request model for field extraction."""
    text: str = ''
    tokens: Optional[List[TokenModel]] = None


class VisionRequest(BaseModel):
    """Single Google Vision ``images:annotate`` response."""
    model_config = ConfigDict(populate_by_name=True)

    text_annotations: List[Dict[str, Any]] = Field(default_factory=list, alias='textAnnotations')


class ExtractionResponse(BaseModel):
    """Response model for extraction results."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    date_of_birth: Optional[str] = Field(None, alias='dateOfBirth')
    id_number: Optional[str] = Field(None, alias='idNumber')
    confidence: float = 0
    is_adult: bool = Field(False, alias='isAdult')
    decision: str
    reasons: List[str] = Field(default_factory=list)
