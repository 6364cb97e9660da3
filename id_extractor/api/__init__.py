"""API module for the ID field extractor."""

from .server import app
from .models import ExtractionRequest, ExtractionResponse, VisionRequest

__all__ = ["app", "ExtractionRequest", "ExtractionResponse", "VisionRequest"]
