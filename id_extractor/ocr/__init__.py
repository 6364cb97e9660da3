"""Recognized-text data models."""

from .models import RecognizedToken, VisualLine, ParseResult, ScannedData
from .vision import from_vision_response

__all__ = ['RecognizedToken', 'VisualLine', 'ParseResult', 'ScannedData', 'from_vision_response']
