"""Extraction strategies."""

from .base import BaseExtractionStrategy, split_lines
from .text_parser import TextLineParser
from .spatial_parser import SpatialTokenParser

__all__ = ['BaseExtractionStrategy', 'split_lines', 'TextLineParser', 'SpatialTokenParser']
