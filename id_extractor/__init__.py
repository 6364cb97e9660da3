"""ID Field Extractor - name and date of birth recovery from identity card OCR text."""

__version__ = "1.0.0"

from .pipeline import IDCardExtractor, extract
from .ocr.models import RecognizedToken, ScannedData
from .utils import load_config, setup_logging

__all__ = ["IDCardExtractor", "extract", "RecognizedToken", "ScannedData", "load_config", "setup_logging"]
