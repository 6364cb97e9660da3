"""Base extraction strategy class."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Dict, List, Optional

from ..ocr.models import RecognizedToken, ScannedData


class BaseExtractionStrategy(ABC):
    """Abstract base class for card extraction strategies.

    A strategy returns None when it has too little signal, which lets the
    caller move on to the next strategy.
    """

    def __init__(self, config: Optional[Dict] = None):
        """Initialize extraction strategy.

        Args:
            config: Configuration dictionary
        """
        self.config = config or {}

    @abstractmethod
    def parse(self,
              text: str,
              tokens: List[RecognizedToken],
              now: Optional[date] = None) -> Optional[ScannedData]:
        """Extract card fields.

        Args:
            text: Full recognized text, newline-delimited
            tokens: Positioned tokens, possibly empty
            now: Reference day for age checks

        Returns:
            ScannedData, or None if this strategy cannot produce a result
        """
        pass

    @abstractmethod
    def get_mode(self) -> str:
        """Get strategy identifier.

        Returns:
            Mode string reported in ScannedData.mode
        """
        pass


def split_lines(text: str) -> List[str]:
    """Split recognized text into non-empty trimmed lines."""
    return [line.strip() for line in (text or '').split('\n') if line.strip()]
