"""Data models for recognized text and extraction results."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence


@dataclass(frozen=True)
class RecognizedToken:
    """One OCR-detected text fragment."""
    text: str
    x: float  # top-left of bounding region, source-image pixels
    y: float

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> 'RecognizedToken':
        """Build a token from the vision payload shape.

        Args:
            payload: ``{'text': ..., 'boundingBox': {'x', 'y', 'vertices'}}``

        Returns:
            RecognizedToken

        Raises:
            ValueError: If payload is not a mapping or coordinates are not numeric
        """
        if not isinstance(payload, Mapping):
            raise ValueError(f"Token payload must be a mapping, got {type(payload).__name__}")

        box = payload.get('boundingBox') or {}
        if not isinstance(box, Mapping):
            raise ValueError("boundingBox must be a mapping")
        vertices = box.get('vertices') or []
        if not isinstance(vertices, Sequence) or isinstance(vertices, str):
            raise ValueError("vertices must be a list")
        first = vertices[0] if vertices and isinstance(vertices[0], Mapping) else {}

        x = box.get('x', first.get('x', 0))
        y = box.get('y', first.get('y', 0))

        try:
            return cls(text=str(payload.get('text') or ''), x=float(x or 0), y=float(y or 0))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid token coordinates: {e}") from e


@dataclass(frozen=True)
class VisualLine:
    """Tokens sharing one horizontal line of the card."""
    text: str
    y: float

    @property
    def words(self) -> List[str]:
        """Words of length >= 2 (single letters are usually OCR noise)."""
        return [w for w in self.text.split() if len(w) >= 2]


@dataclass(frozen=True)
class ParseResult:
    """Field value produced by one extractor rule."""
    value: str
    confidence: float
    source: str = ''

    def __bool__(self) -> bool:
        return bool(self.value)

    @classmethod
    def empty(cls) -> 'ParseResult':
        return cls(value='', confidence=0.0)


@dataclass
class ScannedData:
    """Final extraction result handed to the calling layer."""
    name: Optional[str] = None
    date_of_birth: Optional[str] = None  # YYYY-MM-DD
    id_number: Optional[str] = None
    confidence: float = 0.0
    is_adult: bool = False
    mode: str = 'none'
    details: Dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def empty(cls) -> 'ScannedData':
        """Result for inputs where no field cleared validation."""
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the external (camelCase) contract."""
        return {
            'name': self.name,
            'dateOfBirth': self.date_of_birth,
            'idNumber': self.id_number,
            'confidence': self.confidence,
            'isAdult': self.is_adult,
        }
