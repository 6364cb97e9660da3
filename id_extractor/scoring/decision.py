"""Advisory Accept/Review/Rescan decision for a scan result."""

from typing import Dict, List, Optional
from enum import Enum
from dataclasses import dataclass

from ..ocr.models import ScannedData


class Decision(Enum):
    """What the scanning UI should do with a result."""
    ACCEPT = "accept"
    REVIEW = "review"
    RESCAN = "rescan"


@dataclass
class DecisionResult:
    """Result of decision engine."""
    decision: Decision
    confidence_score: float
    reasons: List[str]

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            'decision': self.decision.value,
            'confidence_score': self.confidence_score,
            'reasons': self.reasons,
        }


class DecisionEngine:
    """Classifies scan results; retrying is left to the caller."""

    def __init__(self, config: Optional[Dict] = None):
        """Initialize decision engine.

        Args:
            config: Decision configuration
        """
        config = config or {}
        self.accept_threshold = config.get('accept_threshold', 80)

    def decide(self, scanned: ScannedData) -> DecisionResult:
        """Make a decision for one extraction result.

        Args:
            scanned: Extraction result

        Returns:
            DecisionResult object
        """
        reasons = []
        score = scanned.confidence

        if not scanned.name:
            reasons.append("Name could not be read")
        if not scanned.date_of_birth:
            reasons.append("Date of birth could not be read")

        if reasons:
            return DecisionResult(decision=Decision.RESCAN, confidence_score=score, reasons=reasons)

        if score >= self.accept_threshold:
            reasons.append(f"Confidence {score:.0f} meets accept threshold {self.accept_threshold}")
            if not scanned.id_number:
                reasons.append("Document number not found")
            return DecisionResult(decision=Decision.ACCEPT, confidence_score=score, reasons=reasons)

        reasons.append(f"Confidence {score:.0f} below accept threshold {self.accept_threshold}")
        return DecisionResult(decision=Decision.REVIEW, confidence_score=score, reasons=reasons)
