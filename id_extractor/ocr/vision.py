"""Adapter from a Google Vision TEXT_DETECTION response to text and tokens."""

import logging
from typing import Any, Dict, List, Mapping, Tuple

from .models import RecognizedToken

logger = logging.getLogger(__name__)


def from_vision_response(response: Mapping[str, Any]) -> Tuple[str, List[RecognizedToken]]:
    """Split a single ``images:annotate`` response into full text and tokens.

    The first text annotation carries the whole recognized text; the rest are
    individual words positioned at the first vertex of their bounding polygon.

    Args:
        response: One entry of the ``responses`` array

    Returns:
        Tuple of (full_text, tokens). ``("", [])`` when nothing was detected.
    """
    annotations = (response or {}).get('textAnnotations') or []
    if not annotations:
        return '', []

    full_text = (annotations[0].get('description') or '').strip()

    tokens = []
    for annotation in annotations[1:]:
        vertices = (annotation.get('boundingPoly') or {}).get('vertices') or []
        first: Dict[str, Any] = vertices[0] if vertices else {}
        tokens.append(RecognizedToken(
            text=annotation.get('description') or '',
            x=float(first.get('x') or 0),
            y=float(first.get('y') or 0),
        ))

    logger.debug(f"Vision response: {len(full_text)} chars, {len(tokens)} tokens")
    return full_text, tokens
