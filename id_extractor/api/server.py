"""HTTP surface for the extractor.

The server only receives recognized text; card images never reach it.
"""

import os
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException

from .models import ExtractionRequest, ExtractionResponse, VisionRequest
from ..ocr.models import RecognizedToken, ScannedData
from ..ocr.vision import from_vision_response
from ..pipeline import IDCardExtractor
from ..scoring.decision import DecisionEngine
from ..utils import load_config, setup_logging

logger = logging.getLogger(__name__)

app = FastAPI(title="ID Field Extractor API",
              description="Extract name, date of birth and document number from identity card OCR text")

# Global instances, created on startup or first request
extractor: Optional[IDCardExtractor] = None
decision_engine: Optional[DecisionEngine] = None


def _init_components() -> None:
    global extractor, decision_engine

    config_path = os.environ.get('ID_EXTRACTOR_CONFIG', 'config.yaml')
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        config = {}

    setup_logging(config.get('logging'))
    extractor = IDCardExtractor(config)
    decision_engine = DecisionEngine(config.get('decision'))
    logger.info("Extractor initialized.")


@app.on_event("startup")
async def startup_event():
    logger.info("Initializing extractor...")
    _init_components()


def _respond(scanned: ScannedData) -> ExtractionResponse:
    decision = decision_engine.decide(scanned)
    return ExtractionResponse(
        name=scanned.name,
        date_of_birth=scanned.date_of_birth,
        id_number=scanned.id_number,
        confidence=scanned.confidence,
        is_adult=scanned.is_adult,
        decision=decision.decision.value,
        reasons=decision.reasons,
    )


def _run(text: str, tokens) -> ExtractionResponse:
    if extractor is None or decision_engine is None:
        _init_components()

    try:
        scanned = extractor.extract(text, tokens)
        logger.info(f"Extraction complete (mode: {scanned.mode}, confidence: {scanned.confidence:.0f})")
        return _respond(scanned)
    except Exception as e:
        logger.error(f"Request failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/extract", response_model=ExtractionResponse, response_model_by_alias=True)
async def extract_fields(request: ExtractionRequest):
    """Extract fields from recognized text and optional positioned tokens."""
    tokens = [
        RecognizedToken.from_dict(t.model_dump(by_alias=True, exclude_none=True))
        for t in (request.tokens or [])
    ]
    return _run(request.text, tokens)


@app.post("/extract/vision", response_model=ExtractionResponse, response_model_by_alias=True)
async def extract_from_vision(request: VisionRequest):
    """Extract fields from a raw Google Vision TEXT_DETECTION response."""
    text, tokens = from_vision_response({'textAnnotations': request.text_annotations})
    return _run(text, tokens)


@app.get("/health")
async def health():
    return {"status": "ok"}


def main():
    """Run the API server."""
    uvicorn.run(app,
                host=os.environ.get('ID_EXTRACTOR_HOST', '0.0.0.0'),
                port=int(os.environ.get('ID_EXTRACTOR_PORT', '8000')),
                reload=False)


if __name__ == "__main__":
    main()
