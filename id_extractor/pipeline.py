"""Main extraction orchestrator.

Runs the extraction strategies in order (spatial when tokens are present, then
text-only) and returns the first result. Never raises: inputs that yield no
validated fields produce the all-null, zero-confidence result.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from .documents import BaseExtractionStrategy, SpatialTokenParser, TextLineParser
from .ocr.models import RecognizedToken, ScannedData
from .utils import load_config
from .validation.exclusions import ExclusionDictionary
from .validation.normalization import DateLike, DateNormalizer, to_date

logger = logging.getLogger(__name__)

TokenInput = Union[RecognizedToken, Dict[str, Any]]


class IDCardExtractor:
    """Extracts name, date of birth and document number from card text."""

    def __init__(self,
                 config: Optional[Dict] = None,
                 exclusions: Optional[ExclusionDictionary] = None,
                 now: Optional[DateLike] = None):
        """Initialize extractor.

        Args:
            config: Configuration dictionary (see config.yaml)
            exclusions: Phrases that are never names; overrides the config
            now: Fixed reference day for age checks, defaults to today per call
        """
        self.config = config or {}
        self.now = now

        if exclusions is None:
            exclusions = ExclusionDictionary.from_config(self.config.get('exclusions'))
        self.exclusions = exclusions

        self.date_normalizer = DateNormalizer(self.config.get('dates'))
        self.text_parser = TextLineParser(self.config, self.exclusions, self.date_normalizer)
        self.spatial_parser = SpatialTokenParser(self.config, self.text_parser)

        logger.debug(f"Extractor initialized with {len(self.exclusions)} exclusion phrases")

    @classmethod
    def from_config_file(cls, config_path: Union[str, Path] = "config.yaml", **kwargs) -> 'IDCardExtractor':
        """Create an extractor from a YAML configuration file."""
        return cls(load_config(config_path), **kwargs)

    def strategies(self, tokens: List[RecognizedToken]) -> List[BaseExtractionStrategy]:
        """Strategies to try, in order."""
        if tokens:
            return [self.spatial_parser, self.text_parser]
        return [self.text_parser]

    def extract(self,
                text: Optional[str],
                tokens: Optional[Iterable[TokenInput]] = None,
                now: Optional[DateLike] = None) -> ScannedData:
        """Extract card fields.

        Args:
            text: Full recognized text, newline-delimited
            tokens: Optional positioned tokens (RecognizedToken or payload dicts)
            now: Reference day, overrides the one given at construction

        Returns:
            ScannedData; all fields None and confidence 0 when nothing validated
        """
        try:
            text = text if isinstance(text, str) else ''
            token_list = self._coerce_tokens(tokens)
            reference = now if now is not None else self.now
            today = to_date(reference) if reference is not None else date.today()

            if not text.strip():
                logger.info("No recognized text")
                return ScannedData.empty()

            for strategy in self.strategies(token_list):
                try:
                    result = strategy.parse(text, token_list, today)
                except Exception as e:
                    logger.error(f"Strategy {strategy.get_mode()} failed: {e}", exc_info=True)
                    continue
                if result is not None:
                    logger.info(f"Extraction succeeded in {strategy.get_mode()} mode "
                                f"(confidence: {result.confidence:.0f})")
                    return result
                logger.debug(f"Strategy {strategy.get_mode()} produced no result")

        except Exception as e:
            logger.error(f"Extraction failed: {e}", exc_info=True)

        return ScannedData.empty()

    @staticmethod
    def _coerce_tokens(tokens: Optional[Iterable[TokenInput]]) -> List[RecognizedToken]:
        if not tokens:
            return []

        if isinstance(tokens, (str, bytes)) or not isinstance(tokens, Iterable):
            logger.warning(f"Ignoring tokens of type {type(tokens).__name__}")
            return []

        coerced = []
        for token in tokens:
            if isinstance(token, RecognizedToken):
                coerced.append(token)
                continue
            try:
                coerced.append(RecognizedToken.from_dict(token))
            except ValueError as e:
                logger.warning(f"Skipping malformed token: {e}")
        return coerced


def extract(text: Optional[str],
            tokens: Optional[Iterable[TokenInput]] = None,
            now: Optional[DateLike] = None) -> ScannedData:
    """Extract card fields with the default configuration.

    Args:
        text: Full recognized text
        tokens: Optional positioned tokens
        now: Reference day, defaults to today

    Returns:
        ScannedData
    """
    return IDCardExtractor(now=now).extract(text, tokens)
