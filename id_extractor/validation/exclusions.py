"""Label and boilerplate phrases that are never personal names."""

import logging
from typing import Dict, Iterable, Optional

logger = logging.getLogger(__name__)

DEFAULT_EXCLUSIONS = (
    'DRIVER LICENCE', 'DRIVER LICENSE', 'DRIVERS LICENCE', 'DRIVERS LICENSE',
    'VICTORIA', 'VICTORIAN', 'VICTORIA AUSTRALIA', 'AUSTRALIAN', 'AUSTRALIA',
    'GOVERNMENT',
    'CARD NUMBER', 'LICENSE NUMBER', 'LICENCE NUMBER', 'LICENSE NO.', 'LICENCE NO.',
    'DATE OF BIRTH', 'EXPIRY DATE', 'ISSUE DATE', 'EXPIRY', 'LICENCE EXPIRY', 'LICENSE EXPIRY',
    'LICENCE TYPE', 'LICENSE TYPE',
    'ADDRESS', 'RESTRICTIONS', 'CONDITIONS', 'CLASS', 'SIGNATURE', 'PHOTO', 'CARD',
    # Vehicle classes
    'CAR', 'MOTORCYCLE', 'TRUCK', 'BUS', 'HEAVY', 'LIGHT', 'MEDIUM', 'RIDER',
    'CONDITION', 'RESTRICTION',
)


class ExclusionDictionary:
    """Case-insensitive exact-or-substring phrase filter."""

    def __init__(self, phrases: Optional[Iterable[str]] = None):
        """Initialize exclusion dictionary.

        Args:
            phrases: Phrases to exclude; defaults to DEFAULT_EXCLUSIONS
        """
        if phrases is None:
            phrases = DEFAULT_EXCLUSIONS
        self.phrases = frozenset(p.strip().upper() for p in phrases if p and p.strip())

    @classmethod
    def from_config(cls, config: Optional[Dict] = None) -> 'ExclusionDictionary':
        """Build from the ``exclusions`` config section.

        ``phrases`` replaces the built-in list, ``extra`` extends it.
        """
        config = config or {}
        phrases = list(DEFAULT_EXCLUSIONS if config.get('phrases') is None else config['phrases'])
        phrases.extend(config.get('extra') or [])
        return cls(phrases)

    def match(self, candidate: str) -> Optional[str]:
        """Return the first phrase the candidate equals or contains."""
        upper = (candidate or '').upper().strip()
        if not upper:
            return None
        # Sorted so the reported phrase is stable across runs
        for phrase in sorted(self.phrases):
            if phrase in upper:
                return phrase
        return None

    def is_excluded(self, candidate: str) -> bool:
        phrase = self.match(candidate)
        if phrase:
            logger.debug(f"Excluded '{candidate}' (matches '{phrase}')")
        return phrase is not None

    def __contains__(self, candidate: str) -> bool:
        return self.is_excluded(candidate)

    def __len__(self) -> int:
        return len(self.phrases)
