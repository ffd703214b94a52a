"""
VIN Extraction from Scanner / OCR Text
======================================

Recovers a valid VIN embedded in noisy text such as barcode payloads or
OCR output. The text is reduced to its ASCII letters and digits, then a
17-character window slides left to right; the first window that passes
``is_valid_vin`` wins. There is no scoring and no correction.
"""

import logging
import re
from typing import Any, Iterator, List, Optional, Tuple

from .vin_utils import VIN_LENGTH, is_valid_vin

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r'[^A-Za-z0-9]')


def normalize_scan_text(text: Any) -> str:
    """Drop everything but ASCII letters and digits, then uppercase."""
    if not isinstance(text, str):
        return ''
    return _NON_ALNUM.sub('', text).upper()


def iter_candidate_windows(text: Any) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(offset, window)`` for every 17-character window.

    Offsets refer to the normalized text and increase from 0.
    Nothing is yielded when the normalized text is shorter than a VIN.
    """
    cleaned = normalize_scan_text(text)
    for offset in range(len(cleaned) - VIN_LENGTH + 1):
        yield offset, cleaned[offset:offset + VIN_LENGTH]


def extract_vin(text: Any) -> Optional[str]:
    """
    Extract the leftmost valid VIN from a longer string.

    Args:
        text: Raw scan or OCR text

    Returns:
        The 17-character VIN, or None if no window validates

    Examples:
        >>> extract_vin("Label:ABC 1HGBH41JXMN109186 End")
        '1HGBH41JXMN109186'
        >>> extract_vin("no vin here") is None
        True
    """
    for offset, candidate in iter_candidate_windows(text):
        if is_valid_vin(candidate):
            logger.debug("VIN %s found at offset %d", candidate, offset)
            return candidate
    return None


def find_vins(text: Any) -> List[str]:
    """
    Return every valid VIN window, left to right.

    Overlapping windows are all reported and duplicates are kept, so the
    first element is always what ``extract_vin`` returns.
    """
    matches = [candidate for _, candidate in iter_candidate_windows(text) if is_valid_vin(candidate)]
    logger.debug("Found %d VIN window(s)", len(matches))
    return matches
