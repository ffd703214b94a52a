"""
VIN Utilities - Checksum and Validation
=======================================

Transliteration, check digit computation and validation for
Vehicle Identification Numbers.

Every function here is pure and total: malformed input yields ``False``,
``None`` or an all-false report, never an exception.

Usage:
    from vin_check.core import compute_check_digit, is_valid_vin

    compute_check_digit("1HGBH41JXMN109186")   # 'X'
    is_valid_vin("1HGBH41JXMN109186")          # True
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


# =============================================================================
# VIN CONSTANTS
# =============================================================================

class VINConstants:
    """Immutable VIN specification constants per ISO 3779 / NHTSA."""

    LENGTH: int = 17

    # Valid characters (I, O, Q excluded to avoid confusion with 1, 0)
    VALID_CHARS: FrozenSet[str] = frozenset("0123456789ABCDEFGHJKLMNPRSTUVWXYZ")
    INVALID_CHARS: FrozenSet[str] = frozenset("IOQ")

    # 0-based index of the check digit (9th character)
    CHECK_DIGIT_INDEX: int = 8

    # Checksum weights by position (NHTSA standard)
    CHECKSUM_WEIGHTS: Tuple[int, ...] = (8, 7, 6, 5, 4, 3, 2, 10, 0, 9, 8, 7, 6, 5, 4, 3, 2)

    # Letter to value mapping for checksum; digits map to themselves
    LETTER_VALUES: Mapping[str, int] = {
        'A': 1, 'B': 2, 'C': 3, 'D': 4, 'E': 5, 'F': 6, 'G': 7, 'H': 8,
        'J': 1, 'K': 2, 'L': 3, 'M': 4, 'N': 5, 'P': 7, 'R': 9,
        'S': 2, 'T': 3, 'U': 4, 'V': 5, 'W': 6, 'X': 7, 'Y': 8, 'Z': 9,
    }

    CHECK_DIGIT_REMAINDER_X: int = 10


VIN_LENGTH = VINConstants.LENGTH
VIN_VALID_CHARS = VINConstants.VALID_CHARS
VIN_INVALID_CHARS = VINConstants.INVALID_CHARS

_DIGITS = frozenset("0123456789")


# =============================================================================
# TRANSLITERATION & CHECKSUM
# =============================================================================

def transliterate(char: str) -> int:
    """
    Map a single VIN character to its checksum value.

    Digits map to their own value, letters use the ISO 3779 table.
    Anything else (including I, O, Q and punctuation) maps to 0.

    Args:
        char: One character, already uppercased by the caller

    Returns:
        Integer value in [0, 9]
    """
    if char in _DIGITS:
        return int(char)
    return VINConstants.LETTER_VALUES.get(char, 0)


def compute_check_digit(vin: str) -> str:
    """
    Compute the check digit for a 17-character VIN.

    The check digit (position 9) is calculated by:
    1. Transliterating each character to a number
    2. Multiplying by its position weight
    3. Summing and taking mod 11
    4. Result 10 becomes 'X'

    The length is not re-validated here. Characters outside the
    table contribute 0, so the function never fails.

    Args:
        vin: 17-character VIN (the check digit position carries weight 0)

    Returns:
        Expected check digit ('0'-'9' or 'X')
    """
    total = sum(
        transliterate(char) * weight
        for char, weight in zip(vin.upper(), VINConstants.CHECKSUM_WEIGHTS)
    )
    remainder = total % 11
    return 'X' if remainder == VINConstants.CHECK_DIGIT_REMAINDER_X else str(remainder)


# =============================================================================
# VIN VALIDATION
# =============================================================================

def normalize_vin(candidate: Any) -> Optional[str]:
    """Strip and uppercase a candidate; ``None`` for non-string input."""
    if not isinstance(candidate, str):
        return None
    return candidate.strip().upper()


def is_valid_vin(candidate: Any) -> bool:
    """
    Check whether a candidate is a valid VIN.

    The candidate is trimmed and uppercased, must be exactly 17 characters,
    must not contain I, O or Q, and its 9th character must equal the
    computed check digit.

    Args:
        candidate: Any object; only strings can be valid

    Returns:
        True if the candidate is a valid VIN, False otherwise
    """
    vin = normalize_vin(candidate)
    if vin is None or len(vin) != VIN_LENGTH:
        return False

    if any(c in VIN_INVALID_CHARS for c in vin):
        return False

    return vin[VINConstants.CHECK_DIGIT_INDEX] == compute_check_digit(vin)


@dataclass
class VINValidationResult:
    """Result of VIN validation."""
    vin: str
    is_valid_length: bool
    has_valid_chars: bool
    invalid_chars: List[str] = field(default_factory=list)
    expected_check_digit: Optional[str] = None
    checksum_valid: bool = False
    is_fully_valid: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'vin': self.vin,
            'is_valid_length': self.is_valid_length,
            'has_valid_chars': self.has_valid_chars,
            'invalid_chars': list(self.invalid_chars),
            'expected_check_digit': self.expected_check_digit,
            'checksum_valid': self.checksum_valid,
            'is_fully_valid': self.is_fully_valid,
        }


def validate_vin(candidate: Any) -> VINValidationResult:
    """
    Comprehensive VIN validation.

    Checks:
    1. Length (must be 17)
    2. Character validity (VIN alphabet only, no I, O, Q)
    3. Checksum at position 9

    Unlike ``is_valid_vin`` this reports which check failed. Characters
    outside the VIN alphabet are listed in ``invalid_chars`` in order.

    Args:
        candidate: VIN string to validate

    Returns:
        VINValidationResult with all validation details
    """
    vin = normalize_vin(candidate)
    if vin is None:
        logger.debug("Rejecting non-string VIN candidate of type %s", type(candidate).__name__)
        return VINValidationResult(vin='', is_valid_length=False, has_valid_chars=False)

    is_valid_length = len(vin) == VIN_LENGTH
    invalid_chars = [c for c in vin if c not in VIN_VALID_CHARS]
    has_valid_chars = not invalid_chars

    expected_check_digit = None
    checksum_valid = False
    if is_valid_length and has_valid_chars:
        expected_check_digit = compute_check_digit(vin)
        checksum_valid = vin[VINConstants.CHECK_DIGIT_INDEX] == expected_check_digit

    return VINValidationResult(
        vin=vin,
        is_valid_length=is_valid_length,
        has_valid_chars=has_valid_chars,
        invalid_chars=invalid_chars,
        expected_check_digit=expected_check_digit,
        checksum_valid=checksum_valid,
        is_fully_valid=is_valid_length and has_valid_chars and checksum_valid,
    )


def validate_vin_format(candidate: Any) -> bool:
    """
    Quick check if VIN has valid format (length and characters).

    Does NOT check checksum. Use validate_vin() for full validation.
    """
    vin = normalize_vin(candidate)
    if vin is None or len(vin) != VIN_LENGTH:
        return False
    return all(c in VIN_VALID_CHARS for c in vin)
