"""
VIN Check Core Module
=====================

Core VIN constants, checksum, validation and extraction logic.
Single Source of Truth for all VIN-related functionality.
"""

from .vin_utils import (
    # Constants
    VINConstants,
    VIN_LENGTH,
    VIN_VALID_CHARS,
    VIN_INVALID_CHARS,
    # Checksum
    transliterate,
    compute_check_digit,
    # Validation
    VINValidationResult,
    normalize_vin,
    is_valid_vin,
    validate_vin,
    validate_vin_format,
)
from .extraction import (
    normalize_scan_text,
    iter_candidate_windows,
    extract_vin,
    find_vins,
)

__all__ = [
    # Constants
    "VINConstants",
    "VIN_LENGTH",
    "VIN_VALID_CHARS",
    "VIN_INVALID_CHARS",
    # Checksum
    "transliterate",
    "compute_check_digit",
    # Validation
    "VINValidationResult",
    "normalize_vin",
    "is_valid_vin",
    "validate_vin",
    "validate_vin_format",
    # Extraction
    "normalize_scan_text",
    "iter_candidate_windows",
    "extract_vin",
    "find_vins",
]
