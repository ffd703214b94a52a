"""
VIN Check
=========

Validation and extraction of Vehicle Identification Numbers (VINs)
from noisy scanner and OCR text.

Package Structure:
    vin_check/
    ├── core/           # Checksum, validation, extraction
    ├── batch.py        # Line-oriented batch extraction
    ├── config.py       # Settings, env overrides, logging setup
    ├── errors.py       # Exceptions for config and CLI input
    └── cli.py          # vin-check command

Quick Start:
    from vin_check import compute_check_digit, is_valid_vin, extract_vin

    compute_check_digit("1HGBH41JXMN109186")          # 'X'
    is_valid_vin("1HGBH41JXMN109186")                 # True
    extract_vin("Label:ABC 1HGBH41JXMN109186 End")    # '1HGBH41JXMN109186'

Version: 1.0.0
"""

__version__ = "1.0.0"

from .core import (
    VINConstants,
    VIN_LENGTH,
    VIN_VALID_CHARS,
    VIN_INVALID_CHARS,
    VINValidationResult,
    transliterate,
    compute_check_digit,
    is_valid_vin,
    validate_vin,
    validate_vin_format,
    normalize_scan_text,
    extract_vin,
    find_vins,
)

__all__ = [
    "__version__",
    # Core
    "VINConstants",
    "VIN_LENGTH",
    "VIN_VALID_CHARS",
    "VIN_INVALID_CHARS",
    "VINValidationResult",
    "transliterate",
    "compute_check_digit",
    "is_valid_vin",
    "validate_vin",
    "validate_vin_format",
    "normalize_scan_text",
    "extract_vin",
    "find_vins",
]
