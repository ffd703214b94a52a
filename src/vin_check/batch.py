"""
Batch VIN extraction over line-oriented scan logs.

Each non-blank line of the input is treated as one independent scan.
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from .core import extract_vin
from .errors import InputReadError

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """Outcome of extracting a VIN from one scan."""
    source: str
    text: str
    vin: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.vin is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'source': self.source,
            'text': self.text,
            'vin': self.vin,
            'found': self.found,
        }


@dataclass
class BatchSummary:
    """Aggregate counts for a batch run."""
    total: int = 0
    found: int = 0
    missing: int = 0
    hit_rate: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class BatchReport:
    """Per-scan results plus their summary."""
    results: List[ExtractionResult] = field(default_factory=list)
    summary: BatchSummary = field(default_factory=BatchSummary)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'summary': self.summary.to_dict(),
            'results': [r.to_dict() for r in self.results],
        }

    def save(self, path: Union[str, Path], indent: int = 2) -> None:
        """Write the report as JSON."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=indent)


def summarize(results: List[ExtractionResult]) -> BatchSummary:
    total = len(results)
    found = sum(1 for r in results if r.found)
    return BatchSummary(
        total=total,
        found=found,
        missing=total - found,
        hit_rate=found / total if total else 0.0,
    )


def extract_from_lines(lines: Iterable[str]) -> BatchReport:
    """
    Run ``extract_vin`` on every non-blank line.

    Sources are 1-based line numbers so they match what an editor shows.
    """
    results = []
    for lineno, line in enumerate(lines, start=1):
        text = line.rstrip('\r\n')
        if not text.strip():
            continue
        results.append(ExtractionResult(source=str(lineno), text=text, vin=extract_vin(text)))

    report = BatchReport(results=results, summary=summarize(results))
    logger.info(
        f"Batch complete: {report.summary.found}/{report.summary.total} scans contained a VIN"
    )
    return report


def read_text(path: Union[str, Path]) -> str:
    """Read a UTF-8 text file, raising ``InputReadError`` on failure."""
    path = Path(path)
    if not path.exists():
        raise InputReadError(str(path), "File not found")
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(str(path), str(e)) from e


def extract_from_file(path: Union[str, Path]) -> BatchReport:
    """Batch-extract VINs from each line of a text file."""
    return extract_from_lines(read_text(path).splitlines())
