"""Loading of recorded analysis results for replay through a formatter.

Results documents are JSON::

    {
      "files": [
        {
          "path": "lib/app.py",
          "source": "...",            # optional, read from "path" if absent
          "offenses": [
            {"severity": "convention", "start": 18, "end": 19,
             "message": "foo", "rule_id": "Style/Foo"}
          ]
        }
      ]
    }

Offsets are character offsets into the file source.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from lintprogress.core.errors import LintProgressError
from lintprogress.core.logging import get_logger
from lintprogress.core.models import Offense, SourceBuffer, SourceRange

LOGGER = get_logger(__name__)


class ResultsError(LintProgressError):
    """A results document is malformed or references unreadable files."""


@dataclass
class FileResult:
    """Offenses detected in one file."""

    path: str
    offenses: List[Offense] = field(default_factory=list)


def load_results(path: Path, base_dir: Optional[Path] = None) -> List[FileResult]:
    """Load a results document from disk.

    Args:
        path: Path to the JSON results file.
        base_dir: Directory that relative file paths without inline source
            are read from. Defaults to the results file's directory.

    Returns:
        File results in document order.

    Raises:
        ResultsError: If the file can't be read or parsed.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ResultsError(f"Cannot read results file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ResultsError(f"Invalid JSON in {path}: {e}") from e

    return parse_results(data, base_dir if base_dir is not None else path.parent)


def parse_results(data: Any, base_dir: Path) -> List[FileResult]:
    """Convert a decoded results document to FileResult objects."""
    if not isinstance(data, dict) or not isinstance(data.get("files"), list):
        raise ResultsError("Results document must be a mapping with a 'files' list")

    results: List[FileResult] = []
    for index, entry in enumerate(data["files"]):
        if not isinstance(entry, dict) or not isinstance(entry.get("path"), str):
            raise ResultsError(f"files[{index}] must be a mapping with a string 'path'")
        file_path = entry["path"]
        offenses_data = entry.get("offenses", [])
        if not isinstance(offenses_data, list):
            raise ResultsError(f"files[{index}].offenses must be a list")

        if not offenses_data:
            results.append(FileResult(path=file_path))
            continue

        buffer = SourceBuffer(name=file_path, source=_read_source(entry, base_dir))
        offenses = [
            _parse_offense(item, buffer, f"files[{index}].offenses[{n}]")
            for n, item in enumerate(offenses_data)
        ]
        results.append(FileResult(path=file_path, offenses=offenses))

    LOGGER.debug(f"Loaded results for {len(results)} file(s)")
    return results


def _read_source(entry: Dict[str, Any], base_dir: Path) -> str:
    source = entry.get("source")
    if isinstance(source, str):
        return source
    source_path = Path(entry["path"])
    if not source_path.is_absolute():
        source_path = base_dir / source_path
    try:
        return source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResultsError(f"Cannot read source for {entry['path']}: {e}") from e


def _parse_offense(item: Any, buffer: SourceBuffer, where: str) -> Offense:
    if not isinstance(item, dict):
        raise ResultsError(f"{where} must be a mapping")
    start = item.get("start")
    end = item.get("end", start)
    if not isinstance(start, int) or not isinstance(end, int):
        raise ResultsError(f"{where} needs integer 'start' and 'end' offsets")
    # Severity is validated by the formatter.
    return Offense(
        severity=item.get("severity", ""),
        location=SourceRange(buffer, start, end),
        message=str(item.get("message", "")),
        rule_id=str(item.get("rule_id", "")),
    )
