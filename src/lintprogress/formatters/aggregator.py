"""Ordered per-file accumulation of offenses for one run."""

from __future__ import annotations

import os
from typing import List, Sequence, Set, Tuple

from lintprogress.core.errors import ContractViolationError
from lintprogress.core.models import Offense


class OffenseAggregator:
    """Collects ``(path, offenses)`` pairs in the order files finish.

    Offense content is stored untouched. A path may be recorded only once;
    recording it again is a driver bug and raises ``ContractViolationError``.
    """

    def __init__(self) -> None:
        self._entries: List[Tuple[str, Tuple[Offense, ...]]] = []
        self._seen: Set[str] = set()

    def record(self, path: str, offenses: Sequence[Offense]) -> None:
        """Append a file's offenses, preserving detection order.

        Args:
            path: File path as reported by the driver.
            offenses: Offenses detected in that file (may be empty).

        Raises:
            ContractViolationError: If the path was already recorded.
        """
        key = os.fspath(path)
        if key in self._seen:
            raise ContractViolationError(f"Offenses for {key!r} were already recorded in this run")
        self._seen.add(key)
        self._entries.append((key, tuple(offenses)))

    def __contains__(self, path: object) -> bool:
        try:
            return os.fspath(path) in self._seen  # type: ignore[arg-type]
        except TypeError:
            return False

    def has_any(self) -> bool:
        """Return True if any recorded file has at least one offense."""
        return any(offenses for _, offenses in self._entries)

    def entries(self) -> List[Tuple[str, Tuple[Offense, ...]]]:
        """Return recorded entries in recording order."""
        return list(self._entries)

    @property
    def file_count(self) -> int:
        return len(self._entries)

    @property
    def offense_count(self) -> int:
        return sum(len(offenses) for _, offenses in self._entries)
