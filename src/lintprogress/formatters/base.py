"""Base class for formatter plugins."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO, Sequence

from lintprogress.core.models import Offense


class FormatterPlugin(ABC):
    """Base class for all formatter plugins.

    A formatter is driven through a fixed lifecycle by the analysis driver:
    ``started`` once, then ``file_started``/``file_finished`` for every
    file, then ``finished`` once. All output goes to the injected stream.
    """

    def __init__(self, output: IO[str]) -> None:
        self.output = output

    @property
    @abstractmethod
    def name(self) -> str:
        """Formatter identifier (e.g., 'progress')."""

    @abstractmethod
    def started(self, files: Sequence[str]) -> None:
        """Begin a run over the given ordered file list."""

    def file_started(self, path: str) -> None:  # noqa: B027
        """Called before a file is analyzed."""

    @abstractmethod
    def file_finished(self, path: str, offenses: Sequence[Offense]) -> None:
        """Called once per file with the offenses detected in it."""

    @abstractmethod
    def finished(self, files: Sequence[str]) -> None:
        """End the run."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
