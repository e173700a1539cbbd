"""Default end-of-run summary."""

from __future__ import annotations

from typing import IO, Callable

SummaryHook = Callable[[IO[str], int, int], None]


def pluralize(count: int, word: str, no_for_zero: bool = False) -> str:
    """Return ``"<count> <word>"`` with a plural ``s`` when needed."""
    if count == 0 and no_for_zero:
        return f"no {word}s"
    if count == 1:
        return f"1 {word}"
    return f"{count} {word}s"


class SummaryReporter:
    """Writes the closing ``N files inspected, M offenses detected`` line."""

    def __call__(self, output: IO[str], inspected_count: int, offense_count: int) -> None:
        self.report(output, inspected_count, offense_count)

    def report(self, output: IO[str], inspected_count: int, offense_count: int) -> None:
        """Write the summary line.

        Args:
            output: Output stream to write to.
            inspected_count: Number of files inspected in the run.
            offense_count: Total number of offenses across all files.
        """
        files = pluralize(inspected_count, "file")
        offenses = pluralize(offense_count, "offense", no_for_zero=True)
        output.write(f"\n{files} inspected, {offenses} detected\n")
