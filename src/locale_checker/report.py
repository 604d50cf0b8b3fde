"""
Line-oriented report printer.

All user-facing report lines go through ``Reporter`` so that lines emitted
from loader worker threads never interleave.
"""

import sys
from pathlib import Path
from threading import Lock
from typing import Iterable, Optional, TextIO

from .checker import all_missing
from .core.models import LoadResult, MissingKey, NamespaceReport


class Reporter:
    """Writes report lines to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._lock = Lock()

    def _write(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        with self._lock:
            print(line, file=stream)

    def sorting(self, path: Path) -> None:
        self._write(f"Sorting {path}")

    def looking_at(self, namespace: str) -> None:
        self._write(f"Looking at namespace '{namespace}'")

    def missing_key(self, entry: MissingKey) -> None:
        self._write(f"Key '{entry.key}' is missing in '{entry.language}' locale")

    def missing_namespace(self, namespace: str, language: str) -> None:
        self._write(f"Namespace '{namespace}' is missing in '{language}' locale")

    def namespace_report(self, report: NamespaceReport) -> None:
        """Print the header for one namespace followed by its findings."""
        self.looking_at(report.name)
        for entry in report.missing:
            self.missing_key(entry)
        for language in report.absent_in:
            self.missing_namespace(report.name, language)

    def summary(self, result: LoadResult, reports: Iterable[NamespaceReport]) -> None:
        """Print run totals and every skipped entry."""
        reports = list(reports)
        missing_count = len(all_missing(reports))
        absent_count = sum(len(r.absent_in) for r in reports)

        self._write("=" * 60)
        self._write("Summary")
        self._write("=" * 60)
        self._write(f"Languages: {len(result.languages)}")
        self._write(f"Namespaces: {len(reports)}")
        self._write(f"Missing keys: {missing_count}")
        if absent_count:
            self._write(f"Missing namespace files: {absent_count}")
        self._write(f"Skipped entries: {len(result.skipped)}")
        for entry in result.skipped:
            self._write(f"  - {entry.describe()}")
