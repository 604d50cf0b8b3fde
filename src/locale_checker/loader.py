"""
Locale tree loader.

Walks ``root/{language}/{namespace-file}``, parses every namespace file as a
flat JSON object of strings and merges each file's keys into a KeyStack.

Expected layout:
    root/
    ├── en/
    │   ├── common.json
    │   └── errors.json
    └── fr/
        └── common.json
"""

import json
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from pathlib import Path
from threading import Event
from typing import List, Optional, Tuple

from loguru import logger

from .canonical import DEFAULT_INDENT, encode_sorted, write_atomic
from .core.exceptions import CanonicalEncodeError, RewriteError, RootDirectoryError
from .core.models import Language, LoadResult, Namespace, SkippedEntry, SkipReason
from .naming import entry_name
from .report import Reporter
from .stack import KeyStack

LanguageOutcome = Tuple[Optional[Language], List[SkippedEntry]]
NamespaceOutcome = Tuple[Optional[Namespace], List[SkippedEntry]]


def _list_dir(path: Path) -> List[Path]:
    """List a directory in sorted basename order."""
    return sorted(path.iterdir(), key=lambda p: p.name)


class NamespaceFormatError(ValueError):
    """Valid JSON that is not a flat string-to-string object."""

    def __init__(self, reason: SkipReason, detail: str):
        self.reason = reason
        self.detail = detail
        super().__init__(detail)


def parse_namespace(raw: bytes) -> dict[str, str]:
    """
    Parse the contents of a namespace file.

    Raises:
        NamespaceFormatError: If the document is not a flat string-to-string
            object, or holds an unpaired surrogate escape such as "\\ud800".
        ValueError: If the content is not JSON (or not decodable text).
    """
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise NamespaceFormatError(
            SkipReason.NOT_A_MAPPING,
            f"expected a JSON object, got {type(data).__name__}",
        )
    for key, value in data.items():
        if not isinstance(value, str):
            raise NamespaceFormatError(
                SkipReason.NON_STRING_VALUE,
                f"value of key {key!r} is {type(value).__name__}, expected string",
            )
        try:
            key.encode("utf-8")
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise NamespaceFormatError(
                SkipReason.INVALID_JSON,
                f"key {key!r} contains an unpaired surrogate escape",
            ) from e
    return data


class TreeLoader:
    """
    Loads every language directory under a root into Language objects.

    The loader never replaces the stack it was given, it only merges into it.
    Broken directories and files are recorded as SkippedEntry items and
    loading continues with their siblings. Only a missing root or a failed
    rewrite in sort mode stops the run.
    """

    def __init__(
        self,
        stack: KeyStack,
        sort: bool = False,
        indent: int = DEFAULT_INDENT,
        workers: int = 1,
        reporter: Optional[Reporter] = None,
    ):
        """
        Args:
            stack: Accumulator receiving every parsed file's keys
            sort: Rewrite each parsed file with its keys sorted
            indent: Indentation used when rewriting
            workers: Number of languages loaded in parallel
            reporter: Destination for "Sorting" lines
        """
        self.stack = stack
        self.sort = sort
        self.indent = indent
        self.workers = max(1, workers)
        self.reporter = reporter or Reporter()
        self._stop = Event()

    def load(self, root: Path) -> LoadResult:
        """
        Load all languages under ``root``.

        Raises:
            RootDirectoryError: If ``root`` cannot be listed.
            RewriteError: If sort mode fails to write a file back.
        """
        root = Path(root)
        try:
            entries = _list_dir(root)
        except OSError as e:
            raise RootDirectoryError(root, e.strerror or str(e)) from e

        self._stop = Event()
        if self.workers > 1 and len(entries) > 1:
            outcomes = self._load_parallel(entries)
        else:
            outcomes = [self.load_language(entry) for entry in entries]

        result = LoadResult()
        languages = []
        for language, skipped in outcomes:
            if language is not None:
                languages.append(language)
            result.skipped.extend(skipped)
        result.languages = tuple(languages)

        logger.info(
            f"Loaded {len(result.languages)} languages from {root} "
            f"({', '.join(lang.name for lang in result.languages)}), "
            f"{len(self.stack)} namespaces, {len(result.skipped)} skipped"
        )
        return result

    def _load_parallel(self, entries: List[Path]) -> List[LanguageOutcome]:
        """Load languages on a thread pool, stopping at the first fatal error."""
        executor = ThreadPoolExecutor(max_workers=self.workers)
        try:
            futures = [executor.submit(self.load_language, entry) for entry in entries]
            done, _ = wait(futures, return_when=FIRST_EXCEPTION)
            for future in futures:
                if future in done and future.exception() is not None:
                    self._stop.set()
                    executor.shutdown(wait=True, cancel_futures=True)
                    raise future.exception()
            return [future.result() for future in futures]
        finally:
            executor.shutdown(wait=True)

    def load_language(self, path: Path) -> LanguageOutcome:
        """Load one language directory. Unlistable entries are skipped."""
        try:
            files = _list_dir(path)
        except OSError as e:
            skipped = SkippedEntry(path, SkipReason.UNREADABLE_DIRECTORY, e.strerror or str(e))
            logger.debug(f"Skipping {skipped.describe()}")
            return None, [skipped]

        namespaces = []
        skipped_entries = []
        for file_path in files:
            if self._stop.is_set():
                break
            namespace, skipped = self.load_namespace(file_path)
            if namespace is not None:
                namespaces.append(namespace)
            skipped_entries.extend(skipped)

        return Language(name=entry_name(path), namespaces=tuple(namespaces)), skipped_entries

    def load_namespace(self, path: Path) -> NamespaceOutcome:
        """
        Load and merge one namespace file.

        Returns:
            The parsed Namespace (or None if the file was skipped) and any
            skip records produced along the way. An encode failure in sort
            mode yields both a Namespace and a skip record.
        """
        try:
            with open(path, "rb") as f:
                raw = f.read()
        except OSError as e:
            return None, [self._skip(path, SkipReason.UNREADABLE_FILE, e.strerror or str(e))]

        try:
            data = parse_namespace(raw)
        except NamespaceFormatError as e:
            return None, [self._skip(path, e.reason, e.detail)]
        except ValueError as e:
            return None, [self._skip(path, SkipReason.INVALID_JSON, str(e))]

        name = entry_name(path)
        self.stack.merge_keys(name, data.keys())
        namespace = Namespace(name=name, data=data)

        if self.sort:
            skipped = self._rewrite_sorted(path, data)
            if skipped is not None:
                return namespace, [skipped]

        return namespace, []

    def _rewrite_sorted(self, path: Path, data: dict[str, str]) -> Optional[SkippedEntry]:
        if self._stop.is_set():
            return None
        self.reporter.sorting(path)
        try:
            content = encode_sorted(data, path, indent=self.indent)
        except CanonicalEncodeError as e:
            logger.warning(f"{e}. Leaving the file unsorted.")
            return SkippedEntry(path, SkipReason.ENCODE_FAILED, e.reason)
        try:
            write_atomic(path, content)
        except RewriteError:
            # Stops the other workers; the error ends the run
            self._stop.set()
            raise
        return None

    def _skip(self, path: Path, reason: SkipReason, detail: str) -> SkippedEntry:
        skipped = SkippedEntry(path, reason, detail)
        logger.debug(f"Skipping {skipped.describe()}")
        return skipped
