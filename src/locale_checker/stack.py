"""
Key union accumulator.

Collects, per namespace name, the union of keys seen across every language.
The checker later compares each language against these records.
"""

from threading import Lock
from typing import Dict, Iterable, Iterator, List, Optional

from .core.models import GlobalNamespaceRecord


class KeyStack:
    """
    Global record of namespace keys, keyed by namespace name.

    Merges are order-independent and idempotent: the final key set for a
    namespace is the plain union of everything merged into it. A lock guards
    the records so loaders running on worker threads can merge concurrently.
    """

    def __init__(self):
        self._records: Dict[str, GlobalNamespaceRecord] = {}
        self._lock = Lock()

    def merge_keys(self, name: str, keys: Iterable[str]) -> GlobalNamespaceRecord:
        """
        Merge a namespace's keys into its global record.

        Args:
            name: Namespace name (file basename)
            keys: Keys found in one language's file for that namespace

        Returns:
            The record for ``name`` after the merge
        """
        keys = list(keys)
        with self._lock:
            record = self._records.get(name)
            if record is None:
                record = GlobalNamespaceRecord(name=name, keys=sorted(set(keys)))
                self._records[name] = record
            else:
                record.extend(keys)
            return record

    def get(self, name: str) -> Optional[GlobalNamespaceRecord]:
        with self._lock:
            return self._records.get(name)

    def names(self) -> List[str]:
        """Namespace names in sorted order."""
        with self._lock:
            return sorted(self._records)

    def records(self) -> List[GlobalNamespaceRecord]:
        """Snapshot of all records, sorted by namespace name."""
        with self._lock:
            return [self._records[name] for name in sorted(self._records)]

    def __iter__(self) -> Iterator[GlobalNamespaceRecord]:
        return iter(self.records())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._records
