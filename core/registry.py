"""Write-once in-memory registry of accepted files, keyed by content identifier"""

from __future__ import annotations

import threading

from core.errors import ErrorKind, VaultError
from core.models import FileRecord, InsertOutcome


class FileRegistry:
    """Maps content identifiers to file records; a key is never overwritten.

    One lock covers the existence check and the insert, so concurrent
    inserts of the same identifier yield exactly one ``inserted``. Reads
    take the same lock for the duration of a single dict access. Keys are
    expected in canonical form (see ``core.content_id.parse_id``).
    """

    def __init__(self) -> None:
        self._records: dict[str, FileRecord] = {}
        self._lock = threading.Lock()

    def insert(self, content_id: str, record: FileRecord) -> InsertOutcome:
        with self._lock:
            if content_id in self._records:
                return InsertOutcome.already_exists
            self._records[content_id] = record
        return InsertOutcome.inserted

    def lookup(self, content_id: str) -> FileRecord:
        with self._lock:
            record = self._records.get(content_id)
        if record is None:
            raise VaultError(ErrorKind.not_found, content_id=content_id)
        return record

    def __contains__(self, content_id: object) -> bool:
        with self._lock:
            return content_id in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
