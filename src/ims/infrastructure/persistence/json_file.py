"""Shared file handling for the JSON-backed repositories.

Each repository keeps one JSON array of records in one file. Every
read-modify-write cycle on a file runs under an inter-process lock on
``<file>.lock``, so two saves never lose either update, whether they
come from two threads or two CLI processes. I/O and decoding failures
surface as StoreUnavailableError.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from ims.domain.exceptions import StoreUnavailableError
from ims.infrastructure.persistence.file_locks import InterProcessLock, lock_for_path

logger = logging.getLogger(__name__)


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path).resolve()
        self.lock: InterProcessLock = lock_for_path(
            self._file_path.with_name(self._file_path.name + ".lock")
        )
        self._ensure_file()

    def load(self) -> list[dict]:
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.error(f"Cannot read {self._file_path}", exc_info=True)
            raise StoreUnavailableError(f"Cannot read {self._file_path.name}: {exc}") from exc
        if not isinstance(data, list):
            raise StoreUnavailableError(
                f"{self._file_path.name} does not contain a list of records"
            )
        return data

    def persist(self, records: list[dict]) -> None:
        # Unique temp file in the same directory, then an atomic rename.
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._file_path.parent,
                prefix=self._file_path.name + ".",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(json.dumps(records, indent=2) + "\n")
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            logger.error(f"Cannot write {self._file_path}", exc_info=True)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StoreUnavailableError(f"Cannot write {self._file_path.name}: {exc}") from exc

    def _ensure_file(self) -> None:
        with self.lock:
            if self._file_path.exists():
                return
            self.persist([])


def next_numeric_id(records: list[dict]) -> int:
    """One more than the largest integer-looking ``id`` in *records*."""
    ids = [int(r["id"]) for r in records if str(r.get("id", "")).isdigit()]
    return max(ids) + 1 if ids else 1
