"""Locks that exclude both other threads and other processes.

Every CLI command runs in its own process, so a ``threading`` lock alone
does not serialize two concurrent ``ims sale record`` calls. Each lock
here pairs a per-process ``RLock`` with an OS-level ``filelock.FileLock``
on a sibling ``.lock`` file. Both are re-entrant within the owning
thread.
"""

from __future__ import annotations

import re
import threading
from pathlib import Path

from filelock import FileLock, Timeout

from ims.domain.exceptions import StoreUnavailableError
from ims.domain.service.stock_ledger import ProductLocks

# Generous: a holder only blocks for one read-modify-write cycle.
LOCK_TIMEOUT_SECONDS = 30.0

_SAFE_NAME_RE = re.compile(r"[^A-Za-z0-9_.-]")


class InterProcessLock:

    def __init__(self, lock_path: Path, timeout: float = LOCK_TIMEOUT_SECONDS) -> None:
        self.lock_path = lock_path
        self._thread_lock = threading.RLock()
        # The RLock admits one thread at a time, so the file lock's
        # re-entrancy counter can be shared.
        self._file_lock = FileLock(str(lock_path), timeout=timeout, thread_local=False)

    def __enter__(self) -> InterProcessLock:
        self._thread_lock.acquire()
        try:
            self._file_lock.acquire()
        except Timeout as exc:
            self._thread_lock.release()
            raise StoreUnavailableError(
                f"Timed out waiting for lock {self.lock_path.name}"
            ) from exc
        except OSError as exc:
            self._thread_lock.release()
            raise StoreUnavailableError(
                f"Cannot lock {self.lock_path.name}: {exc}"
            ) from exc
        return self

    def __exit__(self, *exc_info) -> None:
        try:
            self._file_lock.release()
        finally:
            self._thread_lock.release()


_registry_guard = threading.Lock()
_locks_by_path: dict[Path, InterProcessLock] = {}


def lock_for_path(lock_path: Path) -> InterProcessLock:
    """Return the process-wide lock object for *lock_path*."""
    lock_path = Path(lock_path).resolve()
    with _registry_guard:
        lock = _locks_by_path.get(lock_path)
        if lock is None:
            try:
                lock_path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise StoreUnavailableError(
                    f"Cannot create lock directory {lock_path.parent}: {exc}"
                ) from exc
            lock = InterProcessLock(lock_path)
            _locks_by_path[lock_path] = lock
        return lock


class FileProductLocks(ProductLocks):
    """Per-product locks backed by ``<lock_dir>/product-<id>.lock``."""

    def __init__(self, lock_dir: Path) -> None:
        super().__init__()
        self._lock_dir = Path(lock_dir)

    def for_product(self, product_id: str) -> InterProcessLock:
        name = _SAFE_NAME_RE.sub("_", str(product_id))
        return lock_for_path(self._lock_dir / f"product-{name}.lock")
