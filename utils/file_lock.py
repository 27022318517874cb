"""Exclusive lock on the record store's ``.record_store.lock`` file.

Every CSV store mutation holds this lock while it rewrites the tables, so two
processes sharing a data directory never interleave their writes.
"""

from __future__ import annotations

import contextlib
import errno
import os
import time
from pathlib import Path
from typing import IO, Iterator

_RETRY_DELAY = 0.01

if os.name == "nt":  # pragma: no cover - Windows specific
    import msvcrt

    def _acquire(handle: IO[str]) -> None:
        # msvcrt locks byte ranges, so the lock file needs at least one byte.
        handle.seek(0, os.SEEK_END)
        if handle.tell() == 0:
            handle.write("\n")
            handle.flush()
        handle.seek(0)
        while True:
            try:
                msvcrt.locking(handle.fileno(), msvcrt.LK_NBLCK, 1)
                return
            except OSError as exc:
                if exc.errno not in (errno.EACCES, errno.EDEADLK):
                    raise
                time.sleep(_RETRY_DELAY)

    def _release(handle: IO[str]) -> None:
        handle.seek(0)
        msvcrt.locking(handle.fileno(), msvcrt.LK_UNLCK, 1)

else:
    import fcntl

    def _acquire(handle: IO[str]) -> None:
        fcntl.flock(handle, fcntl.LOCK_EX)

    def _release(handle: IO[str]) -> None:
        fcntl.flock(handle, fcntl.LOCK_UN)


@contextlib.contextmanager
def locked_path(lock_path: Path) -> Iterator[None]:
    """Hold the store lock at ``lock_path`` for the duration of the block."""

    lock_path.parent.mkdir(parents=True, exist_ok=True)
    # Append mode never truncates the marker byte another process locked.
    with lock_path.open("a+") as handle:
        _acquire(handle)
        try:
            yield
        finally:
            _release(handle)


__all__ = ["locked_path"]
