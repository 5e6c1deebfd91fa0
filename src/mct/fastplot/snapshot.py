# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2026 mct-fastplot contributors
"""
Single-slot publication of derived feed state.

The writer computes a complete, immutable snapshot and publishes it with one
reference assignment, so readers on other threads see either the previous or
the new snapshot but never a partially built one. Recomputation is serialized
by a lock; readers of a non-empty snapshot never take it. Reads and refreshes
issued by ``compute`` itself, for example from a resolver calling back into
the assigner, see the previously published snapshot instead of recomputing.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar('T')


class SnapshotPublisher(Generic[T]):
    """
    Holds the latest snapshot and recomputes it on demand.

    Parameters
    ----------
    compute:
        Builds a new snapshot from scratch. Receives the version number the
        snapshot will be published under.
    is_empty:
        Decides whether a published snapshot should be recomputed on read.
    initial:
        Snapshot published before the first computation.
    """

    def __init__(
        self,
        compute: Callable[[int], T],
        is_empty: Callable[[T], bool],
        initial: T,
    ) -> None:
        self._compute = compute
        self._is_empty = is_empty
        self._current = initial
        self._version = 0
        self._write_lock = threading.Lock()
        self._computing_thread: int | None = None

    @property
    def version(self) -> int:
        """Number of snapshots published so far."""
        return self._version

    def peek(self) -> T:
        """Return the published snapshot without recomputing."""
        return self._current

    def get(self) -> T:
        """Return the published snapshot, recomputing first if it is empty."""
        current = self._current
        if not self._is_empty(current) or self._in_compute():
            return current
        with self._write_lock:
            # Another reader may have recomputed while we waited for the lock.
            if self._current is current:
                self._publish_locked()
            return self._current

    def refresh(self) -> T:
        """
        Recompute and publish unconditionally.

        Called from within ``compute`` it returns the published snapshot.
        """
        if self._in_compute():
            return self._current
        with self._write_lock:
            self._publish_locked()
            return self._current

    def _in_compute(self) -> bool:
        return self._computing_thread == threading.get_ident()

    def _publish_locked(self) -> None:
        version = self._version + 1
        self._computing_thread = threading.get_ident()
        try:
            snapshot = self._compute(version)
        finally:
            self._computing_thread = None
        self._current = snapshot
        self._version = version
        logger.debug("Published snapshot", version=version)
