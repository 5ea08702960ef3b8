"""Holder for the currently published location history snapshot."""

from __future__ import annotations

import logging
from threading import RLock
from typing import Iterable

from .index import LocationHistory
from .models import Fix

_LOG = logging.getLogger(__name__)


class HistoryStore:
    """Publish-by-replacement container for a ``LocationHistory``.

    Readers grab ``store.history`` once per request and keep using that
    snapshot; they never take the lock. Writers build a complete replacement
    and swap the reference under the lock, so a published snapshot is never
    modified.
    """

    def __init__(self, history: LocationHistory | None = None) -> None:
        self._lock = RLock()
        self._history = history if history is not None else LocationHistory()
        self._generation = 0

    @property
    def history(self) -> LocationHistory:
        """The currently published snapshot."""

        return self._history

    @property
    def generation(self) -> int:
        """Number of snapshots published since construction."""

        return self._generation

    def publish(self, history: LocationHistory) -> LocationHistory:
        """Replace the current snapshot and return the previous one."""

        with self._lock:
            previous = self._history
            self._history = history
            self._generation += 1
            generation = self._generation
        _LOG.info(
            "Published location history generation %d (%d fixes)",
            generation,
            len(history),
        )
        return previous

    def load(self, fixes: Iterable[Fix]) -> LocationHistory:
        """Index decoded ``fixes`` and publish them as the new snapshot."""

        history = LocationHistory(fixes)
        self.publish(history)
        return history


__all__ = ["HistoryStore"]
