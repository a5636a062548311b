"""Thread-safe record of sub-task outcomes, grouped by progress bar id."""

from __future__ import annotations

import threading
from enum import IntEnum
from typing import Optional

from curvedeploy.task import SkipTask


class Status(IntEnum):
    OK = 0
    SKIP = 1
    ERROR = 2


class Monitor:
    """Collects the result of every task executed under a bar id."""

    def __init__(self) -> None:
        self.error: Optional[BaseException] = None
        self.result: dict[int, list[Optional[BaseException]]] = {}
        self._lock = threading.RLock()

    def set(self, bid: int, err: Optional[BaseException]) -> None:
        """Record one outcome; real errors become the monitor's error."""
        with self._lock:
            self.result.setdefault(bid, []).append(err)
            if err is not None and not isinstance(err, SkipTask):
                self.error = err

    def sum(self, bid: int) -> tuple[int, int, int]:
        """Return the number of successes, skips and errors for a bar."""
        with self._lock:
            outcomes = list(self.result.get(bid, []))
        nsucc = sum(1 for err in outcomes if err is None)
        nskip = sum(1 for err in outcomes if isinstance(err, SkipTask))
        return nsucc, nskip, len(outcomes) - nsucc - nskip

    def get(self, bid: int) -> Status:
        """Overall status: any error wins, all skipped is a skip, else OK."""
        with self._lock:
            nsucc, nskip, nerr = self.sum(bid)
        if nerr:
            return Status.ERROR
        if nskip == nsucc + nskip + nerr:
            return Status.SKIP
        return Status.OK