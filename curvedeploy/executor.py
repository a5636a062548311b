"""Run a batch of tasks concurrently and report their progress per host."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from typing import Optional, TextIO

from curvedeploy.monitor import Monitor, Status
from curvedeploy.task import SkipTask, Task
from curvedeploy.tui.table import fixed_format, green, red, yellow

DEFAULT_CONCURRENCY = 3


@dataclass
class ExecOption:
    """How a batch of tasks is executed and displayed."""

    concurrency: int = 10
    silent_main_bar: bool = False
    silent_sub_bar: bool = False
    skip_error: bool = False


@dataclass
class _Bar:
    id: int
    label: str
    total: int
    done: int = 0

    @property
    def completed(self) -> bool:
        return self.done >= self.total


class Tasks:
    """A batch of tasks; tasks sharing a parent id share one progress line."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.tasks: list[Task] = []
        self.monitor = Monitor()
        self.out = out if out is not None else sys.stdout
        self._main_bar: Optional[_Bar] = None
        self._sub_bars: dict[str, _Bar] = {}
        self._next_id = 0
        self._lock = threading.Lock()

    def add_task(self, task: Task) -> None:
        self.tasks.append(task)

    def count_ptid(self, ptid: str) -> int:
        """Number of tasks whose parent id is `ptid`."""
        return sum(1 for task in self.tasks if task.ptid == ptid)

    def _allocate_id(self) -> int:
        bid = self._next_id
        self._next_id += 1
        return bid

    def _pretty_subnames(self) -> None:
        rows = [task.subname.split(" ") for task in self.tasks]
        subnames = fixed_format(rows, 2).split("\n")
        for task, subname in zip(self.tasks, subnames):
            task.subname = subname

    def _add_main_bar(self) -> None:
        self._main_bar = _Bar(self._allocate_id(), self.tasks[0].name, 1)

    def _add_sub_bar(self, task: Task) -> None:
        with self._lock:
            if task.ptid in self._sub_bars:
                return
            self._sub_bars[task.ptid] = _Bar(
                self._allocate_id(), task.subname, self.count_ptid(task.ptid)
            )

    def _sub_bar(self, task: Task) -> Optional[_Bar]:
        with self._lock:
            return self._sub_bars.get(task.ptid)

    def _set_main_bar_status(self) -> None:
        assert self._main_bar is not None
        main_id = self._main_bar.id
        with self._lock:
            bars = list(self._sub_bars.values())
        for bar in bars:
            status = self.monitor.get(bar.id)
            if status == Status.ERROR:
                self.monitor.set(main_id, self.monitor.error)
                return
            if status == Status.OK:
                self.monitor.set(main_id, None)
                return
        # every task was skipped
        self.monitor.set(main_id, SkipTask())

    def _status_text(self, bar: _Bar) -> str:
        if not bar.completed:
            return ""
        status = self.monitor.get(bar.id)
        if status == Status.OK:
            return green("[OK]")
        if status == Status.SKIP:
            return yellow("[SKIP]")
        return red("[ERROR]")

    def _render(self) -> None:
        lines = []
        if self._main_bar is not None:
            lines.append(f"{self._main_bar.label}: {self._status_text(self._main_bar)}")
        for bar in self._sub_bars.values():
            nsucc, nskip, _ = self.monitor.sum(bar.id)
            replica = f"[{nsucc + nskip}/{bar.total}]"
            lines.append(f"  + {bar.label} {replica} {self._status_text(bar)}")
        if lines:
            self.out.write("\n".join(lines) + "\n")
            self.out.flush()

    def _work(self, task: Task, workers: threading.Semaphore) -> None:
        bar = self._sub_bar(task)
        try:
            err: Optional[BaseException] = None
            try:
                task.execute()
            except Exception as exc:  # every failure is recorded, not propagated
                err = exc
            self.monitor.set(bar.id if bar is not None else 0, err)
        finally:
            if bar is not None:
                with self._lock:
                    bar.done += 1
            workers.release()

    def execute(self, option: Optional[ExecOption] = None) -> None:
        """Run all tasks; raise the last real error any task raised."""
        if not self.tasks:
            return
        option = option if option is not None else ExecOption()

        self._pretty_subnames()
        concurrency = option.concurrency if option.concurrency > 0 else DEFAULT_CONCURRENCY
        workers = threading.Semaphore(concurrency)
        if not option.silent_main_bar:
            self._add_main_bar()

        threads = []
        for task in self.tasks:
            if self.monitor.error is not None and not option.skip_error:
                break
            workers.acquire()
            if self.monitor.error is not None and not option.skip_error:
                workers.release()
                break
            if not option.silent_sub_bar:
                self._add_sub_bar(task)
            thread = threading.Thread(target=self._work, args=(task, workers))
            thread.start()
            threads.append(thread)

        for thread in threads:
            thread.join()
        if self._main_bar is not None:
            self._main_bar.done += 1
            self._set_main_bar_status()
        self._render()

        if self.monitor.error is not None:
            raise self.monitor.error