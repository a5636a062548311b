"""A task: a named sequence of steps run against one host."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol


class SkipTask(Exception):
    """Raised by a step to end its task without counting it as a failure."""

    def __init__(self, message: str = "skip task") -> None:
        super().__init__(message)


@dataclass
class TaskContext:
    """Execution context handed to every step of a task."""

    ssh_config: Any = None

    def close(self) -> None:
        """Release whatever the context holds."""


class Step(Protocol):
    def execute(self, ctx: Any) -> None: ...


def _new_tid() -> str:
    return str(uuid.uuid4())[:12]


@dataclass
class Task:
    """Steps executed in order; the first failing step ends the task."""

    name: str
    subname: str = ""
    ssh_config: Any = None
    context_factory: Callable[[Any], Any] = TaskContext
    tid: str = field(default_factory=_new_tid)
    ptid: str = ""
    steps: list[Step] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.ptid:
            self.ptid = self.tid

    def add_step(self, step: Step) -> None:
        self.steps.append(step)

    def execute(self) -> None:
        """Run every step with a fresh context, closing it afterwards."""
        ctx = self.context_factory(self.ssh_config)
        try:
            for step in self.steps:
                step.execute(ctx)
        finally:
            close = getattr(ctx, "close", None)
            if close is not None:
                close()