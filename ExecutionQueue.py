from __future__ import annotations

import logbook
import typing

from Models import ExecutionBase


class ExecutionQueue(object):
    """
    Where the bot drops its intents. The execution layer drains this once per tick and applies them in order;
    nothing in here touches the world.
    """

    def __init__(self):
        self._pending: typing.List[ExecutionBase] = []

    def add_execution(self, execution: ExecutionBase):
        logbook.debug(f'queued {str(execution)}')
        self._pending.append(execution)

    def pending(self) -> typing.List[ExecutionBase]:
        return self._pending.copy()

    def drain(self) -> typing.List[ExecutionBase]:
        drained = self._pending
        self._pending = []
        return drained

    def __len__(self) -> int:
        return len(self._pending)

    def __str__(self) -> str:
        return '[' + ', '.join(str(e) for e in self._pending) + ']'

    def __repr__(self) -> str:
        return str(self)
