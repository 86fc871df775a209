from __future__ import annotations

from typing import Protocol

from .model import ClockState


class ClockStateRepository(Protocol):
    def get_state(self) -> ClockState:
        raise NotImplementedError

    def save_state(self, state: ClockState) -> None:
        raise NotImplementedError
