from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ClockState:
    """Clock flags kept by the state store and passed explicitly to workflows."""

    is_clocked_in: bool = False
    is_on_break: bool = False

    def clocked_in(self) -> "ClockState":
        return replace(self, is_clocked_in=True)

    def clocked_out(self) -> "ClockState":
        # Clocking out always ends a break.
        return ClockState(is_clocked_in=False, is_on_break=False)

    def with_break(self, on_break: bool) -> "ClockState":
        return replace(self, is_on_break=bool(on_break))


@dataclass(frozen=True)
class WorkflowResult:
    """Acknowledgement shown to the user after a clock workflow."""

    title: str
    message: str
    action: str = ""
