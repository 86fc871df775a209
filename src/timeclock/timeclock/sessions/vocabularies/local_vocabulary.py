from __future__ import annotations

from typing import Optional

from ...core.enums import LogAction, Transition
from .base import SessionVocabulary

_TRANSITIONS = {
    LogAction.IN.value: Transition.OPEN,
    LogAction.BREAK_OUT.value: Transition.PAUSE,
    LogAction.BREAK.value: Transition.PAUSE,  # legacy spelling of BREAK-OUT
    LogAction.BREAK_IN.value: Transition.RESUME,
    LogAction.OUT.value: Transition.CLOSE,
}


class LocalVocabulary(SessionVocabulary):
    """IN / BREAK-OUT / BREAK-IN / OUT rows written by the clock workflows.

    REPORTED rows are checkpoint markers and do not touch the session state.
    """

    name = "local"

    def classify(self, action: str) -> Optional[Transition]:
        return _TRANSITIONS.get(action)
