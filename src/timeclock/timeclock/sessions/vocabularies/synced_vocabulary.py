from __future__ import annotations

from typing import Optional

from ...core.enums import LogAction, Transition
from .base import SessionVocabulary


class SyncedVocabulary(SessionVocabulary):
    """CLOCK_IN / CLOCK_OUT rows from the client-side store; break rows are ignored."""

    name = "synced"

    def classify(self, action: str) -> Optional[Transition]:
        if action == LogAction.CLOCK_IN.value:
            return Transition.OPEN
        if action == LogAction.CLOCK_OUT.value:
            return Transition.CLOSE
        return None
