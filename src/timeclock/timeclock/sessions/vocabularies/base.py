from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...core.enums import Transition


class SessionVocabulary(ABC):
    """Strategy Pattern: which action tokens open, pause, resume and close a session."""

    name: str = ""

    @abstractmethod
    def classify(self, action: str) -> Optional[Transition]:
        """Map an action token to a transition, or None for rows that do not move the state."""
        raise NotImplementedError
