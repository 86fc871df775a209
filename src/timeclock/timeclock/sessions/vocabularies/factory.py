from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import LogSource
from .base import SessionVocabulary
from .local_vocabulary import LocalVocabulary
from .synced_vocabulary import SyncedVocabulary


@dataclass
class VocabularyFactory:
    """Factory Pattern: pick the vocabulary matching the log a report reads from."""

    def for_source(self, source: LogSource) -> SessionVocabulary:
        if source == LogSource.SYNCED:
            return SyncedVocabulary()
        return LocalVocabulary()
