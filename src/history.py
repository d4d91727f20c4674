"""
History Manager — undo / redo par snapshots complets.

Deux piles bornées (les entrées les plus anciennes tombent au-delà de `limit`).
Chaque entrée capture le store (blocs + styles globaux + settings) et la
sélection, pour qu'un undo ne laisse pas de sélection pendante.
"""
import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

from .core.config import HISTORY_LIMIT
from .interaction import InteractionState
from .store import BlockStore, StoreSnapshot

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    snapshot: StoreSnapshot
    selected_block_id: Optional[str]


class HistoryManager:

    def __init__(
        self,
        store: BlockStore,
        interaction: Optional[InteractionState] = None,
        limit: int = HISTORY_LIMIT,
    ):
        if limit < 1:
            raise ValueError(f"limit doit être >= 1 (reçu {limit})")
        self._store = store
        self._interaction = interaction
        self.limit = limit
        self._undo: Deque[HistoryEntry] = deque(maxlen=limit)
        self._redo: Deque[HistoryEntry] = deque(maxlen=limit)

    def _capture(self) -> HistoryEntry:
        selected = self._interaction.selected_block_id if self._interaction else None
        return HistoryEntry(snapshot=self._store.snapshot(), selected_block_id=selected)

    def _apply(self, entry: HistoryEntry) -> None:
        self._store.restore(entry.snapshot)
        if self._interaction is not None:
            self._interaction.select(entry.selected_block_id)

    def record_before_mutation(self) -> None:
        """Appelé par le moteur juste avant d'appliquer une mutation validée."""
        self._undo.append(self._capture())
        self._redo.clear()

    def undo(self) -> bool:
        if not self._undo:
            return False
        self._redo.append(self._capture())
        self._apply(self._undo.pop())
        log.info("undo (reste %d)", len(self._undo))
        return True

    def redo(self) -> bool:
        if not self._redo:
            return False
        self._undo.append(self._capture())
        self._apply(self._redo.pop())
        log.info("redo (reste %d)", len(self._redo))
        return True

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)
