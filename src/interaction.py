"""
Interaction State — état UI transitoire, hors historique.

device, mode preview, sélection, survol, et drag-and-drop en trois phases :
  start_drag(payload) → drag_over(target) → drop (une seule mutation) | cancel_drag()
"""
import logging
from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel

from .core.config import DEFAULT_DEVICE
from .core.schemas import check_device
from .store import BlockStore

log = logging.getLogger(__name__)


class NewComponentDrag(BaseModel):
    """Composant neuf glissé depuis la palette."""
    kind: str
    is_new: Literal[True] = True


class ExistingBlockDrag(BaseModel):
    """Bloc existant déplacé dans le canvas."""
    block_id: str
    is_new: Literal[False] = False


DragPayload = Union[NewComponentDrag, ExistingBlockDrag]


class DropTarget(BaseModel):
    """
    Drop zone candidate : (parent_id, index).
    index = position parmi les frères tels qu'affichés (bloc glissé compris).
    """
    parent_id: Optional[str] = None
    index: int = 0


class InteractionState:
    """Device, preview, sélection, survol, drag en cours."""

    def __init__(self, store: BlockStore):
        self._store = store
        self.device: str = DEFAULT_DEVICE
        self.preview_mode: bool = False
        self._selected: Optional[str] = None
        self._hovered: Optional[str] = None
        self.drag: Optional[DragPayload] = None
        self.drop_target: Optional[DropTarget] = None

    # ── Sélection / survol ──────────────────────────────────────────────────
    # Un id absent du store (supprimé entre-temps) équivaut à None.

    @property
    def selected_block_id(self) -> Optional[str]:
        return self._selected if self._selected in self._store else None

    @property
    def hovered_block_id(self) -> Optional[str]:
        return self._hovered if self._hovered in self._store else None

    def select(self, block_id: Optional[str]) -> None:
        self._selected = block_id if block_id in self._store else None
        log.debug("select %s", self._selected)

    def hover(self, block_id: Optional[str]) -> None:
        self._hovered = block_id if block_id in self._store else None

    # ── Device / preview ────────────────────────────────────────────────────

    def set_device(self, device: str) -> None:
        self.device = check_device(device)
        log.debug("device → %s", device)

    def set_preview_mode(self, enabled: bool) -> None:
        """Le mode preview masque les outils d'édition : sélection et drag abandonnés."""
        self.preview_mode = bool(enabled)
        if self.preview_mode:
            self._selected = None
            self.cancel_drag()
        log.debug("preview_mode → %s", self.preview_mode)

    @property
    def editing(self) -> bool:
        return not self.preview_mode

    def reset(self) -> None:
        """Valeurs par défaut (après chargement d'un document)."""
        self.device = DEFAULT_DEVICE
        self.preview_mode = False
        self._selected = None
        self._hovered = None
        self.cancel_drag()

    # ── Drag-and-drop ───────────────────────────────────────────────────────

    def start_drag(self, payload: DragPayload) -> bool:
        """Phase 1 : capture du payload. Ignoré en mode preview."""
        if self.preview_mode:
            log.debug("drag ignoré en mode preview")
            return False
        self.drag = payload
        self.drop_target = None
        log.debug("drag start %s", payload)
        return True

    def drag_over(self, target: Optional[DropTarget]) -> None:
        """Phase 2 : drop zone candidate (None = hors de toute zone)."""
        if self.drag is None:
            return
        self.drop_target = target

    def cancel_drag(self) -> None:
        self.drag = None
        self.drop_target = None

    def take_drag(self) -> Tuple[Optional[DragPayload], Optional[DropTarget]]:
        """Phase 3 : retourne (payload, cible) et vide l'état de drag."""
        payload, target = self.drag, self.drop_target
        self.cancel_drag()
        return payload, target
