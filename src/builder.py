"""
API publique du Visual Builder.
"""
import logging
from typing import Any, Dict, Optional

from .blocks import ComponentRegistry, default_registry
from .core.errors import BuilderError, CyclicMove
from .core.schemas import Block, BuilderDocument, BuilderSettings, DeviceStyles
from .engine import MutationEngine
from .history import HistoryManager
from .interaction import DragPayload, DropTarget, ExistingBlockDrag, InteractionState
from .renderer.base import Renderer
from .renderer.components import HtmlComponentRenderer
from .renderer.html import render_canvas as _render_canvas
from .renderer.html import render_page as _render_page
from .serialization import DocumentInput, export_document, load_document
from .store import BlockStore
from .style import resolve

log = logging.getLogger(__name__)


class VisualBuilder:
    """
    Session d'édition d'un document : store, historique, interaction, rendu.

    Usage:
        >>> builder = VisualBuilder()
        >>> container = builder.add_block("container")
        >>> heading = builder.add_block("heading", container.id)
        >>> builder.update_block_props(heading.id, {"text": "Bonjour"})
        >>> builder.undo()
        True
        >>> html = builder.render(title="Accueil")
    """

    def __init__(
        self,
        registry: Optional[ComponentRegistry] = None,
        history_limit: Optional[int] = None,
        renderer: Optional[Renderer] = None,
    ):
        """
        Args:
            registry: Catalogue de composants (catalogue standard par défaut)
            history_limit: Profondeur max de l'historique (VISUAL_BUILDER_HISTORY_LIMIT par défaut)
            renderer: Renderer de composants (HTML par défaut)
        """
        self.registry = registry or default_registry()
        self.store = BlockStore()
        self.interaction = InteractionState(self.store)
        if history_limit is None:
            self.history = HistoryManager(self.store, self.interaction)
        else:
            self.history = HistoryManager(self.store, self.interaction, limit=history_limit)
        self.engine = MutationEngine(self.store, self.registry, self.history, self.interaction)
        self.renderer = renderer or HtmlComponentRenderer()

    # ── Lecture ─────────────────────────────────────────────────────────────

    def get_block(self, block_id: str) -> Optional[Block]:
        return self.store.get(block_id)

    @property
    def selected_block(self) -> Optional[Block]:
        return self.store.get(self.interaction.selected_block_id)

    @property
    def dirty(self) -> bool:
        return self.store.dirty

    def resolve_styles(self, block_id: str, device: Optional[str] = None) -> Dict[str, Any]:
        """Styles d'un bloc pour `device` (device courant par défaut)."""
        return resolve(self.store.require(block_id), device or self.interaction.device)

    # ── Mutations ───────────────────────────────────────────────────────────

    def add_block(self, kind: str, parent_id: Optional[str] = None, index: Optional[int] = None) -> Block:
        return self.engine.add_block(kind, parent_id, index)

    def move_block(self, block_id: str, new_parent_id: Optional[str] = None, index: Optional[int] = None) -> Block:
        return self.engine.move_block(block_id, new_parent_id, index)

    def duplicate_block(self, block_id: str) -> Block:
        return self.engine.duplicate_block(block_id)

    def remove_block(self, block_id: str) -> bool:
        return self.engine.remove_block(block_id)

    def update_block_props(self, block_id: str, partial_props: Dict[str, Any]) -> Block:
        return self.engine.update_block_props(block_id, partial_props)

    def update_block_styles(self, block_id: str, device: str, partial_styles: Dict[str, Any]) -> Block:
        return self.engine.update_block_styles(block_id, device, partial_styles)

    def update_global_styles(self, device: str, partial_styles: Dict[str, Any]) -> DeviceStyles:
        return self.engine.update_global_styles(device, partial_styles)

    def update_settings(self, partial: Dict[str, Any]) -> BuilderSettings:
        return self.engine.update_settings(partial)

    def clear_all(self) -> None:
        self.engine.clear_all()

    # ── Historique ──────────────────────────────────────────────────────────

    def undo(self) -> bool:
        return self.history.undo()

    def redo(self) -> bool:
        return self.history.redo()

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    # ── Interaction ─────────────────────────────────────────────────────────

    def select(self, block_id: Optional[str]) -> None:
        self.interaction.select(block_id)

    def hover(self, block_id: Optional[str]) -> None:
        self.interaction.hover(block_id)

    def set_device(self, device: str) -> None:
        self.interaction.set_device(device)

    def set_preview_mode(self, enabled: bool) -> None:
        self.interaction.set_preview_mode(enabled)

    # ── Drag-and-drop ───────────────────────────────────────────────────────

    def can_drop(self, target: DropTarget, payload: Optional[DragPayload] = None) -> bool:
        """True si le drop du payload (drag en cours par défaut) sur `target` serait accepté."""
        payload = payload or self.interaction.drag
        if payload is None:
            return False
        try:
            if isinstance(payload, ExistingBlockDrag):
                block = self.store.require(payload.block_id)
                if target.parent_id is not None and self.store.is_in_subtree(target.parent_id, block.id):
                    raise CyclicMove(f"Cible dans le sous-arbre de {block.id!r}")
                self.engine.check_parent(target.parent_id, block.kind, exclude_id=block.id)
            else:
                self.registry.require(payload.kind)
                self.engine.check_parent(target.parent_id, payload.kind)
        except BuilderError:
            return False
        return True

    def start_drag(self, payload: DragPayload) -> bool:
        return self.interaction.start_drag(payload)

    def drag_over(self, target: Optional[DropTarget]) -> bool:
        """Survol d'une drop zone : seules les cibles valides sont retenues."""
        if target is not None and not self.can_drop(target):
            self.interaction.drag_over(None)
            return False
        self.interaction.drag_over(target)
        return target is not None

    def cancel_drag(self) -> None:
        self.interaction.cancel_drag()

    def drop(self) -> Optional[Block]:
        """
        Fin du drag : une seule mutation (add_block ou move_block) vers la dernière cible valide.
        Sans cible, rien n'est modifié. L'état de drag est vidé dans tous les cas.
        """
        payload, target = self.interaction.take_drag()
        if payload is None or target is None:
            log.debug("drop sans cible : ignoré")
            return None

        if isinstance(payload, ExistingBlockDrag):
            block = self.store.require(payload.block_id)
            index = target.index
            # La drop zone compte le bloc glissé ; move_block attend la position finale
            if block.parent_id == target.parent_id and self.store.index_of(block.id) < index:
                index -= 1
            return self.engine.move_block(block.id, target.parent_id, index)
        return self.engine.add_block(payload.kind, target.parent_id, target.index)

    # ── Persistance ─────────────────────────────────────────────────────────

    def export(self) -> BuilderDocument:
        return export_document(self.store)

    def load(self, data: DocumentInput) -> BuilderDocument:
        """Remplace le document ; historique et interaction repartent de zéro."""
        document = load_document(self.store, data, self.registry)
        self.history.clear()
        self.interaction.reset()
        self.store.mark_clean()
        return document

    def mark_saved(self) -> None:
        self.store.mark_clean()

    # ── Rendu ───────────────────────────────────────────────────────────────

    def render(self, title: str = "", **kwargs) -> str:
        """HTML complet de la page publiée."""
        return _render_page(self.export(), renderer=self.renderer, title=title, **kwargs)

    def render_canvas(self) -> str:
        """HTML de la vue éditeur au device courant."""
        return _render_canvas(self)


def render_document(document: DocumentInput, registry: Optional[ComponentRegistry] = None, **kwargs) -> str:
    """
    Valide puis rend un document en HTML complet (fonction raccourcie).

    Raises:
        InvalidDocument: document corrompu
    """
    builder = VisualBuilder(registry=registry)
    builder.load(document)
    return builder.render(**kwargs)
