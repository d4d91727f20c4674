"""
Mutation Engine — seul chemin d'écriture vers le Block Store.

Chaque opération : validation complète → snapshot d'historique → application.
Une opération rejetée lève avant toute écriture : store, historique et
sélection restent inchangés.
"""
import copy
import functools
import logging
import uuid
from typing import Any, Callable, Dict, Iterable, List, Optional

from pydantic import ValidationError

from .blocks.registry import ComponentRegistry
from .core.config import ID_PREFIX
from .core.errors import BuilderError, CyclicMove, InvalidParent, InvalidSettings
from .core.schemas import Block, BuilderSettings, DeviceStyles, check_device
from .history import HistoryManager
from .interaction import InteractionState
from .store import BlockStore

log = logging.getLogger(__name__)

_MAX_ID_ATTEMPTS = 100


def generate_id(prefix: str = ID_PREFIX) -> str:
    """Id unique de bloc : block_3f9a1c2b7d4e."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def _clamp(index: Optional[int], size: int) -> int:
    """Index d'insertion borné à [0, size] ; None → fin."""
    if index is None:
        return size
    return max(0, min(index, size))


def _rejections_logged(method):
    """Trace en WARNING toute mutation rejetée avant de propager l'erreur."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except BuilderError as e:
            log.warning("%s rejeté : %s", method.__name__, e)
            raise
    return wrapper


class MutationEngine:
    """
    Opérations structurelles et d'édition du document.

    Usage:
        >>> engine = MutationEngine(store, default_registry(), history, interaction)
        >>> row = engine.add_block("row")
        >>> col = engine.add_block("column", row.id, 0)
        >>> engine.move_block(col.id, None)
    """

    def __init__(
        self,
        store: BlockStore,
        registry: ComponentRegistry,
        history: Optional[HistoryManager] = None,
        interaction: Optional[InteractionState] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self._store = store
        self._registry = registry
        self._history = history
        self._interaction = interaction
        self._id_factory = id_factory or generate_id

    # ── Helpers ─────────────────────────────────────────────────────────────

    def _new_id(self, reserved: Iterable[str] = ()) -> str:
        reserved = set(reserved)
        for _ in range(_MAX_ID_ATTEMPTS):
            candidate = self._id_factory()
            if candidate not in self._store and candidate not in reserved:
                return candidate
        raise RuntimeError("Impossible de générer un id de bloc unique")

    def _record(self) -> None:
        if self._history is not None:
            self._history.record_before_mutation()

    def _select(self, block_id: Optional[str]) -> None:
        if self._interaction is not None:
            self._interaction.select(block_id)

    def check_parent(
        self,
        parent_id: Optional[str],
        child_kind: str,
        exclude_id: Optional[str] = None,
    ) -> None:
        """Lève InvalidParent si `child_kind` ne peut pas devenir enfant de `parent_id`."""
        if parent_id is None:
            reason = self._registry.containment_error(None, child_kind)
        else:
            parent = self._store.get(parent_id)
            if parent is None:
                raise InvalidParent(f"Parent introuvable : {parent_id!r}", parent_id=parent_id)
            siblings = [c for c in self._store.children(parent_id) if c.id != exclude_id]
            reason = self._registry.containment_error(parent.kind, child_kind, len(siblings))
        if reason:
            raise InvalidParent(f"Parent invalide : {reason}", parent_id=parent_id, kind=child_kind)

    # ── Structure ───────────────────────────────────────────────────────────

    @_rejections_logged
    def add_block(self, kind: str, parent_id: Optional[str] = None, index: Optional[int] = None) -> Block:
        """Insère un nouveau bloc `kind` sous `parent_id` (racine si None) à `index` (fin par défaut)."""
        definition = self._registry.require(kind)
        self.check_parent(parent_id, kind)

        siblings = self._store.children(parent_id)
        position = _clamp(index, len(siblings))
        block = Block(
            id=self._new_id(),
            kind=kind,
            parent_id=parent_id,
            props=copy.deepcopy(definition.default_props),
            styles=definition.default_styles.model_copy(deep=True),
        )

        self._record()
        self._store._insert(block)
        siblings.insert(position, block)
        self._store._renumber(siblings)
        self._select(block.id)

        log.info("add_block %s (%s) → parent=%s index=%d", block.id, kind, parent_id, position)
        return block

    @_rejections_logged
    def move_block(self, block_id: str, new_parent_id: Optional[str] = None, index: Optional[int] = None) -> Block:
        """
        Re-parente et/ou réordonne un bloc (avec son sous-arbre).
        `index` = position finale parmi les nouveaux frères, bloc retiré de sa place d'origine.
        """
        block = self._store.require(block_id)
        if new_parent_id is not None and self._store.is_in_subtree(new_parent_id, block_id):
            raise CyclicMove(
                f"Impossible de déplacer {block_id!r} dans son propre sous-arbre ({new_parent_id!r})",
                block_id=block_id,
                parent_id=new_parent_id,
            )
        self.check_parent(new_parent_id, block.kind, exclude_id=block_id)

        old_parent_id = block.parent_id
        old_index = self._store.index_of(block_id)
        old_siblings = [b for b in self._store.children(old_parent_id) if b.id != block_id]
        same_parent = old_parent_id == new_parent_id
        new_siblings = old_siblings if same_parent else self._store.children(new_parent_id)
        position = _clamp(index, len(new_siblings))

        self._record()
        if not same_parent:
            self._store._renumber(old_siblings)
            block.parent_id = new_parent_id
        new_siblings.insert(position, block)
        self._store._renumber(new_siblings)

        if same_parent and position == old_index:
            log.debug("move_block %s : position inchangée", block_id)
        else:
            log.info("move_block %s : %s[%d] → %s[%d]", block_id, old_parent_id, old_index, new_parent_id, position)
        return block

    @_rejections_logged
    def duplicate_block(self, block_id: str) -> Block:
        """Clone profond du bloc et de son sous-arbre (ids neufs), inséré juste après l'original."""
        original = self._store.require(block_id)
        self.check_parent(original.parent_id, original.kind)

        siblings = self._store.children(original.parent_id)
        position = [b.id for b in siblings].index(block_id) + 1

        mapping: Dict[str, str] = {}
        clones: List[Block] = []
        for source_id in self._store.subtree_ids(block_id):
            source = self._store.get(source_id)
            new_id = self._new_id(reserved=mapping.values())
            mapping[source_id] = new_id
            clones.append(source.model_copy(
                deep=True,
                update={"id": new_id, "parent_id": mapping.get(source.parent_id, source.parent_id)},
            ))

        self._record()
        for clone in clones:
            self._store._insert(clone)
        siblings.insert(position, clones[0])
        self._store._renumber(siblings)
        self._select(clones[0].id)

        log.info("duplicate_block %s → %s (%d blocs)", block_id, clones[0].id, len(clones))
        return clones[0]

    def remove_block(self, block_id: str) -> bool:
        """Supprime le bloc et tout son sous-arbre. Idempotent : id absent → False, sans effet."""
        block = self._store.get(block_id)
        if block is None:
            log.debug("remove_block %s : déjà absent", block_id)
            return False

        doomed = self._store.subtree_ids(block_id)
        interaction = self._interaction
        drop_selection = interaction is not None and interaction.selected_block_id in doomed
        drop_hover = interaction is not None and interaction.hovered_block_id in doomed

        self._record()
        for doomed_id in doomed:
            self._store._delete(doomed_id)
        self._store._renumber(self._store.children(block.parent_id))
        if drop_selection:
            interaction.select(None)
        if drop_hover:
            interaction.hover(None)

        log.info("remove_block %s (%d blocs)", block_id, len(doomed))
        return True

    @_rejections_logged
    def clear_all(self) -> None:
        """Vide le document (blocs, styles globaux, settings). Annulable."""
        self._record()
        self._store._replace([], DeviceStyles(), BuilderSettings())
        self._select(None)
        if self._interaction is not None:
            self._interaction.hover(None)
        log.info("clear_all")

    # ── Édition ─────────────────────────────────────────────────────────────

    @_rejections_logged
    def update_block_props(self, block_id: str, partial_props: Dict[str, Any]) -> Block:
        """Fusion superficielle dans block.props."""
        block = self._store.require(block_id)
        props = {**block.props, **partial_props}

        self._record()
        block.props = props
        self._store._touch()

        log.debug("update_block_props %s %s", block_id, list(partial_props))
        return block

    @_rejections_logged
    def update_block_styles(self, block_id: str, device: str, partial_styles: Dict[str, Any]) -> Block:
        """Fusion superficielle dans block.styles[device] uniquement."""
        check_device(device)
        block = self._store.require(block_id)
        styles = {**block.styles.for_device(device), **partial_styles}

        self._record()
        setattr(block.styles, device, styles)
        self._store._touch()

        log.debug("update_block_styles %s [%s] %s", block_id, device, list(partial_styles))
        return block

    @_rejections_logged
    def update_global_styles(self, device: str, partial_styles: Dict[str, Any]) -> DeviceStyles:
        """Fusion superficielle dans globalStyles[device]."""
        check_device(device)
        global_styles = self._store.global_styles
        styles = {**global_styles.for_device(device), **partial_styles}

        self._record()
        setattr(global_styles, device, styles)
        self._store._touch()

        log.debug("update_global_styles [%s] %s", device, list(partial_styles))
        return global_styles

    @_rejections_logged
    def update_settings(self, partial: Dict[str, Any]) -> BuilderSettings:
        """
        Met à jour les réglages du document.
        Clés snake_case ou camelCase ; typography / colors fusionnés sur un niveau.
        """
        fields = BuilderSettings.model_fields
        aliases = {f.alias: name for name, f in fields.items() if f.alias}

        normalized: Dict[str, Any] = {}
        for key, value in partial.items():
            name = aliases.get(key, key)
            if name not in fields:
                raise InvalidSettings(f"Réglage inconnu : {key!r}. Attendu : {list(fields)}", key=key)
            normalized[name] = value

        current = self._store.settings.model_dump()
        for name in ("typography", "colors"):
            if name in normalized:
                if not isinstance(normalized[name], dict):
                    raise InvalidSettings(f"{name} attend un objet", key=name)
                normalized[name] = {**current[name], **normalized[name]}
        try:
            settings = BuilderSettings.model_validate({**current, **normalized})
        except ValidationError as e:
            raise InvalidSettings(f"Réglages invalides : {e.error_count()} erreur(s)", errors=e.errors()) from e

        self._record()
        self._store.settings = settings
        self._store._touch()

        log.debug("update_settings %s", list(normalized))
        return settings
