"""
Block Store — forêt de blocs en mémoire (le document en cours d'édition).

Stockage plat id → Block ; l'arbre se lit via parent_id + order.
Lecture libre ; écriture réservée au moteur de mutation, à l'historique
et à la sérialisation (méthodes préfixées `_`).
"""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from .core.errors import BlockNotFound
from .core.schemas import Block, BuilderSettings, DeviceStyles


@dataclass(frozen=True)
class StoreSnapshot:
    """Copie profonde et opaque de l'état du store."""
    blocks: Tuple[Block, ...]
    global_styles: DeviceStyles
    settings: BuilderSettings


class BlockStore:
    """Propriétaire unique de tous les blocs du document."""

    def __init__(self):
        self._blocks: Dict[str, Block] = {}
        self.global_styles = DeviceStyles()
        self.settings = BuilderSettings()
        self.dirty = False

    # ── Lecture ─────────────────────────────────────────────────────────────

    def get(self, block_id: Optional[str]) -> Optional[Block]:
        if block_id is None:
            return None
        return self._blocks.get(block_id)

    def require(self, block_id: str) -> Block:
        block = self._blocks.get(block_id)
        if block is None:
            raise BlockNotFound(f"Bloc introuvable : {block_id!r}", block_id=block_id)
        return block

    def __contains__(self, block_id: object) -> bool:
        return block_id in self._blocks

    def __len__(self) -> int:
        return len(self._blocks)

    def children(self, parent_id: Optional[str]) -> List[Block]:
        """Enfants directs, triés par order croissant (parent_id=None → racines)."""
        return sorted(
            (b for b in self._blocks.values() if b.parent_id == parent_id),
            key=lambda b: b.order,
        )

    def roots(self) -> List[Block]:
        return self.children(None)

    def ancestors(self, block_id: str) -> List[str]:
        """Chaîne des parents, du plus proche à la racine."""
        chain = []
        current = self.require(block_id).parent_id
        while current is not None:
            chain.append(current)
            current = self._blocks[current].parent_id
        return chain

    def subtree_ids(self, block_id: str) -> List[str]:
        """Ids du sous-arbre en pré-ordre, racine incluse."""
        self.require(block_id)
        ids = []
        stack = [block_id]
        while stack:
            current = stack.pop()
            ids.append(current)
            stack.extend(reversed([c.id for c in self.children(current)]))
        return ids

    def is_in_subtree(self, candidate_id: Optional[str], root_id: str) -> bool:
        """True si candidate_id est root_id ou l'un de ses descendants."""
        while candidate_id is not None:
            if candidate_id == root_id:
                return True
            block = self._blocks.get(candidate_id)
            candidate_id = block.parent_id if block else None
        return False

    def walk(self, parent_id: Optional[str] = None, depth: int = 0) -> Iterator[Tuple[Block, int]]:
        """Parcours pré-ordre (bloc, profondeur) — l'arbre du panneau des calques."""
        for child in self.children(parent_id):
            yield child, depth
            yield from self.walk(child.id, depth + 1)

    def blocks(self) -> List[Block]:
        """Liste plate en pré-ordre (parents avant enfants, frères par order)."""
        return [block for block, _ in self.walk()]

    def index_of(self, block_id: str) -> int:
        """Position du bloc parmi ses frères."""
        block = self.require(block_id)
        return [b.id for b in self.children(block.parent_id)].index(block_id)

    # ── Snapshots ───────────────────────────────────────────────────────────

    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            blocks=tuple(b.model_copy(deep=True) for b in self._blocks.values()),
            global_styles=self.global_styles.model_copy(deep=True),
            settings=self.settings.model_copy(deep=True),
        )

    def restore(self, snapshot: StoreSnapshot) -> None:
        self._replace(
            [b.model_copy(deep=True) for b in snapshot.blocks],
            snapshot.global_styles.model_copy(deep=True),
            snapshot.settings.model_copy(deep=True),
        )

    def mark_clean(self) -> None:
        """À appeler par l'appelant une fois le document sauvegardé."""
        self.dirty = False

    # ── Écriture (moteur / historique / sérialisation uniquement) ──────────

    def _insert(self, block: Block) -> None:
        self._blocks[block.id] = block
        self.dirty = True

    def _delete(self, block_id: str) -> None:
        del self._blocks[block_id]
        self.dirty = True

    def _touch(self) -> None:
        """Marque le document modifié après une édition en place (props, styles, settings)."""
        self.dirty = True

    def _renumber(self, ordered: List[Block]) -> None:
        """Réattribue order = 0..n-1 dans l'ordre donné."""
        for position, block in enumerate(ordered):
            block.order = position
        self.dirty = True

    def _replace(
        self,
        blocks: List[Block],
        global_styles: DeviceStyles,
        settings: BuilderSettings,
    ) -> None:
        self._blocks = {b.id: b for b in blocks}
        self.global_styles = global_styles
        self.settings = settings
        self.dirty = True
