"""
Serialization Boundary — Block Store ⇄ BuilderDocument.

export_document(store)                  → BuilderDocument (copie profonde, blocs en pré-ordre)
validate_document(data, registry)       → BuilderDocument validé, ou InvalidDocument
load_document(store, data, registry)    → remplace le store en bloc (rien n'est touché si invalide)

Un document corrompu est rejeté entièrement : pas de récupération partielle.
"""
import json
import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from .blocks.registry import ComponentRegistry
from .core.errors import InvalidDocument
from .core.schemas import Block, BuilderDocument
from .store import BlockStore

log = logging.getLogger(__name__)

DocumentInput = Union[BuilderDocument, Dict[str, Any]]


def export_document(store: BlockStore) -> BuilderDocument:
    """Snapshot du store + settings + styles globaux, prêt à persister."""
    return BuilderDocument(
        blocks=[b.model_copy(deep=True) for b in store.blocks()],
        global_styles=store.global_styles.model_copy(deep=True),
        settings=store.settings.model_copy(deep=True),
    )


def _parse(data: DocumentInput) -> BuilderDocument:
    if isinstance(data, BuilderDocument):
        return data.model_copy(deep=True)
    try:
        return BuilderDocument.model_validate(data)
    except ValidationError as e:
        raise InvalidDocument(f"Document invalide : {e.error_count()} erreur(s) de schéma") from e


def _check_references(blocks: List[Block], registry: ComponentRegistry) -> None:
    by_id: Dict[str, Block] = {}
    for block in blocks:
        if block.id in by_id:
            raise InvalidDocument(f"Id dupliqué : {block.id!r}", block_id=block.id)
        by_id[block.id] = block

    for block in blocks:
        if block.kind not in registry:
            raise InvalidDocument(f"Kind inconnu : {block.kind!r} (bloc {block.id!r})",
                                  block_id=block.id, kind=block.kind)
        if block.parent_id is not None and block.parent_id not in by_id:
            raise InvalidDocument(f"Parent inexistant : {block.parent_id!r} (bloc {block.id!r})",
                                  block_id=block.id, parent_id=block.parent_id)

    # Cycles : toute chaîne de parents doit atteindre None en moins de len(blocks) pas
    for block in blocks:
        seen = set()
        current = block
        while current.parent_id is not None:
            if current.id in seen:
                raise InvalidDocument(f"Cycle de parenté autour de {block.id!r}", block_id=block.id)
            seen.add(current.id)
            current = by_id[current.parent_id]

    siblings: Dict[Any, List[Block]] = defaultdict(list)
    for block in blocks:
        siblings[block.parent_id].append(block)

    for parent_id, children in siblings.items():
        orders = [c.order for c in children]
        if len(orders) != len(set(orders)):
            raise InvalidDocument(f"Valeurs d'order dupliquées sous {parent_id!r}", parent_id=parent_id)

        parent_kind = by_id[parent_id].kind if parent_id is not None else None
        for count, child in enumerate(sorted(children, key=lambda c: c.order)):
            reason = registry.containment_error(parent_kind, child.kind, count)
            if reason:
                raise InvalidDocument(f"Bloc {child.id!r} mal placé : {reason}",
                                      block_id=child.id, parent_id=parent_id)


def validate_document(data: DocumentInput, registry: ComponentRegistry) -> BuilderDocument:
    """Schéma Pydantic + références + invariants d'arbre. Lève InvalidDocument."""
    document = _parse(data)
    _check_references(document.blocks, registry)
    return document


def load_document(store: BlockStore, data: DocumentInput, registry: ComponentRegistry) -> BuilderDocument:
    """Remplace tout le contenu du store. En cas d'erreur l'état précédent est conservé."""
    try:
        document = validate_document(data, registry)
    except InvalidDocument as e:
        log.warning("Chargement rejeté : %s", e)
        raise

    store._replace(
        [b.model_copy(deep=True) for b in document.blocks],
        document.global_styles.model_copy(deep=True),
        document.settings.model_copy(deep=True),
    )
    log.info("Document chargé (%d blocs)", len(document.blocks))
    return document


def dumps(document: BuilderDocument, indent: Optional[int] = None) -> str:
    """JSON au format persisté (camelCase)."""
    return json.dumps(document.to_persisted(), ensure_ascii=False, indent=indent)


def loads(text: str) -> BuilderDocument:
    """JSON → BuilderDocument (schéma seulement ; les références sont vérifiées au load)."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidDocument(f"JSON illisible : {e.msg}") from e
    return _parse(data)
