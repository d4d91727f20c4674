"""
Renderer HTML — deux sorties :
  render_page(document)   → page publiée complète (lecture seule, CSS par device)
  render_canvas(builder)  → vue éditeur au device courant (sélection, survol, drop zones)
"""
from collections import defaultdict
from html import escape
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from ..core.config import DEVICES
from ..core.schemas import Block, BuilderDocument
from ..style import resolve, resolve_global
from .base import Renderer
from .components import HtmlComponentRenderer, _style_attr
from .css import generate_document_css

if TYPE_CHECKING:
    from ..builder import VisualBuilder


def _children_index(blocks: List[Block]) -> Dict[Optional[str], List[Block]]:
    index: Dict[Optional[str], List[Block]] = defaultdict(list)
    for block in blocks:
        index[block.parent_id].append(block)
    for siblings in index.values():
        siblings.sort(key=lambda b: b.order)
    return index


def block_classes(blocks: List[Block]) -> Dict[str, str]:
    """id → classe CSS stable pour ce rendu (les ids ne sont pas forcément des sélecteurs valides)."""
    return {block.id: f"vb-{n}" for n, block in enumerate(blocks)}


# ── Page publiée ────────────────────────────────────────────────────────────

def block_base_styles(document: BuilderDocument, renderer: Renderer) -> Dict[str, Dict[str, Any]]:
    """
    id → défauts du renderer que le bloc redéfinit sur au moins un device.
    Ils passent de l'inline à une règle .vb-N placée avant les media queries,
    pour que les styles par device du bloc les remplacent.
    """
    defaults_of = getattr(renderer, "default_styles", None)
    if defaults_of is None:
        return {}
    base: Dict[str, Dict[str, Any]] = {}
    for block in document.blocks:
        defined = {key for device in DEVICES for key in block.styles.for_device(device)}
        overridden = {k: v for k, v in defaults_of(block.kind, block.props).items() if k in defined}
        if overridden:
            base[block.id] = overridden
    return base


def render_blocks(
    document: BuilderDocument,
    renderer: Optional[Renderer] = None,
    base_styles: Optional[Dict[str, Dict[str, Any]]] = None,
) -> str:
    """HTML des blocs du document, racines par order puis enfants récursivement."""
    renderer = renderer or HtmlComponentRenderer()
    if base_styles is None:
        base_styles = block_base_styles(document, renderer)
    tree = _children_index(document.blocks)
    classes = block_classes(document.blocks)

    def render_block(block: Block) -> str:
        children = "\n".join(render_block(child) for child in tree.get(block.id, []))
        attrs = {"class": f"vb-block {classes[block.id]}", "data-block-id": block.id}
        styles = dict.fromkeys(base_styles.get(block.id, {}))
        return renderer.render(block.kind, block.props, styles, True, children, attrs)

    return "\n".join(render_block(root) for root in tree.get(None, []))


def render_empty(title: str) -> str:
    return f"""<div class="visual-builder-empty" style="min-height:60vh;display:flex;align-items:center;justify-content:center;text-align:center">
  <div>
    <h2>{escape(title)}</h2>
    <p>Aucun contenu n'a encore été créé pour cette page.</p>
  </div>
</div>"""


def render_page(
    document: BuilderDocument,
    renderer: Optional[Renderer] = None,
    title: str = "",
    lang: str = "fr",
    extra_head: str = "",
    extra_body_end: str = "",
) -> str:
    """Génère le HTML complet d'une page publiée."""
    renderer = renderer or HtmlComponentRenderer()
    base_styles = block_base_styles(document, renderer)
    if document.blocks:
        body = render_blocks(document, renderer, base_styles)
    else:
        body = render_empty(title or "Page")
    css = generate_document_css(document, block_classes(document.blocks), base_styles)

    return f"""<!DOCTYPE html>
<html lang="{escape(lang)}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{escape(title)}</title>
  <style>{css}</style>
  {extra_head}
</head>
<body>
<div class="visual-builder-page">
{body}
</div>
{extra_body_end}
</body>
</html>"""


# ── Canvas éditeur ──────────────────────────────────────────────────────────

def _drop_zone(parent_id: Optional[str], index: int) -> str:
    return f'<div class="vb-drop-zone" data-parent-id="{escape(parent_id or "")}" data-index="{index}"></div>'


def render_canvas(builder: "VisualBuilder") -> str:
    """
    Vue éditeur : styles résolus au device courant, marqueurs is-selected / is-hovered,
    drop zones entre les enfants de chaque parent possible (hors mode preview).
    """
    store, state, registry = builder.store, builder.interaction, builder.registry
    renderer = builder.renderer
    device, editing = state.device, state.editing
    selected, hovered = state.selected_block_id, state.hovered_block_id

    def render_children(parent_id: Optional[str], accepts_children: bool) -> str:
        children = store.children(parent_id)
        if not (editing and accepts_children):
            return "\n".join(render_block(c) for c in children)
        parts = [_drop_zone(parent_id, 0)]
        for position, child in enumerate(children, start=1):
            parts.append(render_block(child))
            parts.append(_drop_zone(parent_id, position))
        return "\n".join(parts)

    def render_block(block: Block) -> str:
        definition = registry.get(block.kind)
        children = render_children(block.id, bool(definition and definition.can_have_children))
        markers = ["vb-block"]
        if editing and block.id == selected:
            markers.append("is-selected")
        if editing and block.id == hovered:
            markers.append("is-hovered")
        attrs = {"class": " ".join(markers), "data-block-id": block.id, "data-kind": block.kind}
        return renderer.render(block.kind, block.props, resolve(block, device), not editing, children, attrs)

    if store.roots():
        body = render_children(None, True)
    elif editing:
        body = _drop_zone(None, 0) + '\n<div class="vb-canvas-empty">Start Building : glissez un composant ici</div>'
    else:
        body = ""

    classes = ["vb-canvas", f"vb-canvas--{device}"]
    if not editing:
        classes.append("vb-canvas--preview")
    page_style = _style_attr(resolve_global(store.global_styles, device))
    return f'<div class="{" ".join(classes)}" data-device="{device}"{page_style}>\n{body}\n</div>'
