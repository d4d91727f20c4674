"""
Visual Builder v0.3 — moteur d'édition de pages par blocs (arbre, undo/redo, drag-and-drop, rendu HTML).

Usage (session d'édition):
    >>> from visual_builder import VisualBuilder
    >>> builder = VisualBuilder()
    >>> row = builder.add_block("row")
    >>> col = builder.add_block("column", row.id)
    >>> builder.add_block("heading", col.id)
    >>> builder.undo()
    >>> document = builder.export()

Usage (publication):
    >>> from visual_builder import render_document
    >>> import json
    >>> with open("pages/home.json") as f:
    ...     html = render_document(json.load(f), title="Accueil")

Usage (FastAPI):
    >>> from visual_builder.router import router
    >>> app.include_router(router)
"""

# ── Modèle ──────────────────────────────────────────────────────────────────
from .core import (
    Block,
    BuilderDocument,
    BuilderSettings,
    DeviceStyles,
    BuilderError,
    BlockNotFound,
    InvalidParent,
    CyclicMove,
    UnknownKind,
    InvalidDevice,
    InvalidDocument,
    InvalidSettings,
)

# ── Catalogue ───────────────────────────────────────────────────────────────
from .blocks import ComponentDefinition, ComponentRegistry, default_registry

# ── Moteur ──────────────────────────────────────────────────────────────────
from .store import BlockStore
from .engine import MutationEngine
from .history import HistoryManager
from .interaction import DropTarget, ExistingBlockDrag, InteractionState, NewComponentDrag
from .style import resolve, resolve_global
from .serialization import dumps, export_document, load_document, loads, validate_document

# ── Rendu ───────────────────────────────────────────────────────────────────
from .renderer import HtmlComponentRenderer, Renderer, render_page
from .builder import VisualBuilder, render_document

__version__ = "0.3.0"

__all__ = [
    # Modèle
    "Block", "BuilderDocument", "BuilderSettings", "DeviceStyles",
    "BuilderError", "BlockNotFound", "InvalidParent", "CyclicMove",
    "UnknownKind", "InvalidDevice", "InvalidDocument", "InvalidSettings",
    # Catalogue
    "ComponentDefinition", "ComponentRegistry", "default_registry",
    # Moteur
    "BlockStore", "MutationEngine", "HistoryManager",
    "InteractionState", "NewComponentDrag", "ExistingBlockDrag", "DropTarget",
    "resolve", "resolve_global",
    "export_document", "validate_document", "load_document", "dumps", "loads",
    # Rendu
    "Renderer", "HtmlComponentRenderer", "render_page",
    "VisualBuilder", "render_document",
]
