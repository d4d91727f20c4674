"""
Router FastAPI — endpoints visual_builder.

POST /visual-builder/render         → document JSON → HTMLResponse (422 si document corrompu)
POST /visual-builder/validate       → document JSON → {"valid": bool, "error"?}
GET  /visual-builder/catalog        → catalogue des composants (?q=..., ?category=...)
GET  /visual-builder/catalog/{kind} → définition d'un composant (404 si inconnu)
"""
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body
from fastapi.responses import HTMLResponse, JSONResponse

from .blocks import ComponentRegistry, default_registry
from .builder import render_document
from .core.errors import InvalidDocument
from .serialization import validate_document

log = logging.getLogger(__name__)


def build_router(registry: Optional[ComponentRegistry] = None) -> APIRouter:
    """Router lié à un catalogue de composants (catalogue standard par défaut)."""
    registry = registry or default_registry()
    api = APIRouter(prefix="/visual-builder", tags=["visual_builder"])

    @api.post("/render", response_class=HTMLResponse, summary="Rend un document en HTML")
    def render(document: Dict[str, Any] = Body(...), title: str = "") -> HTMLResponse:
        """Reçoit un document JSON (format persisté), retourne le HTML complet de la page."""
        try:
            html = render_document(document, registry=registry, title=title)
        except InvalidDocument as e:
            return JSONResponse(e.to_dict(), status_code=422)
        return HTMLResponse(content=html)

    @api.post("/validate", summary="Valide un document sans le rendre")
    def validate(document: Dict[str, Any] = Body(...)) -> dict:
        """Schéma, références, cycles, ordres et règles de contenance."""
        try:
            validated = validate_document(document, registry)
        except InvalidDocument as e:
            return {"valid": False, "error": e.message, "code": e.code}
        return {"valid": True, "blocks": len(validated.blocks)}

    @api.get("/catalog", summary="Liste les composants disponibles")
    def catalog(q: str = "", category: str = "all") -> JSONResponse:
        kinds = {d.kind for d in registry.search(q, category)}
        entries = [entry for entry in registry.catalog() if entry["kind"] in kinds]
        return JSONResponse({"components": entries, "categories": registry.categories()})

    @api.get("/catalog/{kind}", summary="Définition d'un composant")
    def component(kind: str) -> JSONResponse:
        definition = registry.get(kind)
        if definition is None:
            return JSONResponse({"error": f"Composant '{kind}' inconnu"}, status_code=404)
        return JSONResponse(definition.model_dump(mode="json"))

    return api


router = build_router()
