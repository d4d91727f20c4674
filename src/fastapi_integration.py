"""
Helpers pour intégration FastAPI.
"""
import logging
from typing import Callable, Dict, Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from .blocks import ComponentRegistry
from .builder import render_document
from .serialization import DocumentInput

log = logging.getLogger(__name__)

DocumentFactory = Callable[[], DocumentInput]


def create_document_route(
    app: FastAPI,
    path: str,
    document_factory: DocumentFactory,
    title: str = "",
    registry: Optional[ComponentRegistry] = None,
    **route_kwargs
):
    """
    Crée une route FastAPI qui publie un document du visual builder.

    Args:
        app: Instance FastAPI
        path: Chemin de la route (ex: "/")
        document_factory: Fonction qui retourne le document (dict persisté ou BuilderDocument)
        title: Titre de la page
        registry: Catalogue de composants (standard par défaut)
        **route_kwargs: Arguments additionnels pour @app.get()

    Example:
        >>> def home():
        ...     return json.loads(Path("home.json").read_text())
        >>> create_document_route(app, "/", home, title="Accueil")
    """
    @app.get(path, response_class=HTMLResponse, **route_kwargs)
    def route():
        document = document_factory()
        return HTMLResponse(render_document(document, registry=registry, title=title))

    log.debug("route publiée : %s", path)
    return route


class DocumentRouter:
    """
    Router pour publier plusieurs documents.

    Usage:
        >>> router = DocumentRouter()
        >>> router.add_document("/", load_home, title="Accueil")
        >>> router.add_document("/about", load_about)
        >>> router.register(app)
    """

    def __init__(self, registry: Optional[ComponentRegistry] = None):
        self.registry = registry
        self.documents: Dict[str, tuple] = {}

    def add_document(self, path: str, document_factory: DocumentFactory, title: str = ""):
        """Ajoute un document au router."""
        self.documents[path] = (document_factory, title)

    def register(self, app: FastAPI):
        """Enregistre toutes les routes sur l'app FastAPI."""
        for path, (factory, title) in self.documents.items():
            create_document_route(app, path, factory, title=title, registry=self.registry)
