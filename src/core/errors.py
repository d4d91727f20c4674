"""
Taxonomie des erreurs du moteur.

Toutes dérivent de ValueError : un appelant peut les intercepter comme
n'importe quelle erreur de validation (cf. router : `except (ValidationError, ValueError)`).
Une mutation rejetée ne laisse aucune trace dans le store ni dans l'historique.
"""
from typing import Any


class BuilderError(ValueError):
    """Erreur de base du moteur (code machine + contexte structuré)."""
    code = "BUILDER_ERROR"

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "context": self.context}


class BlockNotFound(BuilderError):
    """L'id référencé n'existe plus dans le store."""
    code = "NOT_FOUND"


class InvalidParent(BuilderError):
    """Le parent visé ne peut pas accueillir ce bloc (absent, feuille, kind refusé, plein)."""
    code = "INVALID_PARENT"


class CyclicMove(BuilderError):
    """Déplacement d'un bloc dans son propre sous-arbre."""
    code = "CYCLIC_MOVE"


class UnknownKind(BuilderError):
    """Kind absent du registry."""
    code = "UNKNOWN_KIND"


class InvalidDevice(BuilderError):
    """Device hors desktop / tablet / mobile."""
    code = "INVALID_DEVICE"


class InvalidDocument(BuilderError):
    """Document chargé corrompu — le chargement entier est rejeté."""
    code = "INVALID_DOCUMENT"


class InvalidSettings(BuilderError):
    """Réglage inconnu ou valeur refusée par le schéma des settings."""
    code = "INVALID_SETTINGS"
