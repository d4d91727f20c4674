"""
Catalogue de composants — exports publics + registry par défaut.
"""
from .base import ComponentDefinition, EditableField, FieldOption, StyleField
from .registry import ComponentRegistry
from .layout import CONTAINER, ROW, COLUMN, SPACER
from .content import HEADING, TEXT, BUTTON
from .image import IMAGE
from .hero import HERO_SECTION
from .testimonial import TESTIMONIAL_CARD
from .pricing import PRICING_CARD

# Ordre d'affichage dans la palette
DEFAULT_COMPONENTS = [
    CONTAINER,
    ROW,
    COLUMN,
    HEADING,
    TEXT,
    BUTTON,
    IMAGE,
    SPACER,
    HERO_SECTION,
    TESTIMONIAL_CARD,
    PRICING_CARD,
]


def default_registry() -> ComponentRegistry:
    """Nouveau registry contenant le catalogue standard."""
    return ComponentRegistry(DEFAULT_COMPONENTS)


__all__ = [
    # Métadonnées
    "ComponentDefinition", "EditableField", "FieldOption", "StyleField",
    "ComponentRegistry", "default_registry", "DEFAULT_COMPONENTS",
    # Layout
    "CONTAINER", "ROW", "COLUMN", "SPACER",
    # Contenu
    "HEADING", "TEXT", "BUTTON",
    # Média
    "IMAGE",
    # Sections
    "HERO_SECTION", "TESTIMONIAL_CARD", "PRICING_CARD",
]
