"""
Métadonnées de composant : schéma des props éditables, schéma des styles, règles de contenance.
Le moteur ne lit que ces métadonnées — jamais la sémantique visuelle.
"""
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from ..core.schemas import DeviceStyles

FieldType = Literal["text", "textarea", "number", "select", "color", "image", "boolean", "range"]
StyleCategory = Literal["layout", "typography", "spacing", "background", "border", "effects"]
ComponentCategory = Literal["layout", "content", "media", "form", "navigation"]


class FieldOption(BaseModel):
    value: str
    label: str


class EditableField(BaseModel):
    """Champ de l'éditeur de propriétés."""
    type: FieldType
    label: str
    options: Optional[List[Union[str, FieldOption]]] = None
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None


class StyleField(EditableField):
    """Clé de style exposée (catégorie + unité)."""
    category: StyleCategory
    unit: Optional[str] = None


class ComponentDefinition(BaseModel):
    """Entrée du registry pour un kind."""
    kind: str
    name: str
    category: ComponentCategory = "content"
    icon: str = "box"
    description: str = ""
    default_props: Dict[str, Any] = Field(default_factory=dict)
    default_styles: DeviceStyles = Field(default_factory=DeviceStyles)
    editable_props: Dict[str, EditableField] = Field(default_factory=dict)
    style_props: Dict[str, StyleField] = Field(default_factory=dict)
    can_have_children: bool = False
    max_children: Optional[int] = None
    allowed_children: Optional[List[str]] = None
    allowed_parents: Optional[List[str]] = None

    def accepts(self, child_kind: str) -> bool:
        if not self.can_have_children:
            return False
        return self.allowed_children is None or child_kind in self.allowed_children
