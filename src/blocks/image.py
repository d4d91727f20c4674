"""Composant Image — image seule avec caption optionnelle."""
from ..core.schemas import DeviceStyles
from .base import ComponentDefinition, EditableField, StyleField

IMAGE = ComponentDefinition(
    kind="image",
    name="Image",
    category="media",
    icon="image",
    description="Responsive image with caption support",
    default_props={
        "src": "https://via.placeholder.com/600x400?text=Your+Image",
        "alt": "Image description",
        "caption": "",
        "width": "100%",
        "height": "auto",
    },
    default_styles=DeviceStyles(
        desktop={"width": "100%", "height": "auto", "borderRadius": "8px"},
        tablet={"width": "100%"},
        mobile={"width": "100%"},
    ),
    editable_props={
        "src":     EditableField(type="image", label="Image URL"),
        "alt":     EditableField(type="text", label="Alt Text"),
        "caption": EditableField(type="text", label="Caption"),
        "width":   EditableField(type="text", label="Width"),
        "height":  EditableField(type="text", label="Height"),
    },
    style_props={
        "borderRadius": StyleField(type="number", label="Border Radius", category="border", unit="px"),
        "marginBottom": StyleField(type="number", label="Margin Bottom", category="spacing", unit="px"),
        "boxShadow":    StyleField(type="text", label="Box Shadow", category="effects"),
    },
)
