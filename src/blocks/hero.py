"""Composant Hero — bannière pleine largeur avec fond, titre, sous-titre et CTA."""
from ..core.schemas import DeviceStyles
from .base import ComponentDefinition, EditableField, StyleField

HERO_SECTION = ComponentDefinition(
    kind="hero-section",
    name="Hero Section",
    category="layout",
    icon="monitor",
    description="Full-width hero section with background",
    default_props={
        "title": "Welcome to Our Website",
        "subtitle": "Create amazing experiences with our platform",
        "buttonText": "Get Started",
        "buttonUrl": "#",
        "backgroundImage": "",
        "overlay": True,
    },
    default_styles=DeviceStyles(
        desktop={
            "minHeight": "500px",
            "background": "linear-gradient(135deg, #667eea 0%, #764ba2 100%)",
            "display": "flex",
            "alignItems": "center",
            "justifyContent": "center",
            "textAlign": "center",
            "color": "white",
            "padding": "80px 20px",
        },
        tablet={"minHeight": "400px", "padding": "60px 20px"},
        mobile={"minHeight": "300px", "padding": "40px 20px"},
    ),
    editable_props={
        "title":           EditableField(type="text", label="Hero Title"),
        "subtitle":        EditableField(type="textarea", label="Hero Subtitle"),
        "buttonText":      EditableField(type="text", label="Button Text"),
        "buttonUrl":       EditableField(type="text", label="Button URL"),
        "backgroundImage": EditableField(type="image", label="Background Image"),
        "overlay":         EditableField(type="boolean", label="Dark Overlay"),
    },
    style_props={
        "minHeight":       StyleField(type="number", label="Min Height", category="layout", unit="px"),
        "backgroundColor": StyleField(type="color", label="Background Color", category="background"),
        "textAlign":       StyleField(type="select", label="Text Align", category="typography",
                                      options=["left", "center", "right"]),
    },
)
