"""Composant Testimonial — citation client avec photo, nom, fonction et note."""
from ..core.schemas import DeviceStyles
from .base import ComponentDefinition, EditableField, StyleField

TESTIMONIAL_CARD = ComponentDefinition(
    kind="testimonial-card",
    name="Testimonial",
    category="content",
    icon="quote",
    description="Customer testimonial with photo and details",
    default_props={
        "quote": "This product has completely transformed our business. Highly recommended!",
        "name": "John Doe",
        "title": "CEO, Company Name",
        "avatar": "https://via.placeholder.com/80x80?text=JD",
        "rating": 5,
    },
    default_styles=DeviceStyles(
        desktop={
            "padding": "30px",
            "backgroundColor": "white",
            "borderRadius": "12px",
            "boxShadow": "0 4px 12px rgba(0,0,0,0.1)",
            "textAlign": "center",
            "marginBottom": "20px",
        },
        tablet={"padding": "24px"},
        mobile={"padding": "20px"},
    ),
    editable_props={
        "quote":  EditableField(type="textarea", label="Testimonial Quote"),
        "name":   EditableField(type="text", label="Customer Name"),
        "title":  EditableField(type="text", label="Customer Title"),
        "avatar": EditableField(type="image", label="Customer Photo"),
        "rating": EditableField(type="number", label="Rating (1-5)", min=1, max=5),
    },
    style_props={
        "backgroundColor": StyleField(type="color", label="Background Color", category="background"),
        "borderRadius":    StyleField(type="number", label="Border Radius", category="border", unit="px"),
        "padding":         StyleField(type="text", label="Padding", category="spacing"),
        "boxShadow":       StyleField(type="text", label="Box Shadow", category="effects"),
    },
)
