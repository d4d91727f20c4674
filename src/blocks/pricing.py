"""Composant Pricing — carte de plan tarifaire avec liste de features."""
from ..core.schemas import DeviceStyles
from .base import ComponentDefinition, EditableField, StyleField

PRICING_CARD = ComponentDefinition(
    kind="pricing-card",
    name="Pricing Card",
    category="content",
    icon="credit-card",
    description="Pricing plan card with features list",
    default_props={
        "planName": "Pro Plan",
        "price": "$29",
        "period": "/month",
        "features": ["Feature 1", "Feature 2", "Feature 3", "Feature 4"],
        "buttonText": "Get Started",
        "buttonUrl": "#",
        "popular": False,
    },
    default_styles=DeviceStyles(
        desktop={
            "padding": "40px 30px",
            "backgroundColor": "white",
            "borderRadius": "12px",
            "border": "2px solid #e5e7eb",
            "textAlign": "center",
            "position": "relative",
        },
        tablet={"padding": "30px 24px"},
        mobile={"padding": "24px 20px"},
    ),
    editable_props={
        "planName":   EditableField(type="text", label="Plan Name"),
        "price":      EditableField(type="text", label="Price"),
        "period":     EditableField(type="text", label="Billing Period"),
        "features":   EditableField(type="textarea", label="Features (one per line)"),
        "buttonText": EditableField(type="text", label="Button Text"),
        "buttonUrl":  EditableField(type="text", label="Button URL"),
        "popular":    EditableField(type="boolean", label="Mark as Popular"),
    },
    style_props={
        "backgroundColor": StyleField(type="color", label="Background Color", category="background"),
        "borderColor":     StyleField(type="color", label="Border Color", category="border"),
        "borderRadius":    StyleField(type="number", label="Border Radius", category="border", unit="px"),
        "padding":         StyleField(type="text", label="Padding", category="spacing"),
    },
)
