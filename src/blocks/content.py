"""Composants de contenu — heading, text, button."""
from ..core.schemas import DeviceStyles
from .base import ComponentDefinition, EditableField, FieldOption, StyleField

_FONT_WEIGHTS = ["300", "400", "500", "600", "700"]

HEADING = ComponentDefinition(
    kind="heading",
    name="Heading",
    category="content",
    icon="type",
    description="Heading text with customizable levels",
    default_props={"text": "Your Heading Here", "level": "h2", "align": "left"},
    default_styles=DeviceStyles(
        desktop={"fontSize": "2rem", "fontWeight": "bold", "marginBottom": "1rem"},
        tablet={"fontSize": "1.75rem"},
        mobile={"fontSize": "1.5rem"},
    ),
    editable_props={
        "text":  EditableField(type="text", label="Text"),
        "level": EditableField(type="select", label="Heading Level", options=["h1", "h2", "h3", "h4", "h5", "h6"]),
        "align": EditableField(type="select", label="Alignment", options=["left", "center", "right"]),
    },
    style_props={
        "fontSize":     StyleField(type="number", label="Font Size", category="typography", unit="px"),
        "fontWeight":   StyleField(type="select", label="Font Weight", category="typography",
                                   options=_FONT_WEIGHTS + ["800", "900"]),
        "color":        StyleField(type="color", label="Text Color", category="typography"),
        "marginBottom": StyleField(type="number", label="Margin Bottom", category="spacing", unit="px"),
        "lineHeight":   StyleField(type="number", label="Line Height", category="typography", step=0.1),
    },
)

TEXT = ComponentDefinition(
    kind="text",
    name="Text",
    category="content",
    icon="align-left",
    description="Paragraph text with rich formatting options",
    default_props={
        "text": "Your text content goes here. You can write multiple paragraphs and format the text as needed.",
        "align": "left",
    },
    default_styles=DeviceStyles(
        desktop={"fontSize": "1rem", "lineHeight": "1.6", "marginBottom": "1rem"},
        tablet={"fontSize": "0.95rem"},
        mobile={"fontSize": "0.9rem"},
    ),
    editable_props={
        "text":  EditableField(type="textarea", label="Text Content"),
        "align": EditableField(type="select", label="Alignment", options=["left", "center", "right", "justify"]),
    },
    style_props={
        "fontSize":     StyleField(type="number", label="Font Size", category="typography", unit="px"),
        "color":        StyleField(type="color", label="Text Color", category="typography"),
        "lineHeight":   StyleField(type="number", label="Line Height", category="typography", step=0.1),
        "marginBottom": StyleField(type="number", label="Margin Bottom", category="spacing", unit="px"),
        "fontWeight":   StyleField(type="select", label="Font Weight", category="typography", options=_FONT_WEIGHTS),
    },
)

BUTTON = ComponentDefinition(
    kind="button",
    name="Button",
    category="content",
    icon="square",
    description="Call-to-action button with hover effects",
    default_props={
        "text": "Click Me",
        "url": "#",
        "variant": "primary",
        "size": "medium",
        "openInNewTab": False,
    },
    default_styles=DeviceStyles(
        desktop={
            "display": "inline-block",
            "padding": "12px 24px",
            "borderRadius": "6px",
            "backgroundColor": "var(--builder-primary)",
            "color": "white",
            "textDecoration": "none",
            "fontSize": "1rem",
            "fontWeight": "500",
            "border": "none",
            "cursor": "pointer",
            "transition": "all 0.2s ease",
        },
        tablet={"padding": "10px 20px"},
        mobile={"padding": "8px 16px", "fontSize": "0.9rem"},
    ),
    editable_props={
        "text": EditableField(type="text", label="Button Text"),
        "url":  EditableField(type="text", label="Link URL"),
        "variant": EditableField(
            type="select",
            label="Style",
            options=[FieldOption(value=v, label=v.capitalize()) for v in ("primary", "secondary", "outline", "ghost")],
        ),
        "size": EditableField(
            type="select",
            label="Size",
            options=[FieldOption(value=v, label=v.capitalize()) for v in ("small", "medium", "large")],
        ),
        "openInNewTab": EditableField(type="boolean", label="Open in New Tab"),
    },
    style_props={
        "backgroundColor": StyleField(type="color", label="Background Color", category="background"),
        "color":           StyleField(type="color", label="Text Color", category="typography"),
        "borderRadius":    StyleField(type="number", label="Border Radius", category="border", unit="px"),
        "padding":         StyleField(type="text", label="Padding", category="spacing"),
        "fontSize":        StyleField(type="number", label="Font Size", category="typography", unit="px"),
        "fontWeight":      StyleField(type="select", label="Font Weight", category="typography", options=_FONT_WEIGHTS),
    },
)
