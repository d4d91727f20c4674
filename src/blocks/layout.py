"""Composants de layout — container, row, column, spacer (seuls conteneurs du catalogue, hors spacer)."""
from ..core.schemas import DeviceStyles
from .base import ComponentDefinition, EditableField, FieldOption, StyleField

_BG = StyleField(type="color", label="Background Color", category="background")
_PADDING = StyleField(type="text", label="Padding", category="spacing")

CONTAINER = ComponentDefinition(
    kind="container",
    name="Container",
    category="layout",
    icon="box",
    description="A responsive container for organizing content",
    default_props={"maxWidth": "1200px", "padding": "20px"},
    default_styles=DeviceStyles(
        desktop={"maxWidth": "1200px", "margin": "0 auto", "padding": "20px"},
        tablet={"maxWidth": "768px", "padding": "16px"},
        mobile={"maxWidth": "100%", "padding": "12px"},
    ),
    editable_props={
        "maxWidth": EditableField(type="text", label="Max Width"),
        "padding":  EditableField(type="text", label="Padding"),
    },
    style_props={
        "backgroundColor": _BG,
        "marginTop":    StyleField(type="number", label="Margin Top", category="spacing", unit="px"),
        "marginBottom": StyleField(type="number", label="Margin Bottom", category="spacing", unit="px"),
    },
    can_have_children=True,
    allowed_children=["row", "heading", "text", "image", "button"],
)

ROW = ComponentDefinition(
    kind="row",
    name="Row",
    category="layout",
    icon="columns",
    description="A horizontal row for columns",
    default_props={"gap": "20px", "align": "flex-start"},
    default_styles=DeviceStyles(
        desktop={"display": "flex", "gap": "20px", "alignItems": "flex-start"},
        tablet={"flexDirection": "column", "gap": "16px"},
        mobile={"flexDirection": "column", "gap": "12px"},
    ),
    editable_props={
        "gap": EditableField(type="text", label="Gap"),
        "align": EditableField(
            type="select",
            label="Vertical Alignment",
            options=[
                FieldOption(value="flex-start", label="Top"),
                FieldOption(value="center", label="Center"),
                FieldOption(value="flex-end", label="Bottom"),
                FieldOption(value="stretch", label="Stretch"),
            ],
        ),
    },
    style_props={
        "backgroundColor": _BG,
        "padding": _PADDING,
        "borderRadius": StyleField(type="number", label="Border Radius", category="border", unit="px"),
    },
    can_have_children=True,
    allowed_children=["column"],
)

COLUMN = ComponentDefinition(
    kind="column",
    name="Column",
    category="layout",
    icon="layout",
    description="A flexible column for content",
    default_props={"width": "auto"},
    default_styles=DeviceStyles(
        desktop={"flex": "1"},
        tablet={"flex": "1"},
        mobile={"flex": "1"},
    ),
    editable_props={
        "width": EditableField(
            type="select",
            label="Width",
            options=[
                FieldOption(value=v, label=l) for v, l in (
                    ("auto", "Auto"), ("25%", "25%"), ("33.333%", "33%"), ("50%", "50%"),
                    ("66.666%", "66%"), ("75%", "75%"), ("100%", "100%"),
                )
            ],
        ),
    },
    style_props={
        "backgroundColor": _BG,
        "padding": _PADDING,
        "textAlign": StyleField(
            type="select", label="Text Align", category="typography",
            options=["left", "center", "right", "justify"],
        ),
    },
    can_have_children=True,
    allowed_children=["heading", "text", "image", "button", "spacer"],
)

SPACER = ComponentDefinition(
    kind="spacer",
    name="Spacer",
    category="layout",
    icon="move-vertical",
    description="Empty space for better layout control",
    default_props={"height": "40px"},
    default_styles=DeviceStyles(
        desktop={"height": "40px", "width": "100%"},
        tablet={"height": "30px"},
        mobile={"height": "20px"},
    ),
    editable_props={"height": EditableField(type="text", label="Height")},
    style_props={"height": StyleField(type="number", label="Height", category="spacing", unit="px")},
)
