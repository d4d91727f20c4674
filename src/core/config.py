"""
Configuration du moteur visual_builder.

Valeurs lues dans l'environnement (os.getenv) avec des défauts raisonnables.
Les réglages de document par défaut reprennent ceux de l'éditeur d'origine.
"""
import os

DEVICES = ("desktop", "tablet", "mobile")
DEFAULT_DEVICE = "desktop"

HISTORY_LIMIT    = int(os.getenv("VISUAL_BUILDER_HISTORY_LIMIT", "50"))
ID_PREFIX        = os.getenv("VISUAL_BUILDER_ID_PREFIX", "block")

# Breakpoints (px) du rendu publié
TABLET_MAX_WIDTH = int(os.getenv("VISUAL_BUILDER_TABLET_MAX_WIDTH", "768"))
MOBILE_MAX_WIDTH = int(os.getenv("VISUAL_BUILDER_MOBILE_MAX_WIDTH", "480"))

DEFAULT_CONTAINER_WIDTH = "1200px"
DEFAULT_SPACING         = "normal"

DEFAULT_TYPOGRAPHY = {
    "fontFamily": "Inter, sans-serif",
    "fontSize":   "16px",
    "lineHeight": "1.5",
}

DEFAULT_COLORS = {
    "primary":    "#3b82f6",
    "secondary":  "#64748b",
    "accent":     "#f59e0b",
    "background": "#ffffff",
    "foreground": "#0f172a",
}
