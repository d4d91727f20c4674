"""
Design system du document : palette des settings → variables CSS.
Chaque couleur hex donne aussi ses variantes -light / -dark (±15%).
"""
import re
from typing import Dict

_HEX_RE = re.compile(r"^#?[0-9a-fA-F]{6}$")


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convertit #RRGGBB en (R, G, B)."""
    hex_color = hex_color.lstrip("#")
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def lighten(hex_color: str, percent: int = 20) -> str:
    """Éclaircit une couleur de X%."""
    r, g, b = hex_to_rgb(hex_color)
    factor = 1 + (percent / 100)
    r = min(255, int(r * factor))
    g = min(255, int(g * factor))
    b = min(255, int(b * factor))
    return f"#{r:02x}{g:02x}{b:02x}"


def darken(hex_color: str, percent: int = 20) -> str:
    """Assombrit une couleur de X%."""
    r, g, b = hex_to_rgb(hex_color)
    factor = 1 - (percent / 100)
    r = max(0, int(r * factor))
    g = max(0, int(g * factor))
    b = max(0, int(b * factor))
    return f"#{r:02x}{g:02x}{b:02x}"


def palette_variables(colors: Dict[str, str], prefix: str = "--builder") -> Dict[str, str]:
    """
    {"primary": "#3b82f6"} → {"--builder-primary": "#3b82f6",
                              "--builder-primary-light": ..., "--builder-primary-dark": ...}

    Les valeurs non hex (var(), rgb(), noms CSS) sont reprises telles quelles, sans variantes.
    """
    variables: Dict[str, str] = {}
    for name, value in colors.items():
        variables[f"{prefix}-{name}"] = value
        if isinstance(value, str) and _HEX_RE.match(value):
            variables[f"{prefix}-{name}-light"] = lighten(value, 15)
            variables[f"{prefix}-{name}-dark"]  = darken(value, 15)
    return variables
