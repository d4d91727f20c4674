"""
Générateur CSS du rendu publié.

Pipeline :
  settings (palette + typo + largeur)  →  .visual-builder-page { --builder-*: ...; }
  globalStyles[device]                 →  .visual-builder-page dans la plage du device
  défauts des composants surchargés    →  .vb-N hors media query
  block.styles[device]                 →  .vb-N dans la plage du device

Les plages de devices sont disjointes (desktop > 768px, tablet 481–768px,
mobile ≤ 480px) : comme dans l'éditeur, un device sans style explicite
reste non stylé, rien ne cascade d'un device à l'autre.
"""
import re
from typing import Any, Dict, Iterable, Mapping, Optional

from ..core.config import DEVICES, MOBILE_MAX_WIDTH, TABLET_MAX_WIDTH
from ..core.design_system import palette_variables
from ..core.schemas import Block, BuilderDocument, DeviceStyles

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")
_FORBIDDEN_RE = re.compile(r"[{}<>;]")

# Propriétés sans unité : un nombre reste un nombre (sinon → px)
_UNITLESS = {"lineHeight", "fontWeight", "opacity", "zIndex", "flex", "flexGrow", "flexShrink", "order"}


def css_property(name: str) -> str:
    """backgroundColor → background-color (les variables --x restent telles quelles)."""
    if name.startswith("--"):
        return name
    return _CAMEL_RE.sub("-", name).lower()


def css_value(name: str, value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool) and name not in _UNITLESS:
        return f"{value}px"
    return str(value)


def declarations(styles: Mapping[str, Any]) -> str:
    """{"fontSize": 12, "color": "red"} → "font-size:12px;color:red" (valeurs dangereuses ignorées)."""
    parts = []
    for name, value in styles.items():
        if value is None or value == "" or isinstance(value, (dict, list)):
            continue
        text = css_value(name, value)
        if _FORBIDDEN_RE.search(text) or _FORBIDDEN_RE.search(name):
            continue
        parts.append(f"{css_property(name)}:{text}")
    return ";".join(parts)


def device_media(device: str) -> str:
    """Media query de la plage d'un device."""
    if device == "desktop":
        return f"(min-width: {TABLET_MAX_WIDTH + 1}px)"
    if device == "tablet":
        return f"(min-width: {MOBILE_MAX_WIDTH + 1}px) and (max-width: {TABLET_MAX_WIDTH}px)"
    return f"(max-width: {MOBILE_MAX_WIDTH}px)"


def _rule(selector: str, styles: Mapping[str, Any]) -> str:
    decl = declarations(styles)
    return f"{selector}{{{decl}}}" if decl else ""


def generate_settings_css(document: BuilderDocument) -> str:
    """Variables de palette, typographie et largeur du conteneur."""
    settings = document.settings
    typo = settings.typography
    root_vars = dict(palette_variables(settings.colors))
    root_vars.update({
        "fontFamily": typo.get("fontFamily", "Inter, sans-serif"),
        "fontSize":   typo.get("fontSize", "16px"),
        "lineHeight": typo.get("lineHeight", "1.5"),
        "color":      "var(--builder-foreground)",
        "background": "var(--builder-background)",
    })
    return "\n".join([
        _rule(".visual-builder-page", root_vars),
        _rule(".visual-builder-page .builder-container", {"maxWidth": settings.container_width, "margin": "0 auto"}),
    ])


def generate_device_css(
    global_styles: DeviceStyles,
    blocks: Iterable[Block],
    block_classes: Dict[str, str],
) -> str:
    """Une media query par device : styles globaux puis règles par bloc."""
    blocks = list(blocks)
    chunks = []
    for device in DEVICES:
        rules = [_rule(".visual-builder-page", global_styles.for_device(device))]
        rules += [
            _rule(f".visual-builder-page .{block_classes[b.id]}", b.styles.for_device(device))
            for b in blocks
            if b.id in block_classes
        ]
        rules = [r for r in rules if r]
        if rules:
            chunks.append(f"@media {device_media(device)}{{\n" + "\n".join(rules) + "\n}")
    return "\n".join(chunks)


def generate_block_base_css(
    base_styles: Mapping[str, Mapping[str, Any]],
    block_classes: Dict[str, str],
) -> str:
    """Défauts des composants hors media query : les règles par device passent après."""
    rules = [
        _rule(f".visual-builder-page .{block_classes[block_id]}", styles)
        for block_id, styles in base_styles.items()
        if block_id in block_classes
    ]
    return "\n".join(r for r in rules if r)


def generate_document_css(
    document: BuilderDocument,
    block_classes: Dict[str, str],
    base_styles: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> str:
    """CSS complet d'une page publiée."""
    return "\n".join(filter(None, [
        generate_settings_css(document),
        _BASE_CSS,
        generate_block_base_css(base_styles or {}, block_classes),
        generate_device_css(document.global_styles, document.blocks, block_classes),
    ]))


_BASE_CSS = f"""
.visual-builder-page .builder-image img{{max-width:100%;height:auto}}
.visual-builder-page .builder-button:hover{{opacity:.9;transform:translateY(-1px)}}
.visual-builder-page .vb-unknown{{border:2px dashed #ef4444;padding:12px;color:#ef4444;font-family:monospace}}
@media (max-width: {TABLET_MAX_WIDTH}px){{
.visual-builder-page .builder-container{{max-width:100%;padding:0 16px}}
.visual-builder-page .builder-row{{flex-direction:column}}
}}
@media (max-width: {MOBILE_MAX_WIDTH}px){{
.visual-builder-page .builder-container{{padding:0 12px}}
}}
""".strip()
