"""
Renderer HTML par composant — (kind, props, styles résolus, preview) → fragment HTML.

Les styles reçus sont appliqués en inline sur l'élément racine du composant
(une valeur None retire la propriété, y compris un défaut issu des props).
Les enfants (row, column, container) sont injectés tels quels, déjà rendus.
Tout le texte issu des props est échappé ; les URLs hors http(s)/mailto/tel/relatives
sont remplacées par "#".
"""
from html import escape
from typing import Any, Callable, Dict, List, Optional

from .css import declarations

_SAFE_SCHEMES = ("http://", "https://", "mailto:", "tel:")
_HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}


def _safe_url(url: Any, fallback: str = "#") -> str:
    url = str(url or "").strip()
    if not url:
        return fallback
    if url.startswith(("/", "#", "?", "./", "../")) or url.lower().startswith(_SAFE_SCHEMES):
        return url
    return fallback


def _style_attr(styles: Dict[str, Any]) -> str:
    decl = declarations(styles)
    return f' style="{escape(decl)}"' if decl else ""


def _root_attrs(base_class: str, styles: Dict[str, Any], attrs: Optional[Dict[str, str]]) -> str:
    """class + style + attributs supplémentaires (data-*, ...) de l'élément racine."""
    extra = dict(attrs or {})
    classes = " ".join(filter(None, [base_class, extra.pop("class", "")]))
    parts = [f'class="{escape(classes)}"']
    style = _style_attr(styles)
    if style:
        parts.append(style.strip())
    parts += [f'{escape(k)}="{escape(str(v))}"' for k, v in extra.items()]
    return " ".join(parts)


def _text(value: Any, default: str) -> str:
    return escape(str(value if value not in (None, "") else default))


def _features(value: Any) -> List[str]:
    if isinstance(value, str):
        return [f.strip() for f in value.split("\n") if f.strip()]
    if isinstance(value, list):
        return [str(f) for f in value]
    return ["Feature 1", "Feature 2", "Feature 3"]


# ── Composants de layout ────────────────────────────────────────────────────

def render_container(props, styles, is_preview, children, attrs) -> str:
    return f"<div {_root_attrs('builder-container', styles, attrs)}>{children}</div>"


def row_defaults(props) -> Dict[str, Any]:
    return {
        "display": "flex",
        "gap": props.get("gap") or "20px",
        "alignItems": props.get("align") or "flex-start",
    }


def column_defaults(props) -> Dict[str, Any]:
    width = props.get("width") or "auto"
    return {"flex": "1" if width == "auto" else f"0 0 {width}"}


def render_row(props, styles, is_preview, children, attrs) -> str:
    merged = {**row_defaults(props), **styles}
    return f"<div {_root_attrs('builder-row', merged, attrs)}>{children}</div>"


def render_column(props, styles, is_preview, children, attrs) -> str:
    merged = {**column_defaults(props), **styles}
    return f"<div {_root_attrs('builder-column', merged, attrs)}>{children}</div>"


def render_spacer(props, styles, is_preview, children, attrs) -> str:
    merged = {**styles, "height": props.get("height") or "40px", "width": "100%"}
    return f"<div {_root_attrs('builder-spacer', merged, attrs)}></div>"


# ── Composants de contenu ───────────────────────────────────────────────────

def render_heading(props, styles, is_preview, children, attrs) -> str:
    tag = props.get("level") if props.get("level") in _HEADING_TAGS else "h2"
    merged = {**styles, "textAlign": props.get("align") or "left"}
    text = _text(props.get("text"), "Your Heading Here")
    return f"<{tag} {_root_attrs('builder-heading', merged, attrs)}>{text}</{tag}>"


def render_text(props, styles, is_preview, children, attrs) -> str:
    merged = {**styles, "textAlign": props.get("align") or "left"}
    text = _text(props.get("text"), "Your text content goes here.")
    return f"<p {_root_attrs('builder-text', merged, attrs)}>{text}</p>"


def render_button(props, styles, is_preview, children, attrs) -> str:
    merged = {
        **styles,
        "display": "inline-block",
        "textDecoration": "none",
        "border": "none",
        "cursor": "pointer",
        "transition": "all 0.2s ease",
    }
    label = _text(props.get("text"), "Click Me")
    root = _root_attrs("builder-button", merged, attrs)
    if is_preview and props.get("url"):
        href = escape(_safe_url(props.get("url")))
        target = ' target="_blank" rel="noopener noreferrer"' if props.get("openInNewTab") else ' target="_self"'
        return f'<a {root} href="{href}"{target}>{label}</a>'
    return f'<button type="button" {root}>{label}</button>'


def render_image(props, styles, is_preview, children, attrs) -> str:
    src = escape(_safe_url(props.get("src"), "https://via.placeholder.com/600x400?text=Your+Image"))
    alt = _text(props.get("alt"), "Image description")
    img_style = _style_attr({
        "width": props.get("width") or "100%",
        "height": props.get("height") or "auto",
        "maxWidth": "100%",
        "display": "block",
    })
    caption = ""
    if props.get("caption"):
        caption = (
            '<p style="margin-top:8px;font-size:0.9em;color:#666;text-align:center;font-style:italic">'
            f"{escape(str(props['caption']))}</p>"
        )
    return f'<div {_root_attrs("builder-image", styles, attrs)}><img src="{src}" alt="{alt}"{img_style}>{caption}</div>'


# ── Sections ────────────────────────────────────────────────────────────────

def render_hero_section(props, styles, is_preview, children, attrs) -> str:
    background = _safe_url(props.get("backgroundImage"), "")
    merged = {**styles, "backgroundSize": "cover", "backgroundPosition": "center", "position": "relative"}
    if background:
        merged["backgroundImage"] = f'url("{background}")'

    overlay = ""
    if props.get("overlay") and background:
        overlay = '<div style="position:absolute;inset:0;background-color:rgba(0,0,0,0.5)"></div>'

    button = ""
    if props.get("buttonText"):
        label = escape(str(props["buttonText"]))
        if is_preview and props.get("buttonUrl"):
            button = f'<a class="builder-hero__button" href="{escape(_safe_url(props["buttonUrl"]))}">{label}</a>'
        else:
            button = f'<button type="button" class="builder-hero__button">{label}</button>'

    return f"""<div {_root_attrs("builder-hero", merged, attrs)}>{overlay}
  <div style="position:relative;z-index:1">
    <h1 style="font-size:3rem;font-weight:bold;margin-bottom:1rem;color:inherit">{_text(props.get("title"), "Welcome to Our Website")}</h1>
    <p style="font-size:1.25rem;margin-bottom:2rem;color:inherit;opacity:0.9">{_text(props.get("subtitle"), "Create amazing experiences with our platform")}</p>
    {button}
  </div>
</div>"""


def render_testimonial_card(props, styles, is_preview, children, attrs) -> str:
    try:
        rating = max(0, min(int(props.get("rating") or 5), 5))
    except (TypeError, ValueError):
        rating = 5
    stars = "★" * rating
    avatar = escape(_safe_url(props.get("avatar"), "https://via.placeholder.com/80x80?text=JD"))
    name = _text(props.get("name"), "John Doe")
    return f"""<div {_root_attrs("builder-testimonial", styles, attrs)}>
  <div class="builder-testimonial__stars" style="margin-bottom:16px;color:#facc15">{stars}</div>
  <blockquote style="font-size:1.1rem;font-style:italic;margin-bottom:20px;line-height:1.6">&quot;{_text(props.get("quote"), "This product has completely transformed our business.")}&quot;</blockquote>
  <div style="display:flex;align-items:center;gap:12px">
    <img src="{avatar}" alt="{name}" style="width:50px;height:50px;border-radius:50%;object-fit:cover">
    <div>
      <div style="font-weight:600;margin-bottom:4px">{name}</div>
      <div style="font-size:0.9rem;color:#666">{_text(props.get("title"), "CEO, Company Name")}</div>
    </div>
  </div>
</div>"""


def render_pricing_card(props, styles, is_preview, children, attrs) -> str:
    popular = bool(props.get("popular"))
    badge = ""
    if popular:
        badge = (
            '<div class="builder-pricing-card__badge" style="position:absolute;top:-12px;left:50%;'
            "transform:translateX(-50%);background-color:var(--builder-accent);color:white;"
            'padding:4px 16px;border-radius:12px;font-size:0.8rem;font-weight:600">Most Popular</div>'
        )
    features = "".join(
        f'<li style="padding:8px 0;display:flex;align-items:center;gap:8px"><span style="color:#10b981">✓</span>{escape(f)}</li>'
        for f in _features(props.get("features"))
    )
    button_style = (
        "background-color:var(--builder-primary);color:white" if popular
        else "background-color:#f3f4f6;color:#374151"
    )
    return f"""<div {_root_attrs("builder-pricing-card", styles, attrs)}>{badge}
  <div style="text-align:center;margin-bottom:24px">
    <h3 style="font-size:1.5rem;font-weight:bold;margin-bottom:8px">{_text(props.get("planName"), "Pro Plan")}</h3>
    <div style="font-size:3rem;font-weight:bold">{_text(props.get("price"), "$29")}<span style="font-size:1rem;font-weight:normal;color:#666">{_text(props.get("period"), "/month")}</span></div>
  </div>
  <ul style="list-style:none;padding:0;margin-bottom:24px;text-align:left">{features}</ul>
  <button type="button" style="width:100%;padding:12px;border-radius:6px;border:none;font-size:1rem;font-weight:500;cursor:pointer;{button_style}">{_text(props.get("buttonText"), "Get Started")}</button>
</div>"""


def render_unknown(kind: str, styles, children, attrs) -> str:
    """Placeholder visible pour un kind absent du renderer."""
    merged = {**styles, "padding": "20px", "border": "2px dashed #ccc", "textAlign": "center"}
    return (
        f'<div {_root_attrs("vb-unknown", merged, {**(attrs or {}), "data-kind": kind})}>'
        f"Composant inconnu : {escape(kind)}{children}</div>"
    )


ComponentFn = Callable[[Dict[str, Any], Dict[str, Any], bool, str, Optional[Dict[str, str]]], str]

COMPONENT_RENDERERS: Dict[str, ComponentFn] = {
    "container":        render_container,
    "row":              render_row,
    "column":           render_column,
    "spacer":           render_spacer,
    "heading":          render_heading,
    "text":             render_text,
    "button":           render_button,
    "image":            render_image,
    "hero-section":     render_hero_section,
    "testimonial-card": render_testimonial_card,
    "pricing-card":     render_pricing_card,
}

# Styles dérivés des props que les styles du bloc peuvent surcharger
COMPONENT_DEFAULTS: Dict[str, Callable[[Dict[str, Any]], Dict[str, Any]]] = {
    "row":    row_defaults,
    "column": column_defaults,
}


class HtmlComponentRenderer:
    """
    Renderer HTML par défaut.

    Usage:
        >>> renderer = HtmlComponentRenderer()
        >>> renderer.render("heading", {"text": "Bonjour", "level": "h1"}, {"color": "red"}, True)
        '<h1 class="builder-heading" style="color:red;text-align:left">Bonjour</h1>'
    """

    def __init__(self, extra: Optional[Dict[str, ComponentFn]] = None):
        self._renderers = {**COMPONENT_RENDERERS, **(extra or {})}

    def supports(self, kind: str) -> bool:
        return kind in self._renderers

    def default_styles(self, kind: str, props: Dict[str, Any]) -> Dict[str, Any]:
        """Styles par défaut (issus des props) qu'un style du bloc remplace."""
        fn = COMPONENT_DEFAULTS.get(kind)
        if fn is None or self._renderers.get(kind) is not COMPONENT_RENDERERS.get(kind):
            return {}
        return fn(props or {})

    def render(
        self,
        kind: str,
        props: Dict[str, Any],
        styles: Dict[str, Any],
        is_preview: bool,
        children: str = "",
        attrs: Optional[Dict[str, str]] = None,
    ) -> str:
        styles = dict(styles or {})
        if not is_preview:
            styles.setdefault("minHeight", "20px")
        fn = self._renderers.get(kind)
        if fn is None:
            return render_unknown(kind, styles, children, attrs)
        return fn(props or {}, styles, is_preview, children, attrs)
