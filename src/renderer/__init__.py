from .base import Renderer
from .components import COMPONENT_RENDERERS, HtmlComponentRenderer
from .css import css_property, declarations, device_media, generate_document_css
from .html import render_blocks, render_canvas, render_page

__all__ = [
    "Renderer",
    "HtmlComponentRenderer",
    "COMPONENT_RENDERERS",
    "css_property",
    "declarations",
    "device_media",
    "generate_document_css",
    "render_blocks",
    "render_page",
    "render_canvas",
]
