"""
Protocol Renderer — interface pluggable : (kind, props, styles résolus, preview) → sortie affichable.
Un kind inconnu doit produire un placeholder visible, jamais une exception.
"""
from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class Renderer(Protocol):
    def render(
        self,
        kind: str,
        props: Dict[str, Any],
        styles: Dict[str, Any],
        is_preview: bool,
        children: str = "",
        attrs: Optional[Dict[str, str]] = None,
    ) -> str: ...
