"""
Schémas Pydantic du visual builder.
Stockage plat : BuilderDocument → [Block] ; l'arbre se reconstruit via parent_id + order.

Format persisté (camelCase) :
    {"blocks": [...], "globalStyles": {"desktop": {}, "tablet": {}, "mobile": {}},
     "settings": {"containerWidth": "1200px", "spacing": "normal", "typography": {...}, "colors": {...}}}
"""
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import (
    DEFAULT_COLORS,
    DEFAULT_CONTAINER_WIDTH,
    DEFAULT_SPACING,
    DEFAULT_TYPOGRAPHY,
    DEVICES,
)
from .errors import InvalidDevice

Device = Literal["desktop", "tablet", "mobile"]


def check_device(device: str) -> str:
    """Valide une clé de device, lève InvalidDevice sinon."""
    if device not in DEVICES:
        raise InvalidDevice(f"Device inconnu : {device!r}. Attendu : {list(DEVICES)}", device=device)
    return device


class DeviceStyles(BaseModel):
    """Une déclaration de style plate par device — aucun héritage entre devices."""
    desktop: Dict[str, Any] = Field(default_factory=dict)
    tablet: Dict[str, Any] = Field(default_factory=dict)
    mobile: Dict[str, Any] = Field(default_factory=dict)

    def for_device(self, device: str) -> Dict[str, Any]:
        return getattr(self, check_device(device))


class Block(BaseModel):
    """Nœud de l'arbre : une instance de composant placée, stylée et configurée."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    kind: str = Field(..., description="Entrée du registry (container, row, heading…)")
    parent_id: Optional[str] = Field(default=None, alias="parentId")
    order: int = 0
    props: Dict[str, Any] = Field(default_factory=dict)
    styles: DeviceStyles = Field(default_factory=DeviceStyles)


class BuilderSettings(BaseModel):
    """Réglages racine du document (largeur, typo, palette)."""
    model_config = ConfigDict(populate_by_name=True)

    container_width: str = Field(default=DEFAULT_CONTAINER_WIDTH, alias="containerWidth")
    spacing: str = DEFAULT_SPACING
    typography: Dict[str, Any] = Field(default_factory=lambda: dict(DEFAULT_TYPOGRAPHY))
    colors: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_COLORS))


class BuilderDocument(BaseModel):
    """Unité persistée : forêt de blocs (plate) + styles globaux + réglages."""
    model_config = ConfigDict(populate_by_name=True)

    blocks: List[Block] = Field(default_factory=list)
    global_styles: DeviceStyles = Field(default_factory=DeviceStyles, alias="globalStyles")
    settings: BuilderSettings = Field(default_factory=BuilderSettings)

    def to_persisted(self) -> dict:
        """Dict JSON-compatible au format camelCase."""
        return self.model_dump(mode="json", by_alias=True)
