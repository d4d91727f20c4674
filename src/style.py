"""
Style Resolver — style d'un bloc pour un device donné.

Pas d'héritage entre devices : un bloc stylé uniquement sur desktop
ressort non stylé sur tablet / mobile. La combinaison avec les styles
globaux du document reste à la charge de l'appelant.
"""
from typing import Any, Dict

from .core.schemas import Block, DeviceStyles


def resolve(block: Block, device: str) -> Dict[str, Any]:
    """block.styles[device] ou {} — copie, jamais la map du store."""
    return dict(block.styles.for_device(device))


def resolve_global(global_styles: DeviceStyles, device: str) -> Dict[str, Any]:
    """Styles racine du document pour un device."""
    return dict(global_styles.for_device(device))
