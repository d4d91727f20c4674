from .config import DEVICES, DEFAULT_DEVICE, HISTORY_LIMIT
from .errors import (
    BuilderError,
    BlockNotFound,
    InvalidParent,
    CyclicMove,
    UnknownKind,
    InvalidDevice,
    InvalidDocument,
    InvalidSettings,
)
from .schemas import Device, DeviceStyles, Block, BuilderSettings, BuilderDocument, check_device

__all__ = [
    "DEVICES", "DEFAULT_DEVICE", "HISTORY_LIMIT",
    "BuilderError", "BlockNotFound", "InvalidParent", "CyclicMove",
    "UnknownKind", "InvalidDevice", "InvalidDocument", "InvalidSettings",
    "Device", "DeviceStyles", "Block", "BuilderSettings", "BuilderDocument", "check_device",
]
