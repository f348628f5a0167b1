from hyprdots.core.clipboard.abc import ClipEntry, Clipboard
from hyprdots.core.clipboard.real import RealClipboard

__all__ = [
    "ClipEntry",
    "Clipboard",
    "RealClipboard",
]
