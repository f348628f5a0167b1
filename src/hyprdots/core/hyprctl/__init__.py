from hyprdots.core.hyprctl.abc import Hyprctl, Monitor
from hyprdots.core.hyprctl.real import RealHyprctl

__all__ = [
    "Hyprctl",
    "Monitor",
    "RealHyprctl",
]
