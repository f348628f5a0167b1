"""Monitor scale cycling for HiDPI displays."""

import logging
from dataclasses import dataclass

from hyprdots.core.errors import HyprctlError
from hyprdots.core.hyprctl.abc import Hyprctl
from hyprdots.core.notifier import Notifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScaleStep:
    """Monitor scale plus the matching GDK_SCALE for GTK apps."""

    scale: float
    gdk_scale: str

    @property
    def label(self) -> str:
        return f"{self.scale:g}x"


# Cycle 1.25 -> 1.5 -> 2.0 -> 1.25; anything unrecognized restarts at 1.5
SCALE_CYCLE: tuple[tuple[float, ScaleStep], ...] = (
    (1.25, ScaleStep(scale=1.5, gdk_scale="1.5")),
    (1.5, ScaleStep(scale=2.0, gdk_scale="2")),
    (2.0, ScaleStep(scale=1.25, gdk_scale="1.25")),
)
DEFAULT_STEP = ScaleStep(scale=1.5, gdk_scale="1.5")


def next_scale(current: float) -> ScaleStep:
    for scale, step in SCALE_CYCLE:
        if abs(current - scale) < 0.01:
            return step
    return DEFAULT_STEP


def toggle_scale(hyprctl: Hyprctl, notifier: Notifier) -> ScaleStep:
    """Advance the first monitor to the next scale in the cycle.

    Raises:
        HyprctlError: If Hyprland reports no monitors
    """
    monitors = hyprctl.get_monitors()
    if not monitors:
        raise HyprctlError("hyprctl reported no monitors")

    monitor = monitors[0]
    step = next_scale(monitor.scale)
    logger.info("Scaling %s from %g to %g", monitor.name, monitor.scale, step.scale)

    hyprctl.set_keyword(
        "monitor", f"{monitor.name},{monitor.mode},{monitor.position},{step.scale:g}"
    )
    hyprctl.set_keyword("env", f"GDK_SCALE,{step.gdk_scale}")
    notifier.notify("Display Scaling", f"Changed to {step.label}", timeout_ms=2000)
    return step
