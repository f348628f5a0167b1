from hyprdots.core.time.abc import Time
from hyprdots.core.time.real import RealTime

__all__ = [
    "RealTime",
    "Time",
]
