"""Real time implementation using the system clock."""

import time
from datetime import datetime

from hyprdots.core.time.abc import Time


class RealTime(Time):
    """Production implementation using datetime.now() and time.sleep()."""

    def now(self) -> datetime:
        return datetime.now()

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)
