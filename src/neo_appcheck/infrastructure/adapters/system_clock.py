"""Wall-clock time source."""

import time


class SystemClock:
    """Clock backed by ``time.time()``."""

    def now(self) -> float:
        return time.time()
