"""Fixed-interval polling for function readiness"""

import math
import time
from typing import Callable

ACTIVE = "ACTIVE"


def wait_until_active(
    check_status: Callable[[], str],
    max_wait: int = 240,
    interval: int = 5,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """Poll ``check_status`` until it reports ACTIVE.

    The status is checked ``ceil(max_wait / interval)`` times at most, with a
    sleep of ``interval`` seconds after every miss. Returns False once the
    attempts are used up.
    """
    if interval <= 0:
        raise ValueError("interval must be positive")

    attempts = math.ceil(max_wait / interval)
    for _ in range(attempts):
        if check_status() == ACTIVE:
            return True
        sleep(interval)

    return False
