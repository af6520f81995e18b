from __future__ import annotations

import logging
import time
from typing import Callable, TypeVar

from .metrics import STORAGE_RETRIES

T = TypeVar("T")

TRANSIENT_EXCEPTIONS: tuple[type[BaseException], ...] = (ConnectionError, TimeoutError)

logger = logging.getLogger("graph-storage")


def retry(
    operation: Callable[[], T],
    *,
    attempts: int = 4,
    base_delay: float = 0.2,
    retry_on: tuple[type[BaseException], ...] = TRANSIENT_EXCEPTIONS,
) -> T:
    last_error: BaseException | None = None
    for idx in range(max(1, attempts)):
        try:
            return operation()
        except retry_on as exc:
            last_error = exc
            if idx >= attempts - 1:
                break
            STORAGE_RETRIES.inc()
            delay = base_delay * (2 ** idx)
            logger.warning("transient storage error attempt=%d delay_sec=%.2f error=%s", idx + 1, delay, exc)
            time.sleep(delay)
    raise last_error
