import time
from typing import Callable, TypeVar

from .errors import RetryExhaustedError
from .logging_utils import logger

T = TypeVar("T")


def call_with_retry(
    operation: Callable[[], T],
    *,
    stage: str,
    attempts: int,
    delay_seconds: float,
    retry_on: tuple[type[BaseException], ...],
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Run ``operation`` until it succeeds or ``attempts`` is used up.

    Only exceptions listed in ``retry_on`` are retried; anything else
    propagates immediately. The delay is fixed and only applied between
    attempts, never after the last one.
    """
    last_error: BaseException | None = None
    for attempt in range(1, attempts + 1):
        try:
            logger.info(
                "Attempt started",
                extra={"event": f"{stage}_attempt", "stage": stage, "attempt": attempt},
            )
            return operation()
        except retry_on as exc:
            last_error = exc
            will_retry = attempt < attempts
            logger.warning(
                "Attempt failed; retrying" if will_retry else "Attempt failed",
                extra={
                    "event": f"{stage}_failed",
                    "stage": stage,
                    "attempt": attempt,
                    "delay": delay_seconds if will_retry else None,
                },
                exc_info=True,
            )
            if will_retry:
                sleep(delay_seconds)
    assert last_error is not None
    raise RetryExhaustedError(stage, attempts, last_error) from last_error
