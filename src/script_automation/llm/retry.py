"""Retry policy: linear backoff around transport failures."""

import logging
import time
from typing import Callable, Tuple, Type, TypeVar

from script_automation.domain.errors import RetriesExhausted, TransportError
from script_automation.domain.models import RetryState

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryPolicy:
    """Retry *fn* on TransportError up to max_attempts times.

    After the k-th failed attempt (1-indexed) the policy sleeps ``base_delay * k``
    seconds before trying again, so the delays are non-decreasing. Any other
    exception propagates immediately. The sleep is blocking; pass a fake
    ``sleep`` in tests.
    """

    def __init__(
        self,
        max_attempts: int = 3,
        base_delay: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
        retry_on: Tuple[Type[Exception], ...] = (TransportError,),
    ):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self.max_attempts = max_attempts
        self.base_delay = base_delay
        self.retry_on = retry_on
        self._sleep = sleep

    def delay_for(self, failed_attempts: int) -> float:
        return self.base_delay * failed_attempts

    def run(self, fn: Callable[[], T]) -> T:
        state = RetryState(max_attempts=self.max_attempts)
        while True:
            state.attempt += 1
            try:
                return fn()
            except self.retry_on as e:
                state.last_error = e
                logger.warning("Attempt %d/%d failed: %s", state.attempt, state.max_attempts, e)
                if state.exhausted:
                    raise RetriesExhausted(state.attempt, e) from e
                delay = self.delay_for(state.attempt)
                state.delays.append(delay)
                logger.info("Retrying in %.1fs...", delay)
                self._sleep(delay)
