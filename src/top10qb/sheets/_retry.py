"""Retry policy for sheet tab requests.

Connection problems, timeouts, 429 and 5xx responses are retried. Any
other HTTP status (a 404 for a tab that does not exist, a 403 for a
sheet that is not published) fails on the first attempt.
"""

import logging
from dataclasses import dataclass

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
    wait_none,
)

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS = frozenset({429})


def is_retryable(exc: BaseException) -> bool:
    if isinstance(exc, httpx.TransportError):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        return status >= 500 or status in _RETRYABLE_STATUS
    return False


@dataclass(frozen=True)
class RetryPolicy:
    attempts: int = 3
    max_wait_seconds: float = 10.0
    initial_wait_seconds: float = 1.0

    def retrying(self, tab: str) -> AsyncRetrying:
        """Build the retry loop for one request of *tab*."""

        def _log_retry(retry_state: RetryCallState) -> None:
            exc = retry_state.outcome.exception() if retry_state.outcome else None
            logger.warning(
                "Tab %r failed (%s); attempt %d of %d",
                tab,
                exc,
                retry_state.attempt_number,
                self.attempts,
            )

        if self.max_wait_seconds > 0:
            wait = wait_exponential_jitter(initial=self.initial_wait_seconds, max=self.max_wait_seconds)
        else:
            wait = wait_none()
        return AsyncRetrying(
            stop=stop_after_attempt(self.attempts),
            wait=wait,
            retry=retry_if_exception(is_retryable),
            before_sleep=_log_retry,
            reraise=True,
        )
