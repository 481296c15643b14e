# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Retry policy for calls to external services.

The policy is independent of any particular client: it wraps a
zero-argument callable (or coroutine function), retries only errors whose
status code is judged retryable (429 and 5xx by default), and waits
``base_delay * 2**attempt`` plus random jitter between attempts. Client
errors are re-raised at once; when attempts run out the last error is
re-raised unchanged.

Retries never touch property state. They belong to the integration
boundary only.
"""

from __future__ import annotations

import asyncio
import logging
import random
import re
import time
from typing import Any, Awaitable, Callable, Optional, TypeVar

from pydantic import Field

from ..core.errors import TenancyError
from ..core.primitives import Model
from ..core.primitives.types import PositiveFloat, PositiveIntGt0

logger = logging.getLogger(__name__)

T = TypeVar("T")

_STATUS_IN_MESSAGE = re.compile(r"\b(429|5\d\d)\b")


class ModelRequestError(TenancyError):
    """A failed request to an external model service, with its HTTP status."""

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


def status_code_of(error: BaseException) -> int:
    """
    Best-effort HTTP status of an error raised by a client library.

    Looks at ``status_code``, ``status`` and ``code`` attributes, then at a
    ``response`` or nested ``error`` object, then for a 429/5xx number in
    the message. Returns 0 when nothing is found.
    """
    for attr in ("status_code", "status", "code"):
        value = getattr(error, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value

    for nested_attr in ("response", "error"):
        nested = getattr(error, nested_attr, None)
        if nested is None:
            continue
        for attr in ("status_code", "status"):
            value = getattr(nested, attr, None)
            if isinstance(value, int) and not isinstance(value, bool):
                return value

    match = _STATUS_IN_MESSAGE.search(str(error))
    return int(match.group(1)) if match else 0


def is_retryable_status(status: int) -> bool:
    """Rate limiting (429) and server errors (5xx) are worth retrying."""
    return status == 429 or 500 <= status < 600


class RetryPolicy(Model):
    """
    Exponential-backoff retry policy.

    Attributes:
        max_attempts: Total attempts, including the first
        base_delay: Seconds before the first retry; doubles each attempt
        max_jitter: Upper bound of the uniform random seconds added per wait
        retryable: Predicate on an error's status code
        backoff: Optional override mapping attempt index to a delay

    Example:
        >>> policy = RetryPolicy(max_attempts=3, base_delay=1.5, max_jitter=0.0)
        >>> [policy.delay_for(i) for i in range(3)]
        [1.5, 3.0, 6.0]
    """

    max_attempts: PositiveIntGt0 = 3
    base_delay: PositiveFloat = 1.5
    max_jitter: PositiveFloat = 1.0
    retryable: Callable[[int], bool] = Field(default=is_retryable_status)
    backoff: Optional[Callable[[int], float]] = None

    def should_retry(self, error: BaseException) -> bool:
        return self.retryable(status_code_of(error))

    def delay_for(self, attempt: int, rng: Optional[random.Random] = None) -> float:
        """Seconds to wait after failed attempt number ``attempt`` (0-based)."""
        if self.backoff is not None:
            return self.backoff(attempt)
        jitter = (rng or random).uniform(0, self.max_jitter) if self.max_jitter else 0.0
        return self.base_delay * (2**attempt) + jitter

    def _next_wait(self, attempt: int, error: BaseException) -> Optional[float]:
        """Delay before retrying, or None when ``error`` must be re-raised."""
        if not self.should_retry(error) or attempt + 1 >= self.max_attempts:
            return None
        wait = self.delay_for(attempt)
        logger.warning(
            f"Request failed with status {status_code_of(error)}; retrying in "
            f"{wait:.2f}s (attempt {attempt + 1}/{self.max_attempts})"
        )
        return wait

    def run(self, fn: Callable[[], T], sleep: Callable[[float], Any] = time.sleep) -> T:
        """Call ``fn`` until it succeeds, a non-retryable error occurs, or attempts run out."""
        for attempt in range(self.max_attempts):
            try:
                return fn()
            except Exception as e:
                wait = self._next_wait(attempt, e)
                if wait is None:
                    raise
                sleep(wait)
        raise AssertionError("unreachable: the final attempt either returns or raises")

    async def run_async(
        self,
        fn: Callable[[], Awaitable[T]],
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> T:
        """Async counterpart of `run` for coroutine-returning operations."""
        for attempt in range(self.max_attempts):
            try:
                return await fn()
            except Exception as e:
                wait = self._next_wait(attempt, e)
                if wait is None:
                    raise
                await sleep(wait)
        raise AssertionError("unreachable: the final attempt either returns or raises")
