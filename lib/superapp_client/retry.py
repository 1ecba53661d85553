from __future__ import annotations

import enum
import time
from dataclasses import dataclass
from typing import Callable, Protocol


class DelayPolicy(Protocol):
    def __call__(self, attempt: int) -> None: ...


class FixedDelay:
    """Sleep the same amount of time after every failed attempt."""

    def __init__(self, seconds: float, *, sleep: Callable[[float], None] = time.sleep):
        self.seconds = max(0.0, float(seconds))
        self._sleep = sleep

    def __call__(self, attempt: int) -> None:
        if self.seconds:
            self._sleep(self.seconds)

    def __repr__(self) -> str:
        return f"FixedDelay({self.seconds})"


NO_DELAY = FixedDelay(0)


class AttemptOutcome(enum.Enum):
    SUCCESS = "success"
    RETRYABLE = "retryable"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class AttemptResult:
    outcome: AttemptOutcome
    attempt: int
    error: Exception | None = None

    @classmethod
    def success(cls, attempt: int) -> "AttemptResult":
        return cls(AttemptOutcome.SUCCESS, attempt)

    @classmethod
    def retryable(cls, attempt: int, error: Exception) -> "AttemptResult":
        return cls(AttemptOutcome.RETRYABLE, attempt, error)

    @classmethod
    def terminal(cls, attempt: int, error: Exception) -> "AttemptResult":
        return cls(AttemptOutcome.TERMINAL, attempt, error)

    @property
    def ok(self) -> bool:
        return self.outcome is AttemptOutcome.SUCCESS


@dataclass(frozen=True)
class RetryReport:
    attempts: int
    last: AttemptResult

    @property
    def ok(self) -> bool:
        return self.last.ok

    @property
    def error(self) -> Exception | None:
        return self.last.error


def run_attempts(
        fn: Callable[[int], AttemptResult],
        *,
        attempts: int,
        delay: DelayPolicy,
) -> RetryReport:
    """Call ``fn(1)``, ``fn(2)``... until it succeeds, fails terminally or attempts run out.

    The delay policy runs after every retryable failure, the last one included.
    """
    total = max(1, int(attempts))
    n = 0
    while True:
        n += 1
        result = fn(n)
        if result.ok or result.outcome is AttemptOutcome.TERMINAL:
            return RetryReport(attempts=n, last=result)
        delay(n)
        if n >= total:
            return RetryReport(attempts=n, last=result)
