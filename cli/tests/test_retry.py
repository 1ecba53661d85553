from __future__ import annotations

from superapp_client.retry import NO_DELAY, AttemptOutcome, AttemptResult, FixedDelay, run_attempts


def test_fixed_delay_sleeps_configured_seconds() -> None:
    slept: list[float] = []
    delay = FixedDelay(1.0, sleep=slept.append)

    delay(1)
    delay(2)

    assert slept == [1.0, 1.0]


def test_zero_delay_never_sleeps() -> None:
    slept: list[float] = []
    FixedDelay(0, sleep=slept.append)(1)
    assert slept == []


def test_run_attempts_stops_on_success() -> None:
    slept: list[float] = []

    def _fn(n: int) -> AttemptResult:
        if n < 2:
            return AttemptResult.retryable(n, RuntimeError(f"boom {n}"))
        return AttemptResult.success(n)

    report = run_attempts(_fn, attempts=3, delay=FixedDelay(1.0, sleep=slept.append))

    assert report.ok
    assert report.attempts == 2
    assert slept == [1.0]


def test_run_attempts_delays_after_final_failure_and_keeps_last_error() -> None:
    slept: list[float] = []

    report = run_attempts(
        lambda n: AttemptResult.retryable(n, RuntimeError(f"boom {n}")),
        attempts=3,
        delay=FixedDelay(1.0, sleep=slept.append),
    )

    assert not report.ok
    assert report.attempts == 3
    assert str(report.error) == "boom 3"
    assert slept == [1.0, 1.0, 1.0]


def test_run_attempts_terminal_failure_stops_immediately() -> None:
    calls: list[int] = []

    def _fn(n: int) -> AttemptResult:
        calls.append(n)
        return AttemptResult.terminal(n, ValueError("bad input"))

    report = run_attempts(_fn, attempts=3, delay=NO_DELAY)

    assert calls == [1]
    assert report.last.outcome is AttemptOutcome.TERMINAL
    assert isinstance(report.error, ValueError)


def test_run_attempts_always_makes_at_least_one_attempt() -> None:
    calls: list[int] = []

    def _fn(n: int) -> AttemptResult:
        calls.append(n)
        return AttemptResult.retryable(n, RuntimeError("down"))

    report = run_attempts(_fn, attempts=0, delay=NO_DELAY)

    assert calls == [1]
    assert report.attempts == 1
    assert str(report.error) == "down"
