"""Shared fixtures."""

from concurrent.futures import Executor, Future

import pytest


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class DeferredExecutor(Executor):
    """Holds submitted tasks until `run_all` is called."""

    def __init__(self):
        self.pending = []

    def submit(self, fn, /, *args, **kwargs):
        future = Future()
        self.pending.append((future, fn, args, kwargs))
        return future

    def run_all(self):
        pending, self.pending = self.pending, []
        for future, fn, args, kwargs in pending:
            future.set_result(fn(*args, **kwargs))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def deferred():
    return DeferredExecutor()
