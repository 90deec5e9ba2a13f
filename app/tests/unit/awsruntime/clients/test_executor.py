"""Tests for the managed executor combinators."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from awsruntime.clients.executor import ExecutorShutdownError, ManagedExecutor


@pytest.mark.unit
class TestManagedExecutor:
    """Test suite for ManagedExecutor."""

    def test_submit_returns_future(self):
        executor = ManagedExecutor(max_workers=1)
        try:
            assert executor.submit(lambda x: x * 2, 21).result(timeout=5) == 42
        finally:
            executor.shutdown()

    def test_continuation_receives_result(self):
        executor = ManagedExecutor(max_workers=1)
        seen = []
        done = threading.Event()

        def _continuation(value):
            seen.append(value)
            done.set()

        try:
            future = executor.submit_with_continuation(lambda: "outcome", _continuation)
            assert done.wait(timeout=5)
            assert seen == ["outcome"]
            assert future.result(timeout=5) == "outcome"
        finally:
            executor.shutdown()

    def test_failing_continuation_does_not_break_other_work(self):
        executor = ManagedExecutor(max_workers=1)

        def _boom(_):
            raise RuntimeError("handler failed")

        try:
            first = executor.submit_with_continuation(lambda: 1, _boom)
            assert first.result(timeout=5) == 1
            assert executor.submit(lambda: 2).result(timeout=5) == 2
        finally:
            executor.shutdown()

    def test_submit_after_shutdown_raises(self):
        executor = ManagedExecutor(max_workers=1)
        executor.shutdown()
        executor.shutdown()
        assert executor.is_shutdown
        with pytest.raises(ExecutorShutdownError):
            executor.submit(lambda: None)

    def test_external_executor_is_not_shut_down(self):
        pool = ThreadPoolExecutor(max_workers=1)
        executor = ManagedExecutor(executor=pool)
        assert executor.submit(lambda: "ok").result(timeout=5) == "ok"
        executor.shutdown()
        assert pool.submit(lambda: "still running").result(timeout=5) == "still running"
        pool.shutdown()
