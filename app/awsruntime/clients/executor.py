"""Managed executor for the callable and async calling conventions.

Operations always run as one synchronous function; the other two calling
conventions are thin combinators over `submit(fn)` and
`submit_with_continuation(fn, continuation)`.
"""

from concurrent.futures import Executor, Future, ThreadPoolExecutor
from threading import Lock
from typing import Any, Callable, Optional

import structlog

logger = structlog.get_logger()


class ExecutorShutdownError(RuntimeError):
    """Raised when work is submitted after the executor was shut down."""


class ManagedExecutor:
    """Lazily created thread pool shared by all clients of one configuration.

    Args:
        max_workers: Maximum number of worker threads for the owned pool.
        executor: Optional externally owned executor. It is used as is and
            is not shut down by `shutdown()`.
    """

    def __init__(self, max_workers: int = 4, executor: Optional[Executor] = None):
        self.max_workers = max_workers
        self._executor: Optional[Executor] = executor
        self._owned = executor is None
        self._lock = Lock()
        self._shutdown = False

    @property
    def is_shutdown(self) -> bool:
        return self._shutdown

    def _get_or_create_executor(self) -> Optional[Executor]:
        """Lazily create the pool if needed.

        Returns None when the executor has been explicitly shut down.
        """
        with self._lock:
            if self._shutdown:
                return None
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.max_workers, thread_name_prefix="awsruntime"
                )
                logger.debug("created_client_executor", max_workers=self.max_workers)
            return self._executor

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Run `fn` on the pool and return its future."""
        executor = self._get_or_create_executor()
        if executor is None:
            raise ExecutorShutdownError("client executor has been shut down")
        return executor.submit(fn, *args, **kwargs)

    def submit_with_continuation(
        self,
        fn: Callable[[], Any],
        continuation: Callable[[Any], None],
    ) -> Future:
        """Run `fn` on the pool, then call `continuation` with its result.

        A failing continuation is logged and does not affect other work.
        The returned future resolves to the result of `fn`.
        """

        def _run() -> Any:
            outcome = fn()
            try:
                continuation(outcome)
            except Exception as e:  # pylint: disable=broad-except
                logger.exception("async_handler_failed", error=str(e))
            return outcome

        return self.submit(_run)

    def shutdown(self, wait: bool = True) -> None:
        """Shut down the pool and prevent further submissions.

        This function is idempotent and can be called safely multiple times.

        Args:
            wait: If True, wait for pending tasks to complete.
        """
        with self._lock:
            if self._shutdown:
                return
            self._shutdown = True
            if self._executor is None or not self._owned:
                return
            try:
                self._executor.shutdown(wait=wait)
                logger.debug("client_executor_shut_down", wait=wait)
            finally:
                self._executor = None
