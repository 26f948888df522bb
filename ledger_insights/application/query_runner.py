"""Concurrent execution of independent ledger queries.

A report is built from several read-only sections (current transactions,
comparison transactions, investment sums...). ``AggregateQueryRunner`` runs
them on a thread pool, retries transient store failures, and enforces a
deadline. A section that fails or times out is replaced by its default
value and reported by name so the caller can flag it.
"""

import time
from collections.abc import Callable, Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass, field
from typing import Any

from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ledger_insights.domain.errors import StoreFailure
from ledger_insights.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SectionResults:
    """Values produced by a batch of sections.

    Attributes:
        values: Section name to computed (or default) value.
        failed: Names of sections that fell back to their default.
    """

    values: dict[str, Any] = field(default_factory=dict)
    failed: list[str] = field(default_factory=list)

    def __getitem__(self, name: str) -> Any:
        return self.values[name]


class AggregateQueryRunner:
    """Run independent queries concurrently with retries and a deadline."""

    def __init__(
        self,
        *,
        timeout_seconds: float = 10.0,
        max_attempts: int = 3,
        max_workers: int = 6,
        logger=None,
        wait=None,
    ) -> None:
        """Initialize the runner.

        Args:
            timeout_seconds: Deadline for a batch, retries included. Pass a
                shared ``deadline`` to ``run`` to span several batches.
            max_attempts: Attempts per section on ``StoreFailure``.
            max_workers: Thread pool size.
            logger: Optional logger compatible with logging.Logger-like API.
            wait: Optional tenacity wait strategy between attempts.
        """
        self._timeout_seconds = timeout_seconds
        self._max_attempts = max(1, max_attempts)
        self._max_workers = max(1, max_workers)
        self._logger = logger or get_app_logger()
        self._wait = wait or wait_exponential(multiplier=0.2, min=0.2, max=2)

    def run(
        self,
        sections: Mapping[str, Callable[[], Any]],
        defaults: Mapping[str, Any],
        deadline: float | None = None,
    ) -> SectionResults:
        """Execute every section and collect results.

        Sections still running at the deadline are abandoned, not stopped;
        each section must bound its own blocking calls.

        Args:
            sections: Section name to zero-argument callable.
            defaults: Section name to the value used when it fails.
            deadline: Optional ``time.monotonic()`` value from
                ``start_deadline``; defaults to a fresh one for this batch.

        Returns:
            SectionResults: Computed values and the names of failed sections.
        """
        if not sections:
            return SectionResults()
        executor = ThreadPoolExecutor(
            max_workers=min(self._max_workers, len(sections)),
            thread_name_prefix="ledger-query",
        )
        try:
            futures: dict[str, Future] = {
                name: executor.submit(self._with_retry, func)
                for name, func in sections.items()
            }
            if deadline is None:
                deadline = self.start_deadline()
            values: dict[str, Any] = {}
            failed: list[str] = []
            for name, future in futures.items():
                remaining = max(0.0, deadline - time.monotonic())
                try:
                    values[name] = future.result(timeout=remaining)
                except FutureTimeoutError:
                    future.cancel()
                    self._logger.error(
                        f"Section {name} timed out after "
                        f"{self._timeout_seconds}s; using default"
                    )
                    values[name] = defaults.get(name)
                    failed.append(name)
                except Exception as exc:
                    self._logger.error(
                        f"Section {name} failed ({type(exc).__name__}: {exc}); "
                        "using default"
                    )
                    values[name] = defaults.get(name)
                    failed.append(name)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)
        return SectionResults(values=values, failed=failed)

    def start_deadline(self) -> float:
        """Return a deadline ``timeout_seconds`` from now."""
        return time.monotonic() + self._timeout_seconds

    def _with_retry(self, func: Callable[[], Any]) -> Any:
        retrying = Retrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=self._wait,
            retry=retry_if_exception_type(StoreFailure),
            reraise=True,
        )
        return retrying(func)


__all__ = ["AggregateQueryRunner", "SectionResults"]
