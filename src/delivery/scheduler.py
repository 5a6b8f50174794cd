"""Periodic job runner for the dispatch cycles and the outbox relay.

Each job runs its action in a worker thread inside a fresh domain context,
waits for it to finish and only then sleeps for its interval, so a job never
overlaps with itself. Different jobs run concurrently.
"""

import asyncio
import threading
from collections.abc import Callable

import structlog

from delivery.shared.cancellation import CycleCancelled
from delivery.utils.logging import add_context, clear_context

logger = structlog.get_logger(__name__)


class PeriodicJob:
    def __init__(self, name: str, interval: float, action: Callable[[threading.Event], object]):
        if interval <= 0:
            raise ValueError(f"Interval for {name} must be positive")
        self.name = name
        self.interval = interval
        self.action = action
        self.runs = 0

    def _run_once(self, domain, stop: threading.Event):
        add_context(job=self.name, run=self.runs + 1)
        try:
            with domain.domain_context():
                return self.action(stop)
        finally:
            clear_context()

    async def run(self, domain, stop: threading.Event) -> None:
        logger.info("job_started", job=self.name, interval=self.interval)
        while not stop.is_set():
            try:
                await asyncio.to_thread(self._run_once, domain, stop)
            except CycleCancelled:
                break
            except Exception:
                # One failed tick must not stop the job; the unit of work already rolled back.
                logger.exception("job_failed", job=self.name)
            self.runs += 1

            await _sleep_unless_stopped(stop, self.interval)
        logger.info("job_stopped", job=self.name, runs=self.runs)


async def _sleep_unless_stopped(stop: threading.Event, seconds: float) -> None:
    loop = asyncio.get_running_loop()
    deadline = loop.time() + seconds
    while not stop.is_set():
        remaining = deadline - loop.time()
        if remaining <= 0:
            return
        await asyncio.sleep(min(remaining, 0.1))


async def run_jobs(domain, jobs: list[PeriodicJob], stop: threading.Event) -> None:
    await asyncio.gather(*(job.run(domain, stop) for job in jobs))
