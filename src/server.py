"""Periodic runner for the delivery domain.

Starts the background cycles, each on its own interval:
- assign_orders: hands the oldest created order to the best free courier
- move_couriers: moves busy couriers one step and completes arrived orders
- outbox: publishes pending outbox rows to the message bus

Usage:
    python src/server.py                   # Run all cycles
    python src/server.py --job outbox      # Run only the outbox relay
"""

import argparse
import asyncio
import signal
import threading

import structlog

from delivery.config import get_settings
from delivery.scheduler import PeriodicJob, run_jobs

logger = structlog.get_logger(__name__)

JOB_NAMES = ["assign_orders", "move_couriers", "outbox"]


def _get_domain():
    """Import and initialize the delivery domain."""
    from delivery.domain import delivery

    delivery.init()
    return delivery


def _build_jobs(names):
    from delivery.courier.movement import move_couriers
    from delivery.dispatch.assignment import assign_orders
    from delivery.outbox.relay import OutboxRelay

    settings = get_settings()
    available = {
        "assign_orders": PeriodicJob("assign_orders", settings.assign_orders_interval_seconds, assign_orders),
        "move_couriers": PeriodicJob("move_couriers", settings.move_couriers_interval_seconds, move_couriers),
        "outbox": PeriodicJob("outbox", settings.outbox_interval_seconds, OutboxRelay().run),
    }
    return [available[name] for name in names]


async def run(job_names):
    domain = _get_domain()
    jobs = _build_jobs(job_names)

    stop = threading.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop.set)

    logger.info("delivery_runner_started", jobs=job_names)
    await run_jobs(domain, jobs, stop)
    logger.info("delivery_runner_stopped")


def main():
    parser = argparse.ArgumentParser(description="Delivery cycle runner")
    parser.add_argument(
        "--job",
        choices=JOB_NAMES,
        help="Run a single cycle (default: run all)",
    )
    args = parser.parse_args()

    job_names = [args.job] if args.job else JOB_NAMES

    asyncio.run(run(job_names))


if __name__ == "__main__":
    main()
