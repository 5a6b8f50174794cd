"""Runtime settings for the delivery service, read from the environment."""

import os
from dataclasses import dataclass


def _positive_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    value = float(raw)
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    value = int(raw)
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    assign_orders_interval_seconds: float = 1.0
    move_couriers_interval_seconds: float = 2.0
    outbox_interval_seconds: float = 5.0
    outbox_batch_size: int = 20
    geo_adapter: str = "fake"
    message_bus_adapter: str = "fake"
    message_bus_stream: str = "delivery::order_status_changed"


def get_settings() -> Settings:
    """Build settings from environment variables, falling back to defaults."""
    defaults = Settings()
    return Settings(
        assign_orders_interval_seconds=_positive_float(
            "ASSIGN_ORDERS_INTERVAL_SECONDS", defaults.assign_orders_interval_seconds
        ),
        move_couriers_interval_seconds=_positive_float(
            "MOVE_COURIERS_INTERVAL_SECONDS", defaults.move_couriers_interval_seconds
        ),
        outbox_interval_seconds=_positive_float("OUTBOX_INTERVAL_SECONDS", defaults.outbox_interval_seconds),
        outbox_batch_size=_positive_int("OUTBOX_BATCH_SIZE", defaults.outbox_batch_size),
        geo_adapter=os.environ.get("GEO_ADAPTER", defaults.geo_adapter),
        message_bus_adapter=os.environ.get("MESSAGE_BUS_ADAPTER", defaults.message_bus_adapter),
        message_bus_stream=os.environ.get("MESSAGE_BUS_STREAM", defaults.message_bus_stream),
    )
