"""Delivery bounded context — Courier Dispatch and Order Fulfillment.

Assigns created orders to the nearest courier that can carry them, moves busy
couriers towards their destinations and completes orders on arrival. Domain
events are staged in a transactional outbox and relayed to the message bus.
"""

from protean.domain import Domain

from delivery.utils.logging import configure_logging

configure_logging()

delivery = Domain(name="delivery")
