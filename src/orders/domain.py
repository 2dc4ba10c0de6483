"""Orders bounded context — order placement across inventory, payment and notification.

The Order aggregate is registered here; the orchestration that places,
updates and removes orders lives in ``orders.order.service``.
"""

from protean.domain import Domain

from orders.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
orders = Domain(name="orders")
