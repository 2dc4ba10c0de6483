import pytest
from orders.inventory.memory_adapter import InMemoryInventory
from orders.notification.fake_notifier import FakeNotifier
from orders.order.service import OrderService
from orders.payment.fake_adapter import FakePaymentGateway
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def orders_bed():
    from orders.domain import orders

    bed = DomainFixture(orders)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(orders_bed):
    with orders_bed.domain_context():
        yield


@pytest.fixture()
def inventory():
    return InMemoryInventory(stock={"Book": 10, "Pen": 10, "Notebook": 10})


@pytest.fixture()
def gateway():
    return FakePaymentGateway()


@pytest.fixture()
def notifier():
    return FakeNotifier()


@pytest.fixture()
def service(inventory, gateway, notifier):
    return OrderService(inventory, gateway, notifier)
