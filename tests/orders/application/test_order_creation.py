"""Tests for placing orders through OrderService.create_order."""

import pytest
from orders.exceptions import InvalidArgument, InvalidOperation


class TestCreateOrderSuccess:
    def test_returns_paid_order(self, service):
        order = service.create_order("Book", 2)
        assert order.product == "Book"
        assert order.quantity == 2
        assert order.is_paid is True

    def test_first_order_gets_id_one(self, service):
        order = service.create_order("Book", 2)
        assert order.id == 1

    def test_ids_increase(self, service):
        first = service.create_order("Book", 1)
        second = service.create_order("Pen", 1)
        assert second.id == first.id + 1

    def test_order_is_registered(self, service):
        order = service.create_order("Book", 2)
        assert order in service.get_orders()

    def test_stock_is_reserved(self, service, inventory):
        service.create_order("Book", 3)
        assert inventory.available("Book") == 7

    def test_confirmation_sent_once(self, service, notifier):
        order = service.create_order("Book", 2)
        assert len(notifier.sent_confirmations) == 1
        assert notifier.confirmations_for(order.id)[0]["quantity"] == 2

    def test_payment_attempted_once_with_candidate(self, service, gateway):
        service.create_order("Book", 10)
        assert len(gateway.calls) == 1
        assert gateway.calls[0]["quantity"] == 10

    @pytest.mark.parametrize(
        "product,quantity",
        [("Book", 1), ("Pen", 3), ("Notebook", 5)],
    )
    def test_matches_requested_product_and_quantity(self, service, product, quantity):
        order = service.create_order(product, quantity)
        assert order.product == product
        assert order.quantity == quantity


class TestCreateOrderInvalidQuantity:
    @pytest.mark.parametrize("quantity", [0, -1])
    def test_raises_invalid_argument(self, service, quantity):
        with pytest.raises(InvalidArgument) as exc_info:
            service.create_order("Book", quantity)
        assert "quantity" in exc_info.value.messages

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_no_collaborator_is_called(self, service, inventory, gateway, notifier, quantity):
        with pytest.raises(InvalidArgument):
            service.create_order("Book", quantity)
        assert inventory.calls == []
        assert gateway.calls == []
        assert notifier.sent_confirmations == []


class TestCreateOrderNonIntegerQuantity:
    @pytest.mark.parametrize("quantity", [1.5, 2.0, "2", True, None])
    def test_raises_invalid_argument(self, service, quantity):
        with pytest.raises(InvalidArgument) as exc_info:
            service.create_order("Book", quantity)
        assert "quantity" in exc_info.value.messages

    @pytest.mark.parametrize("quantity", [1.5, True])
    def test_no_collaborator_is_called(self, service, inventory, gateway, notifier, quantity):
        with pytest.raises(InvalidArgument):
            service.create_order("Book", quantity)
        assert inventory.calls == []
        assert inventory.available("Book") == 10
        assert gateway.calls == []
        assert notifier.sent_confirmations == []


class TestCreateOrderInvalidProduct:
    @pytest.mark.parametrize("product", ["", "   ", "\t\n", "x" * 256, None])
    def test_rejected_before_any_call(self, service, inventory, product):
        with pytest.raises(InvalidArgument) as exc_info:
            service.create_order(product, 1)
        assert "product" in exc_info.value.messages
        assert inventory.calls == []


class TestCreateOrderInsufficientStock:
    def test_raises_invalid_operation(self, service):
        with pytest.raises(InvalidOperation) as exc_info:
            service.create_order("Book", 50)
        assert exc_info.value.reason == "insufficient stock"

    def test_nothing_reserved_or_charged(self, service, inventory, gateway, notifier):
        with pytest.raises(InvalidOperation):
            service.create_order("Book", 50)
        assert [c["method"] for c in inventory.calls] == ["check_stock"]
        assert inventory.available("Book") == 10
        assert gateway.calls == []
        assert notifier.sent_confirmations == []

    def test_registry_unchanged(self, service):
        service.create_order("Pen", 1)
        with pytest.raises(InvalidOperation):
            service.create_order("Book", 50)
        assert [o.product for o in service.get_orders()] == ["Pen"]


class TestCreateOrderPaymentFailure:
    @pytest.fixture(autouse=True)
    def _decline(self, gateway):
        gateway.configure(should_succeed=False)

    def test_raises_invalid_operation(self, service):
        with pytest.raises(InvalidOperation) as exc_info:
            service.create_order("Book", 1)
        assert exc_info.value.reason == "payment failed"

    def test_stock_restored_once(self, service, inventory):
        with pytest.raises(InvalidOperation):
            service.create_order("Book", 4)
        assert inventory.calls_to("increase_stock") == [
            {"method": "increase_stock", "product": "Book", "quantity": 4}
        ]
        assert inventory.available("Book") == 10

    def test_no_confirmation(self, service, notifier):
        with pytest.raises(InvalidOperation):
            service.create_order("Book", 1)
        assert notifier.sent_confirmations == []

    def test_order_not_registered(self, service):
        with pytest.raises(InvalidOperation):
            service.create_order("Book", 1)
        assert service.get_orders() == ()

    def test_failed_id_is_not_reused(self, service, gateway):
        with pytest.raises(InvalidOperation):
            service.create_order("Book", 1)
        gateway.configure(should_succeed=True)
        order = service.create_order("Book", 1)
        assert order.id == 2
