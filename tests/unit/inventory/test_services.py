"""Unit tests for InventoryService.

Covers:
- update_quantity: minimal absolute-set payload, validation, not-found.
- register_movement: verbatim pass-through, missing product reference.
- list_low_stock / get_inventory.
"""

from __future__ import annotations

import pytest

from factories import make_inventory
from modules.core.exceptions import (
    BusinessValidationError,
    CommunicationError,
    InventoryNotFound,
)
from modules.gateway.exceptions import RemoteFailure, RemoteFailureKind
from modules.inventory.dtos import MovementDTO
from modules.inventory.services import InventoryService

pytestmark = pytest.mark.unit


def _failure(kind: RemoteFailureKind) -> RemoteFailure:
    return RemoteFailure(kind, "op")


@pytest.fixture()
def service(mock_gateway):
    return InventoryService(gateway=mock_gateway)


class TestUpdateQuantity:
    def test_sends_minimal_payload(self, service, mock_gateway):
        mock_gateway.update_inventory.return_value = make_inventory(quantity=3)

        result = service.update_quantity(7, 3)

        assert result.quantity == 3
        product_id, payload = mock_gateway.update_inventory.call_args.args
        assert product_id == 7
        assert payload.to_wire() == {"producto": {"id": 7}, "cantidad": 3}

    def test_does_not_read_current_record(self, service, mock_gateway):
        mock_gateway.update_inventory.return_value = make_inventory()

        service.update_quantity(7, 0)

        mock_gateway.get_inventory.assert_not_called()

    def test_negative_quantity_fails_before_gateway(self, service, mock_gateway):
        with pytest.raises(BusinessValidationError, match="greater than or equal to zero"):
            service.update_quantity(7, -1)
        mock_gateway.update_inventory.assert_not_called()

    def test_missing_quantity_rejected(self, service, mock_gateway):
        with pytest.raises(BusinessValidationError):
            service.update_quantity(7, None)
        mock_gateway.update_inventory.assert_not_called()

    def test_missing_product_id_rejected(self, service, mock_gateway):
        with pytest.raises(BusinessValidationError, match="Product id"):
            service.update_quantity(None, 5)
        mock_gateway.update_inventory.assert_not_called()

    def test_not_found(self, service, mock_gateway):
        mock_gateway.update_inventory.side_effect = _failure(RemoteFailureKind.NOT_FOUND)
        with pytest.raises(InventoryNotFound, match="7"):
            service.update_quantity(7, 5)


class TestRegisterMovement:
    def test_passes_movement_through_unchanged(self, service, mock_gateway):
        body = {
            "producto": {"id": 4, "sku": "AB-1"},
            "cantidad": 12,
            "tipo": "ENTRADA",
            "motivo": None,
        }
        movement = MovementDTO.from_payload(body)
        mock_gateway.register_movement.return_value = make_inventory(quantity=12)

        service.register_movement(movement)

        mock_gateway.register_movement.assert_called_once_with(movement)
        assert mock_gateway.register_movement.call_args.args[0].to_wire() == body

    @pytest.mark.parametrize(
        "movement",
        [
            None,
            MovementDTO.from_payload({"cantidad": 5}),
            MovementDTO.from_payload({"producto": {"nombre": "No id"}, "cantidad": 5}),
            MovementDTO.from_payload({"producto": None, "cantidad": 5}),
        ],
    )
    def test_missing_product_reference_fails_before_gateway(
        self, service, mock_gateway, movement
    ):
        with pytest.raises(BusinessValidationError, match="product id is required"):
            service.register_movement(movement)
        mock_gateway.register_movement.assert_not_called()

    def test_unknown_product(self, service, mock_gateway):
        mock_gateway.register_movement.side_effect = _failure(RemoteFailureKind.NOT_FOUND)
        movement = MovementDTO.from_payload({"producto": {"id": 4}, "cantidad": 1})

        with pytest.raises(InventoryNotFound, match="4"):
            service.register_movement(movement)


class TestQueries:
    def test_low_stock(self, service, mock_gateway):
        mock_gateway.list_low_stock.return_value = [make_inventory()]
        assert len(service.list_low_stock()) == 1

    def test_low_stock_failure(self, service, mock_gateway):
        mock_gateway.list_low_stock.side_effect = _failure(RemoteFailureKind.OTHER)
        with pytest.raises(CommunicationError):
            service.list_low_stock()

    def test_get_inventory_not_found(self, service, mock_gateway):
        mock_gateway.get_inventory.side_effect = _failure(RemoteFailureKind.NOT_FOUND)
        with pytest.raises(InventoryNotFound):
            service.get_inventory(3)

    def test_get_inventory_requires_id(self, service, mock_gateway):
        with pytest.raises(BusinessValidationError):
            service.get_inventory(None)
        mock_gateway.get_inventory.assert_not_called()
