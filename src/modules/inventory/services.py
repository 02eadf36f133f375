"""Inventory service layer (Use Cases).

Stock queries, manual quantity updates and movement registration.  The
business service never computes stock deltas: a quantity update is an
absolute set and a movement is forwarded verbatim; any arithmetic is the
data service's responsibility.

Business rules enforced here:
- RN-INV-001: quantity update checks (``rules.validate_quantity_update``).
- RN-INV-002: movement references a product (``rules.validate_movement``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.core.exceptions import InventoryNotFound
from modules.core.translation import normalize_errors, remote_call
from modules.inventory import rules
from modules.inventory.dtos import InventoryDTO, MovementDTO
from modules.products.rules import require_id

if TYPE_CHECKING:
    from modules.gateway.interfaces import IDataGateway

logger = structlog.get_logger(__name__)


class InventoryService:
    """Application service for Inventory use-cases.

    Receives an ``IDataGateway`` via constructor injection (DIP).
    """

    def __init__(self, gateway: IDataGateway) -> None:
        self._gateway = gateway

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @normalize_errors
    def update_quantity(self, product_id: Optional[int], quantity: Optional[int]) -> InventoryDTO:
        """Set the stock of a product to ``quantity``.

        The current record is not fetched first, so increases and
        decreases are indistinguishable.

        Raises:
            BusinessValidationError: if the id is missing or the quantity
                is missing or negative.
            InventoryNotFound: if the product has no inventory record.
        """
        rules.validate_quantity_update(product_id, quantity)

        payload = InventoryDTO.quantity_update(product_id, quantity)
        with remote_call(
            "inventory.update_quantity",
            not_found=InventoryNotFound(
                f"Inventory not found for product {product_id}."
            ),
            product_id=product_id,
            quantity=quantity,
        ):
            inventory = self._gateway.update_inventory(product_id, payload)

        logger.info("inventory.quantity_updated", product_id=product_id, quantity=quantity)
        return inventory

    @normalize_errors
    def register_movement(self, movement: MovementDTO) -> InventoryDTO:
        """Forward a stock movement to the data service.

        Raises:
            BusinessValidationError: if the movement has no product id.
            InventoryNotFound: if the referenced product does not exist.
        """
        product_id = rules.validate_movement(movement)

        with remote_call(
            "inventory.register_movement",
            not_found=InventoryNotFound(
                f"Product {product_id} not found for inventory movement."
            ),
            product_id=product_id,
        ):
            inventory = self._gateway.register_movement(movement)

        logger.info("inventory.movement_registered", product_id=product_id)
        return inventory

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @normalize_errors
    def list_low_stock(self) -> List[InventoryDTO]:
        """Inventory records below their minimum stock."""
        with remote_call("inventory.list_low_stock"):
            return self._gateway.list_low_stock()

    @normalize_errors
    def get_inventory(self, product_id: Optional[int]) -> InventoryDTO:
        """Raises ``InventoryNotFound`` if the product has no inventory record."""
        require_id(product_id)

        with remote_call(
            "inventory.get",
            not_found=InventoryNotFound(
                f"Inventory not found for product {product_id}."
            ),
            product_id=product_id,
        ):
            return self._gateway.get_inventory(product_id)
