"""Data service gateway interface (Dependency Inversion Principle).

Orchestrators depend on ``IDataGateway``, never on ``requests`` or the
HTTP layout of the data service.  Every method either returns the
deserialized payload or raises ``RemoteFailure`` tagged with its
classification (not-found, conflict, other).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from modules.categories.dtos import CategoryDTO
    from modules.inventory.dtos import InventoryDTO, MovementDTO
    from modules.products.dtos import ProductDTO, ProductRequestDTO


class IDataGateway(ABC):
    """Remote operations offered by the data service."""

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    @abstractmethod
    def list_products(self) -> List[ProductDTO]:
        """Return the entire product catalog."""

    @abstractmethod
    def get_product(self, id: int) -> ProductDTO: ...

    @abstractmethod
    def create_product(self, dto: ProductRequestDTO) -> ProductDTO: ...

    @abstractmethod
    def update_product(self, id: int, dto: ProductRequestDTO) -> ProductDTO: ...

    @abstractmethod
    def delete_product(self, id: int) -> None: ...

    @abstractmethod
    def list_products_by_category(self, category_name: str) -> List[ProductDTO]:
        """Return the products whose category name matches exactly."""

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    @abstractmethod
    def list_categories(self) -> List[CategoryDTO]: ...

    @abstractmethod
    def get_category(self, id: int) -> CategoryDTO: ...

    @abstractmethod
    def create_category(self, dto: CategoryDTO) -> CategoryDTO: ...

    @abstractmethod
    def update_category(self, id: int, dto: CategoryDTO) -> CategoryDTO: ...

    @abstractmethod
    def delete_category(self, id: int) -> None: ...

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------

    @abstractmethod
    def list_low_stock(self) -> List[InventoryDTO]:
        """Return inventory records below their minimum stock."""

    @abstractmethod
    def get_inventory(self, product_id: int) -> InventoryDTO: ...

    @abstractmethod
    def update_inventory(self, product_id: int, dto: InventoryDTO) -> InventoryDTO: ...

    @abstractmethod
    def register_movement(self, dto: MovementDTO) -> InventoryDTO:
        """Forward a stock movement; the body is sent as received."""

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------

    @abstractmethod
    def ping(self) -> None:
        """Raise ``RemoteFailure`` if the data service is not answering."""
