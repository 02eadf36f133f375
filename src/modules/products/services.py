"""Product service layer (Use Cases).

Orchestrates business logic for products, delegating persistence to the
injected ``IDataGateway``.  Each operation validates its input, performs
one gateway call and translates remote failures into domain errors.

Business rules enforced here:
- RN-PRO-001..005: product request checks (``rules.validate_product``).
- RN-PRO-006: price filter bounds (``rules.validate_price_range``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.core.exceptions import ProductNotFound
from modules.core.translation import normalize_errors, remote_call
from modules.products import rules
from modules.products.dtos import PriceRangeDTO, ProductDTO

if TYPE_CHECKING:
    from modules.gateway.interfaces import IDataGateway
    from modules.products.dtos import ProductRequestDTO

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IDataGateway`` via constructor injection (DIP).
    """

    def __init__(self, gateway: IDataGateway) -> None:
        self._gateway = gateway

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @normalize_errors
    def create_product(self, dto: ProductRequestDTO) -> ProductDTO:
        """Create a product after enforcing the product rules.

        Raises:
            BusinessValidationError: if the request breaks a rule.
            CommunicationError: if the data service fails.
        """
        rules.validate_product(dto, creating=True)

        with remote_call("product.create", product_name=dto.name):
            product = self._gateway.create_product(dto)

        logger.info("product.created", product_id=product.id)
        return product

    @normalize_errors
    def update_product(self, id: Optional[int], dto: ProductRequestDTO) -> ProductDTO:
        """Replace an existing product with the supplied fields.

        Raises:
            BusinessValidationError: if the id is missing or the request
                breaks a rule.
            ProductNotFound: if the product does not exist.
        """
        rules.require_id(id)
        rules.validate_product(dto, creating=False)

        with remote_call(
            "product.update",
            not_found=ProductNotFound(f"Product {id} not found."),
            product_id=id,
        ):
            product = self._gateway.update_product(id, dto)

        logger.info("product.updated", product_id=id)
        return product

    @normalize_errors
    def delete_product(self, id: Optional[int]) -> None:
        """Delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        rules.require_id(id)

        with remote_call(
            "product.delete",
            not_found=ProductNotFound(f"Product {id} not found."),
            product_id=id,
        ):
            self._gateway.delete_product(id)

        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @normalize_errors
    def list_products(self) -> List[ProductDTO]:
        """Return the whole catalog."""
        with remote_call("product.list"):
            return self._gateway.list_products()

    @normalize_errors
    def get_product(self, id: Optional[int]) -> ProductDTO:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        rules.require_id(id)

        with remote_call(
            "product.get",
            not_found=ProductNotFound(f"Product {id} not found."),
            product_id=id,
        ):
            product = self._gateway.get_product(id)

        logger.info("product.retrieved", product_id=id)
        return product

    @normalize_errors
    def list_products_by_category(self, category_name: Optional[str]) -> List[ProductDTO]:
        """Return the products of one category.

        Raises:
            ProductNotFound: if the data service knows no products for it.
        """
        name = rules.require_category_name(category_name)

        with remote_call(
            "product.list_by_category",
            not_found=ProductNotFound(f"No products found for category '{name}'."),
            category_name=name,
        ):
            return self._gateway.list_products_by_category(name)

    @normalize_errors
    def filter_products_by_price(self, price_range: PriceRangeDTO) -> List[ProductDTO]:
        """Return products whose price lies within the inclusive bounds.

        The data service offers no price filter, so the whole catalog is
        fetched and filtered here.  Products without a price never match.

        Raises:
            BusinessValidationError: if ``min_price > max_price``.
        """
        rules.validate_price_range(price_range)

        with remote_call(
            "product.filter_by_price",
            min_price=str(price_range.min_price),
            max_price=str(price_range.max_price),
        ):
            products = self._gateway.list_products()

        matches = [p for p in products if rules.price_in_range(p.price, price_range)]
        logger.info(
            "product.filtered_by_price",
            total=len(products),
            matched=len(matches),
        )
        return matches
