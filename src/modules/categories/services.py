"""Category service layer (Use Cases).

Orchestrates category CRUD and reporting, delegating persistence to the
injected ``IDataGateway``.

Business rules enforced here:
- RN-CAT-001/002: category request checks (``rules.validate_category``).
- RN-CAT-003: unique name.  The business service holds no category list;
  a conflict reported by the data service on create/update becomes a
  validation error.
- RN-CAT-004: a category with products cannot be deleted.  Enforced by
  the data service only: no products-by-category check is issued before
  the delete, the conflict it reports becomes a validation error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.categories.rules import validate_category
from modules.categories.statistics import compute_category_statistics
from modules.core.exceptions import CategoryNotFound
from modules.core.translation import normalize_errors, remote_call
from modules.products.rules import require_category_name, require_id

if TYPE_CHECKING:
    from modules.categories.dtos import CategoryDTO, CategoryStatisticsDTO
    from modules.gateway.interfaces import IDataGateway
    from modules.products.dtos import ProductDTO

logger = structlog.get_logger(__name__)

NAME_IN_USE_MESSAGE = "A category with that name already exists."
CATEGORY_IN_USE_MESSAGE = "The category cannot be deleted while it has products."
ID_REQUIRED_MESSAGE = "Category id is required."


class CategoryService:
    """Application service for Category use-cases.

    Receives an ``IDataGateway`` via constructor injection (DIP).
    """

    def __init__(self, gateway: IDataGateway) -> None:
        self._gateway = gateway

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @normalize_errors
    def create_category(self, dto: CategoryDTO) -> CategoryDTO:
        """Create a category.

        Raises:
            BusinessValidationError: if the name is invalid or already taken.
        """
        validate_category(dto)

        with remote_call(
            "category.create",
            conflict=NAME_IN_USE_MESSAGE,
            category_name=dto.name,
        ):
            category = self._gateway.create_category(dto)

        logger.info("category.created", category_id=category.id)
        return category

    @normalize_errors
    def update_category(self, id: Optional[int], dto: CategoryDTO) -> CategoryDTO:
        """Update a category.

        Raises:
            BusinessValidationError: if the id is missing, the name is
                invalid or the new name collides with another category.
            CategoryNotFound: if the category does not exist.
        """
        require_id(id, ID_REQUIRED_MESSAGE)
        validate_category(dto)

        with remote_call(
            "category.update",
            not_found=CategoryNotFound(f"Category {id} not found."),
            conflict=NAME_IN_USE_MESSAGE,
            category_id=id,
        ):
            category = self._gateway.update_category(id, dto)

        logger.info("category.updated", category_id=id)
        return category

    @normalize_errors
    def delete_category(self, id: Optional[int]) -> None:
        """Delete a category.

        Raises:
            BusinessValidationError: if the data service refuses because
                the category still has products.
            CategoryNotFound: if the category does not exist.
        """
        require_id(id, ID_REQUIRED_MESSAGE)

        with remote_call(
            "category.delete",
            not_found=CategoryNotFound(f"Category {id} not found."),
            conflict=CATEGORY_IN_USE_MESSAGE,
            category_id=id,
        ):
            self._gateway.delete_category(id)

        logger.info("category.deleted", category_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @normalize_errors
    def list_categories(self) -> List[CategoryDTO]:
        with remote_call("category.list"):
            return self._gateway.list_categories()

    @normalize_errors
    def get_category(self, id: Optional[int]) -> CategoryDTO:
        """Retrieve a category by ID.

        Raises:
            CategoryNotFound: if the category does not exist.
        """
        require_id(id, ID_REQUIRED_MESSAGE)

        with remote_call(
            "category.get",
            not_found=CategoryNotFound(f"Category {id} not found."),
            category_id=id,
        ):
            return self._gateway.get_category(id)

    @normalize_errors
    def get_category_products(self, category_name: Optional[str]) -> List[ProductDTO]:
        """Products belonging to a category, looked up by exact name.

        Raises:
            CategoryNotFound: if the category does not exist or has no
                products.
        """
        name = require_category_name(category_name)

        with remote_call(
            "category.list_products",
            not_found=CategoryNotFound(f"Category '{name}' not found or has no products."),
            category_name=name,
        ):
            return self._gateway.list_products_by_category(name)

    @normalize_errors
    def get_category_statistics(self, category_name: Optional[str]) -> CategoryStatisticsDTO:
        """Compute the statistics of a category from its current products.

        A remote failure aborts the whole computation; no partial result
        is returned.

        Raises:
            CategoryNotFound: if the category does not exist.
        """
        name = require_category_name(category_name)

        with remote_call(
            "category.statistics",
            not_found=CategoryNotFound(f"Category '{name}' not found."),
            category_name=name,
        ):
            products = self._gateway.list_products_by_category(name)

        statistics = compute_category_statistics(name, products)
        logger.info(
            "category.statistics_computed",
            category_name=name,
            total_products=statistics.total_products,
        )
        return statistics
