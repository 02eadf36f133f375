"""HTTP implementation of the data service gateway.

Satisfies ``IDataGateway`` using a ``requests.Session``.  The gateway
performs no business logic: it marshals DTOs to JSON, issues exactly one
request per call (no retries) and turns every non-2xx answer, transport
error or unreadable body into a ``RemoteFailure``:

- 404 -> ``RemoteFailureKind.NOT_FOUND``
- 409 -> ``RemoteFailureKind.CONFLICT``
- anything else -> ``RemoteFailureKind.OTHER``
"""

from __future__ import annotations

import functools
from contextvars import ContextVar
from typing import Any, List, Optional, Type, TypeVar
from urllib.parse import quote

import requests
import structlog
from django.conf import settings
from django.test.signals import setting_changed
from django.dispatch import receiver
from pydantic import BaseModel, ValidationError

from modules.categories.dtos import CategoryDTO
from modules.gateway.exceptions import RemoteFailure, RemoteFailureKind, classify_status
from modules.gateway.interfaces import IDataGateway
from modules.inventory.dtos import InventoryDTO, MovementDTO
from modules.products.dtos import ProductDTO, ProductRequestDTO

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

#: Longest slice of a failed response body kept for logs.
MAX_DETAIL_LENGTH = 500

REQUEST_ID_HEADER = "X-Request-ID"

#: Correlation id of the inbound request, bound by ``CorrelationIdMiddleware``
#: and forwarded on every call to the data service.
correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")


class DataServiceGateway(IDataGateway):
    """Concrete gateway talking JSON over HTTP to the data service."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def list_products(self) -> List[ProductDTO]:
        data = self._request("list_products", "GET", "/data/productos")
        return self._parse_list(ProductDTO, data, "list_products")

    def get_product(self, id: int) -> ProductDTO:
        data = self._request("get_product", "GET", f"/data/productos/{id}")
        return self._parse(ProductDTO, data, "get_product")

    def create_product(self, dto: ProductRequestDTO) -> ProductDTO:
        data = self._request(
            "create_product", "POST", "/data/productos", payload=dto.to_wire()
        )
        return self._parse(ProductDTO, data, "create_product")

    def update_product(self, id: int, dto: ProductRequestDTO) -> ProductDTO:
        data = self._request(
            "update_product", "PUT", f"/data/productos/{id}", payload=dto.to_wire()
        )
        return self._parse(ProductDTO, data, "update_product")

    def delete_product(self, id: int) -> None:
        self._request("delete_product", "DELETE", f"/data/productos/{id}")

    def list_products_by_category(self, category_name: str) -> List[ProductDTO]:
        path = f"/data/productos/categoria/{quote(category_name, safe='')}"
        data = self._request("list_products_by_category", "GET", path)
        return self._parse_list(ProductDTO, data, "list_products_by_category")

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def list_categories(self) -> List[CategoryDTO]:
        data = self._request("list_categories", "GET", "/data/categorias")
        return self._parse_list(CategoryDTO, data, "list_categories")

    def get_category(self, id: int) -> CategoryDTO:
        data = self._request("get_category", "GET", f"/data/categorias/{id}")
        return self._parse(CategoryDTO, data, "get_category")

    def create_category(self, dto: CategoryDTO) -> CategoryDTO:
        data = self._request(
            "create_category", "POST", "/data/categorias", payload=dto.to_wire()
        )
        return self._parse(CategoryDTO, data, "create_category")

    def update_category(self, id: int, dto: CategoryDTO) -> CategoryDTO:
        data = self._request(
            "update_category", "PUT", f"/data/categorias/{id}", payload=dto.to_wire()
        )
        return self._parse(CategoryDTO, data, "update_category")

    def delete_category(self, id: int) -> None:
        self._request("delete_category", "DELETE", f"/data/categorias/{id}")

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------

    def list_low_stock(self) -> List[InventoryDTO]:
        data = self._request("list_low_stock", "GET", "/data/inventario/stock-bajo")
        return self._parse_list(InventoryDTO, data, "list_low_stock")

    def get_inventory(self, product_id: int) -> InventoryDTO:
        data = self._request(
            "get_inventory", "GET", f"/data/inventario/producto/{product_id}"
        )
        return self._parse(InventoryDTO, data, "get_inventory")

    def update_inventory(self, product_id: int, dto: InventoryDTO) -> InventoryDTO:
        data = self._request(
            "update_inventory",
            "PUT",
            f"/data/inventario/producto/{product_id}",
            payload=dto.to_wire(),
        )
        return self._parse(InventoryDTO, data, "update_inventory")

    def register_movement(self, dto: MovementDTO) -> InventoryDTO:
        data = self._request(
            "register_movement",
            "POST",
            "/data/inventario/movimientos",
            payload=dto.to_wire(),
        )
        return self._parse(InventoryDTO, data, "register_movement")

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------

    def ping(self) -> None:
        self._request("ping", "GET", "/data/categorias")

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        payload: Optional[Any] = None,
    ) -> Any:
        """Issue one HTTP call and return the decoded JSON body (or ``None``)."""
        url = f"{self._base_url}{path}"
        headers = {"Accept": "application/json"}
        correlation_id = correlation_id_var.get()
        if correlation_id:
            headers[REQUEST_ID_HEADER] = correlation_id

        log = logger.bind(operation=operation, http_method=method, url=url)

        try:
            response = self._session.request(
                method,
                url,
                json=payload,
                headers=headers,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            log.warning("gateway.transport_error", error=str(exc))
            raise RemoteFailure(
                RemoteFailureKind.OTHER,
                operation,
                method=method,
                url=url,
                detail=str(exc),
            ) from exc

        if not 200 <= response.status_code < 300:
            kind = classify_status(response.status_code)
            report = log.warning if kind is RemoteFailureKind.OTHER else log.info
            report(
                "gateway.request_failed",
                status_code=response.status_code,
                remote_kind=kind.value,
            )
            raise RemoteFailure(
                kind,
                operation,
                method=method,
                url=url,
                status_code=response.status_code,
                detail=response.text[:MAX_DETAIL_LENGTH],
            )

        log.debug("gateway.request_succeeded", status_code=response.status_code)

        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            log.warning("gateway.invalid_json", status_code=response.status_code)
            raise RemoteFailure(
                RemoteFailureKind.OTHER,
                operation,
                method=method,
                url=url,
                status_code=response.status_code,
                detail="Response body is not valid JSON.",
            ) from exc

    @staticmethod
    def _parse(model: Type[M], data: Any, operation: str) -> M:
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise RemoteFailure(
                RemoteFailureKind.OTHER,
                operation,
                detail=f"Unexpected payload: {exc.error_count()} validation error(s).",
            ) from exc

    @classmethod
    def _parse_list(cls, model: Type[M], data: Any, operation: str) -> List[M]:
        if data is None:
            return []
        if not isinstance(data, list):
            raise RemoteFailure(
                RemoteFailureKind.OTHER,
                operation,
                detail=f"Expected a JSON array, got {type(data).__name__}.",
            )
        return [cls._parse(model, item, operation) for item in data]


def build_gateway() -> DataServiceGateway:
    """Gateway configured from ``DATA_SERVICE_URL`` / ``DATA_SERVICE_TIMEOUT``."""
    return DataServiceGateway(
        settings.DATA_SERVICE_URL,
        timeout=settings.DATA_SERVICE_TIMEOUT,
    )


@functools.lru_cache(maxsize=None)
def get_gateway() -> DataServiceGateway:
    """Process-wide gateway, so every view shares one connection pool."""
    return build_gateway()


@receiver(setting_changed)
def _reset_gateway(*, setting: str, **kwargs: Any) -> None:
    if setting in ("DATA_SERVICE_URL", "DATA_SERVICE_TIMEOUT"):
        get_gateway.cache_clear()
