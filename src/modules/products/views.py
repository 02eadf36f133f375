"""Product API views.

Exposes the ``ProductService`` via HTTP using DRF ViewSets.
Domain exceptions propagate to ``catalog_exception_handler``, which
translates them into HTTP status codes and the standard error body.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.dtos import parse_request
from modules.gateway.client import get_gateway
from modules.products.dtos import PriceRangeDTO, ProductRequestDTO
from modules.products.services import ProductService


class ProductViewSet(ViewSet):
    """ViewSet for Product operations.

    Uses ``ProductService`` with the HTTP data service gateway (DIP).
    """

    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(gateway=get_gateway())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/productos"""
        products = self._service.list_products()
        return Response([p.to_wire() for p in products])

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/productos/{pk}"""
        product = self._service.get_product(int(pk))
        return Response(product.to_wire())

    @action(detail=False, methods=["get"], url_path=r"categoria/(?P<nombre>[^/]+)")
    def by_category(self, request: Request, nombre: str | None = None) -> Response:
        """GET /api/productos/categoria/{nombre}"""
        products = self._service.list_products_by_category(nombre)
        return Response([p.to_wire() for p in products])

    @action(detail=False, methods=["get"], url_path="filtros")
    def filter_by_price(self, request: Request) -> Response:
        """GET /api/productos/filtros?minPrice=&maxPrice="""
        params = {
            key: value
            for key, value in request.query_params.items()
            if key in ("minPrice", "maxPrice") and value != ""
        }
        price_range = parse_request(PriceRangeDTO, params)
        products = self._service.filter_products_by_price(price_range)
        return Response([p.to_wire() for p in products])

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/productos"""
        dto = parse_request(ProductRequestDTO, request.data)
        product = self._service.create_product(dto)
        return Response(product.to_wire(), status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/productos/{pk}"""
        dto = parse_request(ProductRequestDTO, request.data)
        product = self._service.update_product(int(pk), dto)
        return Response(product.to_wire())

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/productos/{pk}"""
        self._service.delete_product(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
