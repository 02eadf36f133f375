"""Category API views.

Exposes the ``CategoryService`` via HTTP using DRF ViewSets.  Categories
are addressed by numeric id for CRUD and by name for their products and
statistics.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.categories.dtos import CategoryDTO
from modules.categories.services import CategoryService
from modules.core.dtos import parse_request
from modules.gateway.client import get_gateway


class CategoryViewSet(ViewSet):
    """ViewSet for Category operations."""

    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CategoryService(gateway=get_gateway())

    def list(self, request: Request) -> Response:
        """GET /api/categorias"""
        return Response([c.to_wire() for c in self._service.list_categories()])

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/categorias/{pk}"""
        return Response(self._service.get_category(int(pk)).to_wire())

    def create(self, request: Request) -> Response:
        """POST /api/categorias"""
        dto = parse_request(CategoryDTO, request.data)
        category = self._service.create_category(dto)
        return Response(category.to_wire(), status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/categorias/{pk}"""
        dto = parse_request(CategoryDTO, request.data)
        category = self._service.update_category(int(pk), dto)
        return Response(category.to_wire())

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/categorias/{pk}"""
        self._service.delete_category(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["get"], url_path=r"(?P<nombre>[^/]+)/productos")
    def products(self, request: Request, nombre: str | None = None) -> Response:
        """GET /api/categorias/{nombre}/productos"""
        products = self._service.get_category_products(nombre)
        return Response([p.to_wire() for p in products])

    @action(detail=False, methods=["get"], url_path=r"(?P<nombre>[^/]+)/estadisticas")
    def statistics(self, request: Request, nombre: str | None = None) -> Response:
        """GET /api/categorias/{nombre}/estadisticas"""
        return Response(self._service.get_category_statistics(nombre).as_dict())
