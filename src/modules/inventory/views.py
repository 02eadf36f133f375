"""Inventory report API views.

Exposes the ``InventoryService`` under ``/api/reportes``.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.gateway.client import get_gateway
from modules.inventory.dtos import MovementDTO
from modules.inventory.rules import parse_quantity
from modules.inventory.services import InventoryService


class InventoryViewSet(ViewSet):
    """ViewSet for inventory reports, quantity updates and movements."""

    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = InventoryService(gateway=get_gateway())

    @action(detail=False, methods=["get"], url_path="stock-bajo")
    def low_stock(self, request: Request) -> Response:
        """GET /api/reportes/stock-bajo"""
        return Response([i.to_wire() for i in self._service.list_low_stock()])

    @action(detail=False, methods=["get"], url_path=r"producto/(?P<producto_id>\d+)")
    def by_product(self, request: Request, producto_id: str | None = None) -> Response:
        """GET /api/reportes/producto/{productoId}"""
        return Response(self._service.get_inventory(int(producto_id)).to_wire())

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/reportes/{productoId}  body: ``{"cantidad": n}``"""
        data = request.data if isinstance(request.data, dict) else {}
        quantity = parse_quantity(data.get("cantidad"))
        inventory = self._service.update_quantity(int(pk), quantity)
        return Response(inventory.to_wire())

    @action(detail=False, methods=["post"], url_path="movimientos")
    def movements(self, request: Request) -> Response:
        """POST /api/reportes/movimientos"""
        movement = MovementDTO.from_payload(request.data)
        inventory = self._service.register_movement(movement)
        return Response(inventory.to_wire(), status=status.HTTP_201_CREATED)
