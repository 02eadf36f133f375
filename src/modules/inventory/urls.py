"""Inventory report URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.inventory.views import InventoryViewSet

router = SimpleRouter(trailing_slash=False)
router.register("reportes", InventoryViewSet, basename="reporte")

urlpatterns = router.urls
