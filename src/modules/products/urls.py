"""Product URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.products.views import ProductViewSet

router = SimpleRouter(trailing_slash=False)
router.register("productos", ProductViewSet, basename="producto")

urlpatterns = router.urls
