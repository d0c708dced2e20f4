"""URL routing for clients."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import ClientViewSet

router = SimpleRouter()
router.register(r"", ClientViewSet, basename="client")

urlpatterns = [
    path("", include(router.urls)),
]
