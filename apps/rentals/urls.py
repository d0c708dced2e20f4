"""URL routing for rentals."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import RentalViewSet

router = SimpleRouter()
router.register(r"", RentalViewSet, basename="rental")

urlpatterns = [
    path("", include(router.urls)),
]
