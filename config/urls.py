"""URL configuration for the fleet rental project.

The `urlpatterns` list routes URLs to views. It includes the Django admin
and the Django Rest Framework routers of each domain app.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/vehicles/', include('apps.vehicles.urls')),
    path('api/v1/clients/', include('apps.clients.urls')),
    path('api/v1/rentals/', include('apps.rentals.urls')),
]
