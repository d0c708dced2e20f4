"""Admin registration for rentals."""

from __future__ import annotations

from django.contrib import admin

from .models import Rental


@admin.register(Rental)
class RentalAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "vehicle",
        "client",
        "start_date",
        "end_date",
        "charge",
        "is_active",
        "created_at",
    )
    list_filter = ("is_active", "start_date", "end_date")
    search_fields = ("vehicle__chassis_number", "client__email")
    readonly_fields = (
        "id",
        "vehicle",
        "client",
        "start_date",
        "end_date",
        "charge",
        "is_active",
        "created_at",
        "updated_at",
    )

    def has_add_permission(self, request):  # type: ignore
        return False

    def has_delete_permission(self, request, obj=None):  # type: ignore
        return False
