"""Admin registration for vehicles."""

from __future__ import annotations

from django.contrib import admin

from .models import Vehicle


@admin.register(Vehicle)
class VehicleAdmin(admin.ModelAdmin):
    list_display = ("chassis_number", "make", "model", "daily_rate", "is_active", "created_at")
    list_filter = ("is_active", "make")
    search_fields = ("chassis_number", "make", "model")
    readonly_fields = ("id", "chassis_number", "is_active", "created_at", "updated_at")

    def has_delete_permission(self, request, obj=None):  # type: ignore
        return False
