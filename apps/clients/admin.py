"""Admin registration for clients."""

from __future__ import annotations

from django.contrib import admin

from .models import Client


@admin.register(Client)
class ClientAdmin(admin.ModelAdmin):
    list_display = ("email", "first_name", "last_name", "is_active", "created_at")
    list_filter = ("is_active",)
    search_fields = ("email", "first_name", "last_name")
    readonly_fields = ("id", "email", "is_active", "created_at", "updated_at")

    def has_delete_permission(self, request, obj=None):  # type: ignore
        return False
