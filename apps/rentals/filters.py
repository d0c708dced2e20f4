"""FilterSet for listing rentals."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Rental


class RentalFilterSet(django_filters.FilterSet):
    vehicle = django_filters.UUIDFilter(field_name="vehicle_id")
    client = django_filters.UUIDFilter(field_name="client_id")
    is_active = django_filters.BooleanFilter(field_name="is_active")
    # rentals touching the given day, boundaries included
    on_date = django_filters.DateFilter(method="filter_on_date")

    class Meta:
        model = Rental
        fields = ["vehicle", "client", "is_active"]

    def filter_on_date(self, queryset, name, value):  # type: ignore
        return queryset.filter(start_date__lte=value, end_date__gte=value)
