from django.apps import AppConfig  # type: ignore


class RentalsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.rentals"
    verbose_name = "Rentals"

    def ready(self) -> None:
        from apps.rentals.bootstrap import bootstrap

        bootstrap()
