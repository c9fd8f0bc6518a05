from django.apps import AppConfig


class TheaterConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "theater"
    verbose_name = "Theater Billing"
