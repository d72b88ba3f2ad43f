from django.apps import AppConfig


class SixesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "SIXES"

    def ready(self):
        # Import signals so receivers are registered
        from . import signals   # noqa: F401
