from django.apps import AppConfig


class AgendaConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "agenda"

    def ready(self) -> None:
        from agenda import signals  # noqa: F401
