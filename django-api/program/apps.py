from django.apps import AppConfig
from django.conf import settings


class ProgramConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "program"
    verbose_name = "Event-day program"

    def ready(self) -> None:
        from program import signals  # noqa: F401
        from program.logging import setup_logging

        setup_logging(
            json_output=getattr(settings, "LOG_JSON", False),
            log_level=getattr(settings, "LOG_LEVEL", "INFO"),
        )
