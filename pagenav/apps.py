# pagenav/apps.py
from django.apps import AppConfig


class PagenavConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "pagenav"
    verbose_name = "Пагинация"

    def ready(self):
        # Проверяем settings.PAGENAV при старте: кривой padding/тема падают сразу, а не на первом рендере
        from .services.config import PaginationConfig

        PaginationConfig.from_settings()
