# PN/PN/urls.py
# ─────────────────────────────────────────────────────────────────────────────
# Назначение: корневые URL-маршруты проекта + подключение debug_toolbar в Dev
# ─────────────────────────────────────────────────────────────────────────────

from django.contrib import admin            # админка Django
from django.urls import path, include       # функции для описания маршрутов
from django.conf import settings            # доступ к settings для проверки DEBUG

urlpatterns = [
    path("admin/", admin.site.urls),                                     # маршрут в админку
    path("", include(("pagenav.urls", "pagenav"), namespace="pagenav")),  # маршруты приложения
]

# Подключаем URL-ы тулбара только если включён DEBUG и тулбар активирован
if settings.DEBUG and getattr(settings, "ENABLE_DEBUG_TOOLBAR", True):
    urlpatterns = [path("__debug__/", include("debug_toolbar.urls"))] + urlpatterns
