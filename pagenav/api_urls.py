# Project/pagenav/api_urls.py
# ─────────────────────────────────────────────────────────────────────────────
# Назначение: маршруты JSON API контрола пагинации
# ─────────────────────────────────────────────────────────────────────────────

from django.urls import path  # функции маршрутизации
from . import api_views

urlpatterns = [
    path("window/", api_views.WindowView.as_view(), name="window"),  # окно страниц
    path("links/",  api_views.LinksView.as_view(),  name="links"),   # ссылки контрола
    path("click/",  api_views.ClickView.as_view(),  name="click"),   # обработка клика
]
