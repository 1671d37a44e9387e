# Project/pagenav/api_views.py
# ─────────────────────────────────────────────────────────────────────────────
# Назначение: JSON API контрола пагинации для фронта (окно, ссылки, клики)
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import ClickSerializer, LinksQuerySerializer, PageLinkSerializer, WindowQuerySerializer
from .services.config import PaginationConfig
from .services.controller import ClickEvent, PaginationController


class WindowView(APIView):
    """GET: окно страниц вокруг текущей.

    Параметры: ?page= (0-based), ?nb_pages=, ?padding= (по умолчанию из settings).
    Ответ: { "page": ..., "nb_pages": ..., "padding": ..., "pages": [...] }
    """
    permission_classes = [permissions.AllowAny]

    def get(self, request, *args, **kwargs):
        serializer = WindowQuerySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        padding = data.get("padding")
        if padding is None:
            padding = PaginationConfig.from_settings().padding

        controller = PaginationController(data["nb_pages"], page=data["page"])
        return Response({
            "page": controller.page,
            "nb_pages": controller.nb_pages,
            "padding": padding,
            "pages": controller.window(padding),
        })


class LinksView(APIView):
    """GET: все ссылки контрола с флагами disabled/active. При nb_pages=0 список пустой."""
    permission_classes = [permissions.AllowAny]

    def get(self, request, *args, **kwargs):
        serializer = LinksQuerySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        config = PaginationConfig.from_settings(
            padding=data.get("padding"),
            show_first=data.get("show_first"),
            show_last=data.get("show_last"),
        )
        controller = PaginationController(data["nb_pages"], page=data["page"])
        links = controller.links(config)
        return Response({
            "page": controller.page,
            "nb_pages": controller.nb_pages,
            "links": PageLinkSerializer(links, many=True).data,
        })


class ClickView(APIView):
    """POST: клик по ссылке.

    Клик с модификатором (shift/ctrl/alt/meta) или не левой кнопкой не меняет страницу:
    { "handled": false }, браузер делает своё. Иначе refine(target) и { "handled": true }.
    """
    permission_classes = [permissions.AllowAny]

    def post(self, request, *args, **kwargs):
        serializer = ClickSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        controller = PaginationController(data["nb_pages"], page=data["page"])
        handled = controller.handle_click(data["target"], ClickEvent.from_mapping(data))
        return Response({"handled": handled, "page": controller.page})
