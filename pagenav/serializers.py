# Project/pagenav/serializers.py
# ─────────────────────────────────────────────────────────────────────────────
# Назначение: DRF-сериализаторы для входных параметров API и ссылок контрола
# ─────────────────────────────────────────────────────────────────────────────

from rest_framework import serializers

from .services.config import MAX_PADDING


class WindowQuerySerializer(serializers.Serializer):
    """Параметры окна: ?page=&nb_pages=&padding= (все неотрицательные, padding не больше MAX_PADDING)."""
    page = serializers.IntegerField(min_value=0, default=0)
    nb_pages = serializers.IntegerField(min_value=0)
    padding = serializers.IntegerField(min_value=0, max_value=MAX_PADDING, required=False)


class LinksQuerySerializer(WindowQuerySerializer):
    """То же + переключатели first/last; None значит «как в settings»."""
    show_first = serializers.BooleanField(required=False, allow_null=True, default=None)
    show_last = serializers.BooleanField(required=False, allow_null=True, default=None)


class ClickSerializer(serializers.Serializer):
    """Клик по ссылке: состояние контрола, целевая страница и модификаторы."""
    page = serializers.IntegerField(min_value=0, default=0)
    nb_pages = serializers.IntegerField(min_value=0)
    target = serializers.IntegerField()
    button = serializers.IntegerField(min_value=0, default=0)
    shift_key = serializers.BooleanField(default=False)
    ctrl_key = serializers.BooleanField(default=False)
    alt_key = serializers.BooleanField(default=False)
    meta_key = serializers.BooleanField(default=False)


class PageLinkSerializer(serializers.Serializer):
    """Одна ссылка контрола (read-only)."""
    kind = serializers.CharField(source="kind.value")
    page = serializers.IntegerField()
    label = serializers.CharField()
    aria_label = serializers.CharField()
    url = serializers.CharField()
    is_disabled = serializers.BooleanField()
    is_active = serializers.BooleanField()
    key = serializers.CharField()
    css_class = serializers.CharField()
    link_class = serializers.CharField()
