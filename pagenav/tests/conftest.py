# PN/pagenav/tests/conftest.py
import pytest
from rest_framework.test import APIClient

from pagenav.services.config import PaginationConfig


@pytest.fixture(autouse=True)
def _db(db):
    """Автоматически включаем БД для всех тестов в этом пакете."""
    pass


@pytest.fixture
def api_client() -> APIClient:
    """DRF-клиент без авторизации (API контрола публичное)."""
    return APIClient()


@pytest.fixture
def config() -> PaginationConfig:
    """Конфиг по умолчанию: padding=3, first есть, last нет."""
    return PaginationConfig()


@pytest.fixture
def pagenav_settings(settings):
    """Сбрасываем settings.PAGENAV к дефолтам, тесты правят его точечно."""
    settings.PAGENAV = {"PADDING": 3, "SHOW_FIRST": True, "SHOW_LAST": False, "THEME": {}}
    return settings
