# Project/pagenav/services/controller.py
# ─────────────────────────────────────────────────────────────────────────────
# Назначение: владелец состояния пагинации (текущая страница + число страниц),
# мутатор refine() и обработка кликов по ссылкам контрола.
# ─────────────────────────────────────────────────────────────────────────────
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional

from django.http import HttpRequest

from .config import PaginationConfig
from .links import CreateURL, PageLink, build_links
from .window import PaginationError, compute_window

logger = logging.getLogger(__name__)

PRIMARY_BUTTON = 0


@dataclass(frozen=True)
class ClickEvent:
    """Клик по ссылке: кнопка мыши и зажатые модификаторы."""
    button: int = PRIMARY_BUTTON
    shift_key: bool = False
    ctrl_key: bool = False
    alt_key: bool = False
    meta_key: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ClickEvent":
        return cls(
            button=int(data.get("button") or PRIMARY_BUTTON),
            shift_key=bool(data.get("shift_key")),
            ctrl_key=bool(data.get("ctrl_key")),
            alt_key=bool(data.get("alt_key")),
            meta_key=bool(data.get("meta_key")),
        )


def is_modified_click(event: ClickEvent) -> bool:
    """True, если клик с модификатором или не основной кнопкой (браузер обработает сам)."""
    return bool(
        event.button != PRIMARY_BUTTON
        or event.shift_key
        or event.ctrl_key
        or event.alt_key
        or event.meta_key
    )


def page_url(request: HttpRequest, page: int, param: str = "page") -> str:
    """URL страницы с сохранением остальных GET-параметров (в URL номер 1-based)."""
    query = request.GET.copy()
    query[param] = str(page + 1)
    return f"{request.path}?{query.urlencode()}"


def page_from_query(raw: Optional[str]) -> int:
    """Парсим ?page= (1-based) в индекс 0-based; мусор и пустое значение дают 0."""
    try:
        return max(0, int(raw or 1) - 1)
    except (TypeError, ValueError):
        return 0


class PaginationController:
    """Текущая страница и число страниц одного контрола.

    refine() единственная точка изменения состояния. Индексы 0-based.
    """

    def __init__(self, nb_pages: int, page: int = 0,
                 on_change: Optional[Callable[[int], Any]] = None):
        if nb_pages < 0:
            raise PaginationError(f"nb_pages must be >= 0, got {nb_pages}")
        self.nb_pages = nb_pages
        self.on_change = on_change
        self.page = self._clamp(page)

    def __repr__(self) -> str:
        return f"PaginationController(page={self.page}, nb_pages={self.nb_pages})"

    @classmethod
    def from_request(cls, request: HttpRequest, nb_pages: int, param: str = "page",
                     **kwargs: Any) -> "PaginationController":
        return cls(nb_pages, page=page_from_query(request.GET.get(param)), **kwargs)

    def _clamp(self, page: int) -> int:
        if self.nb_pages == 0:
            return 0
        clamped = max(0, min(page, self.nb_pages - 1))
        if clamped != page:
            logger.debug("Page %s out of range [0, %s), clamped to %s", page, self.nb_pages, clamped)
        return clamped

    def refine(self, page: int) -> int:
        """Перейти на страницу page (с прижатием к границам). Возвращает новую страницу."""
        self.page = self._clamp(page)
        logger.debug("Refine -> page %s of %s", self.page, self.nb_pages)
        if self.on_change is not None:
            self.on_change(self.page)
        return self.page

    def handle_click(self, target_page: int, event: ClickEvent) -> bool:
        """Клик по ссылке.

        Клик с модификатором не трогаем (False: поведение браузера по умолчанию).
        Иначе один вызов refine(target_page) и True (действие по умолчанию подавлено).
        """
        if is_modified_click(event):
            return False
        self.refine(target_page)
        return True

    def window(self, padding: int = 3) -> List[int]:
        return compute_window(self.page, self.nb_pages, padding)

    def links(self, config: Optional[PaginationConfig] = None,
              create_url: Optional[CreateURL] = None) -> List[PageLink]:
        return build_links(self.page, self.nb_pages, config, create_url)
