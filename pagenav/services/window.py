# Project/pagenav/services/window.py
from __future__ import annotations

import logging
from typing import List

logger = logging.getLogger(__name__)


class PaginationError(ValueError):
    """Некорректные параметры пагинации (отрицательные total/padding и т.п.)."""


def pages_displayed_count(padding: int, total: int) -> int:
    """Сколько номеров страниц поместится в окно."""
    return min(2 * padding + 1, total)


def padding_left(page: int, padding: int, total: int, displayed: int) -> int:
    # у начала диапазона окно прижимается влево: слева меньше страниц, чем padding
    if page <= padding:
        return page
    # у конца диапазона левый отступ забирает «лишнее», что не влезло справа
    if page >= total - padding:
        return displayed - (total - page)
    return padding


def compute_window(page: int, total: int, padding: int = 3) -> List[int]:
    """Возвращает окно номеров страниц вокруг текущей.

    Parameters
    ----------
    page : int
        Текущая страница (0-based). Значение вне [0, total) прижимается к краю.
    total : int
        Общее число страниц, >= 0.
    padding : int, optional
        Сколько ссылок показывать с каждой стороны от текущей, по умолчанию 3.

    Returns
    -------
    List[int]
        Непрерывный возрастающий список индексов длиной min(2*padding + 1, total).

    Raises
    ------
    PaginationError
        Если total или padding отрицательные.
    """
    if total < 0:
        raise PaginationError(f"total must be >= 0, got {total}")
    if padding < 0:
        raise PaginationError(f"padding must be >= 0, got {padding}")

    displayed = pages_displayed_count(padding, total)
    if displayed == total:
        # все страницы влезают: окно не «ездит»
        return list(range(total))

    if not 0 <= page < total:
        clamped = max(0, min(page, total - 1))
        logger.debug("Page %s out of range [0, %s), clamped to %s", page, total, clamped)
        page = clamped

    left = padding_left(page, padding, total, displayed)
    right = displayed - left
    return list(range(page - left, page + right))
