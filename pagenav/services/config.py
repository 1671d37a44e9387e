# Project/pagenav/services/config.py
# ─────────────────────────────────────────────────────────────────────────────
# Назначение: конфигурация контрола пагинации (padding, видимость first/last,
# подписи ссылок и CSS-классы темы). Собирается один раз из settings.PAGENAV.
# ─────────────────────────────────────────────────────────────────────────────
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Dict, Mapping, Optional

from django.conf import settings
from django.utils.translation import gettext

from .window import PaginationError

logger = logging.getLogger(__name__)

Label = Callable[[int], str]

# больше 2*MAX_PADDING + 1 ссылок контрол не рисует
MAX_PADDING = 100


class LinkKind(enum.Enum):
    FIRST = "first"
    PREVIOUS = "previous"
    PAGE = "page"
    NEXT = "next"
    LAST = "last"


@dataclass(frozen=True)
class LinkLabels:
    """Видимая подпись и aria-label для одного вида ссылки (обе от номера страницы)."""
    label: Label
    aria_label: Label


def _const(text: str) -> Label:
    return lambda page: text


def _translated(msgid: str) -> Label:
    # перевод берём в момент рендера, чтобы учитывался активный язык запроса
    return lambda page: gettext(msgid)


def default_labels() -> Dict[LinkKind, LinkLabels]:
    return {
        LinkKind.FIRST: LinkLabels(_const("«"), _translated("First page")),
        LinkKind.PREVIOUS: LinkLabels(_const("‹"), _translated("Previous page")),
        LinkKind.PAGE: LinkLabels(
            lambda page: str(page + 1),
            lambda page: gettext("Page %(number)s") % {"number": page + 1},
        ),
        LinkKind.NEXT: LinkLabels(_const("›"), _translated("Next page")),
        LinkKind.LAST: LinkLabels(_const("»"), _translated("Last page")),
    }


@dataclass(frozen=True)
class PaginationTheme:
    """Имена CSS-классов для разметки контрола."""
    root: str = "Pagination"
    first: str = "Pagination__first"
    last: str = "Pagination__last"
    previous: str = "Pagination__previous"
    next: str = "Pagination__next"
    page: str = "Pagination__page"
    item: str = "Pagination__item"
    item_active: str = "Pagination__item--active"
    item_disabled: str = "Pagination__item--disabled"
    link: str = "Pagination__link"

    def for_kind(self, kind: LinkKind) -> str:
        return getattr(self, kind.value)

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> "PaginationTheme":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise PaginationError(f"Unknown theme keys: {', '.join(sorted(unknown))}")
        return cls(**data)


@dataclass(frozen=True)
class PaginationConfig:
    """Настройки контрола.

    Значения по умолчанию: padding=3, first показываем, last прячем,
    подписи из default_labels(), классы из PaginationTheme().
    """
    padding: int = 3
    show_first: bool = True
    show_last: bool = False
    labels: Mapping[LinkKind, LinkLabels] = field(default_factory=default_labels)
    theme: PaginationTheme = field(default_factory=PaginationTheme)

    def __post_init__(self):
        if not isinstance(self.padding, int) or not 0 <= self.padding <= MAX_PADDING:
            raise PaginationError(
                f"padding must be an integer in [0, {MAX_PADDING}], got {self.padding!r}"
            )
        missing = [k.value for k in LinkKind if k not in self.labels]
        if missing:
            raise PaginationError(f"Labels missing for: {', '.join(missing)}")

    def labels_for(self, kind: LinkKind) -> LinkLabels:
        return self.labels[kind]

    def with_labels(self, **overrides: LinkLabels) -> "PaginationConfig":
        """Копия конфига с подменёнными подписями: with_labels(next=LinkLabels(...))."""
        labels = dict(self.labels)
        for name, value in overrides.items():
            labels[LinkKind(name)] = value
        return replace(self, labels=labels)

    @classmethod
    def from_settings(cls, **overrides: Any) -> "PaginationConfig":
        """Собираем конфиг: дефолты -> settings.PAGENAV -> явные overrides.

        None в overrides означает «не задано» (удобно для тегов шаблона).
        """
        conf: Dict[str, Any] = getattr(settings, "PAGENAV", {}) or {}
        theme_conf: Optional[Mapping[str, str]] = conf.get("THEME")

        values: Dict[str, Any] = {
            "padding": conf.get("PADDING", 3),
            "show_first": conf.get("SHOW_FIRST", True),
            "show_last": conf.get("SHOW_LAST", False),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})

        try:
            if theme_conf and "theme" not in values:
                values["theme"] = PaginationTheme.from_dict(theme_conf)
            return cls(**values)
        except PaginationError:
            logger.warning("Rejected pagination config: %s", values)
            raise
