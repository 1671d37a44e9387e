# Project/pagenav/services/links.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from .config import LinkKind, PaginationConfig
from .window import PaginationError, compute_window

CreateURL = Callable[[int], str]


@dataclass(frozen=True)
class LinkState:
    is_disabled: bool
    is_active: bool


@dataclass(frozen=True)
class PageLink:
    """Одна ссылка контрола, готовая к выводу в шаблон или JSON."""
    kind: LinkKind
    page: int
    label: str
    aria_label: str
    url: str
    is_disabled: bool
    is_active: bool
    key: str
    css_class: str
    link_class: str


def classify_link(target_page: int, current_page: int, total: int,
                  is_active_candidate: bool = False) -> LinkState:
    """Активна ли ссылка и нужно ли её выключить.

    Ссылка на текущую страницу выключена, если это не сама «активная» цифра.
    Цели вне [0, total) выключены всегда.
    """
    is_active = bool(is_active_candidate) and target_page == current_page
    is_disabled = (
        (not is_active and target_page == current_page)
        or target_page < 0
        or target_page >= total
    )
    return LinkState(is_disabled=is_disabled, is_active=is_active)


def _make_link(kind: LinkKind, target: int, page: int, nb_pages: int,
               config: PaginationConfig, create_url: Optional[CreateURL],
               is_active_candidate: bool = False) -> PageLink:
    state = classify_link(target, page, nb_pages, is_active_candidate)
    labels = config.labels_for(kind)
    theme = config.theme

    classes = [theme.item, theme.for_kind(kind)]
    if state.is_active:
        classes.append(theme.item_active)
    if state.is_disabled:
        classes.append(theme.item_disabled)

    url = create_url(target) if create_url is not None and not state.is_disabled else "#"
    return PageLink(
        kind=kind,
        page=target,
        label=labels.label(target),
        aria_label=labels.aria_label(target),
        url=url,
        is_disabled=state.is_disabled,
        is_active=state.is_active,
        key=f"{kind.value}{target}",
        css_class=" ".join(c for c in classes if c),
        link_class=theme.link,
    )


def build_links(page: int, nb_pages: int, config: Optional[PaginationConfig] = None,
                create_url: Optional[CreateURL] = None) -> List[PageLink]:
    """Полный набор ссылок: first, previous, окно страниц, next, last.

    Пустой список при nb_pages == 0: контрол не рисуется.
    page вне [0, nb_pages) прижимается к ближайшей границе.
    """
    if nb_pages < 0:
        raise PaginationError(f"nb_pages must be >= 0, got {nb_pages}")
    if nb_pages == 0:
        return []
    config = config or PaginationConfig()
    # страница вне диапазона считается крайней: стрелки и активная цифра считаются от неё
    page = max(0, min(page, nb_pages - 1))

    links: List[PageLink] = []
    if config.show_first:
        links.append(_make_link(LinkKind.FIRST, 0, page, nb_pages, config, create_url))
    links.append(_make_link(LinkKind.PREVIOUS, page - 1, page, nb_pages, config, create_url))
    for number in compute_window(page, nb_pages, config.padding):
        links.append(_make_link(LinkKind.PAGE, number, page, nb_pages, config, create_url,
                                is_active_candidate=number == page))
    links.append(_make_link(LinkKind.NEXT, page + 1, page, nb_pages, config, create_url))
    if config.show_last:
        links.append(_make_link(LinkKind.LAST, nb_pages - 1, page, nb_pages, config, create_url))
    return links
