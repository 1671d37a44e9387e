from django import template

from pagenav.services.config import PaginationConfig
from pagenav.services.controller import page_url
from pagenav.services.links import build_links
from pagenav.services.window import compute_window

register = template.Library()


def _as_int(value):
    # значения из шаблона могут прийти строкой (например, из request.GET)
    return None if value is None else int(value)


@register.simple_tag
def page_window(page, nb_pages, padding=None):
    """
    Возвращает список индексов страниц (0-based) длиной ≤ 2*padding + 1,
    центрируя текущую страницу где возможно. padding по умолчанию из settings.PAGENAV.
    """
    config = PaginationConfig.from_settings(padding=_as_int(padding))
    return compute_window(int(page), int(nb_pages), config.padding)


@register.inclusion_tag("pagenav/pagination.html", takes_context=True)
def pagination(context, page, nb_pages, padding=None, show_first=None, show_last=None, param="page"):
    """
    Рисует контрол пагинации. Ссылки ведут на текущий URL с ?<param>=N (1-based),
    остальные GET-параметры сохраняются. При nb_pages == 0 ничего не выводит.
    """
    config = PaginationConfig.from_settings(
        padding=_as_int(padding), show_first=show_first, show_last=show_last,
    )
    request = context.get("request")
    create_url = (lambda target: page_url(request, target, param)) if request is not None else None
    return {
        "links": build_links(int(page), int(nb_pages), config, create_url),
        "theme": config.theme,
    }
