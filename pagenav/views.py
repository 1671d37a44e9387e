# Project/pagenav/views.py
from typing import Any, Dict, List

from django.conf import settings
from django.core.paginator import Paginator
from django.views.generic import TemplateView

from .forms import PER_CHOICES, PageQueryForm
from .services.controller import PaginationController


def demo_items() -> List[str]:
    """Результаты для демо-страницы: просто нумерованные строки в памяти."""
    count = getattr(settings, "PAGENAV_DEMO_ITEMS", 0)
    return [f"Результат {i}" for i in range(1, count + 1)]


class ResultsView(TemplateView):
    template_name = "pagenav/results.html"

    def get_items(self) -> List[str]:
        return demo_items()

    def get_context_data(self, **kwargs: Any) -> Dict[str, Any]:
        ctx = super().get_context_data(**kwargs)

        form = PageQueryForm(self.request.GET)
        per = form.per_page()

        paginator = Paginator(self.get_items(), per)
        # у пустого списка Paginator всё равно считает 1 страницу, а нам нужно 0
        nb_pages = paginator.num_pages if paginator.count else 0
        controller = PaginationController(nb_pages, page=form.page_index())

        items: List[str] = []
        first_number = 1
        if nb_pages:
            page_obj = paginator.page(controller.page + 1)
            items = list(page_obj.object_list)
            first_number = page_obj.start_index()

        ctx.update(
            title="Результаты",
            items=items,
            first_number=first_number,
            page=controller.page,
            nb_pages=controller.nb_pages,
            per=per,
            per_choices=PER_CHOICES,
        )
        return ctx
