from django import forms

PER_CHOICES = [10, 20, 50]
DEFAULT_PER = 20


class PageQueryForm(forms.Form):
    """Независимая форма (не связана с моделью): разбор ?page= и ?per= из GET.

    Невалидное поле просто не попадает в cleaned_data, вместо него берём дефолт.
    """
    page = forms.IntegerField(min_value=1, required=False, label="Страница")
    per = forms.TypedChoiceField(
        choices=[(p, p) for p in PER_CHOICES],
        coerce=int,
        required=False,
        empty_value=DEFAULT_PER,
        label="На странице",
    )

    def page_index(self) -> int:
        """0-based индекс запрошенной страницы."""
        self.is_valid()
        page = self.cleaned_data.get("page")
        return page - 1 if page else 0

    def per_page(self) -> int:
        self.is_valid()
        return self.cleaned_data.get("per") or DEFAULT_PER
