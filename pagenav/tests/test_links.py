import pytest

from pagenav.services.config import LinkKind, LinkLabels, PaginationConfig
from pagenav.services.links import build_links, classify_link
from pagenav.services.window import PaginationError


def test_out_of_range_target_always_disabled():
    for current in range(5):
        for candidate in (True, False):
            assert classify_link(-1, current, 5, candidate).is_disabled
            assert classify_link(5, current, 5, candidate).is_disabled
            assert classify_link(99, current, 5, candidate).is_disabled


def test_active_page_link():
    state = classify_link(2, 2, 5, is_active_candidate=True)
    assert state.is_active
    assert not state.is_disabled


def test_link_to_current_page_is_disabled_unless_active():
    # first/previous и т.п., которые ведут на текущую страницу
    state = classify_link(2, 2, 5)
    assert state.is_disabled
    assert not state.is_active


def test_other_page_enabled():
    state = classify_link(3, 2, 5, is_active_candidate=True)
    assert not state.is_active
    assert not state.is_disabled


def test_no_links_without_pages(config):
    assert build_links(0, 0, config) == []


def test_negative_nb_pages_rejected(config):
    with pytest.raises(PaginationError):
        build_links(0, -1, config)


def test_links_on_first_page(config):
    links = build_links(0, 10, config)
    kinds = [link.kind for link in links]
    assert kinds == [LinkKind.FIRST, LinkKind.PREVIOUS] + [LinkKind.PAGE] * 7 + [LinkKind.NEXT]

    first, previous = links[0], links[1]
    assert first.page == 0 and first.is_disabled and not first.is_active
    assert previous.page == -1 and previous.is_disabled

    pages = [link for link in links if link.kind is LinkKind.PAGE]
    assert [link.page for link in pages] == [0, 1, 2, 3, 4, 5, 6]
    assert [link.is_active for link in pages] == [True] + [False] * 6
    assert not any(link.is_disabled for link in pages)

    nxt = links[-1]
    assert nxt.page == 1 and not nxt.is_disabled


def test_links_on_last_page_with_last_link():
    links = build_links(9, 10, PaginationConfig(show_last=True))
    by_kind = {link.kind: link for link in links if link.kind is not LinkKind.PAGE}

    assert not by_kind[LinkKind.FIRST].is_disabled
    assert by_kind[LinkKind.PREVIOUS].page == 8
    assert by_kind[LinkKind.NEXT].page == 10 and by_kind[LinkKind.NEXT].is_disabled
    assert by_kind[LinkKind.LAST].page == 9 and by_kind[LinkKind.LAST].is_disabled
    assert [link.page for link in links if link.kind is LinkKind.PAGE] == [3, 4, 5, 6, 7, 8, 9]


def test_first_link_hidden():
    links = build_links(4, 10, PaginationConfig(show_first=False))
    assert links[0].kind is LinkKind.PREVIOUS


def test_default_labels(config):
    links = {link.key: link for link in build_links(1, 3, config)}
    assert links["first0"].label == "«"
    assert links["first0"].aria_label == "First page"
    assert links["previous0"].label == "‹"
    assert links["previous0"].aria_label == "Previous page"
    assert links["page1"].label == "2"
    assert links["page1"].aria_label == "Page 2"
    assert links["next2"].label == "›"
    assert links["next2"].aria_label == "Next page"


def test_custom_labels(config):
    custom = config.with_labels(next=LinkLabels(lambda p: "Дальше", lambda p: f"К странице {p + 1}"))
    nxt = build_links(0, 3, custom)[-1]
    assert nxt.label == "Дальше"
    assert nxt.aria_label == "К странице 2"


def test_urls_only_for_enabled_links(config):
    links = build_links(0, 3, config, create_url=lambda p: f"/?page={p + 1}")
    urls = {link.key: link.url for link in links}
    assert urls["first0"] == "#"
    assert urls["previous-1"] == "#"
    assert urls["page0"] == "/?page=1"
    assert urls["page2"] == "/?page=3"
    assert urls["next1"] == "/?page=2"


def test_without_create_url_everything_points_to_hash(config):
    assert {link.url for link in build_links(1, 3, config)} == {"#"}


def test_css_classes(config):
    links = {link.key: link for link in build_links(0, 3, config)}
    assert links["page0"].css_class == "Pagination__item Pagination__page Pagination__item--active"
    assert links["page1"].css_class == "Pagination__item Pagination__page"
    assert links["previous-1"].css_class == "Pagination__item Pagination__previous Pagination__item--disabled"
    assert links["page1"].link_class == "Pagination__link"


def test_keys_unique():
    links = build_links(5, 20, PaginationConfig(show_last=True))
    keys = [link.key for link in links]
    assert len(keys) == len(set(keys))


def test_out_of_range_page_is_treated_as_last(config):
    links = build_links(15, 10, config)
    by_kind = {link.kind: link for link in links if link.kind is not LinkKind.PAGE}
    pages = [link for link in links if link.kind is LinkKind.PAGE]

    assert [link.page for link in pages] == [3, 4, 5, 6, 7, 8, 9]
    assert [link.page for link in pages if link.is_active] == [9]
    # назад можно, вперёд некуда
    assert by_kind[LinkKind.PREVIOUS].page == 8 and not by_kind[LinkKind.PREVIOUS].is_disabled
    assert by_kind[LinkKind.NEXT].page == 10 and by_kind[LinkKind.NEXT].is_disabled


def test_negative_page_is_treated_as_first(config):
    links = build_links(-4, 10, config)
    assert [link.page for link in links if link.is_active] == [0]
    assert links[-1].kind is LinkKind.NEXT and links[-1].page == 1 and not links[-1].is_disabled
