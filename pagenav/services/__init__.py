from .window import PaginationError, compute_window, padding_left, pages_displayed_count
from .config import LinkKind, LinkLabels, PaginationConfig, PaginationTheme, default_labels
from .links import LinkState, PageLink, build_links, classify_link
from .controller import ClickEvent, PaginationController, is_modified_click, page_url

__all__ = [
    "PaginationError",
    "compute_window",
    "padding_left",
    "pages_displayed_count",
    "LinkKind",
    "LinkLabels",
    "PaginationConfig",
    "PaginationTheme",
    "default_labels",
    "LinkState",
    "PageLink",
    "build_links",
    "classify_link",
    "ClickEvent",
    "PaginationController",
    "is_modified_click",
    "page_url",
]
