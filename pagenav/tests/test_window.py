import pytest

from pagenav.services.window import PaginationError, compute_window, padding_left, pages_displayed_count


def test_window_is_contiguous_and_sized_for_every_valid_input():
    """Для всех 0 <= page < total: непрерывно, по возрастанию, длина min(2p+1, total)."""
    for total in range(0, 16):
        for padding in range(0, 7):
            for page in range(max(total, 1)):
                pages = compute_window(page, total, padding)
                assert len(pages) == min(2 * padding + 1, total)
                assert all(0 <= p < total for p in pages)
                assert all(b == a + 1 for a, b in zip(pages, pages[1:]))
                if total:
                    assert page in pages


def test_start_flush():
    assert compute_window(0, 10, 3) == [0, 1, 2, 3, 4, 5, 6]
    assert compute_window(1, 10, 3) == [0, 1, 2, 3, 4, 5, 6]


def test_end_flush():
    assert compute_window(9, 10, 3) == [3, 4, 5, 6, 7, 8, 9]
    assert compute_window(8, 10, 3) == [3, 4, 5, 6, 7, 8, 9]


def test_boundary_ties():
    # page == padding: прижато к началу, совпадает с центровкой
    assert compute_window(3, 10, 3) == [0, 1, 2, 3, 4, 5, 6]
    # page == total - padding: прижато к концу
    assert compute_window(7, 10, 3) == [3, 4, 5, 6, 7, 8, 9]


def test_centered_window():
    for page in range(3, 17):
        assert compute_window(page, 20, 3) == list(range(page - 3, page + 4))


def test_full_fit_shows_every_page():
    assert compute_window(2, 5, 3) == [0, 1, 2, 3, 4]
    assert compute_window(6, 7, 3) == [0, 1, 2, 3, 4, 5, 6]


def test_zero_total_is_empty():
    assert compute_window(0, 0, 3) == []
    assert compute_window(0, 0, 0) == []


def test_zero_padding_is_current_page_only():
    assert compute_window(4, 10, 0) == [4]
    assert compute_window(0, 10, 0) == [0]
    assert compute_window(9, 10, 0) == [9]


def test_idempotent():
    assert compute_window(5, 42, 2) == compute_window(5, 42, 2)


def test_out_of_range_page_is_clamped():
    assert compute_window(15, 10, 3) == [3, 4, 5, 6, 7, 8, 9]
    assert compute_window(-2, 10, 3) == [0, 1, 2, 3, 4, 5, 6]


@pytest.mark.parametrize("total, padding", [(-1, 3), (10, -1)])
def test_negative_total_or_padding_rejected(total, padding):
    with pytest.raises(PaginationError):
        compute_window(0, total, padding)


def test_pagination_error_is_value_error():
    assert issubclass(PaginationError, ValueError)


def test_helpers():
    assert pages_displayed_count(3, 10) == 7
    assert pages_displayed_count(3, 4) == 4
    assert padding_left(0, 3, 10, 7) == 0
    assert padding_left(9, 3, 10, 7) == 6
    assert padding_left(5, 3, 10, 7) == 3
