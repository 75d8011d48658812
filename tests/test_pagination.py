import pytest

from pagination import Paginator


def make(n, per_page=10):
    items = list(range(1, n + 1))
    return items, Paginator(lambda: items, per_page=per_page)


def test_empty_list():
    _, pager = make(0)
    assert pager.total_pages == 1
    assert pager.items == []
    assert pager.start_index == 0
    assert pager.end_index == 0
    assert pager.visible_pages == [1]


def test_windows_and_indices():
    _, pager = make(25)
    assert pager.total_pages == 3
    assert pager.items == list(range(1, 11))
    pager.next_page()
    assert pager.items == list(range(11, 21))
    assert (pager.start_index, pager.end_index) == (11, 20)
    pager.next_page()
    assert pager.items == [21, 22, 23, 24, 25]
    assert pager.end_index == 25
    pager.next_page()
    assert pager.current_page == 3
    pager.prev_page()
    pager.prev_page()
    pager.prev_page()
    assert pager.current_page == 1


def test_go_to_page_ignores_out_of_range():
    _, pager = make(25)
    pager.go_to_page(3)
    assert pager.current_page == 3
    pager.go_to_page(0)
    pager.go_to_page(4)
    assert pager.current_page == 3


def test_shrinking_list_returns_to_first_page():
    items, pager = make(25)
    pager.go_to_page(3)
    del items[15:]
    assert pager.total_pages == 2
    assert pager.current_page == 1
    assert pager.items == list(range(1, 11))


def test_growing_list_is_seen_on_next_read():
    items, pager = make(5)
    items.extend(range(6, 16))
    assert pager.total_items == 15
    assert pager.total_pages == 2


@pytest.mark.parametrize(
    "page, expected",
    [
        (1, [1, 2, 3, 4, 5]),
        (3, [1, 2, 3, 4, 5]),
        (4, [2, 3, 4, 5, 6]),
        (6, [4, 5, 6, 7, 8]),
        (8, [4, 5, 6, 7, 8]),
    ],
)
def test_visible_pages(page, expected):
    _, pager = make(80)
    pager.go_to_page(page)
    assert pager.visible_pages == expected


def test_default_page_size():
    pager = Paginator(lambda: list(range(120)))
    assert pager.per_page == 50
    assert pager.total_pages == 3


def test_per_page_must_be_positive():
    with pytest.raises(ValueError):
        Paginator(lambda: [], per_page=0)
