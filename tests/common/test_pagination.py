from __future__ import annotations

import pytest

from society_attendance.common.pagination import page_window, paginate


def test_paginate_clamps_page_number():
    items = list(range(23))

    assert paginate(items, 0, 10).number == 1
    last = paginate(items, 7, 10)
    assert last.number == 3
    assert last.items == [20, 21, 22]
    assert last.has_previous and not last.has_next


def test_paginate_empty():
    page = paginate([], 3, 10)

    assert page.number == 1
    assert page.total_pages == 0
    assert page.items == []
    assert not page.has_next


@pytest.mark.parametrize(
    "current,total,expected",
    [
        (1, 1, [1]),
        (1, 3, [1, 2, 3]),
        (1, 10, [1, 2, None, 10]),
        (5, 10, [1, None, 4, 5, 6, None, 10]),
        (10, 10, [1, None, 9, 10]),
        (3, 10, [1, 2, 3, 4, None, 10]),
    ],
)
def test_page_window(current, total, expected):
    assert page_window(current, total) == expected
