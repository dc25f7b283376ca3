import pytest

from utils import pagination_info, parse_pagination


@pytest.mark.parametrize("total, limit, pages", [(0, 10, 0), (10, 10, 1), (11, 10, 2), (250, 100, 3)])
def test_total_pages(total, limit, pages):
    assert pagination_info(1, limit, total)["totalPages"] == pages


def test_defaults():
    assert parse_pagination() == {"page": 1, "limit": 10, "skip": 0, "take": 10}


def test_page_below_one_is_clamped():
    assert parse_pagination(page=0)["page"] == 1
    assert parse_pagination(page=-3)["page"] == 1


def test_limit_is_clamped_to_range():
    assert parse_pagination(limit=1000)["limit"] == 100
    assert parse_pagination(limit=0)["limit"] == 1


def test_skip_is_page_offset():
    p = parse_pagination(page=3, limit=20)
    assert p["skip"] == 40
    assert p["take"] == 20
