import pytest

from apps.shopfront.services.pagination import paginate, per_page_or_default


@pytest.fixture
def page_settings(settings):
    settings.SHOPFRONT_DEFAULT_PER_PAGE = 10
    settings.SHOPFRONT_MAX_PER_PAGE = 100
    return settings


@pytest.mark.parametrize('size, per_page', [(0, 1), (1, 1), (7, 3), (9, 3), (25, 10), (3, 50)])
def test_pages_rebuild_the_sequence(page_settings, size, per_page):
    items = list(range(size))
    rebuilt = []
    page = 1
    while True:
        chunk = paginate(items, page, per_page)
        if not chunk:
            break
        assert len(chunk) <= per_page
        rebuilt.extend(chunk)
        page += 1

    assert rebuilt == items


def test_last_page_holds_the_remainder(page_settings):
    assert paginate(list('abcdefg'), 3, 3) == ['g']


@pytest.mark.parametrize('page', [0, -1, 4, 99, 'abc', 2.5])
def test_pages_out_of_range_are_empty(page_settings, page):
    assert paginate(list('abcdefg'), page, 3) == []


def test_empty_results_have_an_empty_first_page(page_settings):
    assert paginate([], 1, 5) == []


def test_default_page_size(page_settings):
    page_settings.SHOPFRONT_DEFAULT_PER_PAGE = 4

    assert per_page_or_default() == 4
    assert per_page_or_default('') == 4
    assert paginate(range(10)) == [0, 1, 2, 3]


def test_page_size_is_capped(page_settings):
    page_settings.SHOPFRONT_MAX_PER_PAGE = 5

    assert per_page_or_default(500) == 5
    assert paginate(range(20), 1, 50) == [0, 1, 2, 3, 4]


@pytest.mark.parametrize('per_page', [0, -3, '0'])
def test_page_size_below_one_is_rejected(page_settings, per_page):
    with pytest.raises(ValueError):
        paginate([1, 2, 3], 1, per_page)


def test_page_size_accepts_numeric_strings(page_settings):
    assert per_page_or_default('3') == 3
