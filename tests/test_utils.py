from blog_server import utils
from blog_server.views.components.pagination import render_pagination
from blog_server.views.components.time import format_timestamp


def test_snip_returns_empty_string_for_missing_text():
    assert utils.snip(None) == ""
    assert utils.snip("") == ""


def test_snip_collapses_whitespace():
    assert utils.snip("  one\n\ntwo\tthree  ") == "one two three"


def test_snip_shortens_long_text_with_ellipsis():
    result = utils.snip("abcdefghij", max_chars=5)
    assert result == "abcd…"


def test_snip_keeps_text_at_limit():
    assert utils.snip("abcde", max_chars=5) == "abcde"


def test_page_offset():
    assert utils.page_offset(1, 20) == 0
    assert utils.page_offset(3, 10) == 20


def test_total_pages_is_at_least_one():
    assert utils.total_pages(0, 20) == 1
    assert utils.total_pages(20, 20) == 1
    assert utils.total_pages(21, 20) == 2


def test_format_timestamp_is_utc():
    assert format_timestamp(0) == "1970-01-01 00:00"


def test_fits_sqlite_integer_bounds():
    assert utils.fits_sqlite_integer(2**63 - 1)
    assert utils.fits_sqlite_integer(-(2**63))
    assert not utils.fits_sqlite_integer(2**63)
    assert not utils.fits_sqlite_integer(-(2**63) - 1)


def test_pagination_disabled_links_have_no_target():
    html = str(render_pagination(path="/posts", total=5, page=1, limit=2))
    assert "page=0" not in html
    assert 'href="/posts?page=2&amp;limit=2"' in html

    last = str(render_pagination(path="/posts", total=5, page=3, limit=2))
    assert "page=4" not in last
    assert 'href="/posts?page=2&amp;limit=2"' in last
