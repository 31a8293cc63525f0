from bs4 import BeautifulSoup
from django.test import RequestFactory

from simplecolumns.columns import ColumnSession
from simplecolumns.markdown.postprocessors.columns_layout import SESSION_KEY, columns_layout

PANDOC_BLOCK = (
    "<p>[begin]2<br>\nLeft</p>\n"
    "<p>[col]<br>\nRight<br>\n[end] rtl</p>\n"
)


def test_block_becomes_columns():
    html = columns_layout(PANDOC_BLOCK, {})
    soup = BeautifulSoup(html, "html.parser")

    parent = soup.find("div", class_="columns-parent")
    columns = parent.find_all("div", recursive=False)

    assert parent["class"] == ["columns-parent", "columns-rtl"]
    assert [column["style"] for column in columns] == ["flex: 2", "flex: 1"]
    assert [column.get_text() for column in columns] == ["Left", "Right"]
    assert "[begin]" not in html
    assert "[end]" not in html


def test_content_around_block_is_kept_in_order():
    html = columns_layout("<h1>Title</h1>\n" + PANDOC_BLOCK + "<p>After</p>\n", {})
    soup = BeautifulSoup(html, "html.parser")

    names = [child.name for child in soup.children if child.name]
    assert names == ["h1", "div", "p"]
    assert soup.find_all("p")[-1].get_text() == "After"


def test_document_without_blocks_is_unchanged():
    html = "<h1>Title</h1>\n<p>Just text</p>\n<ul>\n<li>item</li>\n</ul>\n"
    assert columns_layout(html, {}) == html


def test_second_pass_is_a_no_op():
    once = columns_layout(PANDOC_BLOCK, {})
    assert columns_layout(once, {}) == once


def test_block_spread_over_fragments_renders_once():
    html = (
        "<p>[begin]</p>\n"
        "<p>Left</p>\n"
        "<p>[col]<br>\nRight<br>\n[end]</p>\n"
    )
    result = columns_layout(html, {})
    soup = BeautifulSoup(result, "html.parser")

    assert len(soup.find_all("div", class_="columns-parent")) == 1
    assert result.count("Left") == 1
    assert [p.get_text() for p in soup.find_all("p")] == ["Left", "Right"]


def test_malformed_block_passes_through():
    html = "<p>[begin]</p>\n<p>[begin]</p>\n<p>[end]</p>\n"
    result = columns_layout(html, {})
    assert "columns-parent" not in result
    assert result.count("[begin]") == 2


def test_unclosed_block_is_flushed_as_text():
    result = columns_layout("<p>[begin]</p>\n<p>dangling</p>\n", {})
    assert "[begin]" in result
    assert "dangling" in result
    assert "<div" not in result


def test_session_is_stored_and_reset_between_passes():
    context = {}
    columns_layout("<p>[begin]</p>\n", context)
    session = context[SESSION_KEY]
    assert isinstance(session, ColumnSession)

    result = columns_layout("<p>[end]</p>\n", context)
    assert context[SESSION_KEY] is session
    assert "columns-parent" not in result


def test_mobile_request_without_mobile_rendering(settings):
    settings.SIMPLE_COLUMNS = {"RENDER_ON_MOBILE": False}
    request = RequestFactory().get("/", HTTP_USER_AGENT="Mozilla/5.0 (iPhone; CPU iPhone OS 17_0)")

    result = columns_layout(PANDOC_BLOCK, {"request": request})

    assert "columns-parent" not in result
    assert "[begin]" not in result


def test_block_inside_blockquote_is_unchanged():
    html = "<blockquote>\n<p>[begin]<br/>\nLeft<br/>\n[col]<br/>\nRight<br/>\n[end]</p>\n</blockquote>\n"
    result = columns_layout(html, {})

    assert "columns-parent" not in result
    assert result == html


def test_begin_in_heading_is_not_a_tag():
    html = "<h2>[begin]</h2><p>a</p><p>[end]</p>"
    result = columns_layout(html, {})

    assert "columns-parent" not in result
    assert result == html


def test_col_in_list_item_is_column_content():
    html = "<p>[begin]</p><ul><li>[col]</li></ul><p>x</p><p>[end]</p>"
    soup = BeautifulSoup(columns_layout(html, {}), "html.parser")

    parent = soup.find("div", class_="columns-parent")
    columns = parent.find_all("div", recursive=False)

    assert len(columns) == 1
    assert columns[0].li.get_text() == "[col]"
    assert columns[0].p.get_text() == "x"
    assert "[begin]" not in str(soup)
    assert "[end]" not in str(soup)
