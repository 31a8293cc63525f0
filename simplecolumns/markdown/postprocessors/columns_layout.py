# simplecolumns/markdown/postprocessors/columns_layout.py
"""
Postprocessor that lays out [begin]/[col]/[end] blocks side by side.

Expected markdown input:
    [begin]2
    Left column, twice as wide

    [col]
    Right column
    [end] wrap

Pandoc HTML output (one <p> per blank-line separated paragraph):
    <p>[begin]2<br />
    Left column, twice as wide</p>
    <p>[col]<br />
    Right column<br />
    [end] wrap</p>

This postprocessor transforms it to:
    <div class="columns-parent">
        <div class="column-wrap" style="flex: 2"><p>Left column, twice as wide</p></div>
        <div class="column-wrap" style="flex: 1"><p>Right column</p></div>
    </div>

Every top-level element is handed to the ColumnSession as its own fragment,
in document order. Fragments that are not part of a block come out unchanged.
"""

from bs4 import BeautifulSoup, Comment, NavigableString

from ...columns import ColumnSession, Fragment

SESSION_KEY = "column_session"


def columns_layout(html: str, context: dict) -> str:
    """
    Render column blocks found among the top-level elements.

    Args:
        html: HTML string to process
        context: Context dictionary; holds the ColumnSession for this render
            under "column_session" and optionally "request"/"is_mobile"

    Returns:
        Processed HTML with column blocks laid out
    """
    soup = BeautifulSoup(html, "html.parser")

    session = context.get(SESSION_KEY)
    if session is None:
        session = context[SESSION_KEY] = ColumnSession()
    # Partial blocks never carry over from a previous render pass
    session.reset()

    fragments = []
    for element in list(soup.contents):
        if isinstance(element, Comment):
            continue
        if isinstance(element, NavigableString) and not element.strip():
            continue
        fragment = Fragment.wrap(soup, element)
        session.process(fragment, context)
        fragments.append(fragment)

    session.finish()

    for fragment in fragments:
        fragment.settle()

    return str(soup)


def columns_layout_default(html: str, context: dict) -> str:
    """
    Default configuration for columns_layout.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return columns_layout(html, context)
