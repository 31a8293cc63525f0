# simplecolumns/columns/renderer.py
"""
Lay out a complete column block.

Input fragment (already merged and containing one [begin] ... [end] block):

    <p>[begin]2<br/>
    Left side</p>
    <p>[col]<br/>
    Right side<br/>
    more right</p>
    <p>[end] wrap</p>

Output:

    <div class="column-wrap" style="flex: 2"><p>Left side</p></div>
    <div class="column-wrap" style="flex: 1"><p>Right side<br/>more right</p></div>
"""

import logging
from typing import List

from bs4 import BeautifulSoup, Tag

from .grammar import DEFAULT_WIDTH, BlockConfig, parse_width
from .nodes import ColumnMarker, Node, Paragraph, normalize, to_element

logger = logging.getLogger(__name__)


def _fold_line(column: List[Node], paragraph: Paragraph) -> bool:
    """Append the paragraph to the previous line of the same <p>, if any."""
    if not column:
        return False
    previous = column[-1]
    if not isinstance(previous, Paragraph) or previous.source != paragraph.source:
        return False
    previous.lines.extend(paragraph.lines)
    return True


def split_columns(nodes: List[Node]):
    """
    Group nodes into columns.

    Returns (columns, widths) where widths holds one entry per column.
    """
    columns: List[List[Node]] = [[]]
    widths: List[int] = [DEFAULT_WIDTH]

    for node in nodes:
        if isinstance(node, ColumnMarker):
            if node.kind == "col":
                columns.append([])
                widths.append(parse_width(node.remainder))
            elif node.kind == "begin":
                widths[0] = parse_width(node.remainder)
            continue

        if isinstance(node, Paragraph) and _fold_line(columns[-1], node):
            continue
        columns[-1].append(node)

    return columns, widths


def render_block(
    soup: BeautifulSoup,
    container: Tag,
    config: BlockConfig,
    column_settings,
    enabled: bool = True,
) -> int:
    """
    Replace the container's children with one flex column per [col] section.

    Args:
        soup: Soup owning the container, used to create tags
        container: Fragment container holding the whole block
        config: Options written after the [end] tag
        column_settings: ColumnSettings in effect for this render
        enabled: False on mobile when mobile rendering is off; columns are
            still built but carry no wrap class

    Returns:
        Number of columns produced
    """
    columns, widths = split_columns(normalize(container))
    wrap = enabled and config.wraps(column_settings.wrap_by_default)

    divs = []
    for nodes, width in zip(columns, widths):
        attrs = {"class": [column_settings.wrap_class]} if wrap else {}
        attrs["style"] = f"flex: {width}"
        div = soup.new_tag("div", attrs=attrs)
        for node in nodes:
            div.append(to_element(soup, node))
        divs.append(div)

    container.clear()
    for div in divs:
        container.append(div)

    logger.debug("Rendered column block with widths %s (wrap=%s)", widths, wrap)
    return len(divs)
