# simplecolumns/columns/nodes.py
"""
Intermediate node model for column blocks.

A fragment's children are read into four kinds of node:

- ``Paragraph``: one logical line (or several re-folded lines) of a <p>
- ``ColumnMarker``: a paragraph line starting with [begin], [col] or [end]
- ``OtherElement``: any other tag (lists, figures, tables, headings...)
- ``Text``: loose non-blank text directly inside the fragment

Reading never mutates the soup. Serializing moves the original inline
children into freshly built tags.
"""

from dataclasses import dataclass, field
from typing import List, Union

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from .grammar import split_tag

# Inline content whose text is literal, never a column tag
CODE_ELEMENTS = {"code", "pre", "script", "style"}


@dataclass
class Text:
    element: NavigableString


@dataclass
class Paragraph:
    lines: List[list]
    attrs: dict = field(default_factory=dict)
    # Index of the <p> this line was split from
    source: int = 0


@dataclass
class ColumnMarker:
    kind: str
    remainder: str = ""


@dataclass
class OtherElement:
    element: Tag


Node = Union[Text, Paragraph, ColumnMarker, OtherElement]


def _collect_text(children, parts: List[str]) -> None:
    for child in children:
        if isinstance(child, Comment):
            continue
        if isinstance(child, NavigableString):
            parts.append(str(child).replace("\n", " "))
            continue
        if child.name in CODE_ELEMENTS:
            continue
        _collect_text(child.children, parts)


def _span_text(span: list) -> str:
    parts: List[str] = []
    _collect_text(span, parts)
    return "".join(parts).lstrip()


def split_paragraph(p: Tag) -> List[list]:
    """Split the children of a <p> at its <br> tags."""
    spans: List[list] = [[]]
    for child in p.contents:
        if isinstance(child, Tag) and child.name == "br":
            spans.append([])
        else:
            spans[-1].append(child)
    return spans


def line_text(container: Tag) -> str:
    """
    Text of the container's logical lines, one per output line.

    Only lines of top-level <p> children are read, the same lines
    ``normalize`` can turn into markers. A tag written inside a list,
    blockquote, heading or code is ordinary content.
    """
    lines: List[str] = []
    for child in container.contents:
        if isinstance(child, Tag) and child.name == "p":
            lines.extend(_span_text(span) for span in split_paragraph(child))
    return "\n".join(lines)


def normalize(container: Tag) -> List[Node]:
    """
    Read a fragment's children into nodes, one paragraph per logical line.

    A <p> holding ``A<br>B`` becomes two sibling paragraphs. Lines starting
    with a column tag become ColumnMarker nodes.
    """
    nodes: List[Node] = []
    source = 0

    for child in container.contents:
        if isinstance(child, Comment):
            continue
        if isinstance(child, NavigableString):
            if child.strip():
                nodes.append(Text(child))
            continue
        if child.name != "p":
            nodes.append(OtherElement(child))
            continue

        source += 1
        for span in split_paragraph(child):
            if all(isinstance(c, NavigableString) and not c.strip() for c in span):
                continue
            kind, remainder = split_tag(_span_text(span))
            if kind is not None:
                nodes.append(ColumnMarker(kind, remainder))
            else:
                nodes.append(Paragraph([span], dict(child.attrs), source))

    return nodes


def _strip_leading_newline(span: list) -> list:
    if span and isinstance(span[0], NavigableString) and span[0].startswith("\n"):
        stripped = span[0].lstrip("\n")
        return ([NavigableString(stripped)] if stripped else []) + span[1:]
    return span


def to_element(soup: BeautifulSoup, node: Node):
    """Build the soup element for a node, moving its original children."""
    if isinstance(node, Paragraph):
        p = soup.new_tag("p", attrs=dict(node.attrs))
        for i, span in enumerate(node.lines):
            if i:
                p.append(soup.new_tag("br"))
            for child in _strip_leading_newline(span):
                p.append(child)
        return p
    if isinstance(node, OtherElement):
        return node.element
    if isinstance(node, Text):
        return node.element
    raise TypeError(f"Column markers have no output element: {node!r}")
