# simplecolumns/columns/grammar.py
"""
Line-anchored column tags.

    [begin]<width>     opens a block and its first column
    [col]<width>       opens the next column
    [end]<config>      closes the block

``<width>`` is an optional leading integer used as a flex-grow ratio (default
1). ``<config>`` is free text searched for the keywords ``wrap``, ``rtl`` and
``ltr``.
"""

import re
from typing import NamedTuple, Optional, Tuple

TAGS = {
    "begin": "[begin]",
    "col": "[col]",
    "end": "[end]",
}

DEFAULT_WIDTH = 1

# Leading integer, same prefix rules as parseInt: optional whitespace and sign
_WIDTH_RE = re.compile(r"\s*([+-]?\d+)")


class BlockConfig(NamedTuple):
    """Options written after the ``[end]`` tag."""

    text: str = ""

    @property
    def wrap(self) -> bool:
        return "wrap" in self.text

    @property
    def rtl(self) -> bool:
        return "rtl" in self.text

    @property
    def ltr(self) -> bool:
        return "ltr" in self.text

    def direction(self, rtl_by_default: bool = False) -> str:
        # An explicit ltr always beats rtl, whether it comes from the block or the settings
        if self.ltr:
            return "ltr"
        if self.rtl or rtl_by_default:
            return "rtl"
        return "ltr"

    def wraps(self, wrap_by_default: bool = False) -> bool:
        return wrap_by_default or self.wrap


def split_tag(line: str) -> Tuple[Optional[str], str]:
    """
    Split a line into its tag kind and the text after the tag.

    Returns (None, line) when the line does not start with a column tag.
    """
    for kind, tag in TAGS.items():
        if line.startswith(tag):
            return kind, line[len(tag):]
    return None, line


def match_tag(line: str) -> Optional[str]:
    return split_tag(line)[0]


def parse_width(text: str) -> int:
    """
    Parse the width hint following a ``[begin]`` or ``[col]`` tag.

    Anything that is not a positive integer prefix gives DEFAULT_WIDTH.
    """
    match = _WIDTH_RE.match(text or "")
    if not match:
        return DEFAULT_WIDTH
    width = int(match.group(1))
    return width if width > 0 else DEFAULT_WIDTH


def parse_config(text: str) -> BlockConfig:
    return BlockConfig((text or "").strip())

