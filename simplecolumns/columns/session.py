# simplecolumns/columns/session.py
"""
Stitch column blocks back together across fragments.

Pandoc (and the layout postprocessor) hand the document over one top-level
element at a time, so a block written as

    [begin]

    Left side

    [col]
    Right side
    [end]

arrives as three fragments. The session keeps fragments of an open block
pending and merges them into the next fragment until the block closes.

One session serves one render pass; call ``reset()`` before reusing it.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag

from ..conf import get_column_settings
from ..devices import rendering_enabled
from .classifier import Action, TagScan
from .grammar import BlockConfig
from .nodes import line_text
from .renderer import render_block

logger = logging.getLogger(__name__)


class Fragment:
    """A container tag holding one piece of rendered content."""

    def __init__(self, soup: BeautifulSoup, container: Tag):
        self.soup = soup
        self.container = container
        self.rendered = False

    @classmethod
    def wrap(cls, soup: BeautifulSoup, element, name: str = "div") -> "Fragment":
        """Wrap a top-level element in a new container."""
        return cls(soup, element.wrap(soup.new_tag(name)))

    @property
    def text(self) -> str:
        return line_text(self.container)

    @property
    def is_empty(self) -> bool:
        return not self.container.contents

    def take_contents(self) -> list:
        """Detach and return all children."""
        return [child.extract() for child in list(self.container.contents)]

    def prepend(self, children: list) -> None:
        for index, child in enumerate(children):
            self.container.insert(index, child)

    def settle(self) -> None:
        """Put the fragment back into the document for output."""
        if self.rendered:
            return
        if self.is_empty:
            self.container.decompose()
        else:
            self.container.unwrap()


class ColumnSession:
    """Holds the fragments of a block that has not reached its [end] tag."""

    def __init__(self):
        self.pending: List[Fragment] = []
        # Tag scan of the pending content, carried until the block closes
        self.scan = TagScan()

    def reset(self) -> None:
        self.pending = []
        self.scan = TagScan()

    def _merge_pending(self, fragment: Fragment) -> None:
        moved = []
        for previous in self.pending:
            moved.extend(previous.take_contents())
            moved.append(NavigableString("\n"))
        self.pending = []
        if moved:
            fragment.prepend(moved)

    def process(self, fragment: Fragment, context: Optional[dict] = None) -> Action:
        """
        Process one fragment, in document order.

        The fragment ends up rendered as a column block, held pending (its
        earlier siblings emptied into it) or untouched.
        """
        context = context or {}
        # Only the new fragment is scanned, earlier lines are already in self.scan
        scan = self.scan if self.pending else TagScan()
        action = scan.feed(fragment.text)
        self._merge_pending(fragment)
        self.scan = scan if action is Action.ACCUMULATE else TagScan()

        if action is Action.ACCUMULATE:
            self.pending.append(fragment)
        elif action is Action.RENDER:
            self._render(fragment, scan.config, context)

        return action

    def _render(self, fragment: Fragment, config: BlockConfig, context: dict) -> None:
        column_settings = get_column_settings()
        enabled = rendering_enabled(column_settings, context)

        if enabled:
            classes = [column_settings.parent_class]
            if config.direction(column_settings.rtl_by_default) == "rtl":
                classes.append(column_settings.rtl_class)
            fragment.container["class"] = classes

        count = render_block(
            fragment.soup, fragment.container, config, column_settings, enabled
        )
        fragment.rendered = True
        logger.debug("Column block rendered with %d columns (enabled=%s)", count, enabled)

    def finish(self) -> Optional[Fragment]:
        """
        End of document: deal with a block that never reached [end].

        With FLUSH_UNCLOSED_BLOCKS (the default) the fragment is left as plain
        content so the tags stay visible; otherwise its content is dropped.
        """
        if not self.pending:
            return None

        unclosed = self.pending[-1]
        self.reset()

        if get_column_settings().flush_unclosed_blocks:
            logger.warning("Column block without [end] tag, rendering it as plain text")
        else:
            logger.warning("Column block without [end] tag, dropping its content")
            unclosed.take_contents()
        return unclosed
