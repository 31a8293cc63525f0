# simplecolumns/columns/classifier.py
"""Decide what the stitching session does with a fragment."""

import enum
import logging

from .grammar import BlockConfig, parse_config, split_tag

logger = logging.getLogger(__name__)


class Action(enum.Enum):
    ACCUMULATE = "accumulate"  # block open, merge with the next fragment
    RENDER = "render"  # block opened and closed, lay out the columns
    SKIP = "skip"  # no block, or invalid tag sequence


class TagScan:
    """
    Running scan of tag lines across the fragments of one block.

    Fragments are fed in document order, so text already scanned for an open
    block is never read again. The scan stops at the first repeated
    ``[begin]`` or ``[end]`` line: the block is malformed and its tags are
    left visible.
    """

    def __init__(self):
        self.seen_begin = False
        self.seen_end = False
        self.malformed = False
        self.config = BlockConfig()

    def feed(self, text: str) -> Action:
        if not self.malformed:
            self._scan(text)
        return self.action

    def _scan(self, text: str) -> None:
        for line in text.split("\n"):
            kind, rest = split_tag(line)
            if kind == "begin":
                if self.seen_begin:
                    logger.debug("Repeated [begin] tag, leaving fragment untouched")
                    self.malformed = True
                    return
                self.seen_begin = True
            elif kind == "end":
                if self.seen_end:
                    logger.debug("Repeated [end] tag, leaving fragment untouched")
                    self.malformed = True
                    return
                self.seen_end = True
                self.config = parse_config(rest)

    @property
    def action(self) -> Action:
        if self.malformed or not self.seen_begin:
            return Action.SKIP
        return Action.RENDER if self.seen_end else Action.ACCUMULATE


def classify(text: str) -> Action:
    """Classify the line text of a (merged) fragment."""
    return TagScan().feed(text)
