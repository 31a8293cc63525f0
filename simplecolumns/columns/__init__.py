# simplecolumns/columns/__init__.py

from .classifier import Action, TagScan, classify
from .grammar import BlockConfig, match_tag, parse_config, parse_width
from .renderer import render_block
from .session import ColumnSession, Fragment

__all__ = [
    "Action",
    "BlockConfig",
    "ColumnSession",
    "Fragment",
    "TagScan",
    "classify",
    "match_tag",
    "parse_config",
    "parse_width",
    "render_block",
]
