# simplecolumns/conf.py
"""
Runtime settings for column rendering.

Settings live in the Django ``SIMPLE_COLUMNS`` dict and are merged over
``DEFAULT_SETTINGS`` on every read, so a change made at runtime (for example
with ``override_settings``) is picked up by the next render.

    SIMPLE_COLUMNS = {
        "RTL_BY_DEFAULT": False,
        "WRAP_BY_DEFAULT": True,
        "RENDER_ON_MOBILE": False,
    }

``DEFAULT_BLOCK_ARRANGEMENT`` ("ltr" or "rtl") is accepted as an alternative
way of spelling ``RTL_BY_DEFAULT``.
"""

from typing import NamedTuple

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_SETTINGS = {
    "RTL_BY_DEFAULT": False,
    "WRAP_BY_DEFAULT": False,
    "RENDER_ON_MOBILE": True,
    "DEFAULT_BLOCK_ARRANGEMENT": None,
    "FLUSH_UNCLOSED_BLOCKS": True,
    "PARENT_CLASS": "columns-parent",
    "RTL_CLASS": "columns-rtl",
    "WRAP_CLASS": "column-wrap",
}

BLOCK_ARRANGEMENTS = ("ltr", "rtl")


class ColumnSettings(NamedTuple):
    rtl_by_default: bool = False
    wrap_by_default: bool = False
    render_on_mobile: bool = True
    flush_unclosed_blocks: bool = True
    parent_class: str = "columns-parent"
    rtl_class: str = "columns-rtl"
    wrap_class: str = "column-wrap"


def get_column_settings() -> ColumnSettings:
    """
    Build a ColumnSettings from Django settings.

    Raises:
        ImproperlyConfigured: if SIMPLE_COLUMNS is not a dict or names an
            unknown block arrangement
    """
    overrides = getattr(settings, "SIMPLE_COLUMNS", None) or {}
    if not isinstance(overrides, dict):
        raise ImproperlyConfigured("SIMPLE_COLUMNS must be a dict")

    merged = dict(DEFAULT_SETTINGS)
    merged.update(overrides)

    rtl_by_default = bool(merged["RTL_BY_DEFAULT"])
    arrangement = merged["DEFAULT_BLOCK_ARRANGEMENT"]
    if arrangement is not None:
        if arrangement not in BLOCK_ARRANGEMENTS:
            raise ImproperlyConfigured(
                f"SIMPLE_COLUMNS['DEFAULT_BLOCK_ARRANGEMENT'] must be one of "
                f"{', '.join(BLOCK_ARRANGEMENTS)}, got {arrangement!r}"
            )
        rtl_by_default = arrangement == "rtl"

    return ColumnSettings(
        rtl_by_default=rtl_by_default,
        wrap_by_default=bool(merged["WRAP_BY_DEFAULT"]),
        render_on_mobile=bool(merged["RENDER_ON_MOBILE"]),
        flush_unclosed_blocks=bool(merged["FLUSH_UNCLOSED_BLOCKS"]),
        parent_class=merged["PARENT_CLASS"],
        rtl_class=merged["RTL_CLASS"],
        wrap_class=merged["WRAP_CLASS"],
    )
