# simplecolumns/markdown/postprocessors/sanitizer.py

import logging
from functools import lru_cache

import bleach

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "div",
            "span",
            "section",
            "mark",
            "ins",
            "del",
            "sup",
            "sub",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "hr",
            "blockquote",
            "dl",
            "dt",
            "dd",
            # code
            "pre",
            "code",
            "kbd",
            # tables
            "table",
            "thead",
            "tbody",
            "tr",
            "th",
            "td",
            "caption",
            # media
            "img",
            "figure",
            "figcaption",
            # task lists
            "input",
            "label",
        }
    )

    allowed_attrs = {
        "*": ["class", "id", "title", "data-*", "aria-*"],
        "a": ["href", "title", "rel", "target"],
        "img": ["src", "alt", "title", "width", "height", "loading"],
        "ol": ["start", "type", "class"],
        "th": ["colspan", "rowspan", "scope"],
        "td": ["colspan", "rowspan"],
        "input": ["type", "checked", "disabled"],
    }

    allowed_protocols = ["http", "https", "mailto", "tel"]

    return allowed_tags, allowed_attrs, allowed_protocols


def sanitize_html(html, context):
    """
    Sanitize HTML output using bleach.
    This is the FIRST post-processor: the column layout adds its inline flex
    styles afterwards, so user-written style attributes never survive.
    """
    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()

    try:
        return bleach.clean(
            html,
            tags=allowed_tags,
            attributes=allowed_attrs,
            protocols=allowed_protocols,
            strip=False,  # Escape disallowed tags instead of dropping their text
        )
    except Exception as e:
        logger.error(f"Bleach sanitization failed: {e}", exc_info=True)
        return html
