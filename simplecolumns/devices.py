# simplecolumns/devices.py
"""Decide whether the page is being rendered for a mobile device."""

import re

# Common mobile user-agent tokens
MOBILE_UA_PATTERN = re.compile(
    r"Mobi|Android|iPhone|iPad|iPod|Opera Mini|IEMobile|BlackBerry", re.IGNORECASE
)


def is_mobile(context: dict) -> bool:
    """
    Return True when the render context targets a mobile device.

    An explicit ``is_mobile`` key in the context wins. Otherwise the
    User-Agent header of ``context["request"]`` is inspected. Renders without
    a request (management commands, tests) count as desktop.
    """
    if "is_mobile" in context:
        return bool(context["is_mobile"])

    request = context.get("request")
    if request is None:
        return False

    user_agent = request.META.get("HTTP_USER_AGENT", "")
    return bool(MOBILE_UA_PATTERN.search(user_agent))


def rendering_enabled(column_settings, context: dict) -> bool:
    """Column layout applies on desktop, and on mobile only when allowed."""
    return not is_mobile(context) or column_settings.render_on_mobile
