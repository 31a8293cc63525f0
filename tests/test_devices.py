from django.test import RequestFactory

from simplecolumns.conf import ColumnSettings
from simplecolumns.devices import is_mobile, rendering_enabled

ANDROID_UA = "Mozilla/5.0 (Linux; Android 14; Pixel 8) Mobile Safari/537.36"
DESKTOP_UA = "Mozilla/5.0 (X11; Linux x86_64; rv:125.0) Gecko/20100101 Firefox/125.0"


def test_no_request_is_desktop():
    assert not is_mobile({})


def test_explicit_flag_wins():
    request = RequestFactory().get("/", HTTP_USER_AGENT=DESKTOP_UA)
    assert is_mobile({"is_mobile": True, "request": request})


def test_user_agent_detection():
    factory = RequestFactory()
    assert is_mobile({"request": factory.get("/", HTTP_USER_AGENT=ANDROID_UA)})
    assert not is_mobile({"request": factory.get("/", HTTP_USER_AGENT=DESKTOP_UA)})
    assert not is_mobile({"request": factory.get("/")})


def test_rendering_enabled():
    assert rendering_enabled(ColumnSettings(render_on_mobile=False), {})
    assert not rendering_enabled(ColumnSettings(render_on_mobile=False), {"is_mobile": True})
    assert rendering_enabled(ColumnSettings(), {"is_mobile": True})
