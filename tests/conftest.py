from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from simplecolumns.columns import Fragment


def _fragments(*pieces: str) -> list[Fragment]:
    soup = BeautifulSoup("".join(f"<div>{piece}</div>" for piece in pieces), "html.parser")
    return [Fragment(soup, div) for div in soup.find_all("div", recursive=False)]


@pytest.fixture
def make_fragments():
    """Build fragments sharing one soup, one per HTML piece."""
    return _fragments


@pytest.fixture
def make_fragment():
    return lambda html: _fragments(html)[0]
