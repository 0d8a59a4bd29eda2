from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

if TYPE_CHECKING:
    import pytest

BLOCKED_HOSTS = {
    "overpass-api.de",
    "overpass.kumi.systems",
    "query.wikidata.org",
    "www.wikidata.org",
    "commons.wikimedia.org",
    "upload.wikimedia.org",
}


def _is_blocked_url(url: str) -> bool:
    host = (urlparse(url).hostname or "").lower()
    if not host:
        return False
    if host in BLOCKED_HOSTS:
        return True
    return any(host.endswith(f".{item}") for item in BLOCKED_HOSTS)


def install_network_blocker(monkeypatch: pytest.MonkeyPatch) -> None:
    import aiohttp

    def _aiohttp_block(self, method: str, url: Any, *args: Any, **kwargs: Any) -> Any:
        if _is_blocked_url(str(url)):
            msg = f"Blocked external host: {url}"
            raise RuntimeError(msg)
        return _orig_aiohttp_request(self, method, url, *args, **kwargs)

    _orig_aiohttp_request = aiohttp.ClientSession._request
    monkeypatch.setattr(aiohttp.ClientSession, "_request", _aiohttp_block, raising=True)
