"""Shared blocking HTTP client."""
from functools import lru_cache

import requests
from requests.adapters import HTTPAdapter

# Upper bound on concurrent asyncio.to_thread workers issuing HEAD and shortener calls
POOL_SIZE = 32

@lru_cache()
def get_http_session() -> requests.Session:
    """Process-wide session reused by the endpoint validator and the URL shortener.

    Worker threads share it read-only: headers and adapters are fixed here and
    never touched afterwards. Each host gets a pool of POOL_SIZE connections so
    concurrent calls do not discard connections.
    """
    session = requests.Session()
    session.headers.update({"User-Agent": "video-gateway/1.0"})
    adapter = HTTPAdapter(pool_connections=POOL_SIZE, pool_maxsize=POOL_SIZE)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session
