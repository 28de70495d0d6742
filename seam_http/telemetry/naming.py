"""
Operation name of a client span
"""

import httpx


def span_name(method: str, url) -> str:
    """Name a request span "{METHOD} {scheme}://{authority}{path}"

    The "://" separator is only emitted when the URL has a scheme, so a
    relative URL such as "/items" yields "GET /items". The path is kept
    percent-encoded as it goes on the wire.

    Args:
        method: HTTP method
        url: Request URL (str or httpx.URL)
    """
    url = httpx.URL(url)
    scheme = f"{url.scheme}://" if url.scheme else ""
    authority = url.netloc.decode("ascii")
    path = url.raw_path.split(b"?", 1)[0].decode("ascii") or "/"
    return f"{method.upper()} {scheme}{authority}{path}"
