"""
HTTP helpers.

Remote RDF documents are the only network input geoclass reads. This module keeps
that to one small function with deterministic defaults (timeout + User-Agent)
and raises on non-2xx so callers decide how to fail.
"""

from __future__ import annotations

import httpx


DEFAULT_USER_AGENT = "geoclass/0.1.0 (+https://local)"


def get_text(
    url: str,
    *,
    headers: dict[str, str] | None = None,
    timeout_seconds: float = 15,
    user_agent: str = DEFAULT_USER_AGENT,
) -> str:
    """GET `url` and return the decoded response body.

    Raises:
        httpx.HTTPError: On transport errors or non-2xx status codes.
    """
    request_headers = {"User-Agent": user_agent}
    if headers:
        request_headers.update(headers)

    with httpx.Client(timeout=timeout_seconds, follow_redirects=True) as client:
        resp = client.get(url, headers=request_headers)
        resp.raise_for_status()
        return resp.text
