"""
HTTP feed fetching with bounded redirect following.

Redirects are followed by hand rather than by httpx so that the hop limit,
the per-hop timeout and the error raised on an overlong chain are under our
control. Failures surface as FetchError subclasses; there are no retries.
"""

from __future__ import annotations

from urllib.parse import urljoin

import httpx

from ..config import FetchConfig
from ..errors import FetchTimeoutError, HttpStatusError, NetworkError, TooManyRedirectsError


REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})


def build_client(cfg: FetchConfig, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """Create the shared async client used for feed requests.

    Args:
        cfg: Fetch configuration (timeout, headers, proxy behavior)
        transport: Optional transport override, used by tests

    Returns:
        An httpx.AsyncClient that does not follow redirects on its own and
        decodes bodies as UTF-8 unless the server declares a charset
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(cfg.timeout_seconds),
        headers={"User-Agent": cfg.user_agent, "Accept": cfg.accept},
        follow_redirects=False,
        trust_env=cfg.trust_env,
        default_encoding="utf-8",
        transport=transport,
    )


async def fetch_feed(client: httpx.AsyncClient, url: str, max_redirects: int = 5) -> str:
    """Fetch a feed URL and return the response body as text.

    Redirect responses (301, 302, 303, 307, 308) carrying a Location header
    are resolved against the current URL and re-requested, up to
    max_redirects hops. Each hop gets a fresh timeout.

    Args:
        client: Client from build_client
        url: Absolute http(s) URL of the feed
        max_redirects: Maximum number of redirects to follow

    Returns:
        The full response body of the final 200 response

    Raises:
        FetchTimeoutError: A request exceeded the timeout
        NetworkError: Connection-level failure or unsupported URL
        TooManyRedirectsError: The chain needed more than max_redirects hops
        HttpStatusError: The final response was not 200
    """
    current = url
    for _ in range(max_redirects + 1):
        response = await _get(client, current)
        location = response.headers.get("location")
        if response.status_code in REDIRECT_STATUSES and location:
            current = urljoin(current, location)
            continue
        if response.status_code != 200:
            raise HttpStatusError(response.status_code)
        return response.text
    raise TooManyRedirectsError("Too many redirects")


async def _get(client: httpx.AsyncClient, url: str) -> httpx.Response:
    try:
        return await client.get(url)
    except httpx.TimeoutException as exc:
        raise FetchTimeoutError("Timeout") from exc
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        raise NetworkError(f"{type(exc).__name__}: {exc}") from exc
