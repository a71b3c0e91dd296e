"""Gateway: HTTP(S) fetcher over httpx — implements Fetcher port."""

from __future__ import annotations

import logging
import ssl
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

import httpx

from office_template_sync.l1_entities.artifact import RemoteResource
from office_template_sync.l1_entities.errors import FetchError

log = logging.getLogger('ots.http')

DEFAULT_TIMEOUT = 30.0


def build_tls_context() -> ssl.SSLContext:
    """Default-verified context that refuses anything older than TLS 1.2."""
    ctx = ssl.create_default_context()
    ctx.minimum_version = ssl.TLSVersion.TLSv1_2
    return ctx


def parse_last_modified(value: str | None) -> datetime | None:
    """Parse an HTTP date header into an aware UTC datetime. Returns None when absent or garbled."""
    if not value:
        return None
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def require_https(request: httpx.Request) -> None:
    """Request hook: refuse plaintext requests, including redirect hops."""
    if request.url.scheme != 'https':
        raise httpx.UnsupportedProtocol(f'refusing non-https request to {request.url}', request=request)


class HttpxFetcher:
    """Fetches templates with a single TLS ≥ 1.2 client per run."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {'User-Agent': user_agent} if user_agent else None
        kwargs: dict = dict(
            timeout=timeout,
            headers=headers,
            follow_redirects=True,
            event_hooks={'request': [require_https]},
        )
        if transport is not None:
            kwargs['transport'] = transport
        else:
            kwargs['verify'] = build_tls_context()
        self._client = httpx.Client(**kwargs)

    def fetch(self, uri: str) -> RemoteResource:
        log.debug('GET %s', uri)
        try:
            resp = self._client.get(uri)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(f'{uri}: HTTP {e.response.status_code} {e.response.reason_phrase}') from e
        except httpx.TimeoutException as e:
            raise FetchError(f'{uri}: timed out') from e
        except httpx.HTTPError as e:
            raise FetchError(f'{uri}: {type(e).__name__}: {e}') from e

        reported = parse_last_modified(resp.headers.get('Last-Modified'))
        log.debug('GET %s -> %d bytes, last-modified=%s', uri, len(resp.content), reported)
        return RemoteResource(uri=uri, payload=resp.content, reported_timestamp=reported)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpxFetcher:
        return self

    def __exit__(self, *args) -> None:
        self.close()
