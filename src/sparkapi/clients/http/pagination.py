"""Link-header pagination over :class:`~sparkapi.core.api_client.APIClient`."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from requests.structures import CaseInsensitiveDict
from requests.utils import parse_header_links
from structlog.stdlib import BoundLogger

from sparkapi.core.api_client import APIClient, QueryParams
from sparkapi.core.exceptions import SparkValidationError
from sparkapi.core.logging import LogEvents, UnifiedLogger

__all__ = ["PageSet", "Paginator", "next_page_url"]

LINK_HEADER = "Link"
NEXT_RELATION = "next"


@dataclass(slots=True)
class PageSet:
    """Raw page bodies in fetch order plus the error that ended the traversal.

    Pages collected before a failure are valid data; ``error`` is ``None``
    when the traversal ended normally.
    """

    pages: list[bytes] = field(default_factory=list)
    error: Exception | None = None

    @property
    def complete(self) -> bool:
        return self.error is None

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)


def next_page_url(headers: Mapping[str, str]) -> str | None:
    """Return the ``rel="next"`` URL from the ``Link`` header, if any.

    Header names are matched case-insensitively. Only the first link entry
    is inspected; a first entry carrying any other relation ends the
    traversal.
    """

    if not isinstance(headers, CaseInsensitiveDict):
        headers = CaseInsensitiveDict(headers)
    raw = headers.get(LINK_HEADER)
    if not raw:
        return None
    if not isinstance(raw, str):
        raw = raw[0] if raw else ""
    links = parse_header_links(raw)
    if not links:
        return None
    first = links[0]
    if first.get("rel") != NEXT_RELATION:
        return None
    return first.get("url") or None


class Paginator:
    """Follow continuation links while honouring a caller-supplied item cap.

    Each round trip requests ``min(page_size, remaining)`` items, or
    ``page_size`` when the cap is 0 (everything available). After every
    round trip the remaining budget shrinks by the configured page size,
    whatever the server actually returned.
    """

    def __init__(self, api: APIClient, *, logger: BoundLogger | None = None) -> None:
        self._api = api
        self._log = logger or UnifiedLogger.get(__name__).bind(component="clients.paginator")

    @property
    def page_size(self) -> int:
        return self._api.config.page_size

    def fetch(
        self,
        url: str,
        *,
        params: QueryParams | None = None,
        limit: int = 0,
    ) -> PageSet:
        """Collect raw pages starting at ``url``.

        Failures never raise: the pages fetched so far come back together
        with the error in :attr:`PageSet.error`.

        A negative ``limit`` is a caller mistake and raises
        :class:`SparkValidationError` before any request, where the Go SDK
        returns an empty result without an error.
        """

        if limit < 0:
            raise SparkValidationError(f"max must be >= 0, got {limit}")

        page_size = self.page_size
        unbounded = limit == 0
        remaining = limit
        result = PageSet()
        current_url = url

        while unbounded or remaining > 0:
            requested = page_size if unbounded or remaining > page_size else remaining
            try:
                response = self._api.request(
                    "GET", current_url, params=params, page_size=requested
                )
            except Exception as exc:
                self._log.warning(
                    LogEvents.HTTP_PAGINATOR_ABORTED,
                    url=current_url,
                    page_index=len(result.pages),
                    error=str(exc),
                )
                result.error = exc
                return result

            result.pages.append(response.content)
            remaining -= page_size
            self._log.debug(
                LogEvents.HTTP_PAGINATOR_PAGE_FETCHED,
                url=current_url,
                page_index=len(result.pages) - 1,
                requested=requested,
                remaining=None if unbounded else remaining,
            )

            next_url = next_page_url(response.headers)
            if next_url is None:
                self._log.debug(LogEvents.HTTP_PAGINATOR_STOPPED, pages=len(result.pages))
                break
            self._log.debug(LogEvents.HTTP_PAGINATOR_NEXT_RESOLVED, next_url=next_url)
            current_url = next_url

        return result
