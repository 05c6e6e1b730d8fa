"""Base class shared by the per-resource clients."""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar
from urllib.parse import quote

from structlog.stdlib import BoundLogger

from sparkapi.clients.http.pagination import Paginator
from sparkapi.core.api_client import APIClient, QueryParams
from sparkapi.core.exceptions import (
    PartialResultError,
    ResponseDecodeError,
    SparkValidationError,
)
from sparkapi.core.logging import LogEvents, UnifiedLogger, emit
from sparkapi.schemas.common import ItemList, SparkModel, decode

__all__ = ["ResourceClient"]

ModelT = TypeVar("ModelT", bound=SparkModel)


class ResourceClient:
    """Validate, serialise, send and decode for one resource collection.

    Subclasses set :attr:`resource` to the collection path below the API
    root (``"people"``, ``"rooms"`` ...).
    """

    resource: ClassVar[str]

    def __init__(
        self,
        api: APIClient,
        paginator: Paginator | None = None,
        *,
        logger: BoundLogger | None = None,
    ) -> None:
        self._api = api
        self._paginator = paginator or Paginator(api)
        self._log = logger or UnifiedLogger.get(__name__).bind(
            component=f"clients.{self.resource}"
        )

    @property
    def url(self) -> str:
        return self._api.config.resource_url(self.resource)

    def item_url(self, item_id: str) -> str:
        return f"{self.url}/{quote(item_id, safe='=-_.~')}"

    def _invalid(self, message: str) -> SparkValidationError:
        self._log.warning(LogEvents.CLIENT_VALIDATION_FAILED, reason=message)
        return SparkValidationError(message)

    def _require(self, value: Any, message: str) -> None:
        if not value:
            raise self._invalid(message)

    def _decode(self, model: type[ModelT], content: bytes) -> ModelT:
        try:
            return decode(model, content)
        except ResponseDecodeError as exc:
            self._log.warning(LogEvents.CLIENT_DECODE_FAILED, model=model.__name__, error=str(exc))
            raise

    def _get(self, model: type[ModelT], url: str) -> ModelT:
        return self._decode(model, self._api.get(url))

    def _post(self, model: type[ModelT], url: str, payload: SparkModel) -> ModelT:
        return self._decode(model, self._api.post(url, payload.to_json()))

    def _put(self, model: type[ModelT], url: str, payload: SparkModel) -> ModelT:
        return self._decode(model, self._api.put(url, payload.to_json()))

    def _delete(self, url: str) -> None:
        self._api.delete(url)

    def _list(
        self,
        model: type[ModelT],
        max_items: int,
        params: QueryParams | None = None,
    ) -> list[ModelT]:
        """Fetch up to ``max_items`` records (0 = all) and flatten the pages.

        A failure with nothing decoded re-raises that failure. Anything
        else that went wrong after records were decoded raises
        :class:`PartialResultError` carrying those records and every cause.
        """

        page_set = self._paginator.fetch(self.url, params=params, limit=max_items)
        items: list[ModelT] = []
        causes: list[Exception] = []
        if page_set.error is not None:
            causes.append(page_set.error)

        envelope = ItemList[model]  # type: ignore[valid-type]
        for content in page_set.pages:
            try:
                page = decode(envelope, content)
            except ResponseDecodeError as exc:
                causes.append(exc)
                break
            items.extend(page.items)

        if not causes:
            emit(self._log, LogEvents.CLIENT_LIST_COMPLETED, pages=len(page_set), items=len(items))
            return items
        if not items and len(causes) == 1:
            raise causes[0]
        self._log.warning(
            LogEvents.CLIENT_LIST_PARTIAL,
            items=len(items),
            causes=[type(cause).__name__ for cause in causes],
        )
        raise PartialResultError(items, causes) from causes[-1]

    @staticmethod
    def _query(params: Any | None) -> dict[str, list[str]]:
        return params.to_query() if params is not None else {}
