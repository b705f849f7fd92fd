"""REST implementation of the service client."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar
from urllib.parse import quote

import requests
from loguru import logger
from pydantic import BaseModel, ValidationError

from odps_console.client.models import OnlineModel, TablePage
from odps_console.config import Settings
from odps_console.errors import ConfigurationError, InvalidResponseError, NotFoundError, ServiceError

DEFAULT_TIMEOUT_SECONDS = 30
DEFAULT_PAGE_SIZE = 1000
USER_AGENT = "odps-console/0.1"

ModelT = TypeVar("ModelT", bound=BaseModel)


class RestServiceClient:
    """Thin synchronous client for the project/table/online-model endpoints."""

    def __init__(
        self,
        endpoint: str,
        *,
        access_id: str | None = None,
        access_key: str | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        page_size: int = DEFAULT_PAGE_SIZE,
        session: requests.Session | None = None,
    ) -> None:
        self._endpoint = endpoint.rstrip("/")
        self._timeout = timeout_seconds
        self._page_size = page_size
        self._session = session or requests.Session()
        self._session.headers.setdefault("User-Agent", USER_AGENT)
        self._session.headers.setdefault("Accept", "application/json")
        if access_id and access_key:
            self._session.auth = (access_id, access_key)

    @classmethod
    def from_settings(cls, settings: Settings) -> RestServiceClient:
        if not settings.endpoint:
            raise ConfigurationError("Service endpoint is not configured. Set ODPS_ENDPOINT.")
        return cls(
            settings.endpoint,
            access_id=settings.access_id,
            access_key=settings.access_key,
            timeout_seconds=settings.timeout_seconds,
            page_size=settings.page_size,
        )

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> RestServiceClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        _ = (exc_type, exc, tb)
        self.close()

    def list_tables(self, project: str | None, prefix: str | None = None) -> Iterator[str]:
        """Yield table names page by page, following the service marker."""

        path = f"{_project_path(project)}/tables"
        marker: str | None = None
        while True:
            params: dict[str, Any] = {"maxitems": self._page_size}
            if prefix:
                params["prefix"] = prefix
            if marker:
                params["marker"] = marker
            page = _parse(TablePage, self._get(path, params=params))
            yield from page.tables
            if not page.marker:
                return
            if page.marker == marker:
                raise InvalidResponseError(200, f"Table listing repeated marker: {marker}")
            marker = page.marker

    def online_model_exists(self, project: str | None, name: str) -> bool:
        try:
            self._get(_online_model_path(project, name))
        except NotFoundError:
            return False
        return True

    def get_online_model(self, project: str | None, name: str) -> OnlineModel:
        response = self._get(_online_model_path(project, name), not_found=("Onlinemodel", name))
        return _parse(OnlineModel, response)

    def _get(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        not_found: tuple[str, str] | None = None,
    ) -> requests.Response:
        url = f"{self._endpoint}{path}"
        logger.debug("client.request method=GET path={} params={}", path, params)
        response = self._session.get(url, params=params, timeout=self._timeout)
        if response.status_code == 404:
            kind, name = not_found or ("Resource", path)
            raise NotFoundError(kind, name)
        if response.status_code >= 400:
            raise ServiceError(response.status_code, response.text.strip() or response.reason or "")
        return response


def _parse(model: type[ModelT], response: requests.Response) -> ModelT:
    try:
        return model.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        raise InvalidResponseError(response.status_code, f"Unexpected {model.__name__} payload: {exc}") from exc


def _project_path(project: str | None) -> str:
    if not project:
        raise ConfigurationError("No project specified. Use -p/--project or set ODPS_PROJECT.")
    return f"/projects/{quote(project, safe='')}"


def _online_model_path(project: str | None, name: str) -> str:
    return f"{_project_path(project)}/onlinemodels/{quote(name, safe='')}"
