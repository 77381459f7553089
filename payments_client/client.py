"""
HTTP clients for the payments API.

Client wraps httpx.Client, AsyncClient wraps httpx.AsyncClient. Both expose
get_query(path, params, model), the single call resources need, and raise
the errors in payments_client.errors.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from payments_client import config
from payments_client.errors import (
    APIConnectionError,
    ConfigurationError,
    DeserializationError,
    api_error_from_response,
)
from payments_client.params import QueryParams, encode_query

logger = logging.getLogger("payments_client.client")

M = TypeVar("M", bound=BaseModel)

Params = Union[QueryParams, Mapping[str, Any], None]


class BaseClient:
    """
    Request building and response handling shared by the sync and async clients.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        api_version: Optional[str] = None,
    ):
        if not api_key:
            raise ConfigurationError("No API key provided; set PAYMENTS_API_KEY or pass api_key")
        self.api_key = api_key
        self.base_url = (base_url or config.DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.api_version = api_version

    @classmethod
    def from_env(cls, **kwargs):
        """
        Build a client from PAYMENTS_* environment variables (and .env).
        """
        return cls(
            api_key=kwargs.pop("api_key", config.API_KEY),
            base_url=kwargs.pop("base_url", config.API_BASE_URL),
            timeout=kwargs.pop("timeout", config.REQUEST_TIMEOUT),
            api_version=kwargs.pop("api_version", config.API_VERSION),
            **kwargs,
        )

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        if self.api_version:
            headers["Stripe-Version"] = self.api_version
        return headers

    @staticmethod
    def _query(params: Params) -> List[Tuple[str, str]]:
        if params is None:
            return []
        if isinstance(params, QueryParams):
            return params.to_query()
        return encode_query(params)

    @staticmethod
    def _handle_response(method: str, url: str, response: httpx.Response, model: Type[M]) -> M:
        logger.info("%s %s -> %s", method, url, response.status_code)

        # redirects are not followed, so anything outside 2xx is an error
        if not response.is_success:
            try:
                body = response.json()
            except ValueError:
                body = None
            logger.error("HTTP error %s %s -> %s %s", method, url, response.status_code, response.text[:500])
            raise api_error_from_response(response.status_code, body, response.text)

        try:
            payload = response.json()
        except ValueError as e:
            raise DeserializationError(f"{method} {url} returned a non-JSON body", body=response.text) from e

        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise DeserializationError(
                f"{method} {url} returned a body that does not match {model.__name__}: {e}",
                body=response.text,
            ) from e


class Client(BaseClient):
    """
    Synchronous client. Usable as a context manager; closes the underlying
    httpx.Client only if it created it.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        api_version: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        super().__init__(api_key, base_url=base_url, timeout=timeout, api_version=api_version)
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=self.timeout)

    def get_query(self, path: str, params: Params, model: Type[M]) -> M:
        url = self._url(path)
        try:
            resp = self._client.get(url, params=self._query(params), headers=self._headers())
        except httpx.RequestError as e:
            logger.exception("HTTPX request failed: %s", e)
            raise APIConnectionError(f"GET {url} failed: {e}") from e
        return self._handle_response("GET", url, resp, model)

    def close(self):
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class AsyncClient(BaseClient):
    """
    Asynchronous client; get_query is a coroutine.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        api_version: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(api_key, base_url=base_url, timeout=timeout, api_version=api_version)
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=self.timeout)

    async def get_query(self, path: str, params: Params, model: Type[M]) -> M:
        url = self._url(path)
        try:
            resp = await self._client.get(url, params=self._query(params), headers=self._headers())
        except httpx.RequestError as e:
            logger.exception("HTTPX request failed: %s", e)
            raise APIConnectionError(f"GET {url} failed: {e}") from e
        return self._handle_response("GET", url, resp, model)

    async def close(self):
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()
