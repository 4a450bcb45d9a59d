import json
import time
import asyncio
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple
import aiohttp
from sendzen_core.errors import ApiError, ServerError, NetworkError, UnknownError
from sendzen_core.models.sendzen.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_MS,
    DeveloperOptions,
    RequestOptions,
    SendZenConfig
)
from sendzen_core.models.whatsapp.response.message_response import ApiResponse

class HttpMethods(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

class AsyncSendZenClient:
    """
    Issues requests against the SendZen messages endpoint and normalizes
    what comes back.

    Successful calls return an ``ApiResponse``. Failures raise ``ServerError``
    (gateway answered with 4xx/5xx), ``NetworkError`` (no response, including
    timeouts) or ``UnknownError``.

    Timeouts: milliseconds
    """
    __USER_AGENT = "sendzen-python/0.1.0"
    __DEFAULT_CONTENT_TYPE = "application/json"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT_MS,
        headers: Optional[Dict[str, str]] = None,
        developer_options: Optional[DeveloperOptions] = None,
        reuse_client: bool = False
    ):
        self._api_key = api_key.strip()
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._headers = dict(headers or {})
        self._developer_options = developer_options or DeveloperOptions()
        self._reuse_client = reuse_client
        self._session: Optional[aiohttp.ClientSession] = None
        self._logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_config(
        cls,
        config: SendZenConfig,
        reuse_client: bool = False
    ) -> "AsyncSendZenClient":
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            headers=config.headers,
            developer_options=config.developer_options,
            reuse_client=reuse_client
        )

    @property
    def developer_options(self) -> DeveloperOptions:
        return self._developer_options

    def __get_headers__(
        self,
        extra_headers: Optional[Dict[str, str]] = None
    ) -> Dict[str, str]:
        headers = {
            "Content-Type": self.__DEFAULT_CONTENT_TYPE,
            "Authorization": f"Bearer {self._api_key}",
            "User-Agent": self.__USER_AGENT,
        }
        headers.update(self._headers)
        if extra_headers:
            headers.update(extra_headers)
        return headers

    async def __get_session(self) -> Tuple[aiohttp.ClientSession, bool]:
        """Returns the session to use and whether the caller must close it."""
        if not self._reuse_client:
            return aiohttp.ClientSession(), True
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session, False

    def __get_url(self, endpoint: str) -> str:
        if endpoint and not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"
        return f"{self._base_url}{endpoint}"

    @staticmethod
    def __parse_body(raw: str) -> Any:
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            return raw

    async def __send(
        self,
        method: str,
        url: str,
        payload: Any,
        headers: Dict[str, str],
        timeout_ms: int
    ):
        session, close_after = await self.__get_session()
        params = {"_t": str(int(time.time() * 1000))}
        try:
            async with session.request(
                method,
                url,
                params=params,
                json=payload,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=timeout_ms / 1000)
            ) as response:
                raw = await response.text(errors="replace")
                return (
                    response.status,
                    response.reason or "",
                    dict(response.headers),
                    self.__parse_body(raw)
                )
        finally:
            if close_after:
                await session.close()

    async def arequest(
        self,
        method: str,
        endpoint: str = "",
        data: Any = None,
        options: Optional[RequestOptions] = None
    ) -> ApiResponse:
        method = method.upper()
        if method not in HttpMethods.__members__:
            raise ValueError(f"Unsupported HTTP method: {method}")
        options = options or RequestOptions()
        url = self.__get_url(endpoint)
        headers = self.__get_headers__(options.headers)
        timeout_ms = options.timeout or self._timeout
        payload = data if method in (HttpMethods.POST.value, HttpMethods.PUT.value, HttpMethods.PATCH.value) else None

        if self._developer_options.enable_request_logging:
            self.__log_request(method, url, payload, headers)
        self.__debug_log(f"Sending {method} request", {"url": url, "timeout_ms": timeout_ms})

        try:
            status, reason, response_headers, body = await self.__send(
                method, url, payload, headers, timeout_ms
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            error = NetworkError()
            self.__log_error("Request Error", error, cause=e)
            raise error from e
        except Exception as e:
            error = UnknownError(str(e))
            self.__log_error("Request Error", error, cause=e)
            raise error from e

        if status >= 400:
            error = self.__get_server_error(status, reason, body)
            self.__log_error("Response Error", error, data=body)
            raise error

        if self._developer_options.enable_response_logging:
            self.__log_response(status, reason, response_headers, body)
        return self.__format_response(status, reason, response_headers, body)

    async def aget(self, endpoint: str = "", options: Optional[RequestOptions] = None) -> ApiResponse:
        return await self.arequest(HttpMethods.GET.value, endpoint, options=options)

    async def apost(self, endpoint: str = "", data: Any = None, options: Optional[RequestOptions] = None) -> ApiResponse:
        return await self.arequest(HttpMethods.POST.value, endpoint, data, options)

    async def aput(self, endpoint: str = "", data: Any = None, options: Optional[RequestOptions] = None) -> ApiResponse:
        return await self.arequest(HttpMethods.PUT.value, endpoint, data, options)

    async def apatch(self, endpoint: str = "", data: Any = None, options: Optional[RequestOptions] = None) -> ApiResponse:
        return await self.arequest(HttpMethods.PATCH.value, endpoint, data, options)

    async def adelete(self, endpoint: str = "", options: Optional[RequestOptions] = None) -> ApiResponse:
        return await self.arequest(HttpMethods.DELETE.value, endpoint, options=options)

    def __get_server_error(
        self,
        status: int,
        reason: str,
        body: Any
    ) -> ServerError:
        body = body if isinstance(body, dict) else {}
        error_body = body.get("error") if isinstance(body.get("error"), dict) else {}
        return ServerError(
            message=body.get("message") or reason or "Request failed",
            code=error_body.get("code") or "API_ERROR",
            details=error_body.get("details") or "Unknown error details",
            status=status
        )

    def __format_response(
        self,
        status: int,
        reason: str,
        headers: Dict[str, str],
        body: Any
    ) -> ApiResponse:
        message = "Success"
        data = body
        if isinstance(body, dict):
            message = body.get("message") or "Success"
            data = body.get("data") or body
        return ApiResponse(
            message=message,
            data=data,
            status=status,
            status_text=reason,
            headers=headers
        )

    def __emit(
        self,
        level: int,
        title: str,
        log_data: Dict[str, Any]
    ) -> None:
        if level < _LOG_LEVELS[self._developer_options.log_level]:
            return
        log_data = {**log_data, "timestamp": datetime.now(timezone.utc).isoformat()}
        if self._developer_options.log_format == "json":
            self._logger.log(level, "%s: %s", title, json.dumps(log_data, indent=2, default=str))
            return
        lines = [title]
        for key, value in log_data.items():
            if value is None:
                continue
            if isinstance(value, (dict, list)):
                value = json.dumps(value, indent=2, default=str)
            lines.append(f"  {key}: {value}")
        self._logger.log(level, "\n".join(lines))

    def __log_request(self, method, url, payload, headers) -> None:
        masked_headers = dict(headers)
        masked_headers["Authorization"] = "Bearer ***"
        self.__emit(logging.INFO, "Request", {
            "method": method,
            "url": url,
            "data": payload,
            "headers": masked_headers,
        })

    def __log_response(self, status, reason, headers, body) -> None:
        self.__emit(logging.INFO, "Response", {
            "status": status,
            "status_text": reason,
            "data": body,
            "headers": headers,
        })

    def __log_error(
        self,
        error_type: str,
        error: ApiError,
        data: Any = None,
        cause: Optional[BaseException] = None
    ) -> None:
        if not self._developer_options.enable_error_logging:
            return
        self.__emit(logging.ERROR, "Error", {
            "type": error_type,
            "message": error.message,
            "code": error.code,
            "status": error.status,
            "data": data,
            "cause": repr(cause) if cause is not None else None,
        })

    def __debug_log(self, message: str, data: Any = None) -> None:
        if not self._developer_options.enable_debug_logging:
            return
        self.__emit(logging.DEBUG, "Debug", {"message": message, "data": data})

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self):
        if self._session is not None:
            await self._session.close()
            self._session = None
