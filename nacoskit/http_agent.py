"""A small HTTP client used to talk to the servers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence, Union

import requests

from nacoskit import logger
from nacoskit.util.common import get_url_formed_map, to_json_string

HeaderValue = Union[str, Sequence[str]]
Header = Mapping[str, HeaderValue]

METHOD_GET = "GET"
METHOD_POST = "POST"
METHOD_PUT = "PUT"
METHOD_DELETE = "DELETE"


class HttpAgentError(Exception):
    """Raised when a request cannot be made or the method is not supported."""


@dataclass
class HttpResponse:
    """A completed HTTP response with its whole body."""

    status_code: int
    body: bytes = b""
    status: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        """The body decoded as UTF-8."""
        return self.body.decode("utf-8", errors="replace")


def fake_http_response(status: int, body: str) -> HttpResponse:
    """Build a response without a server, for tests and stubs."""
    return HttpResponse(
        status_code=status,
        body=body.encode("utf-8"),
        status=str(status),
        headers={},
    )


def _log_error(msg: str, *args: Any) -> None:
    log = logger.get_logger()
    if log is not None:
        log.error(msg, *args)


def _timeout(timeout_ms: int) -> float | None:
    return timeout_ms / 1000 if timeout_ms else None


def _headers(header: Header | None) -> dict[str, str]:
    if not header:
        return {}
    result = {}
    for key, value in header.items():
        result[key] = value if isinstance(value, str) else ", ".join(value)
    return result


def _with_query(path: str, params: Mapping[str, str] | None) -> str:
    if not path.endswith("?"):
        path += "?"
    path += "&".join(f"{key}={value}" for key, value in (params or {}).items())
    return path


def _put_body(params: Mapping[str, str] | None) -> str:
    return "&".join(
        f"{key}={value}" for key, value in (params or {}).items() if value
    )


class HttpAgent:
    """Sends GET, POST, PUT and DELETE requests with form-style parameters."""

    def _send(
        self,
        method: str,
        url: str,
        header: Header | None,
        timeout_ms: int,
        body: str | None = None,
    ) -> HttpResponse:
        try:
            resp = requests.request(
                method,
                url,
                headers=_headers(header),
                data=body.encode("utf-8") if body is not None else None,
                timeout=_timeout(timeout_ms),
            )
        except requests.RequestException as exc:
            raise HttpAgentError(str(exc)) from exc
        return HttpResponse(
            status_code=resp.status_code,
            body=resp.content,
            status=f"{resp.status_code} {resp.reason}".strip(),
            headers=dict(resp.headers),
        )

    def get(
        self,
        path: str,
        header: Header | None,
        timeout_ms: int,
        params: Mapping[str, str] | None,
    ) -> HttpResponse:
        """Send a GET with the parameters appended to the query string."""
        return self._send(METHOD_GET, _with_query(path, params), header, timeout_ms)

    def post(
        self,
        path: str,
        header: Header | None,
        timeout_ms: int,
        params: Mapping[str, str] | None,
    ) -> HttpResponse:
        """Send a POST with the parameters form-encoded in the body."""
        body = get_url_formed_map(params or {})
        return self._send(METHOD_POST, path, header, timeout_ms, body)

    def put(
        self,
        path: str,
        header: Header | None,
        timeout_ms: int,
        params: Mapping[str, str] | None,
    ) -> HttpResponse:
        """Send a PUT with the non-empty parameters in the body."""
        return self._send(METHOD_PUT, path, header, timeout_ms, _put_body(params))

    def delete(
        self,
        path: str,
        header: Header | None,
        timeout_ms: int,
        params: Mapping[str, str] | None,
    ) -> HttpResponse:
        """Send a DELETE with the parameters appended to the query string."""
        return self._send(METHOD_DELETE, _with_query(path, params), header, timeout_ms)

    def request(
        self,
        method: str,
        path: str,
        header: Header | None,
        timeout_ms: int,
        params: Mapping[str, str] | None,
    ) -> HttpResponse:
        """Send a request by method name.

        Raises HttpAgentError for an unsupported method or a failed request.
        """
        handlers = {
            METHOD_GET: self.get,
            METHOD_POST: self.post,
            METHOD_PUT: self.put,
            METHOD_DELETE: self.delete,
        }
        handler = handlers.get(method)
        if handler is None:
            _log_error(
                "request method[%s], path[%s],header:[%s],params:[%s], not available method ",
                method,
                path,
                to_json_string(header),
                to_json_string(params),
            )
            raise HttpAgentError("not available method")
        return handler(path, header, timeout_ms, params)

    def request_only_result(
        self,
        method: str,
        path: str,
        header: Header | None,
        timeout_ms: int,
        params: Mapping[str, str] | None,
    ) -> str:
        """Send a request and return its body, or an empty string on any failure."""
        try:
            response = self.request(method, path, header, timeout_ms, params)
        except HttpAgentError as exc:
            _log_error(
                "request method[%s],request path[%s],header:[%s],params:[%s],err:%s",
                method,
                path,
                to_json_string(header),
                to_json_string(params),
                exc,
            )
            return ""
        if response.status_code != 200:
            _log_error(
                "request method[%s],request path[%s],header:[%s],params:[%s],status code error:%d",
                method,
                path,
                to_json_string(header),
                to_json_string(params),
                response.status_code,
            )
            return ""
        return response.text