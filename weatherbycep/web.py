"""HTTP layer: the temperature handler, a small router and the server."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, unquote, urlsplit

from weatherbycep.api import NotFoundZipcodeError
from weatherbycep.entity import InvalidZipcodeError, LocationProvider, WeatherProvider
from weatherbycep.usecase import GetTempUseCase

logger = logging.getLogger(__name__)

Query = Mapping[str, Sequence[str]]


@dataclass
class Response:
    status: int
    body: bytes = b""
    content_type: str | None = "text/plain; charset=utf-8"
    headers: dict[str, str] = field(default_factory=dict)


def _error_response(message: str, status: int) -> Response:
    return Response(
        status, (message + "\n").encode(), headers={"X-Content-Type-Options": "nosniff"}
    )


@dataclass
class TempHandler:
    """Answers ``GET /temp?CEP=...`` with the temperatures of the CEP's city."""

    location_client: LocationProvider
    weather_client: WeatherProvider

    def get(self, query: Query) -> Response:
        raw_cep = (query.get("CEP") or [""])[0]
        try:
            output = GetTempUseCase(self.location_client, self.weather_client).execute(raw_cep)
        except InvalidZipcodeError as exc:
            return _error_response(str(exc), HTTPStatus.UNPROCESSABLE_ENTITY)
        except NotFoundZipcodeError as exc:
            return _error_response(str(exc), HTTPStatus.NOT_FOUND)
        except Exception as exc:
            return _error_response(str(exc), HTTPStatus.INTERNAL_SERVER_ERROR)
        values = {
            key: int(value) if value.is_integer() and abs(value) < 1e21 else value
            for key, value in output.to_dict().items()
        }
        try:
            payload = json.dumps(values, allow_nan=False, separators=(",", ":"))
        except ValueError as exc:
            return _error_response(str(exc), HTTPStatus.INTERNAL_SERVER_ERROR)
        return Response(HTTPStatus.OK, (payload + "\n").encode())


@dataclass(frozen=True)
class Route:
    path: str
    method: str
    handler: Callable[[Query], Response]


@dataclass
class WebServer:
    """Routes requests to registered handlers; only GET and POST routes are served."""

    address: str
    routes: list[Route] = field(default_factory=list)

    def add_handler(self, path: str, method: str, handler: Callable[[Query], Response]) -> None:
        self.routes.append(Route(path, method, handler))

    def dispatch(self, method: str, target: str) -> Response:
        parts = urlsplit(target)
        path = unquote(parts.path) or "/"
        matching = [r for r in self.routes if r.method in ("GET", "POST") and r.path == path]
        if not matching:
            return _error_response("404 page not found", HTTPStatus.NOT_FOUND)
        for route in reversed(matching):
            if route.method == method:
                return route.handler(parse_qs(parts.query, keep_blank_values=True))
        allowed = ", ".join(dict.fromkeys(r.method for r in matching))
        return Response(HTTPStatus.METHOD_NOT_ALLOWED, content_type=None, headers={"Allow": allowed})

    def make_server(self) -> ThreadingHTTPServer:
        """Bind a threaded HTTP server that dispatches to this router."""
        host, sep, port = self.address.rpartition(":")
        if self.address and not sep:
            raise ValueError(f"address {self.address}: missing port in address")
        bind = (host.strip("[]"), int(port or 0)) if self.address else ("", 80)
        dispatch = self.dispatch

        class _RequestHandler(BaseHTTPRequestHandler):
            def _handle(self) -> None:
                length = int(self.headers.get("Content-Length") or 0)
                if length:
                    self.rfile.read(length)
                response = dispatch(self.command, self.path)
                self.send_response(response.status)
                if response.content_type:
                    self.send_header("Content-Type", response.content_type)
                for name, value in response.headers.items():
                    self.send_header(name, value)
                self.send_header("Content-Length", str(len(response.body)))
                self.end_headers()
                if self.command != "HEAD":
                    self.wfile.write(response.body)
                logger.info('"%s %s" - %d', self.command, self.path, response.status)

            do_GET = do_POST = do_PUT = do_PATCH = do_DELETE = do_HEAD = do_OPTIONS = _handle

            def log_message(self, format: str, *args: object) -> None:
                logger.debug(format, *args)

        return ThreadingHTTPServer(bind, _RequestHandler)

    def start(self) -> None:
        with self.make_server() as server:
            server.serve_forever()


@dataclass
class WebServerStarter:
    web_server: WebServer