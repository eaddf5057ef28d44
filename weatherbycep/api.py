"""HTTP clients for the location (CEP lookup) and weather services."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any


class NotFoundZipcodeError(LookupError):
    """Raised when the location service does not know a CEP."""

    def __init__(self, message: str = "can not find zipcode") -> None:
        super().__init__(message)


def _send(request: urllib.request.Request) -> bytes:
    """Return the response body, whatever the status code."""
    try:
        with urllib.request.urlopen(request) as response:
            return response.read()
    except urllib.error.HTTPError as exc:
        try:
            return exc.read()
        finally:
            exc.close()


def _object(value: Any, name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"unexpected JSON value for {name}: expected an object")
    return value


def _string(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"unexpected JSON value for {key}: expected a string")
    return value


def _number(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"unexpected JSON value for {key}: expected a number")
    return float(value)


@dataclass
class LocationClient:
    """Looks up the city of a CEP; ``@CEP`` in the URL is replaced by the code."""

    base_url: str

    def get_location(self, cep: str) -> str:
        url = self.base_url.replace("@CEP", cep)
        body = _send(urllib.request.Request(url, method="GET"))
        data = _object(json.loads(body), "location response")
        if _string(data, "erro") == "true":
            raise NotFoundZipcodeError()
        return _string(data, "localidade")


class WeatherClient:
    """Fetches the current temperature of a city from a bulk weather endpoint."""

    def __init__(self, url: str, api_key: str) -> None:
        self.base_url = url.replace("@APIKEY", api_key)

    def get_weather(self, city: str) -> float:
        payload = json.dumps({"locations": [{"q": city}]}, ensure_ascii=False, separators=(",", ":"))
        request = urllib.request.Request(
            self.base_url,
            data=payload.encode("utf-8"),
            headers={"Content-Type": "application/json"},
            method="POST",
        )
        data = _object(json.loads(_send(request)), "weather response")
        bulk = data.get("bulk") or []
        if not isinstance(bulk, list):
            raise ValueError("unexpected JSON value for bulk: expected an array")
        if not bulk:
            raise LookupError("weather response has no results")
        query = _object(_object(bulk[0], "bulk item").get("query"), "query")
        current = _object(query.get("current"), "current")
        return _number(current, "temp_c")