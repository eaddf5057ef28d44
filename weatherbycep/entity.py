"""Domain values: the Brazilian postal code (CEP) and temperatures."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Protocol

_CEP_PATTERN = re.compile(r"[0-9]{8}")


class InvalidZipcodeError(ValueError):
    def __init__(self, message: str = "invalid zipcode") -> None:
        super().__init__(message)


def is_valid_cep(value: str) -> bool:
    return _CEP_PATTERN.fullmatch(value) is not None


def new_cep(value: str) -> str:
    if not is_valid_cep(value):
        raise InvalidZipcodeError()
    return value


class LocationProvider(Protocol):
    def get_location(self, cep: str) -> str: ...


class WeatherProvider(Protocol):
    def get_weather(self, city: str) -> float: ...


@dataclass(frozen=True)
class Temperature:
    temp_c: float
    temp_f: float
    temp_k: float

    @classmethod
    def from_celsius(cls, temp_c: float) -> Temperature:
        return cls(temp_c, temp_c * 1.8 + 32, temp_c + 273)