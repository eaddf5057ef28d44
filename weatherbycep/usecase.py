"""The use case: from a raw CEP to rounded temperatures."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from weatherbycep.entity import LocationProvider, Temperature, WeatherProvider, new_cep


def _round_tenth(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    if not math.isfinite(value):
        return value
    scaled = Decimal(value * 10).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return float(scaled) / 10


@dataclass(frozen=True)
class TempOutput:
    """Temperatures rounded to one decimal place."""

    temp_c: float
    temp_f: float
    temp_k: float

    def to_dict(self) -> dict[str, float]:
        return {"temp_C": self.temp_c, "temp_F": self.temp_f, "temp_K": self.temp_k}


@dataclass
class GetTempUseCase:
    """Validates a CEP, resolves its city and reports the city's temperature."""

    location_client: LocationProvider
    weather_client: WeatherProvider

    def execute(self, raw_cep: str) -> TempOutput:
        cep = new_cep(raw_cep)
        location = self.location_client.get_location(cep)
        temperature = Temperature.from_celsius(self.weather_client.get_weather(location))
        return TempOutput(
            temp_c=_round_tenth(temperature.temp_c),
            temp_f=_round_tenth(temperature.temp_f),
            temp_k=_round_tenth(temperature.temp_k),
        )