"""Application settings read from a ``.env`` file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values


@dataclass(frozen=True)
class Config:
    location_client_url: str = ""
    weather_client_url: str = ""
    weather_client_key: str = ""
    web_server_port: str = ""


def load_config(path: str | os.PathLike[str]) -> Config:
    """Load ``<path>/.env``; non-empty environment variables override its keys."""
    env_file = Path(path) / ".env"
    if not env_file.is_file():
        raise FileNotFoundError(f"config file not found: {env_file}")
    values = {key.upper(): value for key, value in dotenv_values(env_file).items()}
    return Config(
        **{
            name: (os.environ.get(name.upper()) or values[name.upper()] or "")
            if name.upper() in values
            else ""
            for name in Config.__dataclass_fields__
        }
    )