"""Command entry point: load settings and serve ``GET /temp``."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from weatherbycep.api import LocationClient, WeatherClient
from weatherbycep.config import Config, load_config
from weatherbycep.web import TempHandler, WebServer


def build_server(config: Config) -> WebServer:
    server = WebServer(config.web_server_port)
    handler = TempHandler(
        LocationClient(config.location_client_url),
        WeatherClient(config.weather_client_url, config.weather_client_key),
    )
    server.add_handler("/temp", "GET", handler.get)
    return server


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(prog="weatherbycep").parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    config = load_config(".")
    server = build_server(config)
    print("Starting web server on port ", config.web_server_port)
    server.start()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())