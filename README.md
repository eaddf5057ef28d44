# weatherbycep

A small HTTP service that takes a Brazilian zipcode (CEP), finds the city it
belongs to, looks up the current temperature there, and answers with the value
in Celsius, Fahrenheit and Kelvin.

## Installing

```
pip install .
```

## Configuration

Settings are read from a `.env` file in the working directory. The file must
exist; otherwise `load_config` raises `FileNotFoundError`. For each key that
appears in the file, an environment variable of the same name takes precedence
when it is set and not empty. Keys missing from the file are left empty.

```
LOCATION_CLIENT_URL=https://cep-service.example.com/ws/@CEP/json/
WEATHER_CLIENT_URL=https://weather-service.example.com/v1/current.json?key=@APIKEY&q=bulk
WEATHER_CLIENT_KEY=placeholder
WEB_SERVER_PORT=:8080
```

- `LOCATION_CLIENT_URL`: the zipcode lookup address; `@CEP` is replaced by the
  requested zipcode. The service is expected to answer with a JSON object
  holding `localidade`; `"erro": "true"` marks an unknown zipcode.
- `WEATHER_CLIENT_URL`: the bulk weather endpoint; `@APIKEY` is replaced by
  `WEATHER_CLIENT_KEY`. A JSON body `{"locations":[{"q":"<city>"}]}` is posted
  to it, and the temperature is read from `bulk[0].query.current.temp_c`.
- `WEB_SERVER_PORT`: the address to listen on, as `host:port` or `:port`
  (for example `:8080`). When empty, the server listens on port 80.

## Running

```
weatherbycep
```

The command takes no options. It prints the address it listens on and logs
each request at INFO level. Then ask for a temperature:

```
GET /temp?CEP=13098401
```

```
{"temp_C":28.5,"temp_F":83.3,"temp_K":301.5}
```

Values are rounded to one decimal place, halves away from zero; whole values
are written without a fraction (`28` rather than `28.0`). Fahrenheit is
Celsius × 1.8 + 32, and Kelvin is Celsius + 273.

| Situation                          | Status | Body (plain text)       |
|------------------------------------|--------|-------------------------|
| Success                            | 200    | JSON as above           |
| CEP is not exactly eight digits    | 422    | `invalid zipcode`       |
| CEP is not known                   | 404    | `can not find zipcode`  |
| Any other failure                  | 500    | the error message       |
| Unknown path                       | 404    | `404 page not found`    |
| Known path, other method           | 405    | empty, with `Allow`     |

## Using it as a library

```python
from weatherbycep.api import LocationClient, WeatherClient
from weatherbycep.usecase import GetTempUseCase

location_client = LocationClient("https://cep-service.example.com/ws/@CEP/json/")
weather_client = WeatherClient(
    "https://weather-service.example.com/v1/current.json?key=@APIKEY&q=bulk",
    "placeholder",
)
result = GetTempUseCase(location_client, weather_client).execute("13098401")
print(result.to_dict())  # {'temp_C': ..., 'temp_F': ..., 'temp_K': ...}
```

`execute` raises `InvalidZipcodeError` (a `ValueError`) for a malformed CEP
and `NotFoundZipcodeError` (a `LookupError`) when the location service does
not know it.

Modules:

- `weatherbycep.entity`: the zipcode check (`new_cep`, `is_valid_cep`,
  `InvalidZipcodeError`), `Temperature.from_celsius`, and the
  `LocationProvider` / `WeatherProvider` protocols, which other data sources
  can implement.
- `weatherbycep.api`: `LocationClient`, `WeatherClient` and
  `NotFoundZipcodeError`.
- `weatherbycep.usecase`: `GetTempUseCase` and its result, `TempOutput`.
- `weatherbycep.web`: `TempHandler`, whose `get(query)` returns a `Response`;
  `WebServer`, with `add_handler(path, method, handler)`, `dispatch(method,
  target)` for routing without a socket, `make_server()` and `start()`. Only
  GET and POST routes are served.
- `weatherbycep.config`: `Config` and `load_config(path)`.
- `weatherbycep.main`: `build_server(config)` and `main()`, the command.

## Tests

```
pip install ".[test]"
pytest
```