import pytest

from weatherbycep.api import NotFoundZipcodeError
from weatherbycep.entity import InvalidZipcodeError
from weatherbycep.usecase import GetTempUseCase, TempOutput


class FakeLocation:
    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def get_location(self, cep):
        self.calls.append(cep)
        if self.error is not None:
            raise self.error
        if cep == "13098401":
            return "Campinas"
        raise NotFoundZipcodeError()


class FakeWeather:
    def __init__(self, temp=28.5):
        self.temp = temp
        self.cities = []

    def get_weather(self, city):
        self.cities.append(city)
        return self.temp


def test_execute_returns_rounded_temperatures():
    weather = FakeWeather()
    use_case = GetTempUseCase(FakeLocation(), weather)
    assert use_case.execute("13098401") == TempOutput(temp_c=28.5, temp_f=83.3, temp_k=301.5)
    assert weather.cities == ["Campinas"]


def test_execute_not_found():
    use_case = GetTempUseCase(FakeLocation(), FakeWeather())
    with pytest.raises(NotFoundZipcodeError):
        use_case.execute("07085311")


def test_execute_invalid_zipcode_skips_lookup():
    location = FakeLocation()
    use_case = GetTempUseCase(location, FakeWeather())
    with pytest.raises(InvalidZipcodeError):
        use_case.execute("13098")
    assert location.calls == []


def test_execute_propagates_other_errors():
    use_case = GetTempUseCase(FakeLocation(error=RuntimeError("bad request")), FakeWeather())
    with pytest.raises(RuntimeError, match="bad request"):
        use_case.execute("13098401")


@pytest.mark.parametrize(
    "temp_c, expected",
    [
        (-10.1, TempOutput(temp_c=-10.1, temp_f=13.8, temp_k=262.9)),
        (-32, TempOutput(temp_c=-32, temp_f=-25.6, temp_k=241)),
        (49.5, TempOutput(temp_c=49.5, temp_f=121.1, temp_k=322.5)),
    ],
)
def test_execute_rounding(temp_c, expected):
    use_case = GetTempUseCase(FakeLocation(), FakeWeather(temp_c))
    assert use_case.execute("13098401") == expected


def test_to_dict_keys():
    output = TempOutput(temp_c=28.5, temp_f=83.3, temp_k=301.5)
    assert output.to_dict() == {"temp_C": 28.5, "temp_F": 83.3, "temp_K": 301.5}