import pytest
from citysearch.models import Coordinate, Record


def _city(i: int, name: str, country: str, lon: float = 0.0, lat: float = 0.0) -> Record:
    return Record(id=i, name=name, country=country, coord=Coordinate(lon=lon, lat=lat))


@pytest.fixture
def cities() -> list[Record]:
    return [
        _city(1, "Buenos Aires", "Argentina", -58.3816, -34.6037),
        _city(2, "New York", "USA", -74.0060, 40.7128),
        _city(3, "London", "UK", -0.1276, 51.5074),
        _city(4, "São Paulo", "Brasil", -46.6333, -23.5505),
        _city(5, "Paris", "France", 2.3522, 48.8566),
        _city(6, "Tokyo", "Japan", 139.6917, 35.6895),
        _city(7, "Sydney", "Australia", 151.2093, -33.8688),
        _city(8, "Berlin", "Germany", 13.4050, 52.5200),
        _city(9, "Madrid", "Spain", -3.7038, 40.4168),
        _city(10, "Rome", "Italy", 12.4964, 41.9028),
    ]


@pytest.fixture
def three_cities() -> list[Record]:
    return [
        _city(1, "Buenos Aires", "Argentina", -58.3816, -34.6037),
        _city(2, "New York", "USA", -74.0060, 40.7128),
        _city(3, "London", "UK", -0.1276, 51.5074),
    ]


@pytest.fixture
def new_cities() -> list[Record]:
    return [
        _city(1, "New York", "USA"),
        _city(2, "New Orleans", "USA"),
        _city(3, "Newark", "USA"),
        _city(4, "Newcastle", "UK"),
    ]
