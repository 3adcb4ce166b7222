import datetime

import pytest
from fastapi.testclient import TestClient

from circuits.repository import CIRCUIT
from constructors.repository import CONSTRUCTOR
from core.db import Database, Failed, Fetched
from core.errors import DataSourceError
from drivers.repository import DRIVER
from main import create_app
from qualifying.repository import QUALIFYING_ENTRY
from races.repository import RACE
from results.repository import RESULT
from standings.repository import CONSTRUCTOR_STANDING, DRIVER_STANDING


def flatten(projection, data):
    """Flat aliased row, as the database returns it, for a nested dict."""
    row = {projection.alias(name): data[name] for name in projection.columns}
    for key, child in projection.nested.items():
        row.update(flatten(child, data[key]))
    return row


class FakeDatabase(Database):
    """In-memory stand-in: records every statement and returns canned rows."""

    def __init__(self):
        super().__init__(None)
        self.rows = []
        self.failure = None
        self.calls = []
        self.opened = False

    async def connect(self):
        self.opened = True

    async def close(self):
        self.opened = False

    async def fetch_all(self, sql, *args):
        self.calls.append((sql, args))
        if self.failure is not None:
            return Failed(self.failure)
        return Fetched(list(self.rows))

    async def fetch_one(self, sql, *args):
        self.calls.append((sql, args))
        if self.failure is not None:
            return Failed(self.failure)
        return Fetched(self.rows[0] if self.rows else None)

    def fail(self, detail="connection refused"):
        self.failure = DataSourceError(detail)

    @property
    def last_sql(self):
        return self.calls[-1][0]

    @property
    def last_args(self):
        return self.calls[-1][1]


MONZA = {
    "circuit_id": 14,
    "circuit_ref": "monza",
    "name": "Autodromo Nazionale di Monza",
    "location": "Monza",
    "country": "Italy",
    "lat": 45.6156,
    "lng": 9.28111,
    "alt": 162,
    "url": "http://en.wikipedia.org/wiki/Autodromo_Nazionale_Monza",
}

SILVERSTONE = {
    "circuit_id": 9,
    "circuit_ref": "silverstone",
    "name": "Silverstone Circuit",
    "location": "Silverstone",
    "country": "UK",
    "lat": 52.0786,
    "lng": -1.01694,
    "alt": 153,
    "url": "http://en.wikipedia.org/wiki/Silverstone_Circuit",
}

HAMILTON = {
    "driver_id": 1,
    "driver_ref": "hamilton",
    "number": 44,
    "code": "HAM",
    "forename": "Lewis",
    "surname": "Hamilton",
    "dob": datetime.date(1985, 1, 7),
    "nationality": "British",
    "url": "http://en.wikipedia.org/wiki/Lewis_Hamilton",
}

HAMMOND = {
    "driver_id": 900,
    "driver_ref": "hammond",
    "number": None,
    "code": None,
    "forename": "Peter",
    "surname": "Hammond",
    "dob": None,
    "nationality": "British",
    "url": None,
}

MCLAREN = {
    "constructor_id": 1,
    "constructor_ref": "mclaren",
    "name": "McLaren",
    "nationality": "British",
    "url": "http://en.wikipedia.org/wiki/McLaren",
}

ITALIAN_GP_2008 = {
    "race_id": 15,
    "year": 2008,
    "round": 14,
    "name": "Italian Grand Prix",
    "date": datetime.date(2008, 9, 14),
    "time": datetime.time(12, 0),
    "url": "http://en.wikipedia.org/wiki/2008_Italian_Grand_Prix",
}


def circuit_row(**overrides):
    return flatten(CIRCUIT, {**MONZA, **overrides})


def constructor_row(**overrides):
    return flatten(CONSTRUCTOR, {**MCLAREN, **overrides})


def driver_row(**overrides):
    return flatten(DRIVER, {**HAMILTON, **overrides})


def race_row(circuit=None, **overrides):
    return flatten(RACE, {**ITALIAN_GP_2008, **overrides, "circuit": circuit or MONZA})


def result_row(driver=None, race=None, **overrides):
    data = {
        "result_id": 7573,
        "race_id": ITALIAN_GP_2008["race_id"],
        "number": 22,
        "grid": 15,
        "position": 7,
        "position_text": "7",
        "position_order": 7,
        "points": 2.0,
        "laps": 53,
        "time": "+29.912",
        "milliseconds": 5260000,
        "fastest_lap": 49,
        "rank": 6,
        "fastest_lap_time": "1:29.000",
        "fastest_lap_speed": "234.335",
        "status": {"status_id": 1, "status": "Finished"},
        "driver": driver or HAMILTON,
        "constructor": MCLAREN,
        "race": race or ITALIAN_GP_2008,
    }
    data.update(overrides)
    return flatten(RESULT, data)


def qualifying_row(**overrides):
    data = {
        "qualify_id": 300,
        "race_id": ITALIAN_GP_2008["race_id"],
        "driver_id": HAMILTON["driver_id"],
        "constructor_id": MCLAREN["constructor_id"],
        "number": 22,
        "position": 15,
        "q1": "1:36.000",
        "q2": "1:37.000",
        "q3": None,
        "driver": HAMILTON,
        "constructor": MCLAREN,
        "race": ITALIAN_GP_2008,
    }
    data.update(overrides)
    return flatten(QUALIFYING_ENTRY, data)


def driver_standing_row(**overrides):
    data = {
        "driver_standings_id": 6000,
        "race_id": ITALIAN_GP_2008["race_id"],
        "points": 78.0,
        "position": 1,
        "position_text": "1",
        "wins": 4,
        "driver": HAMILTON,
        "race": ITALIAN_GP_2008,
    }
    data.update(overrides)
    return flatten(DRIVER_STANDING, data)


def constructor_standing_row(**overrides):
    data = {
        "constructor_standings_id": 2500,
        "race_id": ITALIAN_GP_2008["race_id"],
        "points": 114.0,
        "position": 2,
        "position_text": "2",
        "wins": 4,
        "constructor": MCLAREN,
        "race": ITALIAN_GP_2008,
    }
    data.update(overrides)
    return flatten(CONSTRUCTOR_STANDING, data)


@pytest.fixture()
def fake_db():
    return FakeDatabase()


@pytest.fixture()
def client(fake_db):
    with TestClient(create_app(database=fake_db)) as test_client:
        yield test_client
