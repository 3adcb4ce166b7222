import datetime

from conftest import SILVERSTONE, race_row

BRITISH_GP_1950 = {
    "race_id": 833,
    "year": 1950,
    "round": 1,
    "name": "British Grand Prix",
    "date": datetime.date(1950, 5, 13),
    "time": None,
    "url": "http://en.wikipedia.org/wiki/1950_British_Grand_Prix",
}


def test_race_for_season_round_has_nested_circuit(client, fake_db):
    fake_db.rows = [race_row(circuit=SILVERSTONE, **BRITISH_GP_1950)]
    response = client.get("/races/season/1950/1")
    assert response.status_code == 200
    body = response.json()
    assert body["raceId"] == 833
    assert body["name"] == "British Grand Prix"
    assert body["date"] == "1950-05-13"
    assert body["time"] is None
    assert body["circuit"]["circuitRef"] == "silverstone"
    assert body["circuit"]["name"] == "Silverstone Circuit"
    assert fake_db.last_args == (1950, 1)


def test_missing_season_round_is_404(client, fake_db):
    response = client.get("/races/season/1949/1")
    assert response.status_code == 404
    assert response.json() == {"error": "Race round 1 for season 1949 was not found."}


def test_races_for_season_sorts_in_sql_by_round(client, fake_db):
    client.get("/races/season/2008")
    assert "ORDER BY ra.round ASC, ra.raceId ASC" in fake_db.last_sql
    assert "INNER JOIN circuits ci" in fake_db.last_sql


def test_races_for_season_keeps_database_row_order(client, fake_db):
    fake_db.rows = [race_row(race_id=3, round=3), race_row(race_id=1, round=1), race_row(race_id=2, round=2)]
    response = client.get("/races/season/2008")
    assert response.status_code == 200
    assert [r["round"] for r in response.json()] == [3, 1, 2]


def test_empty_season_is_404(client, fake_db):
    response = client.get("/races/season/1900")
    assert response.status_code == 404
    assert response.json() == {"error": "No races found for season 1900."}


def test_races_for_circuit(client, fake_db):
    fake_db.rows = [race_row()]
    response = client.get("/races/circuits/MONZA")
    assert response.status_code == 200
    assert fake_db.last_args == ("monza",)
    assert "ORDER BY ra.year ASC, ra.round ASC" in fake_db.last_sql


def test_races_for_unknown_circuit_is_404(client, fake_db):
    response = client.get("/races/circuits/atlantis")
    assert response.status_code == 404
    assert response.json() == {"error": "No races found for circuit 'atlantis'."}


def test_races_for_circuit_between_seasons(client, fake_db):
    fake_db.rows = [race_row()]
    response = client.get("/races/circuits/monza/season/2005/2010")
    assert response.status_code == 200
    assert fake_db.last_args == ("monza", 2005, 2010)
    assert "BETWEEN $2 AND $3" in fake_db.last_sql


def test_single_season_range_is_valid(client, fake_db):
    fake_db.rows = [race_row()]
    response = client.get("/races/circuits/monza/season/2008/2008")
    assert response.status_code == 200
    assert fake_db.last_args == ("monza", 2008, 2008)


def test_inverted_season_range_is_rejected_before_querying(client, fake_db):
    response = client.get("/races/circuits/monza/season/2005/2001")
    assert response.status_code == 400
    assert response.json() == {"error": "End year must be greater than or equal to start year."}
    assert fake_db.calls == []


def test_empty_season_range_is_404(client, fake_db):
    response = client.get("/races/circuits/monza/season/1900/1901")
    assert response.status_code == 404
    assert response.json() == {"error": "No races found for circuit 'monza' between seasons 1900 and 1901."}


def test_race_by_id(client, fake_db):
    fake_db.rows = [race_row()]
    response = client.get("/races/15")
    assert response.status_code == 200
    assert response.json()["time"] == "12:00:00"
    assert fake_db.last_args == (15,)


def test_unknown_race_id_is_404(client, fake_db):
    response = client.get("/races/99999")
    assert response.status_code == 404
    assert response.json() == {"error": "Race with id '99999' was not found."}


def test_out_of_range_race_id_is_bad_request(client, fake_db):
    response = client.get("/races/99999999999")
    assert response.status_code == 400
    assert "race_id" in response.json()["error"]
    assert fake_db.calls == []


def test_out_of_range_season_bounds_are_bad_request(client, fake_db):
    assert client.get("/races/season/99999999999/1").status_code == 400
    assert client.get("/races/circuits/monza/season/2000/99999999999").status_code == 400
    assert fake_db.calls == []


def test_largest_int4_race_id_reaches_the_query(client, fake_db):
    response = client.get("/races/2147483647")
    assert response.status_code == 404
    assert fake_db.last_args == (2147483647,)
