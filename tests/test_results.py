from conftest import result_row


def test_results_for_race(client, fake_db):
    fake_db.rows = [result_row()]
    response = client.get("/results/15")
    assert response.status_code == 200
    entry = response.json()[0]
    assert entry["resultId"] == 7573
    assert entry["positionText"] == "7"
    assert entry["points"] == 2.0
    assert entry["fastestLapSpeed"] == "234.335"
    assert set(entry) >= {"status", "driver", "constructor", "race"}
    assert "circuit" not in entry["race"]
    assert "ORDER BY r.grid ASC" in fake_db.last_sql


def test_result_joins_are_inner(client, fake_db):
    fake_db.rows = [result_row()]
    client.get("/results/15")
    sql = fake_db.last_sql
    assert "LEFT JOIN" not in sql
    for table in ("drivers d", "constructors co", "races ra", "status s"):
        assert f"INNER JOIN {table}" in sql


def test_unclassified_position_is_explicit_null(client, fake_db):
    fake_db.rows = [result_row(position=None, position_text="R", status={"status_id": 5, "status": "Engine"})]
    entry = client.get("/results/15").json()[0]
    assert "position" in entry
    assert entry["position"] is None
    assert entry["status"]["status"] == "Engine"


def test_results_for_race_without_rows_is_404(client, fake_db):
    response = client.get("/results/99999")
    assert response.status_code == 404
    assert response.json() == {"error": "No results found for race 99999."}


def test_results_for_driver(client, fake_db):
    fake_db.rows = [result_row()]
    response = client.get("/results/driver/Hamilton")
    assert response.status_code == 200
    assert fake_db.last_args == ("hamilton",)
    assert "ORDER BY ra.year ASC, ra.round ASC, r.grid ASC" in fake_db.last_sql


def test_results_for_unknown_driver_is_404(client, fake_db):
    response = client.get("/results/driver/nobody")
    assert response.status_code == 404
    assert response.json() == {"error": "No results found for driver 'nobody'."}


def test_results_for_driver_between_seasons(client, fake_db):
    fake_db.rows = [result_row()]
    response = client.get("/results/drivers/hamilton/seasons/2007/2008")
    assert response.status_code == 200
    assert fake_db.last_args == ("hamilton", 2007, 2008)


def test_results_inverted_range_is_400_without_query(client, fake_db):
    response = client.get("/results/drivers/hamilton/seasons/2010/2007")
    assert response.status_code == 400
    assert response.json() == {"error": "End year must be greater than or equal to start year."}
    assert fake_db.calls == []


def test_results_empty_range_is_404(client, fake_db):
    response = client.get("/results/drivers/hamilton/seasons/1950/1951")
    assert response.status_code == 404
    assert response.json() == {
        "error": "No results found for driver 'hamilton' between seasons 1950 and 1951."
    }


def test_repeated_requests_are_byte_identical(client, fake_db):
    fake_db.rows = [result_row(), result_row(result_id=7574, grid=16)]
    first = client.get("/results/15").content
    second = client.get("/results/15").content
    assert first == second


def test_out_of_range_ids_are_bad_request(client, fake_db):
    assert client.get("/results/99999999999").status_code == 400
    assert client.get("/results/drivers/hamilton/seasons/2007/99999999999").status_code == 400
    assert fake_db.calls == []
