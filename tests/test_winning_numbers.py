import pytest


def _latest(client):
    response = client.get("/api/winning-numbers/latest")
    assert response.status_code == 200
    return response.get_json()


def test_latest_is_null_when_nothing_recorded(client):
    assert _latest(client) is None


def test_record_winning_numbers(client):
    response = client.post("/api/winning-numbers", json={"numbers": [3, 14, 15, 92], "drawDate": "2024-06-01"})
    assert response.status_code == 200

    body = response.get_json()
    assert isinstance(body["id"], int)
    assert body["numbers"] == [3, 14, 15, 92]
    assert body["drawDate"] == "2024-06-01"

    latest = _latest(client)
    assert latest["id"] == body["id"]
    assert latest["numbers"] == [3, 14, 15, 92]
    assert latest["draw_date"] == "2024-06-01"
    assert latest["created_at"]


def test_draw_date_is_optional(client):
    body = client.post("/api/winning-numbers", json={"numbers": [1, 2, 3, 4]}).get_json()
    assert body["drawDate"] is None


@pytest.mark.parametrize("numbers", [[1, 2, 3], [1, 2, 3, 4, 5], [], None])
def test_exactly_four_numbers_required(client, numbers):
    response = client.post("/api/winning-numbers", json={"numbers": numbers})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Exactly 4 numbers required"
    assert _latest(client) is None


def test_missing_numbers_rejected(client):
    response = client.post("/api/winning-numbers", json={"drawDate": "2024-06-01"})
    assert response.status_code == 400
    assert _latest(client) is None


def test_invalid_draw_date_rejected(client):
    response = client.post("/api/winning-numbers", json={"numbers": [1, 2, 3, 4], "drawDate": "soon"})
    assert response.status_code == 400
    assert _latest(client) is None


def test_latest_returns_most_recent_draw(client):
    client.post("/api/winning-numbers", json={"numbers": [1, 2, 3, 4], "drawDate": "2024-06-01"})
    second = client.post("/api/winning-numbers", json={"numbers": [5, 6, 7, 8], "drawDate": "2024-05-01"}).get_json()

    latest = _latest(client)
    assert latest["id"] == second["id"]
    assert latest["numbers"] == [5, 6, 7, 8]


def test_clear_removes_every_draw(client):
    client.post("/api/winning-numbers", json={"numbers": [1, 2, 3, 4]})
    client.post("/api/winning-numbers", json={"numbers": [5, 6, 7, 8]})

    response = client.delete("/api/winning-numbers/clear")
    assert response.status_code == 200
    assert response.get_json() == {"success": True, "message": "All winning numbers cleared"}
    assert _latest(client) is None


def test_clear_when_empty_still_succeeds(client):
    first = client.delete("/api/winning-numbers/clear")
    second = client.delete("/api/winning-numbers/clear")
    assert first.get_json() == second.get_json() == {"success": True, "message": "All winning numbers cleared"}


def test_blank_draw_date_from_form_is_stored_as_null(client):
    response = client.post(
        "/api/winning-numbers",
        data={"numbers": "[1,2,3,4]", "drawDate": ""},
        content_type="multipart/form-data",
    )
    assert response.status_code == 200
    body = response.get_json()
    assert body["numbers"] == [1, 2, 3, 4]
    assert body["drawDate"] is None

    assert _latest(client)["draw_date"] is None


def test_draw_date_from_form(client):
    response = client.post(
        "/api/winning-numbers",
        data={"numbers": "[4,3,2,1]", "drawDate": "2024-07-04"},
        content_type="multipart/form-data",
    )
    assert response.status_code == 200
    assert response.get_json()["drawDate"] == "2024-07-04"
