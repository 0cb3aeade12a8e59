import math


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_evaluate_records_history(client, history_store):
    response = client.post("/api/evaluate", json={"expression": "2+3*4"})
    assert response.status_code == 200
    assert response.json() == {
        "expression": "2+3*4",
        "result": 14.0,
        "display": "14",
        "next_expression": "14",
        "next_expression_exact": True,
    }

    entries = history_store.load()
    assert len(entries) == 1
    assert entries[0].expr == "2+3*4"
    assert entries[0].result == 14.0


def test_evaluate_error_is_classified(client, history_store):
    response = client.post("/api/evaluate", json={"expression": "5/0"})
    assert response.status_code == 400
    assert response.json()["detail"] == {
        "kind": "DivisionByZero",
        "message": "Division by zero",
    }
    assert history_store.load() == []


def test_evaluate_unexpected_character(client):
    response = client.post("/api/evaluate", json={"expression": "2&3"})
    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["kind"] == "UnexpectedCharacter"
    assert detail["character"] == "&"


def test_evaluate_blank_is_zero_and_not_recorded(client, history_store):
    response = client.post("/api/evaluate", json={"expression": "   "})
    assert response.status_code == 200
    assert response.json()["result"] == 0
    assert history_store.load() == []


def test_evaluate_rejects_overlong_expression(client):
    response = client.post("/api/evaluate", json={"expression": "1+" * 200 + "1"})
    assert response.status_code == 422


def test_preview_keeps_last_result(client):
    response = client.post(
        "/api/preview", json={"expression": "2+", "last_result": 2}
    )
    assert response.status_code == 200
    assert response.json() == {"result": 2.0, "display": "2"}

    response = client.post("/api/preview", json={"expression": "0.1+0.2"})
    assert response.json()["display"] == "0.3"


def test_input_applies_key_and_previews(client):
    response = client.post("/api/input", json={"expression": "2", "key": "("})
    assert response.status_code == 200
    assert response.json() == {"expression": "2*(", "result": 0.0, "display": "0"}

    response = client.post(
        "/api/input", json={"expression": "2*(3", "key": ")", "last_result": 2}
    )
    assert response.json() == {"expression": "2*(3)", "result": 6.0, "display": "6"}


def test_history_listing_and_clear(client):
    client.post("/api/evaluate", json={"expression": "1+1"})
    client.post("/api/evaluate", json={"expression": "1e0"})
    client.post("/api/evaluate", json={"expression": "1000000000000*10"})

    response = client.get("/api/history")
    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 2
    assert [item["expr"] for item in body["items"]] == [
        "1000000000000*10",
        "1+1",
    ]
    assert body["items"][0]["display"] == "1e+13"

    response = client.delete("/api/history")
    assert response.json() == {"message": "History cleared", "cleared": 2}
    assert client.get("/api/history").json() == {"count": 0, "items": []}


def test_long_result_text_can_be_sent_back(client):
    expression = "1/3/1" + "0" * 230
    response = client.post("/api/evaluate", json={"expression": expression})
    assert response.status_code == 200
    body = response.json()
    assert len(body["next_expression"]) <= 240
    assert body["next_expression_exact"] is False

    response = client.post(
        "/api/input", json={"expression": body["next_expression"], "key": "Backspace"}
    )
    assert response.status_code == 200
    assert math.isclose(response.json()["result"], body["result"], rel_tol=1e-6)

    response = client.post("/api/evaluate", json={"expression": body["next_expression"]})
    assert response.status_code == 200
    assert math.isclose(response.json()["result"], body["result"], rel_tol=1e-6)
