# tests/test_app.py
# pylint: disable=redefined-outer-name
import pytest
from fastapi.testclient import TestClient

from app import app, get_queue
from pqueue import Order, PQueue


@pytest.fixture
def queue():
    return PQueue(Order.DESC)


@pytest.fixture
def client(queue):
    app.dependency_overrides[get_queue] = lambda: queue
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_insert_returns_length(client):
    resp = client.post("/queue/items", json={"data": "A", "priority": 1})
    assert resp.status_code == 201
    assert resp.json() == {"length": 1}
    resp = client.post("/queue/items", json={"data": {"nested": [1, 2]}, "priority": 4})
    assert resp.json() == {"length": 2}


def test_pop_in_priority_order(client):
    for data, priority in [("A", 1), ("B", 5), ("C", 3)]:
        client.post("/queue/items", json={"data": data, "priority": priority})
    popped = [client.post("/queue/pop").json()["data"] for _ in range(3)]
    assert popped == ["B", "C", "A"]


def test_pop_and_peek_empty_return_404(client):
    resp = client.post("/queue/pop")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Queue is empty"
    resp = client.get("/queue/peek")
    assert resp.status_code == 404


def test_peek_does_not_remove(client, queue):
    client.post("/queue/items", json={"data": "A", "priority": 1})
    assert client.get("/queue/peek").json() == {"data": "A"}
    assert queue.length() == 1


def test_head_and_pop_item_return_null_when_empty(client):
    resp = client.get("/queue/head")
    assert resp.status_code == 200
    assert resp.json() is None
    resp = client.post("/queue/pop-item")
    assert resp.status_code == 200
    assert resp.json() is None


def test_pop_item_returns_removed_item(client, queue):
    client.post("/queue/items", json={"data": "A", "priority": 1})
    client.post("/queue/items", json={"data": "B", "priority": 2})
    assert client.get("/queue/head").json() == {"data": "B", "priority": 2}
    assert client.post("/queue/pop-item").json() == {"data": "B", "priority": 2}
    assert queue.length() == 1


def test_list_queue(client):
    for data, priority in [("X", 2), ("Y", 2), ("Z", 7)]:
        client.post("/queue/items", json={"data": data, "priority": priority})
    body = client.get("/queue").json()
    assert body["order"] == "desc"
    assert body["length"] == 3
    assert [i["data"] for i in body["items"]] == ["Z", "X", "Y"]
    assert body["text"] == "Z (7): X (2): Y (2)"
    assert client.get("/queue/length").json() == {"length": 3}


@pytest.mark.parametrize(
    "payload",
    [
        {"data": "A"},
        {"priority": 1},
        {"data": "A", "priority": "high"},
        {"data": "A", "priority": 1.5},
    ],
)
def test_insert_rejects_invalid_payload(client, queue, payload):
    resp = client.post("/queue/items", json=payload)
    assert resp.status_code == 422
    assert queue.length() == 0


def test_queue_is_built_from_env_on_first_use(monkeypatch):
    import app as app_module

    monkeypatch.setattr(app_module, "_queue", None)
    monkeypatch.setenv("PQUEUE_ORDER", "asc")
    client = TestClient(app)
    client.post("/queue/items", json={"data": "B", "priority": 5})
    client.post("/queue/items", json={"data": "A", "priority": 1})
    body = client.get("/queue").json()
    assert body["order"] == "asc"
    assert [i["data"] for i in body["items"]] == ["A", "B"]


def test_invalid_env_order_fails_on_first_request(monkeypatch):
    import app as app_module

    monkeypatch.setattr(app_module, "_queue", None)
    monkeypatch.setenv("PQUEUE_ORDER", "sideways")
    client = TestClient(app)
    assert client.get("/health").status_code == 200
    with pytest.raises(ValueError, match="PQUEUE_ORDER"):
        client.get("/queue/length")
