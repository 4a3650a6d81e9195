def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body.get("status") == "ok" and body.get("service") == "envbind"


def test_ping(client):
    r = client.get("/ping")
    assert r.status_code == 200
    assert r.json() == "pong"


def test_index(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["settings"] == "/settings"
