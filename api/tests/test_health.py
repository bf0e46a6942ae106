from __future__ import annotations


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_unknown_route_returns_error_body(client):
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert "error" in response.json()


def test_uploads_are_served_statically(client, uploads_dir):
    (uploads_dir / "hello.txt").write_bytes(b"glass heart")

    response = client.get("/api/uploads/hello.txt")

    assert response.status_code == 200
    assert response.content == b"glass heart"
