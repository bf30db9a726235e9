from __future__ import annotations

from fastapi.testclient import TestClient


def test_app_smoke_routes(sandbox_settings, db_file):
    import app as app_module

    client = TestClient(app_module.create_app(sandbox_settings))

    # first start seeds the data file from the bundled template
    assert db_file.exists()

    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["data_file"] == str(db_file)

    r = client.get("/api/menu")
    assert r.status_code == 200
    assert isinstance(r.json(), list)

    r = client.options(
        "/api/menu",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"
