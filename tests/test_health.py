def test_liveness(client):
    for path in ("/health", "/health/live"):
        res = client.get(path)
        assert res.status_code == 200
        assert res.json() == {"status": "ok", "service": "fleet-rentals-api"}


def test_database_check_in_memory(client):
    res = client.get("/health/db")

    assert res.status_code == 200
    assert res.json()["backend"] == "in_memory"


def test_readiness(client):
    res = client.get("/health/ready")

    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}
