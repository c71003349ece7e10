def test_health_check(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "healthy"
    assert data["environment"] == "test"
    assert data["loanPolicy"]["baseRate"] == 8.5
    assert data["loanPolicy"]["minCreditScore"] == 650


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["docs"] == "/api/docs"
