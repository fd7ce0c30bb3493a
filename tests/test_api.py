def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_checksum_isbn10(client):
    response = client.get("/checksum", params={"text": "0-201-53992-6"})
    assert response.status_code == 200
    data = response.json()
    assert data["kind"] == "ISBN-10"
    assert data["check_digit"] == "6"


def test_checksum_isbn13(client):
    response = client.get("/checksum", params={"text": "978-1-61262-294-1"})
    assert response.status_code == 200
    assert response.json()["check_digit"] == "1"


def test_checksum_insufficient_input(client):
    response = client.get("/checksum", params={"text": "12-34"})
    assert response.status_code == 422
    assert "at least 9 digits" in response.json()["detail"]


def test_checksum_strict_mismatch(client):
    response = client.get("/checksum", params={"text": "9780062802188", "strict": "true"})
    assert response.status_code == 422
    assert "mismatch" in response.json()["detail"]


def test_verify_at_point(client):
    payload = {"text": "ISBN 91-85668-01-X.", "position": 8}
    response = client.post("/verify-at-point", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert data["token"] == "91-85668-01-X"
    assert data["check_digit"] == "X"


def test_verify_at_point_no_token(client):
    response = client.post("/verify-at-point", json={"text": "nothing here", "position": 2})
    assert response.status_code == 404


def test_verify_at_point_negative_position_is_clamped(client):
    response = client.post("/verify-at-point", json={"text": "0312168144", "position": -1})
    assert response.status_code == 200
    data = response.json()
    assert data["token"] == "0312168144"
    assert data["check_digit"] == "4"


def test_validate(client):
    response = client.post("/validate", json={"isbn": "0201539925"})
    assert response.status_code == 200
    data = response.json()
    assert data["valid"] is False
    assert data["expected"] == "6"
    assert data["actual"] == "5"


def test_validate_malformed(client):
    response = client.post("/validate", json={"isbn": "123"})
    assert response.status_code == 422
