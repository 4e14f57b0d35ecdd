import pytest

from passgen.web.api import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_home(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "version" in resp.get_json()


def test_generate(client):
    resp = client.post("/api/generate", json={"length": 20, "numbers": True})
    data = resp.get_json()
    assert resp.status_code == 200
    assert len(data["password"]) == 20 and data["password"].isdigit()
    assert data["formatted_password"] == data["password"]
    assert data["entropy"] > 0


def test_generate_batch(client):
    resp = client.post("/api/generate", json={"length": 8, "count": 3, "unique": True, "format": "hex"})
    data = resp.get_json()
    assert len(data["passwords"]) == 3
    assert all(len(p["formatted_password"]) == 16 for p in data["passwords"])


def test_generate_policy_error(client):
    resp = client.post("/api/generate", json={"length": 2})
    assert resp.status_code == 400
    assert resp.get_json()["category"] == "OverconstrainedPolicy"


def test_generate_bad_length_type(client):
    resp = client.post("/api/generate", json={"length": "long"})
    assert resp.status_code == 400
    assert resp.get_json()["category"] == "InvalidArgument"


def test_passphrase(client):
    resp = client.post("/api/passphrase", json={"words": 3, "separator": "."})
    data = resp.get_json()
    assert data["words"] == 3
    assert len(data["passphrase"].split(".")) == 3


def test_check(client):
    resp = client.post("/api/check", json={"password": "password123"})
    data = resp.get_json()
    assert data["length"] == 11
    assert data["strength"] in ("Very Weak", "Weak", "Medium")
    assert any(item["criterion"] == "No common sequences" and not item["status"] for item in data["analysis"])


def test_hash_unsupported(client):
    resp = client.post("/api/hash", json={"input": "x", "algorithm": "md5"})
    assert resp.status_code == 400
    assert resp.get_json()["category"] == "UnsupportedFormat"


def test_generate_negative_count(client):
    resp = client.post("/api/generate", json={"length": 8, "count": -1})
    assert resp.status_code == 400
    assert resp.get_json()["category"] == "InvalidArgument"
