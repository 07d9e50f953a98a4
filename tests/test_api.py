import string

import pytest

from passgen.api import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_generate_with_class_list(client):
    resp = client.post("/generate", json={"length": 12, "classes": ["lower", "digits"], "exclude": "aeiou"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert len(data["password"]) == 12
    assert set(data["password"]) <= set("bcdfghjklmnpqrstvwxyz0123456789")
    assert data["strength"]["label"] in ("Strong", "Very Strong")


def test_generate_with_flags(client):
    resp = client.post("/generate", json={"length": 20, "special": False, "upper": False})
    assert resp.status_code == 200
    pw = resp.get_json()["password"]
    assert set(pw) <= set(string.ascii_lowercase + string.digits)


def test_generate_defaults(client):
    resp = client.post("/generate")
    assert resp.status_code == 200
    assert len(resp.get_json()["password"]) == 12


def test_generate_empty_pool(client):
    resp = client.post("/generate", json={"length": 100, "classes": ["digits"], "exclude": "0123456789"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "empty_pool"


@pytest.mark.parametrize("body", [
    {"classes": []},
    {"length": 0},
    {"length": "twelve"},
    {"classes": ["emoji"]},
    {"group_mode": "sideways"},
    {"classes": [1]},
    {"classes": "upper"},
    {"exclude": ["a"]},
    {"exclude": 5},
    {"one_per_group": "false"},
    {"upper": "no"},
    {"length": 4097},
    {"length": 10 ** 8},
])
def test_generate_invalid_configuration(client, body):
    resp = client.post("/generate", json=body)
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "invalid_configuration"


def test_score(client):
    resp = client.post("/score", json={"password": "abc123"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["label"] == "Moderate"
    assert data["charset_size"] == 36


def test_score_empty(client):
    data = client.post("/score", json={}).get_json()
    assert data["entropy"] == 0.0
    assert data["label"] == "Weak"


def test_score_rejects_non_string(client):
    resp = client.post("/score", json={"password": 123})
    assert resp.status_code == 400


def test_null_exclude_means_nothing_excluded(client):
    resp = client.post("/generate", json={"length": 4096, "classes": ["upper"], "exclude": None})
    assert resp.status_code == 200
    pw = resp.get_json()["password"]
    assert set(pw) <= set(string.ascii_uppercase)
    # 4096 draws from 26 letters: both are all but certain to appear
    assert "N" in pw and "E" in pw


def test_real_booleans_accepted(client):
    resp = client.post("/generate", json={"length": 3, "one_per_group": False, "special": False})
    assert resp.status_code == 200
    assert len(resp.get_json()["password"]) == 3


def test_max_length_accepted(client):
    resp = client.post("/generate", json={"length": 4096})
    assert resp.status_code == 200
    assert len(resp.get_json()["password"]) == 4096
