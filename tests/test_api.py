import pytest
from fastapi.testclient import TestClient

from geotarget.geo.countries import COUNTRY_NAME_TO_CODE
from geotarget.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_list_countries(client):
    body = client.get("/geo/countries").json()
    assert len(body) == len(COUNTRY_NAME_TO_CODE)
    names = [c["name"] for c in body]
    assert names == sorted(names)
    assert {"name": "Germany", "code": "DE"} in body


def test_normalize(client):
    resp = client.get("/geo/normalize", params={"country": "us"})
    assert resp.status_code == 200
    assert resp.json() == {"name": "United States", "code": "US", "normalized": "us"}


def test_normalize_empty(client):
    assert client.get("/geo/normalize").json() == {"name": None, "code": None, "normalized": ""}


def test_match(client):
    resp = client.post("/geo/match", json={"user_country": "Germany", "targets": ["FR", "DE"]})
    assert resp.json() == {"targeted": True, "matched_target": "DE", "rule": "code"}


def test_match_empty_targets_is_not_targeted(client):
    resp = client.post("/geo/match", json={"user_country": "US", "targets": []})
    assert resp.json() == {"targeted": False, "matched_target": None, "rule": None}


def test_eligible_ads(client):
    payload = {
        "user": {"id": "demo-publisher_001"},
        "ads": [
            {"id": "1", "title": "Worldwide", "countries": []},
            {"id": "2", "title": "DACH", "ad_type": "boosted_post", "countries": ["DE", "AT", "CH"]},
            {"id": "3", "title": "France only", "countries": ["France"]},
            {"id": "4", "title": "Untargeted"},
        ],
    }
    body = client.post("/ads/eligible", json=payload).json()
    assert body["user_country"] == "Germany"
    assert [item["ad"]["id"] for item in body["ads"]] == ["1", "2", "4"]
    assert body["ads"][1]["decision"] == {
        "outcome": "match",
        "eligible": True,
        "matched_target": "DE",
        "matched_rule": "code",
    }


def test_eligible_ads_session_country(client):
    payload = {
        "user": {"id": "u-42"},
        "session_user": {"country": "ca"},
        "ads": [{"id": "1", "title": "Canada", "countries": ["Canada"]}],
    }
    body = client.post("/ads/eligible", json=payload).json()
    assert body["user_country"] == "ca"
    assert [item["ad"]["id"] for item in body["ads"]] == ["1"]


def test_eligible_ads_rejects_bad_payload(client):
    resp = client.post("/ads/eligible", json={"ads": [{"id": "1"}]})
    assert resp.status_code == 422
