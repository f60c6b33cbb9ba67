import pytest
import requests

from tweetcluster.api import base_client
from tweetcluster.api.base_client import TwitterAPIError
from tweetcluster.api.twitter_search_client import (
    TwitterSearchClient,
    get_basic_token,
    get_bearer_token,
)
from tweetcluster.config import TWITTER_AUTH_URL, TWITTER_SEARCH_URL


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


SEARCH_PAYLOAD = {
    "statuses": [
        {
            "created_at": "Mon Sep 24 03:35:21 +0000 2012",
            "favorite_count": 1,
            "text": "first &amp; best",
            "user": {"id": 1, "name": "One", "screen_name": "one"},
        },
        {
            "created_at": "Mon Sep 24 03:36:00 +0000 2012",
            "favorite_count": 0,
            "text": "second",
            "user": {"id": 2, "name": "Two", "screen_name": "two"},
        },
    ],
    "search_metadata": {"query": "cats", "count": 2, "max_id": 9},
}


def test_get_basic_token():
    assert get_basic_token("key", "secret") == "a2V5OnNlY3JldA=="


def test_client_requires_token():
    with pytest.raises(ValueError):
        TwitterSearchClient(None)


def test_search_parses_statuses_in_order(monkeypatch):
    calls = {}

    def fake_get(url, params=None, headers=None, timeout=None):
        calls.update(url=url, params=params, headers=headers, timeout=timeout)
        return FakeResponse(200, SEARCH_PAYLOAD)

    monkeypatch.setattr(base_client.requests, "get", fake_get)

    result = TwitterSearchClient("tok").search("cats", count=2)

    assert calls["url"] == TWITTER_SEARCH_URL
    assert calls["params"] == {"q": "cats", "count": 2}
    assert calls["headers"] == {"Authorization": "Bearer tok"}
    assert calls["timeout"] == 10
    assert [t.screen_name for t in result.tweets] == ["one", "two"]
    assert result.tweets[0].text == "first & best"
    assert result.metadata.count == 2


def test_search_without_statuses(monkeypatch):
    monkeypatch.setattr(
        base_client.requests, "get", lambda *a, **kw: FakeResponse(200, {})
    )
    result = TwitterSearchClient("tok").search("nothing")
    assert result.tweets == []


def test_search_rejects_empty_query():
    with pytest.raises(ValueError):
        TwitterSearchClient("tok").search("")


def test_search_non_200_raises(monkeypatch):
    monkeypatch.setattr(
        base_client.requests, "get", lambda *a, **kw: FakeResponse(401, {"errors": []})
    )
    with pytest.raises(TwitterAPIError) as excinfo:
        TwitterSearchClient("tok").search("cats")
    assert excinfo.value.status_code == 401


def test_search_bad_json_raises(monkeypatch):
    monkeypatch.setattr(
        base_client.requests, "get", lambda *a, **kw: FakeResponse(200, None)
    )
    with pytest.raises(TwitterAPIError):
        TwitterSearchClient("tok").search("cats")


def test_search_transport_error_raises(monkeypatch):
    def fake_get(*args, **kwargs):
        raise requests.ConnectionError("boom")

    monkeypatch.setattr(base_client.requests, "get", fake_get)
    with pytest.raises(TwitterAPIError) as excinfo:
        TwitterSearchClient("tok").search("cats")
    assert excinfo.value.status_code is None


def test_get_bearer_token(monkeypatch):
    calls = {}

    def fake_post(url, data=None, headers=None, timeout=None):
        calls.update(url=url, data=data, headers=headers)
        return FakeResponse(200, {"token_type": "bearer", "access_token": "AAAA"})

    monkeypatch.setattr(base_client.requests, "post", fake_post)

    assert get_bearer_token("key", "secret") == "AAAA"
    assert calls["url"] == TWITTER_AUTH_URL
    assert calls["data"] == {"grant_type": "client_credentials"}
    assert calls["headers"]["Authorization"] == "Basic a2V5OnNlY3JldA=="
    assert calls["headers"]["Content-Type"].startswith("application/x-www-form-urlencoded")


def test_get_bearer_token_missing_token(monkeypatch):
    monkeypatch.setattr(
        base_client.requests, "post", lambda *a, **kw: FakeResponse(200, {"token_type": "bearer"})
    )
    with pytest.raises(TwitterAPIError):
        get_bearer_token("key", "secret")


def test_get_bearer_token_requires_credentials():
    with pytest.raises(ValueError):
        get_bearer_token("key", "")


def test_from_credentials(monkeypatch):
    monkeypatch.setattr(
        base_client.requests, "post", lambda *a, **kw: FakeResponse(200, {"access_token": "BBBB"})
    )
    client = TwitterSearchClient.from_credentials("key", "secret")
    assert client.api_key == "BBBB"
