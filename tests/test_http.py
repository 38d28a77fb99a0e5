from unittest.mock import MagicMock

import pytest
import requests

import src.api.http as http


def _ok(payload, content=b"{}"):
    mock_resp = MagicMock()
    mock_resp.raise_for_status.return_value = None
    mock_resp.content = content
    mock_resp.json.return_value = payload
    return mock_resp


@pytest.fixture
def sleeps(monkeypatch):
    calls: list[float] = []
    monkeypatch.setattr(http.time, "sleep", lambda s: calls.append(s))
    return calls


def test_api_request_with_retry_success(monkeypatch, sleeps):
    seen = {}

    def fake_request(method, url, **kw):
        seen.update(method=method, url=url, **kw)
        return _ok({"ok": True})

    monkeypatch.setattr("requests.request", fake_request)

    result = http.api_request_with_retry("https://x", "get", headers={"Authorization": "Bearer t"})

    assert result == {"ok": True}
    assert seen["method"] == "GET"
    assert seen["headers"]["Authorization"] == "Bearer t"
    assert seen["headers"]["User-Agent"] == http.USER_AGENT
    assert seen["timeout"] == http.HTTP_TIMEOUT_S
    assert sleeps == []


def test_api_request_with_retry_retries_then_success(monkeypatch, sleeps):
    calls = {"n": 0}

    def fake_request(*a, **kw):
        calls["n"] += 1
        if calls["n"] < 2:
            raise requests.exceptions.ConnectionError("temporary fail")
        return _ok([1, 2])

    monkeypatch.setattr("requests.request", fake_request)

    assert http.api_request_with_retry("https://example.com") == [1, 2]
    assert calls["n"] == 2
    assert sleeps == [http.HTTP_RETRY_BASE_S]


def test_api_request_with_retry_all_fail_raises_fetch_error(monkeypatch, sleeps):
    calls = {"n": 0}

    def always_fail(*a, **kw):
        calls["n"] += 1
        raise requests.exceptions.Timeout("fail")

    monkeypatch.setattr("requests.request", always_fail)

    with pytest.raises(http.FetchError):
        http.api_request_with_retry("https://x", retry_count=3)

    assert calls["n"] == 3
    assert sleeps == [http.HTTP_RETRY_BASE_S, http.HTTP_RETRY_BASE_S * 2]


def test_http_error_status_is_retried(monkeypatch, sleeps):
    bad = MagicMock()
    bad.raise_for_status.side_effect = requests.HTTPError("503")
    responses = [bad, _ok({"ok": True})]

    monkeypatch.setattr("requests.request", lambda *a, **kw: responses.pop(0))

    assert http.api_request_with_retry("https://x") == {"ok": True}
    assert len(sleeps) == 1


def test_post_is_not_retried(monkeypatch, sleeps):
    calls = {"n": 0}

    def always_fail(*a, **kw):
        calls["n"] += 1
        raise requests.exceptions.ConnectionError("fail")

    monkeypatch.setattr("requests.request", always_fail)

    with pytest.raises(http.FetchError):
        http.api_request_with_retry("https://x", "POST", retry_count=3)

    assert calls["n"] == 1
    assert sleeps == []


def test_empty_body_returns_none(monkeypatch, sleeps):
    monkeypatch.setattr("requests.request", lambda *a, **kw: _ok(None, content=b""))
    assert http.api_request_with_retry("https://x", "DELETE") is None


def test_fetch_error_is_request_exception():
    assert issubclass(http.FetchError, requests.RequestException)
