# tests/test_client.py
"""Tests for the CLI's HTTP client (MockTransport, no server)."""

import httpx
import pytest

from hoverdict.cli import client


@pytest.fixture
def requests(monkeypatch):
    seen = []
    
    def handler(request):
        seen.append(request)
        if request.url.raw_path.endswith(b"/missing"):
            return httpx.Response(404, json={"detail": "Word not found"})
        return httpx.Response(200, json={"word": "c#", "markdown": "_c#_"})
    
    mock = httpx.Client(transport=httpx.MockTransport(handler))
    monkeypatch.setattr(client.httpx, "get", mock.get)
    return seen


@pytest.mark.parametrize("word, path", [
    ("c#", b"/api/words/c%23"),
    ("what?", b"/api/words/what%3F"),
    ("and/or", b"/api/words/and%2For"),
    ("cat", b"/api/words/cat"),
])
def test_get_word_escapes_path(requests, word, path):
    client.get_word(word)
    
    assert requests[-1].url.raw_path == path


def test_get_word_not_found(requests):
    assert client.get_word("missing") is None
