"""
HTTP client for the hoverdict API.
"""

from urllib.parse import quote

import httpx

from hoverdict.config import BASE_URL


def hover(line: str, character: int) -> dict | None:
    r = httpx.post(f"{BASE_URL}/hover", json={"line": line, "character": character})
    r.raise_for_status()
    return r.json()


def resolve(text: str, offset: int) -> list[dict]:
    r = httpx.get(f"{BASE_URL}/resolve", params={"text": text, "offset": offset})
    r.raise_for_status()
    return r.json()["candidates"]


def get_word(word: str) -> dict | None:
    r = httpx.get(f"{BASE_URL}/words/{quote(word, safe='')}")
    if r.status_code == 404:
        return None
    r.raise_for_status()
    return r.json()


def store_info() -> dict:
    r = httpx.get(f"{BASE_URL}/store")
    r.raise_for_status()
    return r.json()
