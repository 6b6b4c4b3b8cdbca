import asyncio
import datetime as dt

import pytest


pytestmark = pytest.mark.asyncio


def _ts(value: str) -> dt.datetime:
    return dt.datetime.fromisoformat(value.replace("Z", "+00:00"))


async def _seed(client, headers, words, category="general"):
    resp = await client.post("/api/words", headers=headers, json={"words": words, "category": category})
    assert resp.status_code == 201, resp.text
    return resp


async def test_word_endpoints_require_token(client):
    assert (await client.get("/api/words")).status_code == 401
    assert (await client.get("/api/random")).status_code == 401
    assert (await client.get("/api/categories")).status_code == 401
    assert (await client.post("/api/words", json={"words": ["a"]})).status_code == 401
    assert (await client.put("/api/words", json={"words": ["a"]})).status_code == 401
    assert (await client.request("DELETE", "/api/words", json={"words": ["a"]})).status_code == 401


async def test_post_words_creates_and_merges(client, user_headers):
    first = await _seed(client, user_headers, ["cat", "dog", "bird"])
    assert first.json()["message"] == "Words added successfully"
    assert first.json()["result"]["upserted"] is True
    assert first.json()["result"]["totalWords"] == 3

    second = await _seed(client, user_headers, ["cat", "fish"])
    assert second.json()["result"]["upserted"] is False
    assert second.json()["result"]["totalWords"] == 4

    page = await client.get("/api/words", headers=user_headers, params={"limit": 10})
    assert page.json()["words"] == ["cat", "dog", "bird", "fish"]


async def test_post_words_defaults_to_general(client, user_headers):
    resp = await client.post("/api/words", headers=user_headers, json={"words": ["cat"]})
    assert resp.status_code == 201
    assert resp.json()["result"]["category"] == "general"


async def test_post_words_validation(client, user_headers):
    no_words = await client.post("/api/words", headers=user_headers, json={"category": "general"})
    assert no_words.status_code == 400
    empty = await client.post("/api/words", headers=user_headers, json={"words": []})
    assert empty.status_code == 400
    not_list = await client.post("/api/words", headers=user_headers, json={"words": "cat"})
    assert not_list.status_code == 400


async def test_random_words(client, user_headers):
    await _seed(client, user_headers, ["cat", "dog", "bird"])

    resp = await client.get("/api/random", headers=user_headers, params={"count": 2})
    assert resp.status_code == 200
    words = resp.json()["words"]
    assert len(words) == 2
    assert len(set(words)) == 2
    assert set(words) <= {"cat", "dog", "bird"}

    default = await client.get("/api/random", headers=user_headers)
    assert len(default.json()["words"]) == 1

    everything = await client.get("/api/random", headers=user_headers, params={"count": 50})
    assert sorted(everything.json()["words"]) == ["bird", "cat", "dog"]

    none = await client.get("/api/random", headers=user_headers, params={"count": 0})
    assert none.json()["words"] == []


async def test_random_words_updates_last_used(client, user_headers):
    await _seed(client, user_headers, ["cat"])
    before = (await client.get("/api/words", headers=user_headers)).json()["metadata"]
    await asyncio.sleep(0.01)
    await client.get("/api/random", headers=user_headers)
    after = (await client.get("/api/words", headers=user_headers)).json()["metadata"]
    assert _ts(after["lastUsed"]) > _ts(before["lastUsed"])
    assert _ts(after["updatedAt"]) > _ts(before["updatedAt"])


async def test_random_words_not_found(client, user_headers):
    resp = await client.get("/api/random", headers=user_headers, params={"category": "missing"})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "NO_WORDS_FOUND"

    bad_count = await client.get("/api/random", headers=user_headers, params={"count": "lots"})
    assert bad_count.status_code == 400


async def test_paginated_words(client, user_headers):
    await _seed(client, user_headers, ["cat", "dog", "bird"])

    resp = await client.get("/api/words", headers=user_headers, params={"page": 1, "limit": 2})
    assert resp.status_code == 200
    body = resp.json()
    assert body["words"] == ["cat", "dog"]
    assert body["pagination"] == {"total": 3, "page": 1, "limit": 2, "pages": 2}
    assert body["metadata"]["category"] == "general"
    assert body["metadata"]["totalWords"] == 3
    for key in ("lastUsed", "createdAt", "updatedAt"):
        assert body["metadata"][key]

    page_two = await client.get("/api/words", headers=user_headers, params={"page": 2, "limit": 2})
    assert page_two.json()["words"] == ["bird"]


async def test_paginated_search(client, user_headers):
    await _seed(client, user_headers, ["Apple", "banana", "pineapple", "cherry"])

    resp = await client.get("/api/words", headers=user_headers, params={"search": "APPLE", "limit": 1})
    body = resp.json()
    assert body["words"] == ["Apple"]
    assert body["pagination"]["total"] == 2
    assert body["pagination"]["pages"] == 2
    assert body["metadata"]["totalWords"] == 4

    no_match = await client.get("/api/words", headers=user_headers, params={"search": "kiwi"})
    assert no_match.status_code == 200
    assert no_match.json()["words"] == []
    assert no_match.json()["pagination"]["pages"] == 0


async def test_paginated_words_errors(client, user_headers):
    missing = await client.get("/api/words", headers=user_headers, params={"category": "missing"})
    assert missing.status_code == 404

    bad_page = await client.get("/api/words", headers=user_headers, params={"page": 0})
    assert bad_page.status_code == 400
    bad_limit = await client.get("/api/words", headers=user_headers, params={"limit": 0})
    assert bad_limit.status_code == 400


async def test_admin_routes_reject_regular_users(client, user_headers):
    put_resp = await client.put("/api/words", headers=user_headers, json={"words": ["cat"]})
    assert put_resp.status_code == 403
    assert put_resp.json()["detail"] == "FORBIDDEN_ADMIN_ONLY"

    delete_resp = await client.request("DELETE", "/api/words", headers=user_headers, json={"words": ["cat"]})
    assert delete_resp.status_code == 403


async def test_admin_put_is_idempotent_upsert(client, admin_headers):
    first = await client.put("/api/words", headers=admin_headers, json={"words": ["a"], "category": "letters"})
    assert first.status_code == 200
    assert first.json()["message"] == "Words updated successfully"
    assert first.json()["result"]["upserted"] is True

    second = await client.put("/api/words", headers=admin_headers, json={"words": ["a"], "category": "letters"})
    assert second.json()["result"]["modified"] is False
    assert second.json()["result"]["totalWords"] == 1

    page = await client.get("/api/words", headers=admin_headers, params={"category": "letters"})
    assert page.json()["words"] == ["a"]


async def test_admin_delete_words(client, admin_headers):
    await _seed(client, admin_headers, ["cat", "dog", "bird"])

    resp = await client.request(
        "DELETE", "/api/words", headers=admin_headers, json={"words": ["dog", "fish"]}
    )
    assert resp.status_code == 200
    assert resp.json()["message"] == "Words deleted successfully"
    assert resp.json()["result"]["totalWords"] == 2

    page = await client.get("/api/words", headers=admin_headers)
    assert page.json()["words"] == ["cat", "bird"]

    missing = await client.request(
        "DELETE", "/api/words", headers=admin_headers, json={"words": ["x"], "category": "missing"}
    )
    assert missing.status_code == 404


async def test_list_categories(client, user_headers):
    await _seed(client, user_headers, ["z"], category="zoo")
    await _seed(client, user_headers, ["a", "b"], category="animals")

    resp = await client.get("/api/categories", headers=user_headers)
    assert resp.status_code == 200
    categories = resp.json()["categories"]
    assert [c["category"] for c in categories] == ["animals", "zoo"]
    assert [c["totalWords"] for c in categories] == [2, 1]


async def test_concurrent_posts_to_same_category(client, user_headers):
    tasks = [
        client.post("/api/words", headers=user_headers, json={"words": [f"w{i}", "shared"]})
        for i in range(8)
    ]
    responses = await asyncio.gather(*tasks)
    assert all(r.status_code == 201 for r in responses)

    page = await client.get("/api/words", headers=user_headers, params={"limit": 100})
    words = page.json()["words"]
    assert sorted(words) == sorted([f"w{i}" for i in range(8)] + ["shared"])
