"""Font Routes — inventory and origin-gated delivery.

Invariants:
    - /listFonts excludes reserved keys and reports byte sizes
    - Denied origin → 403 whether or not the key exists
    - Allowed origin + absent key → 404
    - Allowed origin + present key → exact bytes, font/woff2, CORS echo
"""


async def test_list_fonts_reports_sizes(client, seeded_store, font_bytes):
    await seeded_store.put("other.woff2", b"12345")
    res = await client.get("/listFonts")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")
    assert res.json() == {"myfont.woff2": len(font_bytes), "other.woff2": 5}


async def test_list_fonts_excludes_reserved_keys(client, store):
    await store.put("domains", '["a.com"]')
    await store.put("whitelist", "legacy")
    await store.put("k", b"x" * 10)
    res = await client.get("/listFonts")
    assert res.json() == {"k": 10}


async def test_list_fonts_empty_store(client):
    res = await client.get("/listFonts")
    assert res.json() == {}


async def test_list_fonts_empty_value_is_zero(client, store):
    await store.put("empty.woff2", b"")
    res = await client.get("/listFonts")
    assert res.json() == {"empty.woff2": 0}


async def test_serve_font_with_allowed_origin(client, seeded_store, allowed_origin, font_bytes):
    res = await client.get("/myfont.woff2", headers={"Origin": allowed_origin})
    assert res.status_code == 200
    assert res.content == font_bytes
    assert res.headers["content-type"] == "font/woff2"
    assert res.headers["cache-control"] == "public, max-age=31536000"
    assert res.headers["access-control-allow-origin"] == allowed_origin
    assert res.headers["access-control-allow-methods"] == "GET, HEAD, OPTIONS"
    assert res.headers["access-control-allow-headers"] == "Content-Type"


async def test_serve_font_exact_domain(client, seeded_store):
    res = await client.get("/myfont.woff2", headers={"Origin": "https://example.com"})
    assert res.status_code == 200


async def test_serve_font_nested_key(client, seeded_store, allowed_origin):
    await seeded_store.put("family/bold.woff2", b"bold")
    res = await client.get("/family/bold.woff2", headers={"Origin": allowed_origin})
    assert res.content == b"bold"


async def test_denied_origin_is_403_for_existing_key(client, seeded_store):
    res = await client.get("/myfont.woff2", headers={"Origin": "https://badexample.com"})
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "ORIGIN_NOT_ALLOWED"
    assert "access-control-allow-origin" not in res.headers


async def test_denied_origin_is_403_for_missing_key(client, seeded_store):
    res = await client.get("/nope.woff2", headers={"Origin": "https://evil.net"})
    assert res.status_code == 403


async def test_missing_origin_is_403(client, seeded_store):
    res = await client.get("/myfont.woff2")
    assert res.status_code == 403


async def test_malformed_origin_is_403_not_500(client, seeded_store):
    res = await client.get("/myfont.woff2", headers={"Origin": "http://[::1"})
    assert res.status_code == 403


async def test_allowed_origin_missing_key_is_404(client, seeded_store, allowed_origin):
    res = await client.get("/nope.woff2", headers={"Origin": allowed_origin})
    assert res.status_code == 404
    body = res.json()["error"]
    assert body["message"] == "Font not found"
    assert body["context"]["font_key"] == "nope.woff2"


async def test_no_whitelist_denies(client, store, allowed_origin, font_bytes):
    await store.put("myfont.woff2", font_bytes)
    res = await client.get("/myfont.woff2", headers={"Origin": allowed_origin})
    assert res.status_code == 403


async def test_legacy_comma_whitelist_allows_subdomain(client, store, font_bytes):
    await store.put("domains", "example.com")
    await store.put("myfont.woff2", font_bytes)
    res = await client.get("/myfont.woff2", headers={"Origin": "https://cdn.example.com"})
    assert res.status_code == 200


async def test_head_returns_headers_without_body(client, seeded_store, allowed_origin, font_bytes):
    res = await client.head("/myfont.woff2", headers={"Origin": allowed_origin})
    assert res.status_code == 200
    assert res.content == b""
    assert res.headers["content-length"] == str(len(font_bytes))
    assert res.headers["access-control-allow-origin"] == allowed_origin


async def test_head_denied_origin_is_403(client, seeded_store):
    res = await client.head("/myfont.woff2", headers={"Origin": "https://evil.net"})
    assert res.status_code == 403


async def test_preflight_allowed(client, seeded_store, allowed_origin):
    res = await client.options("/anything.woff2", headers={"Origin": allowed_origin})
    assert res.status_code == 204
    assert res.headers["access-control-allow-origin"] == allowed_origin
    assert res.headers["access-control-max-age"] == "86400"


async def test_preflight_denied(client, seeded_store):
    res = await client.options("/myfont.woff2", headers={"Origin": "https://evil.net"})
    assert res.status_code == 403


async def test_post_to_font_path_not_allowed(client, seeded_store, allowed_origin):
    res = await client.post("/myfont.woff2", headers={"Origin": allowed_origin})
    assert res.status_code == 405


async def test_head_list_fonts_is_not_a_font_lookup(client, seeded_store):
    res = await client.head("/listFonts")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")


async def test_percent_encoded_path_looks_up_decoded_key(client, seeded_store, allowed_origin):
    await seeded_store.put("my font.woff2", b"spaced")
    res = await client.get("/my%20font.woff2", headers={"Origin": allowed_origin})
    assert res.status_code == 200
    assert res.content == b"spaced"


async def test_encoded_key_is_not_stored_verbatim(client, seeded_store, allowed_origin):
    await seeded_store.put("my%20font.woff2", b"literal")
    res = await client.get("/my%20font.woff2", headers={"Origin": allowed_origin})
    assert res.status_code == 404
    assert res.json()["error"]["context"]["font_key"] == "my font.woff2"
