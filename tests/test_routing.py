def test_unknown_route(client):
    r = client.get("/nope")
    assert r.status_code == 404
    assert r.text == "Route not found"


def test_wrong_method_is_route_not_found(client):
    r = client.delete("/questions")
    assert r.status_code == 404
    assert r.text == "Route not found"


def test_cors_preflight_allowed(client):
    r = client.options(
        "/questions",
        headers={
            "origin": "http://example.com",
            "access-control-request-method": "GET",
            "access-control-request-headers": "content-type",
        },
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


def test_cors_preflight_bad_method_forbidden(client):
    r = client.options(
        "/questions",
        headers={"origin": "http://example.com", "access-control-request-method": "PATCH"},
    )
    assert r.status_code == 403
    assert "method" in r.text.lower()


def test_cors_preflight_bad_header_forbidden(client):
    r = client.options(
        "/questions",
        headers={
            "origin": "http://example.com",
            "access-control-request-method": "GET",
            "access-control-request-headers": "x-not-allowed",
        },
    )
    assert r.status_code == 403
    assert "headers" in r.text.lower()


def test_simple_request_gets_cors_header(client):
    r = client.get("/questions", headers={"origin": "http://example.com"})
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "count": 5}
