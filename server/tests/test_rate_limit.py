from dataclasses import replace

from fastapi.testclient import TestClient

from core.rate_limit import RateLimiter
from main import create_app


def test_limiter_window():
    limiter = RateLimiter(max_requests=2, window_seconds=60)

    assert limiter.is_allowed("anon:1", now=1000.0) == (True, None)
    assert limiter.is_allowed("anon:1", now=1001.0) == (True, None)
    assert limiter.is_allowed("anon:1", now=1002.0) == (False, 58)
    # other clients are counted separately
    assert limiter.is_allowed("anon:2", now=1002.0) == (True, None)
    # oldest request has left the window
    assert limiter.is_allowed("anon:1", now=1061.0) == (True, None)


def test_middleware_returns_429(settings, empty_storage):
    client = TestClient(create_app(settings=replace(settings, rate_limit_max_requests=3), storage=empty_storage))

    responses = [client.get("/api/courses") for _ in range(4)]

    assert [r.status_code for r in responses] == [200, 200, 200, 429]
    assert responses[0].headers["X-RateLimit-Limit"] == "3"
    assert responses[2].headers["X-RateLimit-Remaining"] == "0"
    assert "Rate limit exceeded" in responses[3].json()["detail"]


def test_health_is_not_limited(settings, empty_storage):
    client = TestClient(create_app(settings=replace(settings, rate_limit_max_requests=1), storage=empty_storage))

    assert all(client.get("/api/health").status_code == 200 for _ in range(5))


def test_idle_clients_are_forgotten():
    limiter = RateLimiter(max_requests=5, window_seconds=60)
    for n in range(50):
        limiter.is_allowed(f"ip:10.0.0.{n}", now=1000.0)

    assert len(limiter.requests) == 50

    limiter.is_allowed("ip:10.0.0.99", now=1100.0)

    assert list(limiter.requests) == ["ip:10.0.0.99"]
    assert limiter.remaining("ip:10.0.0.1") == 5
    assert "ip:10.0.0.1" not in limiter.requests
