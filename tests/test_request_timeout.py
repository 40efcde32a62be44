import asyncio

import pytest

from minisearch.middleware import RequestTimeoutMiddleware


def _run(app, scope):
    sent = []

    async def receive():
        return {"type": "http.request", "body": b"", "more_body": False}

    async def send(message):
        sent.append(message)

    asyncio.run(app(scope, receive, send))
    return sent


async def _hanging_app(scope, receive, send):
    await asyncio.sleep(5)


async def _fast_app(scope, receive, send):
    await send({"type": "http.response.start", "status": 200, "headers": []})
    await send({"type": "http.response.body", "body": b"ok"})


class TestRequestTimeoutMiddleware:
    def test_hanging_request_is_cut_off(self):
        app = RequestTimeoutMiddleware(_hanging_app, timeout=0.05)
        with pytest.raises(asyncio.TimeoutError):
            _run(app, {"type": "http", "method": "GET", "path": "/search/x"})

    def test_fast_request_passes_through(self):
        app = RequestTimeoutMiddleware(_fast_app, timeout=1)
        sent = _run(app, {"type": "http", "method": "GET", "path": "/"})
        assert sent[-1]["body"] == b"ok"

    def test_non_http_scope_is_not_bounded(self):
        calls = []

        async def lifespan_app(scope, receive, send):
            calls.append(scope["type"])

        _run(RequestTimeoutMiddleware(lifespan_app, timeout=0.01), {"type": "lifespan"})
        assert calls == ["lifespan"]

    def test_application_is_bounded_by_http_timeout(self):
        from minisearch.asgi import application

        assert isinstance(application, RequestTimeoutMiddleware)
        assert application.timeout == 15
