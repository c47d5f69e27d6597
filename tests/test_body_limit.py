import asyncio

import pytest

from videohub.core.body_limit import BodySizeLimitMiddleware
from videohub.core.errors import PayloadTooLargeError


async def read_all(scope, receive, send):
    while True:
        message = await receive()
        if not message.get("more_body"):
            break
    await send({"type": "http.response.start", "status": 200, "headers": []})
    await send({"type": "http.response.body", "body": b"ok"})


def run(middleware, headers, chunks):
    scope = {"type": "http", "method": "POST", "path": "/", "headers": headers}
    pending = list(chunks)
    sent = []

    async def receive():
        body = pending.pop(0)
        return {"type": "http.request", "body": body, "more_body": bool(pending)}

    async def send(message):
        sent.append(message)

    asyncio.run(middleware(scope, receive, send))
    return sent


def test_declared_length_over_limit_is_rejected_before_reading():
    sent = run(BodySizeLimitMiddleware(read_all, max_body_size=10), [(b"content-length", b"11")], [])
    assert sent[0]["status"] == 413


def test_streamed_body_over_limit_aborts_read():
    with pytest.raises(PayloadTooLargeError):
        run(BodySizeLimitMiddleware(read_all, max_body_size=10), [], [b"x" * 6, b"x" * 6])


def test_body_within_limit_passes():
    sent = run(BodySizeLimitMiddleware(read_all, max_body_size=10), [(b"content-length", b"10")], [b"x" * 10])
    assert sent[0]["status"] == 200
