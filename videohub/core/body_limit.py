from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from videohub.core.errors import PayloadTooLargeError


class BodySizeLimitMiddleware:
    """Caps request bodies at the transport layer.

    A declared ``Content-Length`` over the limit is answered with 413 before
    the body is read. Streamed bodies are counted chunk by chunk and the read
    is aborted with ``PayloadTooLargeError`` once the limit is crossed.
    """

    def __init__(self, app: ASGIApp, max_body_size: int):
        self.app = app
        self.max_body_size = max_body_size

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = Headers(scope=scope).get("content-length")
        if declared and declared.isdigit() and int(declared) > self.max_body_size:
            response = JSONResponse(status_code=413, content={"error": "Request body too large"})
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_size:
                    raise PayloadTooLargeError("Request body too large")
            return message

        await self.app(scope, limited_receive, send)
