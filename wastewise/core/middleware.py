import logging

from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from wastewise.core.config import settings
from wastewise.core.exceptions import PayloadTooLargeError
from wastewise.core.logger import logs

class BodySizeLimitMiddleware:
    """
    Rejects request bodies larger than MAX_BODY_BYTES with a 413.

    A declared Content-Length is checked up front. Bodies without one
    (chunked uploads) are buffered and counted, then replayed to the app.
    """
    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        limit = settings.MAX_BODY_BYTES
        content_length = Headers(scope=scope).get("content-length")

        if content_length is not None:
            if content_length.isdigit() and int(content_length) > limit:
                await self._reject(scope, receive, send, limit)
                return
            await self.app(scope, receive, send)
            return

        chunks = []
        received = 0
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] == "http.disconnect":
                return
            body = message.get("body", b"")
            received += len(body)
            if received > limit:
                await self._reject(scope, receive, send, limit)
                return
            chunks.append(body)
            more_body = message.get("more_body", False)

        buffered = b"".join(chunks)
        replayed = False

        async def replay() -> Message:
            nonlocal replayed
            if not replayed:
                replayed = True
                return {"type": "http.request", "body": buffered, "more_body": False}
            return await receive()

        await self.app(scope, replay, send)

    async def _reject(self, scope: Scope, receive: Receive, send: Send, limit: int):
        error = PayloadTooLargeError(f"Request body exceeds {limit} bytes")
        logs.log(logging.WARNING, f"Rejected {scope.get('path')}: {error.details}")
        response = JSONResponse(status_code=error.status_code, content=error.to_payload())
        await response(scope, receive, send)
