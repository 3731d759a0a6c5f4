"""
Local Library Catalog — Request ID Middleware
================================================

What:  Assigns a short unique ID to each request and returns it as X-Request-ID.
Why:   Every log line of one request, and the error page a user reports,
       carry the same ID.
How:   Uses the client's X-Request-ID when sent, otherwise a fresh UUID prefix;
       stored in a ContextVar (coroutine-local) and in request.state.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one thread each see their own value
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 characters is enough for correlation and readable in logs
        rid = request.headers.get("X-Request-ID", str(uuid.uuid4())[:8])

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers["X-Request-ID"] = rid
        return response
