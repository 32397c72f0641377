from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
}

PROXY_PATHS = frozenset({"/generate-prompt", "/generate-artwork"})


class ProxyPreflightMiddleware(BaseHTTPMiddleware):
    """Answer every OPTIONS request to the AI proxy endpoints.

    The reply is an empty 200 with the fixed CORS headers, whatever the
    pre-flight asks for, and nothing behind the middleware runs.
    """

    def __init__(self, app, paths=PROXY_PATHS):
        super().__init__(app)
        self._paths = frozenset(paths)

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS" and request.url.path in self._paths:
            return Response(status_code=200, headers=CORS_HEADERS)
        return await call_next(request)
