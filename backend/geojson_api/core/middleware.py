from collections.abc import Sequence

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse


class MaxBodySizeMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, max_body_size: int, exclude_paths: Sequence[str] = ()):
        super().__init__(app)
        self.max_body_size = max_body_size
        self.exclude_paths = exclude_paths

    async def dispatch(self, request, call_next):
        for p in self.exclude_paths:
            if request.url.path.startswith(p):
                return await call_next(request)

        # Seul Content-Length est contrôlé : un body envoyé en chunked (sans en-tête) passe
        cl = request.headers.get("content-length")
        if cl is not None:
            try:
                if int(cl) > self.max_body_size:
                    return JSONResponse(
                        {"error": f"Request body too large (>{self.max_body_size} bytes)"},
                        status_code=413,
                    )
            except ValueError:
                # Content-Length invalide : laissé au serveur
                pass
        return await call_next(request)
