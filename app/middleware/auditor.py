"""요청 작성자(Auditor) 미들웨어.

Auditor middleware.
Reads the ``X-Auditor`` header and exposes it through the auditor context
for the duration of the request, so entities saved while handling it are
stamped with that name. Requests without the header use
``settings.DEFAULT_AUDITOR``.
"""

from contextvars import Token

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.auditing import current_auditor_var, set_current_auditor

AUDITOR_HEADER: str = "X-Auditor"


class AuditorMiddleware(BaseHTTPMiddleware):
    """요청 헤더의 작성자를 감사 컨텍스트에 설정하는 미들웨어."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        auditor: str | None = request.headers.get(AUDITOR_HEADER) or None
        token: Token = set_current_auditor(auditor)
        try:
            return await call_next(request)
        finally:
            current_auditor_var.reset(token)
