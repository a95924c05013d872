"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Sends one structured event per API call to Axiom: method, path, params,
masked request body, status code, duration, auditor and error reason.
Without an Axiom token/dataset the middleware passes requests through.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.auditing import get_current_auditor
from app.config import settings

# 마스킹 대상 필드 패턴 — Fields to mask in request bodies and query params
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}


def _mask_dict(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(k) else _mask_dict(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_mask_dict(item, depth + 1) for item in data[:20]]
    return data


async def _read_error_detail(response: Response) -> tuple[Response, str]:
    """에러 응답 본문에서 사유를 추출하고 본문을 다시 감싼 응답을 반환합니다.

    Drain the streamed body of an error response, pull out ``detail`` and
    return an equivalent response with the body buffered.
    """
    body: bytes = b""
    async for chunk in response.body_iterator:
        body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")

    try:
        payload = json.loads(body)
        detail = payload.get("detail", payload) if isinstance(payload, dict) else payload
        detail_text: str = detail if isinstance(detail, str) else json.dumps(detail)
    except (json.JSONDecodeError, UnicodeDecodeError):
        detail_text = body.decode("utf-8", errors="replace")

    rebuilt: Response = Response(
        content=body,
        status_code=response.status_code,
        headers=dict(response.headers),
        media_type=response.media_type,
    )
    return rebuilt, detail_text[:500]


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs API requests and responses to Axiom.

    Args:
        app: ASGI 애플리케이션 (Wrapped ASGI app)
        client: Axiom 클라이언트, None이면 설정으로 생성
                (Axiom client; built from settings when omitted)
        dataset: 데이터셋 이름 (Dataset name; defaults to settings.AXIOM_DATASET)
    """

    def __init__(self, app: Any, client: Any | None = None, dataset: str | None = None) -> None:
        super().__init__(app)
        self._dataset: str = dataset or settings.AXIOM_DATASET
        self._client: Any | None = client

        if self._client is None and settings.AXIOM_API_TOKEN and self._dataset:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 제외 경로 또는 Axiom 미설정시 패스스루 — Pass through skipped paths or when unconfigured
        if request.url.path in _SKIP_PATHS or self._client is None:
            return await call_next(request)

        start_time: float = time.time()
        log_event: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
            "auditor": get_current_auditor(),
        }
        if request.query_params:
            log_event["query_params"] = _mask_dict(dict(request.query_params))

        # Request body 읽기 — Read request body (only for methods with body)
        if request.method in ("POST", "PUT", "PATCH"):
            body_bytes: bytes = await request.body()
            if body_bytes:
                try:
                    log_event["request_body"] = _mask_dict(json.loads(body_bytes))
                except (json.JSONDecodeError, UnicodeDecodeError):
                    log_event["request_body"] = "(non-json body)"

        log_event["status_code"] = 500
        try:
            response: Response = await call_next(request)
            log_event["status_code"] = response.status_code
            if response.status_code >= 400:
                response, log_event["error"] = await _read_error_detail(response)
        except Exception as exc:
            log_event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            log_event["duration_ms"] = round((time.time() - start_time) * 1000, 2)
            try:
                self._client.ingest_events(self._dataset, [log_event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break a request on log failure

        return response
