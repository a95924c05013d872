"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어 및 라우터 등록.

FastAPI application entry point — Middleware and router registration.
"""

from fastapi import FastAPI

from app.api import api_router
from app.config import settings
from app.middleware.auditor import AuditorMiddleware
from app.middleware.axiom_logging import AxiomLoggingMiddleware

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# 미들웨어는 나중에 등록한 것이 바깥쪽 — The last middleware added runs outermost.
# Axiom 로깅이 요청 작성자를 볼 수 있도록 AuditorMiddleware를 바깥에 둠
# AuditorMiddleware wraps Axiom logging so log events carry the auditor
app.add_middleware(AxiomLoggingMiddleware)
app.add_middleware(AuditorMiddleware)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


app.include_router(api_router, prefix="/api/v1")
