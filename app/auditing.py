"""감사(Auditing) 작성자 컨텍스트 모듈.

Auditor context module.
Holds the name of the actor performing the current unit of work so that
entity lifecycle hooks can stamp ``created_by`` / ``last_modified_by``
without repositories passing it around.

Usage:
    with auditor_context("admin"):
        await team_repository.save(db, Team("teamA"))
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

from app.config import settings

# 현재 작성자 — Current auditor for this task/request (None falls back to settings)
current_auditor_var: ContextVar[str | None] = ContextVar("current_auditor", default=None)


def get_current_auditor() -> str:
    """현재 작성자 이름을 반환합니다.

    Return the current auditor, falling back to ``settings.DEFAULT_AUDITOR``.
    """
    return current_auditor_var.get() or settings.DEFAULT_AUDITOR


def set_current_auditor(auditor: str | None) -> Token:
    """현재 작성자를 설정하고 복원용 토큰을 반환합니다.

    Set the current auditor and return the token needed to reset it.
    """
    return current_auditor_var.set(auditor)


@contextmanager
def auditor_context(auditor: str) -> Iterator[str]:
    """블록 안에서만 유효한 작성자를 설정합니다.

    Scope an auditor to a ``with`` block.
    """
    token: Token = set_current_auditor(auditor)
    try:
        yield auditor
    finally:
        current_auditor_var.reset(token)
