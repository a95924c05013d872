"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    base: 감사 믹스인 (Auditing mixins: TimestampMixin, AuditingMixin)
    member: 회원 (Member)
    team: 팀 (Team)
    item: 상품 (Item)
"""

from app.models.base import AuditingMixin, TimestampMixin
from app.models.member import Member
from app.models.team import Team
from app.models.item import Item

__all__ = [
    "AuditingMixin", "TimestampMixin",
    "Member", "Team", "Item",
]
