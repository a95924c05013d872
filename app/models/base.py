"""엔티티 공통 감사(Auditing) 믹스인.

Shared auditing mixins for entities.

Two flavours are provided:
    - TimestampMixin: 생명주기 콜백 방식 (lifecycle-callback style)
      created_date / updated_date, set by pre_persist / pre_update.
    - AuditingMixin: 작성자까지 기록하는 감사 방식 (auditor-aware style)
      created_date / last_modified_date / created_by / last_modified_by.

Both are driven by mapper ``before_insert`` / ``before_update`` events so
repositories never set these columns themselves. ORM bulk UPDATE statements
bypass mapper events and therefore leave these columns untouched.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, event
from sqlalchemy.orm import Mapped, mapped_column, object_session

from app.auditing import get_current_auditor


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _has_column_changes(target: object) -> bool:
    # before_update는 net change가 없는 dirty 객체에도 호출됨
    # before_update also fires for dirty objects without net column changes
    session = object_session(target)
    return session is None or session.is_modified(target, include_collections=False)


class TimestampMixin:
    """생성/수정 일시 믹스인 — 생명주기 콜백 방식.

    Creation / update timestamps maintained by lifecycle callbacks.

    Attributes:
        created_date: 최초 저장 일시, 이후 변경되지 않음 (Set once on insert)
        updated_date: 마지막 수정 일시 (Refreshed on every update)
    """

    created_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def pre_persist(self) -> None:
        """저장 전 이벤트 — called before INSERT."""
        now: datetime = _utcnow()
        self.created_date = now
        self.updated_date = now

    def pre_update(self) -> None:
        """수정 전 이벤트 — called before UPDATE."""
        self.updated_date = _utcnow()


class AuditingMixin:
    """감사 믹스인 — 일시와 작성자를 함께 기록.

    Auditing columns populated from the current auditor context.

    Attributes:
        created_date: 생성 일시 (Creation timestamp, insert only)
        last_modified_date: 최종 수정 일시 (Last modification timestamp)
        created_by: 생성자 (Auditor at insert time, never rewritten)
        last_modified_by: 최종 수정자 (Auditor at last update)
    """

    created_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    last_modified_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_modified_by: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def mark_created(self, auditor: str) -> None:
        now: datetime = _utcnow()
        self.created_date = now
        self.last_modified_date = now
        self.created_by = auditor
        self.last_modified_by = auditor

    def mark_modified(self, auditor: str) -> None:
        self.last_modified_date = _utcnow()
        self.last_modified_by = auditor


# ---------------------------------------------------------------------------
# 매퍼 이벤트 등록 — propagate=True로 믹스인을 상속한 모든 매핑 클래스에 적용
# Mapper event registration; propagate=True applies to every mapped subclass
# ---------------------------------------------------------------------------
@event.listens_for(TimestampMixin, "before_insert", propagate=True)
def _timestamp_before_insert(mapper, connection, target: TimestampMixin) -> None:
    target.pre_persist()


@event.listens_for(TimestampMixin, "before_update", propagate=True)
def _timestamp_before_update(mapper, connection, target: TimestampMixin) -> None:
    if _has_column_changes(target):
        target.pre_update()


@event.listens_for(AuditingMixin, "before_insert", propagate=True)
def _auditing_before_insert(mapper, connection, target: AuditingMixin) -> None:
    target.mark_created(get_current_auditor())


@event.listens_for(AuditingMixin, "before_update", propagate=True)
def _auditing_before_update(mapper, connection, target: AuditingMixin) -> None:
    if _has_column_changes(target):
        target.mark_modified(get_current_auditor())
