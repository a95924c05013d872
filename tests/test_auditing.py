"""감사(Auditing) 테스트.

Auditing tests — lifecycle-callback timestamps on members, auditor-aware
columns on teams and the auditor context itself.
"""

from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.auditing import (
    auditor_context,
    current_auditor_var,
    get_current_auditor,
    set_current_auditor,
)
from app.config import settings
from app.models import Member, Team
from app.repositories.member_repository import member_repository
from app.repositories.team_repository import team_repository


def _as_utc(value: datetime) -> datetime:
    # SQLite는 타임존 없이 저장 — SQLite returns naive UTC values
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


class TestAuditorContext:
    """작성자 컨텍스트 테스트."""

    def test_default_auditor(self):
        assert get_current_auditor() == settings.DEFAULT_AUDITOR

    def test_auditor_context_is_scoped(self):
        """블록을 벗어나면 이전 작성자로 복원됨."""
        with auditor_context("alice"):
            assert get_current_auditor() == "alice"
            with auditor_context("bob"):
                assert get_current_auditor() == "bob"
            assert get_current_auditor() == "alice"
        assert get_current_auditor() == settings.DEFAULT_AUDITOR

    def test_set_and_reset(self):
        token = set_current_auditor("carol")
        try:
            assert get_current_auditor() == "carol"
        finally:
            current_auditor_var.reset(token)
        assert get_current_auditor() == settings.DEFAULT_AUDITOR


class TestTimestampMixin:
    """생명주기 콜백 방식 생성/수정 일시 테스트."""

    async def test_timestamps_set_on_insert(self, db: AsyncSession):
        member = await member_repository.save(db, Member("member1"))

        assert member.created_date is not None
        assert member.updated_date == member.created_date

    async def test_updated_date_refreshed_on_update(self, db: AsyncSession):
        """수정 시 updated_date만 갱신, created_date는 유지."""
        member = await member_repository.save(db, Member("member1"))
        created = member.created_date
        first_update = member.updated_date

        member.username = "member2"
        await db.flush()

        assert member.created_date == created
        assert member.updated_date >= first_update

    async def test_timestamps_before_flush(self):
        """저장 전에는 일시가 비어 있음."""
        member = Member("member1")
        assert member.created_date is None
        assert member.updated_date is None


class TestAuditingMixin:
    """작성자 기록 감사 테스트."""

    async def test_created_by_default_auditor(self, db: AsyncSession):
        team = await team_repository.save(db, Team("teamA"))

        assert team.created_by == settings.DEFAULT_AUDITOR
        assert team.last_modified_by == settings.DEFAULT_AUDITOR
        assert team.created_date is not None
        assert team.last_modified_date == team.created_date

    async def test_auditors_recorded(self, db: AsyncSession):
        """생성자는 고정, 수정자는 마지막 작성자."""
        with auditor_context("alice"):
            team = await team_repository.save(db, Team("teamA"))

        assert team.created_by == "alice"
        assert team.last_modified_by == "alice"
        created = team.created_date

        with auditor_context("bob"):
            team.name = "teamB"
            await db.flush()

        assert team.created_by == "alice"
        assert team.last_modified_by == "bob"
        assert team.created_date == created
        assert team.last_modified_date >= created

    async def test_collection_change_does_not_touch_team_auditing(self, db: AsyncSession):
        """회원 추가는 팀의 컬럼 변경이 아니므로 수정자가 바뀌지 않음."""
        with auditor_context("alice"):
            team = await team_repository.save(db, Team("teamA"))

        with auditor_context("bob"):
            await member_repository.save(db, Member("member1", 10, team))

        assert team.last_modified_by == "alice"
        assert await team_repository.count_members(db, team.id) == 1

    async def test_bulk_update_skips_hooks(self, db: AsyncSession):
        """벌크 수정은 생명주기 콜백을 거치지 않음."""
        member = await member_repository.save(db, Member("member1", 30))
        updated = member.updated_date

        assert await member_repository.bulk_age_plus(db, 20) == 1

        reloaded = (await member_repository.find_by_username(db, "member1"))[0]
        assert reloaded.age == 31
        assert _as_utc(reloaded.updated_date) == _as_utc(updated)
