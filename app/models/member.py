"""회원 SQLAlchemy ORM 모델 정의.

Member SQLAlchemy ORM model definition.

Tables:
    - members: 회원 (Members, each optionally belonging to one team)
"""

from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.base import TimestampMixin

if TYPE_CHECKING:
    from app.models.team import Team


class Member(TimestampMixin, Base):
    """회원 모델 — 팀과의 연관관계의 주인.

    Member model — owning side of the member/team association.
    The ``team`` relationship is lazy: in async code it is loaded on demand
    with ``await member.awaitable_attrs.team`` or eagerly through a fetch join
    or the ``"Member.all"`` entity graph.

    Attributes:
        id: 고유 식별자 (Generated integer identifier, column member_id)
        username: 회원 이름 (Username, not unique)
        age: 나이 (Age, defaults to 0)
        team_id: 소속 팀 FK (Team foreign key, nullable)

    Relationships:
        team: 소속 팀 (Team, many-to-one, lazy)
    """

    __tablename__ = "members"

    # 이름 있는 엔티티 그래프 — Named entity graphs: name -> relationships to eager-load
    __entity_graphs__: ClassVar[dict[str, tuple[str, ...]]] = {
        "Member.all": ("team",),
    }

    # 회원 고유 식별자 — Generated identifier stored in column member_id
    id: Mapped[int] = mapped_column("member_id", Integer, primary_key=True, autoincrement=True)
    # 회원 이름 — Username (중복 허용, duplicates allowed)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # 나이 — Age
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # 소속 팀 FK — Owning foreign key to teams.team_id
    team_id: Mapped[int | None] = mapped_column(ForeignKey("teams.team_id"), nullable=True, index=True)

    # 관계 — Relationships
    team: Mapped[Optional["Team"]] = relationship(back_populates="members")

    def __init__(self, username: str | None = None, age: int = 0, team: "Team | None" = None) -> None:
        super().__init__(username=username, age=age, team=None)
        if team is not None:
            self.change_team(team)

    # == 연관관계 메서드 == #
    def change_team(self, team: "Team") -> None:
        """소속 팀을 변경합니다.

        Move the member to ``team``. ``back_populates`` keeps
        ``team.members`` in sync in memory.
        """
        self.team = team

    def __repr__(self) -> str:
        return f"Member(id={self.id}, username={self.username}, age={self.age})"
