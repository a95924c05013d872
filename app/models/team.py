"""팀 SQLAlchemy ORM 모델 정의.

Team SQLAlchemy ORM model definition.

Tables:
    - teams: 팀 (Teams, inverse side of the member association)
"""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.base import AuditingMixin

if TYPE_CHECKING:
    from app.models.member import Member


class Team(AuditingMixin, Base):
    """팀 모델 — 회원 목록을 역방향으로 참조.

    Team model. ``members`` is the inverse (non-owning) side; changing it
    alone does not change any foreign key, ``Member.change_team`` does.
    Creation/modification dates and auditors come from AuditingMixin.

    Attributes:
        id: 고유 식별자 (Generated integer identifier, column team_id)
        name: 팀 이름 (Team name)

    Relationships:
        members: 소속 회원 목록 (Members of the team)
    """

    __tablename__ = "teams"

    # 팀 고유 식별자 — Generated identifier stored in column team_id
    id: Mapped[int] = mapped_column("team_id", Integer, primary_key=True, autoincrement=True)
    # 팀 이름 — Team name
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # 관계 — Relationships
    members: Mapped[list["Member"]] = relationship(back_populates="team")

    def __init__(self, name: str) -> None:
        super().__init__(name=name, members=[])

    def __repr__(self) -> str:
        return f"Team(id={self.id}, name={self.name})"
