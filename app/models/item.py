"""상품 SQLAlchemy ORM 모델 정의.

Item SQLAlchemy ORM model definition.
The identifier is assigned by the caller, so "is this entity new?" cannot be
answered from the id. ``created_date`` is used instead: it is only populated
by the insert hook.

Tables:
    - items: 상품 (Items with caller-assigned string ids)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, event
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Item(Base):
    """상품 모델 — 직접 할당하는 식별자.

    Item model with a caller-assigned identifier.

    Attributes:
        id: 식별자 (Caller-assigned string identifier)
        created_date: 생성 일시 (Set by the insert hook; None until persisted)
    """

    __tablename__ = "items"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    created_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __init__(self, id: str) -> None:
        super().__init__(id=id)

    def is_new(self) -> bool:
        """아직 저장되지 않은 엔티티인지 여부 — True until the first INSERT."""
        return self.created_date is None

    def __repr__(self) -> str:
        return f"Item(id={self.id})"


@event.listens_for(Item, "before_insert")
def _item_created_date(mapper, connection, target: Item) -> None:
    if target.created_date is None:
        target.created_date = datetime.now(timezone.utc)
