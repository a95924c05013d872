"""상품 레포지토리.

Item Repository. Items carry caller-assigned ids, so ``save`` relies on
``Item.is_new()`` to choose between INSERT and merge.
"""

from app.models.item import Item
from app.repositories.base import BaseRepository


class ItemRepository(BaseRepository[Item]):
    def __init__(self) -> None:
        super().__init__(Item)


# 싱글턴 인스턴스 — Singleton instance
item_repository: ItemRepository = ItemRepository()
