"""상품 레포지토리 테스트.

Item repository tests — entities with caller-assigned ids decide for
themselves whether they are new, so save() inserts instead of merging.
"""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Item
from app.repositories.item_repository import item_repository as repo


class TestItemSave:
    """직접 할당 ID 엔티티 저장 테스트."""

    async def test_new_item_is_inserted(self, db: AsyncSession):
        """신규 상품은 INSERT되고 생성 일시가 채워짐."""
        item = Item("A")
        assert item.is_new() is True
        assert repo.is_new(item) is True

        saved = await repo.save(db, item)

        assert saved is item
        assert item.created_date is not None
        assert item.is_new() is False
        assert await repo.find_by_id(db, "A") is item
        assert await repo.count(db) == 1

    async def test_saving_persisted_item_again(self, db: AsyncSession):
        """이미 저장된 상품을 다시 저장해도 같은 인스턴스."""
        item = await repo.save(db, Item("A"))

        again = await repo.save(db, item)

        assert again is item
        assert await repo.count(db) == 1

    async def test_detached_item_is_merged(self, db: AsyncSession):
        """분리된 상품은 merge되어 영속 인스턴스가 반환됨."""
        item = await repo.save(db, Item("A"))
        db.expunge(item)

        merged = await repo.save(db, item)

        assert merged is not item
        assert merged.id == "A"
        assert merged in db
        assert await repo.count(db) == 1

    async def test_duplicate_new_item_fails(self, db: AsyncSession):
        """같은 ID의 신규 상품을 다시 INSERT하면 무결성 오류."""
        await repo.save(db, Item("A"))
        db.expunge_all()

        with pytest.raises(IntegrityError):
            await repo.save(db, Item("A"))

    async def test_find_all_by_ids(self, db: AsyncSession):
        await repo.save_all(db, [Item("A"), Item("B"), Item("C")])

        found = await repo.find_all_by_ids(db, ["A", "C", "Z"])
        assert sorted(i.id for i in found) == ["A", "C"]
        assert await repo.exists_by_id(db, "B") is True
        assert await repo.exists_by_id(db, "Z") is False
