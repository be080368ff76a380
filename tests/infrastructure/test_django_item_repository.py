"""Tests for DjangoItemRepository against the sqlite test database."""

import uuid
from decimal import Decimal

import pytest
from django.db import DatabaseError

from core.domain import DependencyFailureException, DuplicateKeyException, EntityNotFoundException
from items.domain import Attributes, Category, Image, Item, ItemID, ItemStatus, Price, SKU
from items.infrastructure.models.item_models import ItemModel
from items.infrastructure.repositories.django_item_repository import DjangoItemRepository

pytestmark = pytest.mark.django_db


def _item(sku="TEST-001", name="Widget", category="tools", price="19.99",
          quantity=0, active=True, description="") -> Item:
    item = Item.create(SKU(sku), name, description, Price(Decimal(price)), Category(category))
    if quantity:
        item.restock(quantity)
    if active:
        item.activate()
    return item


@pytest.fixture
def repo() -> DjangoItemRepository:
    return DjangoItemRepository()


class TestSaveAndFind:

    def test_round_trip(self, repo):
        item = _item(description="desc", quantity=7)
        item.add_image(Image("http://x/1.png", "front", True))
        item.set_attribute("color", "red")
        repo.save(item)

        loaded = repo.find_by_id(item.id)
        assert loaded == item
        assert loaded.sku == SKU("TEST-001")
        assert loaded.name == "Widget"
        assert loaded.description == "desc"
        assert loaded.price == Price(Decimal("19.99"))
        assert loaded.category == Category("tools")
        assert loaded.inventory.quantity == 7
        assert loaded.images == [Image("http://x/1.png", "front", True)]
        assert loaded.attributes.all() == {"color": "red"}
        assert loaded.status is ItemStatus.ACTIVE
        assert loaded.created_at == item.created_at
        assert loaded.updated_at == item.updated_at
        assert loaded.domain_events == []

    def test_price_stored_in_minor_units(self, repo):
        item = _item(price="19.99")
        repo.save(item)
        row = ItemModel.objects.get(id=item.id.value)
        assert row.price_amount == 1999
        assert row.price_currency == "USD"
        assert row.category_slug == "tools"

    def test_find_by_sku(self, repo):
        item = _item()
        repo.save(item)
        assert repo.find_by_sku(SKU("test-001")).id == item.id

    def test_missing(self, repo):
        with pytest.raises(EntityNotFoundException):
            repo.find_by_id(ItemID.generate())
        with pytest.raises(EntityNotFoundException):
            repo.find_by_sku(SKU("NOPE-1"))

    def test_duplicate_sku_enforced_by_constraint(self, repo):
        repo.save(_item())
        with pytest.raises(DuplicateKeyException):
            repo.save(_item(name="Other"))
        assert ItemModel.objects.count() == 1

    def test_duplicate_id_reported_as_id(self, repo):
        item = _item()
        repo.save(item)
        clash = Item.restore(
            id=item.id, sku=SKU("OTHER-1"), name=item.name, description="",
            price=item.price, category=item.category, inventory=item.inventory,
            images=[], attributes=Attributes({}), status=item.status,
            created_at=item.created_at, updated_at=item.updated_at,
        )
        with pytest.raises(DuplicateKeyException, match="id="):
            repo.save(clash)
        assert ItemModel.objects.count() == 1

    def test_exists(self, repo):
        item = _item()
        assert not repo.exists_by_sku(item.sku)
        repo.save(item)
        assert repo.exists_by_sku(item.sku)
        assert repo.exists_by_id(item.id)
        assert not repo.exists_by_id(ItemID.generate())


class TestUpdateAndDelete:

    def test_update(self, repo):
        item = _item()
        repo.save(item)
        item.rename("Gadget")
        item.restock(3)
        repo.update(item)
        loaded = repo.find_by_id(item.id)
        assert loaded.name == "Gadget"
        assert loaded.inventory.quantity == 3
        assert loaded.updated_at == item.updated_at

    def test_update_missing(self, repo):
        with pytest.raises(EntityNotFoundException):
            repo.update(_item())

    def test_delete(self, repo):
        item = _item()
        repo.save(item)
        repo.delete(item.id)
        with pytest.raises(EntityNotFoundException):
            repo.find_by_id(item.id)

    def test_delete_missing(self, repo):
        with pytest.raises(EntityNotFoundException):
            repo.delete(ItemID.from_string(str(uuid.uuid4())))


class TestQueries:

    @pytest.fixture
    def seeded(self, repo):
        rows = [
            dict(sku="HAMMER-1", name="Claw hammer", quantity=3),
            dict(sku="SAW-1", name="Hand saw", description="cuts WOOD"),
            dict(sku="ROSE-1", name="Red rose", category="garden", quantity=10),
            dict(sku="GOLD-1", name="Gold tool", quantity=1, active=False),
            dict(sku="NAIL-1", name="Nails", quantity=5),
        ]
        # Save one at a time so created_at follows the list order
        return [repo.save(_item(**fields)) for fields in rows]

    def test_by_category_newest_first(self, repo, seeded):
        result = repo.find_by_category("tools", limit=10, offset=0)
        assert [i.sku.value for i in result] == ["NAIL-1", "GOLD-1", "SAW-1", "HAMMER-1"]
        assert repo.count_by_category("tools") == 4

    def test_limit_and_offset(self, repo, seeded):
        result = repo.find_by_category("tools", limit=2, offset=1)
        assert [i.sku.value for i in result] == ["GOLD-1", "SAW-1"]

    def test_same_created_at_pages_are_stable(self, repo):
        created = _item(sku="TIE-0")
        items = [
            Item.restore(
                id=ItemID.generate(), sku=SKU(f"TIE-{n}"), name="Widget", description="",
                price=created.price, category=created.category, inventory=created.inventory,
                images=[], attributes=Attributes({}), status=ItemStatus.ACTIVE,
                created_at=created.created_at, updated_at=created.updated_at,
            )
            for n in range(6)
        ]
        for item in items:
            repo.save(item)

        pages = [repo.find_by_category("tools", limit=2, offset=offset) for offset in (0, 2, 4)]
        ids = [i.id.value for page in pages for i in page]
        assert len(set(ids)) == 6
        assert ids == sorted((i.id.value for i in items), reverse=True)

    def test_by_status(self, repo, seeded):
        assert [i.sku.value for i in repo.find_by_status(ItemStatus.DRAFT, 10, 0)] == ["GOLD-1"]
        assert repo.count_by_status(ItemStatus.ACTIVE) == 4

    def test_search_case_insensitive(self, repo, seeded):
        assert [i.sku.value for i in repo.search("wood", 10, 0)] == ["SAW-1"]
        assert [i.sku.value for i in repo.search("hammer", 10, 0)] == ["HAMMER-1"]
        assert repo.count_search("-1") == 5

    def test_available(self, repo, seeded):
        skus = {i.sku.value for i in repo.find_available_items(10, 0)}
        assert skus == {"HAMMER-1", "ROSE-1", "NAIL-1"}
        assert repo.count_available_items() == 3

    def test_low_stock_ascending(self, repo, seeded):
        result = repo.find_items_with_low_stock(5)
        assert [i.sku.value for i in result] == ["SAW-1", "HAMMER-1", "NAIL-1"]


class TestDatabaseFailure:

    def test_database_error_becomes_dependency_failure(self, repo, monkeypatch):
        def broken(*args, **kwargs):
            raise DatabaseError("connection lost")

        monkeypatch.setattr(ItemModel.objects, "filter", broken)
        with pytest.raises(DependencyFailureException, match="database") as exc_info:
            repo.exists_by_sku(SKU("TEST-001"))
        assert isinstance(exc_info.value.__cause__, DatabaseError)
