"""In-memory fakes for testing.

FakeItemRepository implements the full ItemRepository contract on a dict.
Items are stored as snapshots, so changes are only visible after save/update.
"""

from decimal import Decimal
from itertools import count
from typing import Dict, List, Optional

from core.domain import (
    DuplicateKeyException,
    EntityNotFoundException,
    ValidationException,
)
from items.domain import (
    Attributes,
    CategoryService,
    Item,
    ItemID,
    ItemRepository,
    ItemStatus,
    PricingService,
    SKU,
)


def _snapshot(item: Item) -> Item:
    return Item.restore(
        id=item.id,
        sku=item.sku,
        name=item.name,
        description=item.description,
        price=item.price,
        category=item.category,
        inventory=item.inventory,
        images=item.images,
        attributes=Attributes(item.attributes.all()),
        status=item.status,
        created_at=item.created_at,
        updated_at=item.updated_at,
    )


class FakeItemRepository(ItemRepository):

    def __init__(self) -> None:
        self._store: Dict[ItemID, Item] = {}
        self._order: Dict[ItemID, int] = {}
        self._seq = count()

    def _newest_first(self, items: List[Item]) -> List[Item]:
        return sorted(
            items,
            key=lambda i: (i.created_at, self._order[i.id]),
            reverse=True,
        )

    def _page(self, items: List[Item], limit: int, offset: int) -> List[Item]:
        return [_snapshot(i) for i in self._newest_first(items)[offset:offset + limit]]

    def _matches(self, item: Item, query: str) -> bool:
        q = query.lower()
        return (
            q in item.name.lower()
            or q in item.description.lower()
            or q in item.sku.value.lower()
        )

    def _available(self) -> List[Item]:
        return [i for i in self._store.values() if i.is_available_for_purchase()]

    def save(self, item: Item) -> Item:
        if any(i.sku == item.sku for i in self._store.values()):
            raise DuplicateKeyException("商品", "sku", item.sku.value)
        self._store[item.id] = _snapshot(item)
        self._order[item.id] = next(self._seq)
        return item

    def find_by_id(self, item_id: ItemID) -> Item:
        if item_id not in self._store:
            raise EntityNotFoundException("商品", item_id)
        return _snapshot(self._store[item_id])

    def find_by_sku(self, sku: SKU) -> Item:
        for item in self._store.values():
            if item.sku == sku:
                return _snapshot(item)
        raise EntityNotFoundException("商品", f"sku={sku}")

    def update(self, item: Item) -> Item:
        if item.id not in self._store:
            raise EntityNotFoundException("商品", item.id)
        self._store[item.id] = _snapshot(item)
        return item

    def delete(self, item_id: ItemID) -> None:
        if item_id not in self._store:
            raise EntityNotFoundException("商品", item_id)
        del self._store[item_id]
        del self._order[item_id]

    def find_by_category(self, category_slug: str, limit: int, offset: int) -> List[Item]:
        items = [i for i in self._store.values() if i.category.slug == category_slug]
        return self._page(items, limit, offset)

    def find_by_status(self, status: ItemStatus, limit: int, offset: int) -> List[Item]:
        items = [i for i in self._store.values() if i.status == status]
        return self._page(items, limit, offset)

    def search(self, query: str, limit: int, offset: int) -> List[Item]:
        items = [i for i in self._store.values() if self._matches(i, query)]
        return self._page(items, limit, offset)

    def find_available_items(self, limit: int, offset: int) -> List[Item]:
        return self._page(self._available(), limit, offset)

    def find_items_with_low_stock(self, threshold: int) -> List[Item]:
        items = [
            i for i in self._store.values()
            if i.is_active() and i.inventory.quantity <= threshold
        ]
        return [_snapshot(i) for i in sorted(items, key=lambda i: i.inventory.quantity)]

    def exists_by_sku(self, sku: SKU) -> bool:
        return any(i.sku == sku for i in self._store.values())

    def exists_by_id(self, item_id: ItemID) -> bool:
        return item_id in self._store

    def count_by_category(self, category_slug: str) -> int:
        return sum(1 for i in self._store.values() if i.category.slug == category_slug)

    def count_by_status(self, status: ItemStatus) -> int:
        return sum(1 for i in self._store.values() if i.status == status)

    def count_search(self, query: str) -> int:
        return sum(1 for i in self._store.values() if self._matches(i, query))

    def count_available_items(self) -> int:
        return len(self._available())


class StaleSkuCheckRepository(FakeItemRepository):
    """exists_by_sku always answers False, as if another writer had not committed yet.

    The unique SKU rule is then only enforced by save.
    """

    def exists_by_sku(self, sku: SKU) -> bool:
        return False


class StubCategoryService(CategoryService):
    """Rejects the categories in ``blocked``; raises ``error`` when given."""

    def __init__(self, blocked=("restricted",), error: Optional[Exception] = None) -> None:
        self.blocked = {c.lower() for c in blocked}
        self.error = error
        self.calls: List[str] = []

    def validate_category(self, category: str) -> None:
        self.calls.append(category)
        if self.error is not None:
            raise self.error
        if category.lower() in self.blocked:
            raise ValidationException("category", f"category '{category}' is not allowed")


class StubPricingService(PricingService):
    """Multiplies by ``factor`` (1 by default); raises ``error`` when given."""

    def __init__(self, factor: Decimal = Decimal("1"), error: Optional[Exception] = None) -> None:
        self.factor = factor
        self.error = error

    def calculate_price(self, base_price: Decimal, category: str) -> Decimal:
        if self.error is not None:
            raise self.error
        return base_price * self.factor
