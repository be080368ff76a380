"""End-to-end scenarios for the application service on the Django repository."""

import uuid
from decimal import Decimal

import pytest

from core.domain import DuplicateKeyException, EntityNotFoundException, ValidationException
from items.application import (
    CreateItemCommand,
    DeleteItemCommand,
    GetItemQuery,
    SearchItemsQuery,
    UpdateInventoryCommand,
)
from items.domain import ItemSettings
from items.infrastructure.factory import ItemInfrastructureFactory
from items.infrastructure.models.item_models import ItemModel

pytestmark = pytest.mark.django_db


@pytest.fixture
def service():
    return ItemInfrastructureFactory(settings=ItemSettings()).create_item_service()


def _create(service, **overrides):
    fields = dict(sku="TEST-001", name="Widget", price=Decimal("19.99"), category="tools")
    fields.update(overrides)
    return service.create_item(CreateItemCommand(**fields))


class TestScenarios:

    def test_a_create(self, service):
        dto = _create(service, inventory=5)
        row = ItemModel.objects.get(id=dto.id)
        assert row.status == "active"
        assert row.inventory_quantity == 5

    def test_b_duplicate_sku(self, service):
        _create(service)
        with pytest.raises(DuplicateKeyException):
            _create(service)
        assert ItemModel.objects.count() == 1

    def test_c_update_inventory(self, service):
        dto = _create(service)
        with pytest.raises(ValidationException, match="cannot be negative"):
            service.update_inventory(UpdateInventoryCommand(dto.id, -1))
        service.update_inventory(UpdateInventoryCommand(dto.id, 50))
        assert service.get_item(GetItemQuery(dto.id)).inventory["quantity"] == 50

    def test_d_search_by_category(self, service):
        for n in range(12):
            _create(service, sku=f"TOOL-{n:03d}")
        _create(service, sku="ROSE-001", category="garden")
        result = service.search_items(SearchItemsQuery(category="tools", page=1, page_size=10))
        assert len(result.items) == 10
        assert {item.category["slug"] for item in result.items} == {"tools"}
        assert result.total == 12
        created = [item.created_at for item in result.items]
        assert created == sorted(created, reverse=True)

    def test_e_delete(self, service):
        with pytest.raises(EntityNotFoundException):
            service.delete_item(DeleteItemCommand(str(uuid.uuid4())))
        dto = _create(service)
        service.delete_item(DeleteItemCommand(dto.id))
        with pytest.raises(EntityNotFoundException):
            service.get_item(GetItemQuery(dto.id))


class TestPricing:

    def test_category_discount_applied(self, service):
        dto = _create(service, price=Decimal("100"), category="Electronics")
        assert dto.price == Decimal("95.00")
        assert ItemModel.objects.get(id=dto.id).price_amount == 9500

    def test_blocked_category(self, service):
        with pytest.raises(ValidationException, match="not allowed"):
            _create(service, category="restricted")
