"""Unit tests for the Item aggregate."""

from decimal import Decimal

import pytest

from core.domain import ValidationException
from items.domain import (
    STATUS_TRANSITIONS,
    Category,
    Image,
    InvalidStatusTransitionException,
    Item,
    ItemCreatedEvent,
    ItemInventoryUpdatedEvent,
    ItemPriceChangedEvent,
    ItemStatus,
    ItemStatusChangedEvent,
    Price,
    SKU,
)


def _item(**overrides) -> Item:
    fields = dict(
        sku=SKU("TEST-001"),
        name="Widget",
        description="A widget",
        price=Price(Decimal("19.99")),
        category=Category("Tools"),
    )
    fields.update(overrides)
    return Item.create(**fields)


def _event_types(item: Item) -> list:
    return [type(e) for e in item.domain_events]


class TestCreate:

    def test_defaults(self):
        item = _item()
        assert item.status is ItemStatus.DRAFT
        assert item.inventory.quantity == 0
        assert item.images == []
        assert len(item.attributes) == 0
        assert item.created_at == item.updated_at
        assert item.created_at.tzinfo is not None

    def test_records_created_event(self):
        item = _item()
        assert _event_types(item) == [ItemCreatedEvent]
        event = item.domain_events[0]
        assert event.sku == "TEST-001"
        assert event.name == "Widget"

    def test_distinct_ids(self):
        assert _item().id != _item().id

    def test_name_trimmed(self):
        assert _item(name="  Widget ").name == "Widget"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationException, match="name cannot be empty"):
            _item(name="   ")

    def test_name_length_limit(self):
        assert len(_item(name="x" * 255).name) == 255
        with pytest.raises(ValidationException, match="at most 255"):
            _item(name="x" * 256)

    def test_restore_records_no_events(self):
        item = _item()
        restored = Item.restore(
            id=item.id, sku=item.sku, name=item.name, description=item.description,
            price=item.price, category=item.category, inventory=item.inventory,
            images=item.images, attributes=item.attributes, status=ItemStatus.ACTIVE,
            created_at=item.created_at, updated_at=item.updated_at,
        )
        assert restored.domain_events == []
        assert restored == item


class TestMutation:

    def test_every_mutation_advances_updated_at(self):
        item = _item()
        stamps = [item.updated_at]
        for mutate in (
            lambda: item.rename("Gadget"),
            lambda: item.redescribe("new"),
            lambda: item.reprice(Price(5)),
            lambda: item.recategorize(Category("Garden")),
            lambda: item.restock(3),
            lambda: item.add_image(Image("http://x/a.png")),
            lambda: item.clear_images(),
            lambda: item.set_attribute("color", "red"),
            lambda: item.activate(),
        ):
            mutate()
            assert item.updated_at > stamps[-1]
            stamps.append(item.updated_at)

    def test_reprice_records_event_only_on_change(self):
        item = _item()
        item.clear_domain_events()
        item.reprice(Price(Decimal("19.99")))
        assert item.domain_events == []
        item.reprice(Price(Decimal("9.99")))
        assert _event_types(item) == [ItemPriceChangedEvent]
        event = item.domain_events[0]
        assert event.old_price == Price(Decimal("19.99"))
        assert event.new_price == Price(Decimal("9.99"))

    def test_restock(self):
        item = _item()
        item.clear_domain_events()
        item.restock(10)
        assert item.inventory.quantity == 10
        assert _event_types(item) == [ItemInventoryUpdatedEvent]

    def test_restock_negative_rejected(self):
        item = _item()
        with pytest.raises(ValidationException, match="cannot be negative"):
            item.restock(-1)
        assert item.inventory.quantity == 0

    def test_recategorize_updates_slug(self):
        item = _item()
        item.recategorize(Category("Home Garden"))
        assert item.category.slug == "home-garden"

    def test_images_property_is_a_copy(self):
        item = _item()
        item.images.append(Image("http://x/a.png"))
        assert item.images == []

    def test_attributes_property_is_a_copy(self):
        item = _item()
        item.attributes.set("color", "red")
        assert "color" not in item.attributes
        item.set_attribute("color", "red")
        assert item.attributes.get("color") == "red"


class TestImages:

    def test_primary_image_demotes_previous(self):
        item = _item()
        item.add_image(Image("http://x/1.png", is_primary=True))
        item.add_image(Image("http://x/2.png", is_primary=True))
        primaries = [i for i in item.images if i.is_primary]
        assert len(primaries) == 1
        assert item.primary_image.url == "http://x/2.png"

    def test_secondary_image_keeps_primary(self):
        item = _item()
        item.add_image(Image("http://x/1.png", is_primary=True))
        item.add_image(Image("http://x/2.png"))
        assert item.primary_image.url == "http://x/1.png"
        assert len(item.images) == 2

    def test_no_primary(self):
        item = _item()
        item.add_image(Image("http://x/1.png"))
        assert item.primary_image is None

    def test_clear_images(self):
        item = _item()
        item.add_image(Image("http://x/1.png"))
        item.clear_images()
        assert item.images == []


class TestStatusTransitions:

    @pytest.mark.parametrize("current, target", [
        (current, target)
        for current, targets in STATUS_TRANSITIONS.items()
        for target in targets
    ])
    def test_allowed(self, current, target):
        item = _item()
        # Drive the item into the starting state
        if current is ItemStatus.ACTIVE:
            item.activate()
        elif current is ItemStatus.INACTIVE:
            item.activate()
            item.deactivate()
        elif current is ItemStatus.ARCHIVED:
            item.archive()
        item.set_status(target)
        assert item.status is target

    def test_draft_cannot_deactivate(self):
        item = _item()
        with pytest.raises(InvalidStatusTransitionException, match="cannot transition from draft to inactive"):
            item.deactivate()
        assert item.status is ItemStatus.DRAFT

    @pytest.mark.parametrize("target", [ItemStatus.DRAFT, ItemStatus.ACTIVE, ItemStatus.INACTIVE])
    def test_archived_is_terminal(self, target):
        item = _item()
        item.archive()
        with pytest.raises(InvalidStatusTransitionException):
            item.set_status(target)

    def test_active_cannot_go_back_to_draft(self):
        item = _item()
        item.activate()
        assert not item.can_transition_to(ItemStatus.DRAFT)
        with pytest.raises(ValidationException):
            item.set_status(ItemStatus.DRAFT)

    def test_same_status_is_noop(self):
        item = _item()
        item.activate()
        item.clear_domain_events()
        before = item.updated_at
        item.activate()
        assert item.updated_at == before
        assert item.domain_events == []

    def test_transition_records_event(self):
        item = _item()
        item.clear_domain_events()
        item.activate()
        assert _event_types(item) == [ItemStatusChangedEvent]
        event = item.domain_events[0]
        assert event.old_status is ItemStatus.DRAFT
        assert event.new_status is ItemStatus.ACTIVE


class TestPredicates:

    def test_available_for_purchase_needs_active_and_stock(self):
        item = _item()
        item.restock(1)
        assert not item.is_available_for_purchase()
        item.activate()
        assert item.is_available_for_purchase()
        item.restock(0)
        assert not item.is_available_for_purchase()

    def test_status_predicates(self):
        item = _item()
        assert item.is_draft()
        item.activate()
        assert item.is_active()
        item.deactivate()
        assert item.is_inactive()
        item.archive()
        assert item.is_archived()
