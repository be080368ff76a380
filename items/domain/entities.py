"""
商品领域模型中的实体。
Item是商品聚合根，组合各个值对象并负责生命周期时间戳和状态流转。
"""
from datetime import datetime, timedelta, timezone
from typing import Dict, FrozenSet, Iterable, List, Optional

from core.domain import AggregateRoot, ValidationException
from items.domain.value_objects import (
    ItemID,
    SKU,
    Price,
    Category,
    Inventory,
    Image,
    Attributes,
    ItemStatus,
)
from items.domain.events import (
    ItemCreatedEvent,
    ItemPriceChangedEvent,
    ItemInventoryUpdatedEvent,
    ItemStatusChangedEvent,
)


NAME_MAX_LENGTH = 255

# 允许的状态流转，ARCHIVED为终态
STATUS_TRANSITIONS: Dict[ItemStatus, FrozenSet[ItemStatus]] = {
    ItemStatus.DRAFT: frozenset({ItemStatus.ACTIVE, ItemStatus.ARCHIVED}),
    ItemStatus.ACTIVE: frozenset({ItemStatus.INACTIVE, ItemStatus.ARCHIVED}),
    ItemStatus.INACTIVE: frozenset({ItemStatus.ACTIVE, ItemStatus.ARCHIVED}),
    ItemStatus.ARCHIVED: frozenset(),
}


class InvalidStatusTransitionException(ValidationException):
    """商品状态流转异常"""
    def __init__(self, current_status: ItemStatus, target_status: ItemStatus):
        super().__init__("status", f"cannot transition from {current_status} to {target_status}")
        self.current_status = current_status
        self.target_status = target_status


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _validate_name(name: str) -> str:
    normalized = (name or "").strip()
    if not normalized:
        raise ValidationException("name", "name cannot be empty")
    if len(normalized) > NAME_MAX_LENGTH:
        raise ValidationException("name", f"name must be at most {NAME_MAX_LENGTH} characters")
    return normalized


class Item(AggregateRoot):
    """
    商品聚合根。
    所有修改都通过聚合根上的方法进行，每次修改都会严格递增updated_at。
    """

    def __init__(
        self,
        id: ItemID,
        sku: SKU,
        name: str,
        description: str,
        price: Price,
        category: Category,
        inventory: Inventory,
        images: List[Image],
        attributes: Attributes,
        status: ItemStatus,
        created_at: datetime,
        updated_at: datetime,
    ):
        """
        初始化商品聚合根。一般不直接调用，请使用create()或restore()。

        Args:
            id: 商品ID
            sku: 商品SKU
            name: 商品名称
            description: 商品描述
            price: 商品价格
            category: 商品分类
            inventory: 商品库存
            images: 商品图片列表
            attributes: 商品属性
            status: 商品状态
            created_at: 创建时间
            updated_at: 更新时间
        """
        super().__init__(id)
        self._sku = sku
        self._name = _validate_name(name)
        self._description = description or ""
        self._price = price
        self._category = category
        self._inventory = inventory
        self._images = list(images)
        self._attributes = attributes
        self._status = status
        self._created_at = created_at
        self._updated_at = updated_at

    @classmethod
    def create(
        cls,
        sku: SKU,
        name: str,
        description: str,
        price: Price,
        category: Category,
    ) -> 'Item':
        """
        创建新商品。
        新商品分配新ID，状态为草稿，库存为0。

        Args:
            sku: 商品SKU
            name: 商品名称
            description: 商品描述
            price: 商品价格
            category: 商品分类

        Returns:
            新的商品聚合根

        Raises:
            ValidationException: 名称为空或过长
        """
        now = _utcnow()
        item = cls(
            id=ItemID.generate(),
            sku=sku,
            name=name,
            description=description,
            price=price,
            category=category,
            inventory=Inventory(0),
            images=[],
            attributes=Attributes(),
            status=ItemStatus.DRAFT,
            created_at=now,
            updated_at=now,
        )
        item.add_domain_event(ItemCreatedEvent(item.id, item.sku.value, item.name))
        return item

    @classmethod
    def restore(
        cls,
        id: ItemID,
        sku: SKU,
        name: str,
        description: str,
        price: Price,
        category: Category,
        inventory: Inventory,
        images: Iterable[Image],
        attributes: Attributes,
        status: ItemStatus,
        created_at: datetime,
        updated_at: datetime,
    ) -> 'Item':
        """从持久化状态重建商品，不记录领域事件。"""
        return cls(
            id=id,
            sku=sku,
            name=name,
            description=description,
            price=price,
            category=category,
            inventory=inventory,
            images=list(images),
            attributes=attributes,
            status=status,
            created_at=created_at,
            updated_at=updated_at,
        )

    # ==================== 属性 ====================

    @property
    def sku(self) -> SKU:
        return self._sku

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def price(self) -> Price:
        return self._price

    @property
    def category(self) -> Category:
        return self._category

    @property
    def inventory(self) -> Inventory:
        return self._inventory

    @property
    def images(self) -> List[Image]:
        return list(self._images)

    @property
    def primary_image(self) -> Optional[Image]:
        for image in self._images:
            if image.is_primary:
                return image
        return None

    @property
    def attributes(self) -> Attributes:
        """返回属性集合的副本，修改请使用set_attribute()。"""
        return Attributes(self._attributes.all())

    @property
    def status(self) -> ItemStatus:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    # ==================== 修改方法 ====================

    def _touch(self) -> None:
        # 同一时钟刻度内的连续修改也要保证updated_at严格递增
        now = _utcnow()
        if now <= self._updated_at:
            now = self._updated_at + timedelta(microseconds=1)
        self._updated_at = now

    def rename(self, name: str) -> None:
        """
        修改商品名称。

        Args:
            name: 新名称

        Raises:
            ValidationException: 名称为空或过长
        """
        self._name = _validate_name(name)
        self._touch()

    def redescribe(self, description: str) -> None:
        """修改商品描述。"""
        self._description = description or ""
        self._touch()

    def reprice(self, price: Price) -> None:
        """
        修改商品价格，价格实际变化时记录价格变更事件。

        Args:
            price: 新价格
        """
        old_price = self._price
        self._price = price
        self._touch()
        if old_price != price:
            self.add_domain_event(ItemPriceChangedEvent(self.id, old_price, price))

    def recategorize(self, category: Category) -> None:
        """修改商品分类，slug随新的Category一起重新计算。"""
        self._category = category
        self._touch()

    def restock(self, quantity: int) -> None:
        """
        设置库存数量。

        Args:
            quantity: 新的库存数量

        Raises:
            ValidationException: 数量为负
        """
        new_inventory = Inventory(quantity)
        old_quantity = self._inventory.quantity
        self._inventory = new_inventory
        self._touch()
        if old_quantity != new_inventory.quantity:
            self.add_domain_event(
                ItemInventoryUpdatedEvent(self.id, old_quantity, new_inventory.quantity)
            )

    def can_transition_to(self, status: ItemStatus) -> bool:
        return status == self._status or status in STATUS_TRANSITIONS[self._status]

    def set_status(self, status: ItemStatus) -> None:
        """
        变更商品状态。
        设置为当前状态时不做任何修改。

        Args:
            status: 目标状态

        Raises:
            InvalidStatusTransitionException: 不允许的状态流转
        """
        if status == self._status:
            return
        if status not in STATUS_TRANSITIONS[self._status]:
            raise InvalidStatusTransitionException(self._status, status)
        old_status = self._status
        self._status = status
        self._touch()
        self.add_domain_event(ItemStatusChangedEvent(self.id, old_status, status))

    def activate(self) -> None:
        self.set_status(ItemStatus.ACTIVE)

    def deactivate(self) -> None:
        self.set_status(ItemStatus.INACTIVE)

    def archive(self) -> None:
        self.set_status(ItemStatus.ARCHIVED)

    def add_image(self, image: Image) -> None:
        """
        添加图片。
        新图片为主图时，原有主图自动降级为普通图片。

        Args:
            image: 图片值对象
        """
        if image.is_primary:
            self._images = [
                existing.as_secondary() if existing.is_primary else existing
                for existing in self._images
            ]
        self._images.append(image)
        self._touch()

    def clear_images(self) -> None:
        self._images = []
        self._touch()

    def set_attribute(self, key: str, value: str) -> None:
        """
        设置商品属性。

        Args:
            key: 属性名
            value: 属性值

        Raises:
            ValidationException: 属性名为空
        """
        self._attributes.set(key, value)
        self._touch()

    # ==================== 状态查询 ====================

    def is_active(self) -> bool:
        return self._status == ItemStatus.ACTIVE

    def is_draft(self) -> bool:
        return self._status == ItemStatus.DRAFT

    def is_inactive(self) -> bool:
        return self._status == ItemStatus.INACTIVE

    def is_archived(self) -> bool:
        return self._status == ItemStatus.ARCHIVED

    def is_available_for_purchase(self) -> bool:
        """
        检查商品是否可购买。

        Returns:
            商品处于激活状态且有库存时返回True
        """
        return self.is_active() and self._inventory.is_available()

    def __repr__(self) -> str:
        return f"Item(id={self.id}, sku={self._sku}, status={self._status})"
