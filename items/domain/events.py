"""
商品领域事件。
由商品聚合根记录，在持久化成功后由应用服务通过DomainEvents同步分发。
"""
from typing import Any

from core.domain.events import DomainEvent


class ItemCreatedEvent(DomainEvent):
    """商品创建事件"""

    event_type = "ItemCreated"

    def __init__(self, item_id: Any, sku: str, name: str):
        """
        初始化商品创建事件。

        Args:
            item_id: 商品ID
            sku: 商品SKU
            name: 商品名称
        """
        super().__init__(item_id)
        self.item_id = item_id
        self.sku = sku
        self.name = name


class ItemPriceChangedEvent(DomainEvent):
    """商品价格变更事件"""

    event_type = "ItemPriceChanged"

    def __init__(self, item_id: Any, old_price: Any, new_price: Any):
        """
        初始化商品价格变更事件。

        Args:
            item_id: 商品ID
            old_price: 旧价格
            new_price: 新价格
        """
        super().__init__(item_id)
        self.item_id = item_id
        self.old_price = old_price
        self.new_price = new_price


class ItemInventoryUpdatedEvent(DomainEvent):
    """商品库存变更事件"""

    event_type = "ItemInventoryUpdated"

    def __init__(self, item_id: Any, old_quantity: int, new_quantity: int):
        """
        初始化商品库存变更事件。

        Args:
            item_id: 商品ID
            old_quantity: 旧库存
            new_quantity: 新库存
        """
        super().__init__(item_id)
        self.item_id = item_id
        self.old_quantity = old_quantity
        self.new_quantity = new_quantity


class ItemStatusChangedEvent(DomainEvent):
    """商品状态变更事件"""

    event_type = "ItemStatusChanged"

    def __init__(self, item_id: Any, old_status: Any, new_status: Any):
        super().__init__(item_id)
        self.item_id = item_id
        self.old_status = old_status
        self.new_status = new_status


class ItemDeletedEvent(DomainEvent):
    """商品删除事件"""

    event_type = "ItemDeleted"

    def __init__(self, item_id: Any, sku: str):
        super().__init__(item_id)
        self.item_id = item_id
        self.sku = sku
