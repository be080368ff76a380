"""
商品领域模型包。
提供商品聚合根、值对象、领域事件、仓储接口和协作服务接口。
"""

# 值对象
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

# 聚合根
from items.domain.entities import Item, InvalidStatusTransitionException, STATUS_TRANSITIONS

# 领域事件
from items.domain.events import (
    ItemCreatedEvent,
    ItemPriceChangedEvent,
    ItemInventoryUpdatedEvent,
    ItemStatusChangedEvent,
    ItemDeletedEvent,
)

# 仓储接口
from items.domain.repositories import ItemRepository

# 协作服务接口
from items.domain.services import CategoryService, PricingService

# 配置
from items.domain.config import ItemSettings

__all__ = [
    # 值对象
    'ItemID',
    'SKU',
    'Price',
    'Category',
    'Inventory',
    'Image',
    'Attributes',
    'ItemStatus',

    # 聚合根
    'Item',
    'InvalidStatusTransitionException',
    'STATUS_TRANSITIONS',

    # 领域事件
    'ItemCreatedEvent',
    'ItemPriceChangedEvent',
    'ItemInventoryUpdatedEvent',
    'ItemStatusChangedEvent',
    'ItemDeletedEvent',

    # 仓储接口
    'ItemRepository',

    # 协作服务接口
    'CategoryService',
    'PricingService',

    # 配置
    'ItemSettings',
]
