"""
商品应用服务层包。
提供商品相关的应用服务、数据传输对象、命令和查询。
"""

# DTO
from items.application.dtos import ItemDTO, ItemListDTO

# 命令
from items.application.commands import (
    CreateItemCommand,
    UpdateItemCommand,
    UpdateInventoryCommand,
    AddImageCommand,
    ClearImagesCommand,
    ChangeItemStatusCommand,
    DeleteItemCommand,
)

# 查询
from items.application.queries import (
    GetItemQuery,
    GetItemBySkuQuery,
    SearchItemsQuery,
    ListItemsByCategoryQuery,
    ListAvailableItemsQuery,
    ListLowStockItemsQuery,
)

# 应用服务
from items.application.item_service import ItemApplicationService

__all__ = [
    # DTO
    'ItemDTO',
    'ItemListDTO',

    # 命令
    'CreateItemCommand',
    'UpdateItemCommand',
    'UpdateInventoryCommand',
    'AddImageCommand',
    'ClearImagesCommand',
    'ChangeItemStatusCommand',
    'DeleteItemCommand',

    # 查询
    'GetItemQuery',
    'GetItemBySkuQuery',
    'SearchItemsQuery',
    'ListItemsByCategoryQuery',
    'ListAvailableItemsQuery',
    'ListLowStockItemsQuery',

    # 应用服务
    'ItemApplicationService',
]
