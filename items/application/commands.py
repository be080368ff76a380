"""
商品应用服务层的命令对象。
定义用于修改系统状态的命令。
"""
from typing import Any, Dict, Optional


class CreateItemCommand:
    """创建商品命令"""

    def __init__(
        self,
        sku: str,
        name: str,
        price: Any,
        category: str,
        description: str = "",
        currency: Optional[str] = None,
        inventory: int = 0,
        attributes: Optional[Dict[str, str]] = None
    ):
        """
        初始化创建商品命令。

        Args:
            sku: 商品SKU
            name: 商品名称
            price: 基础价格
            category: 分类名称
            description: 商品描述
            currency: 币种，为空时使用配置的默认币种
            inventory: 初始库存
            attributes: 商品属性
        """
        self.sku = sku
        self.name = name
        self.price = price
        self.category = category
        self.description = description
        self.currency = currency
        self.inventory = inventory
        self.attributes = attributes or {}


class UpdateItemCommand:
    """更新商品命令，值为None的字段保持不变"""

    def __init__(
        self,
        id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        price: Optional[Any] = None,
        currency: Optional[str] = None,
        category: Optional[str] = None,
        attributes: Optional[Dict[str, str]] = None
    ):
        """
        初始化更新商品命令。

        Args:
            id: 商品ID
            name: 商品名称
            description: 商品描述
            price: 商品价格
            currency: 币种
            category: 分类名称
            attributes: 需要设置的商品属性
        """
        self.id = id
        self.name = name
        self.description = description
        self.price = price
        self.currency = currency
        self.category = category
        self.attributes = attributes


class UpdateInventoryCommand:
    """更新商品库存命令"""

    def __init__(self, id: str, quantity: int):
        """
        初始化更新商品库存命令。

        Args:
            id: 商品ID
            quantity: 新的库存数量
        """
        self.id = id
        self.quantity = quantity


class AddImageCommand:
    """添加商品图片命令"""

    def __init__(self, id: str, url: str, alt: str = "", is_primary: bool = False):
        """
        初始化添加商品图片命令。

        Args:
            id: 商品ID
            url: 图片地址
            alt: 替代文本
            is_primary: 是否为主图
        """
        self.id = id
        self.url = url
        self.alt = alt
        self.is_primary = is_primary


class ClearImagesCommand:
    """清空商品图片命令"""

    def __init__(self, id: str):
        self.id = id


class ChangeItemStatusCommand:
    """变更商品状态命令，用于激活、停用和归档"""

    def __init__(self, id: str):
        self.id = id


class DeleteItemCommand:
    """删除商品命令"""

    def __init__(self, id: str):
        self.id = id
