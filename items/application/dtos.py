"""
商品应用服务层的数据传输对象(DTOs)。
定义应用服务与外部通信使用的数据结构。
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List


class ItemDTO:
    """商品数据传输对象，用于返回商品信息"""

    def __init__(
        self,
        id: str,
        sku: str,
        name: str,
        description: str,
        price: Decimal,
        currency: str,
        category: Dict[str, str],
        inventory: Dict[str, Any],
        images: List[Dict[str, Any]],
        attributes: Dict[str, str],
        status: str,
        created_at: datetime,
        updated_at: datetime
    ):
        """
        初始化商品DTO。

        Args:
            id: 商品ID
            sku: 商品SKU
            name: 商品名称
            description: 商品描述
            price: 商品价格
            currency: 币种
            category: 分类，包含name和slug
            inventory: 库存，包含quantity和is_available
            images: 图片列表
            attributes: 商品属性
            status: 商品状态
            created_at: 创建时间
            updated_at: 更新时间
        """
        self.id = id
        self.sku = sku
        self.name = name
        self.description = description
        self.price = price
        self.currency = currency
        self.category = category
        self.inventory = inventory
        self.images = images
        self.attributes = attributes
        self.status = status
        self.created_at = created_at
        self.updated_at = updated_at

    @classmethod
    def from_entity(cls, item) -> 'ItemDTO':
        """
        从商品聚合根创建DTO。

        Args:
            item: 商品聚合根

        Returns:
            商品DTO
        """
        return cls(
            id=str(item.id),
            sku=item.sku.value,
            name=item.name,
            description=item.description,
            price=item.price.amount,
            currency=item.price.currency,
            category={"name": item.category.name, "slug": item.category.slug},
            inventory={
                "quantity": item.inventory.quantity,
                "is_available": item.inventory.is_available(),
            },
            images=[image.to_dict() for image in item.images],
            attributes=item.attributes.all(),
            status=str(item.status),
            created_at=item.created_at,
            updated_at=item.updated_at,
        )


class ItemListDTO:
    """商品分页列表DTO"""

    def __init__(
        self,
        items: List[ItemDTO],
        total: int,
        page: int,
        page_size: int,
        total_pages: int
    ):
        """
        初始化商品列表DTO。

        Args:
            items: 当前页的商品DTO列表
            total: 匹配的商品总数
            page: 当前页码
            page_size: 每页大小
            total_pages: 总页数
        """
        self.items = items
        self.total = total
        self.page = page
        self.page_size = page_size
        self.total_pages = total_pages
