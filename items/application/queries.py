"""
商品应用服务层的查询对象。
定义用于查询系统状态的查询，分页参数由应用服务统一校验。
"""
from typing import Optional


class GetItemQuery:
    """获取单个商品的查询"""

    def __init__(self, id: str):
        """
        初始化获取商品查询。

        Args:
            id: 商品ID
        """
        self.id = id


class GetItemBySkuQuery:
    """根据SKU获取商品的查询"""

    def __init__(self, sku: str):
        self.sku = sku


class SearchItemsQuery:
    """
    搜索商品的查询。
    按query、category、status的优先级选择一种过滤方式，都为空时返回可售商品。
    """

    def __init__(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        status: Optional[str] = None,
        page: int = 1,
        page_size: Optional[int] = None
    ):
        """
        初始化搜索商品查询。

        Args:
            query: 搜索文本，匹配名称、描述和SKU
            category: 分类名称
            status: 商品状态
            page: 页码，从1开始
            page_size: 每页大小，为空时使用配置的默认值
        """
        self.query = query
        self.category = category
        self.status = status
        self.page = page
        self.page_size = page_size


class ListItemsByCategoryQuery:
    """按分类获取商品列表的查询"""

    def __init__(self, category: str, page: int = 1, page_size: Optional[int] = None):
        self.category = category
        self.page = page
        self.page_size = page_size


class ListAvailableItemsQuery:
    """获取可售商品列表的查询"""

    def __init__(self, page: int = 1, page_size: Optional[int] = None):
        self.page = page
        self.page_size = page_size


class ListLowStockItemsQuery:
    """获取低库存商品列表的查询"""

    def __init__(self, threshold: Optional[int] = None):
        """
        初始化低库存商品查询。

        Args:
            threshold: 库存阈值，为空时使用配置的默认值
        """
        self.threshold = threshold
