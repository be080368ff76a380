"""
商品领域模型中的仓储接口。
定义用于持久化和检索商品聚合根的仓储契约，与具体存储技术无关。

列表查询统一按创建时间倒序返回，分页参数(limit/offset)由调用方校验。
分页总数由对应的count_*方法单独提供。
"""
from abc import abstractmethod
from typing import List

from core.domain.repositories import Repository
from items.domain.entities import Item
from items.domain.value_objects import ItemID, SKU, ItemStatus


class ItemRepository(Repository[Item]):
    """
    商品仓储接口。
    save/update/delete各自是原子操作，SKU唯一性由存储层的唯一约束保证。
    """

    @abstractmethod
    def save(self, item: Item) -> Item:
        """
        保存新商品。

        Args:
            item: 新商品

        Returns:
            保存后的商品

        Raises:
            DuplicateKeyException: SKU已存在
            DependencyFailureException: 存储不可用
        """
        pass

    @abstractmethod
    def find_by_id(self, item_id: ItemID) -> Item:
        """
        根据ID获取商品。

        Args:
            item_id: 商品ID

        Returns:
            商品聚合根

        Raises:
            EntityNotFoundException: 商品不存在
        """
        pass

    @abstractmethod
    def find_by_sku(self, sku: SKU) -> Item:
        """
        根据SKU获取商品。

        Args:
            sku: 商品SKU

        Returns:
            商品聚合根

        Raises:
            EntityNotFoundException: 商品不存在
        """
        pass

    @abstractmethod
    def update(self, item: Item) -> Item:
        """
        更新已存在的商品。

        Args:
            item: 商品聚合根

        Returns:
            更新后的商品

        Raises:
            EntityNotFoundException: 商品不存在
        """
        pass

    @abstractmethod
    def delete(self, item_id: ItemID) -> None:
        """
        删除商品。

        Args:
            item_id: 商品ID

        Raises:
            EntityNotFoundException: 商品不存在
        """
        pass

    @abstractmethod
    def find_by_category(self, category_slug: str, limit: int, offset: int) -> List[Item]:
        """
        按分类slug查询商品。

        Args:
            category_slug: 分类slug
            limit: 返回的最大记录数
            offset: 跳过的记录数

        Returns:
            商品列表，没有匹配时返回空列表
        """
        pass

    @abstractmethod
    def find_by_status(self, status: ItemStatus, limit: int, offset: int) -> List[Item]:
        """
        按状态查询商品。

        Args:
            status: 商品状态
            limit: 返回的最大记录数
            offset: 跳过的记录数

        Returns:
            商品列表，没有匹配时返回空列表
        """
        pass

    @abstractmethod
    def search(self, query: str, limit: int, offset: int) -> List[Item]:
        """
        在名称、描述和SKU中进行大小写不敏感的子串搜索。

        Args:
            query: 搜索文本
            limit: 返回的最大记录数
            offset: 跳过的记录数

        Returns:
            商品列表，没有匹配时返回空列表
        """
        pass

    @abstractmethod
    def find_available_items(self, limit: int, offset: int) -> List[Item]:
        """
        查询可售商品(激活状态且库存大于0)。

        Args:
            limit: 返回的最大记录数
            offset: 跳过的记录数

        Returns:
            商品列表
        """
        pass

    @abstractmethod
    def find_items_with_low_stock(self, threshold: int) -> List[Item]:
        """
        查询库存不超过阈值的激活商品，按库存升序排列。

        Args:
            threshold: 库存阈值

        Returns:
            商品列表
        """
        pass

    @abstractmethod
    def exists_by_sku(self, sku: SKU) -> bool:
        pass

    @abstractmethod
    def exists_by_id(self, item_id: ItemID) -> bool:
        pass

    @abstractmethod
    def count_by_category(self, category_slug: str) -> int:
        pass

    @abstractmethod
    def count_by_status(self, status: ItemStatus) -> int:
        pass

    @abstractmethod
    def count_search(self, query: str) -> int:
        pass

    @abstractmethod
    def count_available_items(self) -> int:
        pass
