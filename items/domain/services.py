"""
商品领域模型中的外部协作服务接口。
分类校验和价格计算由基础设施层实现，应用服务在构造时注入。
"""
from abc import ABC, abstractmethod
from decimal import Decimal


class CategoryService(ABC):
    """
    分类服务接口。
    校验分类名称是否允许使用。
    """

    @abstractmethod
    def validate_category(self, category: str) -> None:
        """
        校验分类。

        Args:
            category: 分类名称

        Raises:
            ValidationException: 分类不允许使用
        """
        pass


class PricingService(ABC):
    """
    定价服务接口。
    根据分类计算调整后的价格。
    """

    @abstractmethod
    def calculate_price(self, base_price: Decimal, category: str) -> Decimal:
        """
        计算分类调整后的价格。

        Args:
            base_price: 基础价格
            category: 分类名称

        Returns:
            调整后的价格

        Raises:
            ValidationException: 基础价格非法
        """
        pass
