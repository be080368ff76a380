"""
基于分类折扣的定价服务实现。
"""
from decimal import Decimal

from core.domain import ValidationException
from items.domain.config import ItemSettings
from items.domain.services import PricingService


class CategoryDiscountPricingService(PricingService):
    """
    按分类折扣系数调整价格。
    没有配置折扣的分类返回原价，舍入交给Price值对象处理。
    """

    def __init__(self, settings: ItemSettings):
        self.settings = settings

    def calculate_price(self, base_price: Decimal, category: str) -> Decimal:
        """
        计算分类调整后的价格。

        Args:
            base_price: 基础价格
            category: 分类名称，不区分大小写

        Returns:
            调整后的价格

        Raises:
            ValidationException: 基础价格为负数
        """
        if base_price < 0:
            raise ValidationException("price", "price cannot be negative")
        factor = self.settings.category_discounts.get((category or "").strip().lower())
        if factor is None:
            return base_price
        return base_price * factor
