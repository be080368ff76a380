"""
商品模块配置。
将Django设置中的ITEM_SETTINGS转换为显式的配置对象，在构造时注入应用服务和协作服务。
"""
from decimal import Decimal
from typing import Any, Dict, Iterable, Mapping, Optional


DEFAULT_CATEGORY_DISCOUNTS = {
    'electronics': Decimal('0.95'),
    'books': Decimal('0.90'),
    'clothing': Decimal('0.85'),
}


class ItemSettings:
    """
    商品模块配置对象。
    所有目录策略(价格上限、草稿阈值、允许的币种、分类折扣等)都从这里读取，不使用模块级可变状态。
    """

    def __init__(
        self,
        default_currency: str = "USD",
        allowed_currencies: Iterable[str] = ("USD", "EUR", "GBP", "JPY"),
        max_price: Any = 999999,
        draft_price_threshold: Any = 1000,
        min_name_length: int = 3,
        max_inventory: int = 999999,
        category_discounts: Optional[Mapping[str, Any]] = None,
        blocked_categories: Iterable[str] = ("restricted",),
        allowed_categories: Iterable[str] = (),
        default_page_size: int = 20,
        max_page_size: int = 100,
        low_stock_threshold: int = 5,
    ):
        """
        初始化商品模块配置。

        Args:
            default_currency: 请求未指定币种时使用的默认币种
            allowed_currencies: 创建和更新商品时允许的币种
            max_price: 价格上限
            draft_price_threshold: 基础价格超过该值的新商品保持草稿状态
            min_name_length: 创建和更新商品时名称的最小长度
            max_inventory: 库存数量上限
            category_discounts: 分类(小写)到价格系数的映射
            blocked_categories: 禁止使用的分类
            allowed_categories: 非空时只允许这些分类
            default_page_size: 默认每页大小
            max_page_size: 最大每页大小
            low_stock_threshold: 低库存列表的默认阈值
        """
        self.default_currency = default_currency.upper()
        self.allowed_currencies = frozenset(c.upper() for c in allowed_currencies)
        self.max_price = Decimal(str(max_price))
        self.draft_price_threshold = Decimal(str(draft_price_threshold))
        self.min_name_length = min_name_length
        self.max_inventory = max_inventory
        discounts = DEFAULT_CATEGORY_DISCOUNTS if category_discounts is None else category_discounts
        self.category_discounts: Dict[str, Decimal] = {
            name.lower(): Decimal(str(factor)) for name, factor in discounts.items()
        }
        self.blocked_categories = frozenset(c.lower() for c in blocked_categories)
        self.allowed_categories = frozenset(c.lower() for c in allowed_categories)
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size
        self.low_stock_threshold = low_stock_threshold

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> 'ItemSettings':
        """
        从ITEM_SETTINGS风格的字典创建配置，缺失的键使用默认值。

        Args:
            values: 配置字典，键为大写形式

        Returns:
            配置对象
        """
        kwargs = {key.lower(): value for key, value in values.items()}
        return cls(**kwargs)

    @classmethod
    def from_django_settings(cls) -> 'ItemSettings':
        """从Django设置中的ITEM_SETTINGS创建配置。"""
        from django.conf import settings

        return cls.from_dict(getattr(settings, 'ITEM_SETTINGS', {}))
