"""
基于配置的分类服务实现。
"""
from loguru import logger

from core.domain import ValidationException
from items.domain.config import ItemSettings
from items.domain.services import CategoryService


class ConfiguredCategoryService(CategoryService):
    """
    根据ITEM_SETTINGS校验分类。
    禁用列表中的分类被拒绝；允许列表非空时，只接受列表中的分类。比较时不区分大小写。
    """

    def __init__(self, settings: ItemSettings):
        self.settings = settings

    def validate_category(self, category: str) -> None:
        normalized = (category or "").strip().lower()
        if not normalized:
            raise ValidationException("category", "category is required")
        if normalized in self.settings.blocked_categories:
            logger.warning(f"分类已被禁用: {category}")
            raise ValidationException("category", f"category '{category}' is not allowed")
        if self.settings.allowed_categories and normalized not in self.settings.allowed_categories:
            raise ValidationException("category", f"category '{category}' is not allowed")
