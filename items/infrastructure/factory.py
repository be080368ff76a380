"""
商品基础设施层工厂。
负责创建和管理基础设施层对象，包括仓储和协作服务实例。
"""
from typing import Optional

from core.infrastructure.transaction import TransactionManager, DjangoTransactionManager

from items.domain import ItemRepository, CategoryService, PricingService, ItemSettings
from items.application.item_service import ItemApplicationService
from items.infrastructure.repositories.django_item_repository import DjangoItemRepository
from items.infrastructure.services.category_service import ConfiguredCategoryService
from items.infrastructure.services.pricing_service import CategoryDiscountPricingService


class ItemInfrastructureFactory:
    """
    商品基础设施层工厂类。
    负责创建商品领域的基础设施层对象，并组装应用服务。
    """

    def __init__(
        self,
        settings: Optional[ItemSettings] = None,
        transaction_manager: Optional[TransactionManager] = None
    ):
        """
        初始化商品基础设施层工厂。

        Args:
            settings: 商品模块配置，未提供时从Django设置读取
            transaction_manager: 事务管理器，未提供时使用Django事务
        """
        self.settings = settings or ItemSettings.from_django_settings()
        self.transaction_manager = transaction_manager or DjangoTransactionManager()

        # 存储已创建的实例
        self._item_repository = None
        self._category_service = None
        self._pricing_service = None

    def create_item_repository(self) -> ItemRepository:
        """
        创建商品仓储。

        Returns:
            商品仓储实例
        """
        if not self._item_repository:
            self._item_repository = DjangoItemRepository()

        return self._item_repository

    def create_category_service(self) -> CategoryService:
        if not self._category_service:
            self._category_service = ConfiguredCategoryService(self.settings)

        return self._category_service

    def create_pricing_service(self) -> PricingService:
        if not self._pricing_service:
            self._pricing_service = CategoryDiscountPricingService(self.settings)

        return self._pricing_service

    def create_item_service(self) -> ItemApplicationService:
        """
        组装商品应用服务。

        Returns:
            商品应用服务实例
        """
        return ItemApplicationService(
            item_repository=self.create_item_repository(),
            category_service=self.create_category_service(),
            pricing_service=self.create_pricing_service(),
            transaction_manager=self.transaction_manager,
            settings=self.settings,
        )
