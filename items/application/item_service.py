"""
商品应用服务。
定义商品相关的应用层服务，处理命令和查询，协调领域层和基础设施层。
"""
import math
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, List, Optional, Tuple

from loguru import logger
from core.domain import (
    DomainEvent,
    DomainEvents,
    DomainException,
    ValidationException,
    DuplicateKeyException,
    DependencyFailureException,
)
from core.infrastructure.transaction import TransactionManager

from items.domain import (
    Item,
    ItemID,
    SKU,
    Price,
    Category,
    Image,
    Inventory,
    ItemStatus,
    ItemDeletedEvent,
    ItemRepository,
    CategoryService,
    PricingService,
    ItemSettings,
)
from items.application.dtos import ItemDTO, ItemListDTO
from items.application.commands import (
    CreateItemCommand,
    UpdateItemCommand,
    UpdateInventoryCommand,
    AddImageCommand,
    ClearImagesCommand,
    ChangeItemStatusCommand,
    DeleteItemCommand,
)
from items.application.queries import (
    GetItemQuery,
    GetItemBySkuQuery,
    SearchItemsQuery,
    ListItemsByCategoryQuery,
    ListAvailableItemsQuery,
    ListLowStockItemsQuery,
)


# 创建请求中SKU的宽松长度限制，之后还要通过SKU值对象的3-20字符校验
REQUEST_SKU_MIN_LENGTH = 3
REQUEST_SKU_MAX_LENGTH = 50
ATTRIBUTE_VALUE_MAX_LENGTH = 1000


class ItemApplicationService:
    """
    商品应用服务。
    负责输入校验、重复检查、调用分类和定价服务、组装聚合根并通过仓储持久化。
    领域事件在持久化成功、事务提交后同步分发。
    """

    def __init__(
        self,
        item_repository: ItemRepository,
        category_service: CategoryService,
        pricing_service: PricingService,
        transaction_manager: TransactionManager,
        settings: Optional[ItemSettings] = None
    ):
        """
        初始化商品应用服务。

        Args:
            item_repository: 商品仓储
            category_service: 分类服务
            pricing_service: 定价服务
            transaction_manager: 事务管理器
            settings: 商品模块配置，未提供时使用默认配置
        """
        self.item_repository = item_repository
        self.category_service = category_service
        self.pricing_service = pricing_service
        self.transaction_manager = transaction_manager
        self.settings = settings or ItemSettings()

    # ==================== 内部方法 ====================

    def _call_dependency(self, dependency: str, func: Callable[..., Any], *args: Any) -> Any:
        """
        调用外部协作服务。
        领域异常原样抛出，其他异常包装为DependencyFailureException。

        Args:
            dependency: 依赖名称
            func: 要调用的方法
            *args: 调用参数

        Returns:
            调用结果
        """
        try:
            return func(*args)
        except DomainException:
            raise
        except Exception as e:
            raise DependencyFailureException(dependency, str(e)) from e

    @staticmethod
    def _to_decimal(value: Any, field_name: str) -> Decimal:
        if isinstance(value, bool):
            raise ValidationException(field_name, f"{field_name} must be a number")
        if isinstance(value, float):
            value = str(value)
        try:
            result = Decimal(value)
        except (InvalidOperation, TypeError, ValueError):
            raise ValidationException(field_name, f"{field_name} must be a number")
        if not result.is_finite():
            raise ValidationException(field_name, f"{field_name} must be a finite number")
        return result

    def _validate_name(self, name: Optional[str]) -> str:
        normalized = (name or "").strip()
        if len(normalized) < self.settings.min_name_length:
            raise ValidationException(
                "name", f"item name must be at least {self.settings.min_name_length} characters"
            )
        return normalized

    def _validate_price(self, price: Any) -> Decimal:
        amount = self._to_decimal(price, "price")
        if amount <= 0:
            raise ValidationException("price", "item price must be positive")
        if amount > self.settings.max_price:
            raise ValidationException(
                "price", f"item price too high, must not exceed {self.settings.max_price}"
            )
        return amount

    def _validate_currency(self, currency: Optional[str]) -> str:
        normalized = (currency or "").strip().upper() or self.settings.default_currency
        if normalized not in self.settings.allowed_currencies:
            raise ValidationException("currency", f"currency {normalized} is not supported")
        return normalized

    def _validate_quantity(self, quantity: int) -> int:
        quantity = Inventory(quantity).quantity
        if quantity > self.settings.max_inventory:
            raise ValidationException(
                "inventory", f"inventory quantity too high, must not exceed {self.settings.max_inventory}"
            )
        return quantity

    def _validate_category(self, category: Optional[str]) -> Category:
        name = (category or "").strip()
        if not name:
            raise ValidationException("category", "category is required")
        self._call_dependency("category_service", self.category_service.validate_category, name)
        return Category(name)

    def _apply_attributes(self, item: Item, attributes: dict) -> None:
        for key, value in attributes.items():
            if value is not None and len(str(value)) > ATTRIBUTE_VALUE_MAX_LENGTH:
                raise ValidationException("attributes", f"attribute value too long: {key}")
            item.set_attribute(key, value)

    def _resolve_page(self, page: Optional[int], page_size: Optional[int]) -> Tuple[int, int]:
        """
        校验分页参数。

        Args:
            page: 页码，从1开始
            page_size: 每页大小，为空时使用默认值

        Returns:
            (page, page_size)元组

        Raises:
            ValidationException: 页码小于1或每页大小越界
        """
        page = 1 if page is None else page
        page_size = self.settings.default_page_size if page_size is None else page_size
        if page < 1:
            raise ValidationException("page", "page must be at least 1")
        if not 1 <= page_size <= self.settings.max_page_size:
            raise ValidationException(
                "page_size", f"page size must be between 1 and {self.settings.max_page_size}"
            )
        return page, page_size

    @staticmethod
    def _build_page(items: List[Item], total: int, page: int, page_size: int) -> ItemListDTO:
        return ItemListDTO(
            items=[ItemDTO.from_entity(item) for item in items],
            total=total,
            page=page,
            page_size=page_size,
            total_pages=math.ceil(total / page_size),
        )

    def _load(self, item_id: Any) -> Item:
        return self.item_repository.find_by_id(ItemID.from_string(item_id))

    def _publish_events(self, events: List[DomainEvent]) -> None:
        """
        在事务提交后分发领域事件。
        数据已经持久化，事件处理器的异常只记录日志，不影响操作结果。
        """
        for event in events:
            try:
                DomainEvents.publish(event)
            except Exception:
                logger.exception(f"领域事件处理失败: type={event.event_type}, aggregate_id={event.aggregate_id}")

    def _mutate(self, item_id: Any, mutation: Callable[[Item], None]) -> ItemDTO:
        """
        加载、修改并更新商品的统一流程。

        Args:
            item_id: 商品ID
            mutation: 对聚合根执行的修改

        Returns:
            更新后的商品DTO
        """
        with self.transaction_manager.start():
            item = self._load(item_id)
            mutation(item)
            self.item_repository.update(item)
        self._publish_events(item.clear_domain_events())
        return ItemDTO.from_entity(item)

    # ==================== 命令处理方法 ====================

    def create_item(self, command: CreateItemCommand) -> ItemDTO:
        """
        创建商品。
        基础价格超过草稿阈值的商品保持草稿状态，其余商品直接激活。

        Args:
            command: 创建商品命令

        Returns:
            创建的商品DTO

        Raises:
            ValidationException: 输入不合法
            DuplicateKeyException: SKU已存在
            DependencyFailureException: 分类或定价服务不可用
        """
        try:
            name = self._validate_name(command.name)
            base_price = self._validate_price(command.price)

            raw_sku = (command.sku or "").strip()
            if not raw_sku:
                raise ValidationException("sku", "SKU is required")
            if not REQUEST_SKU_MIN_LENGTH <= len(raw_sku) <= REQUEST_SKU_MAX_LENGTH:
                raise ValidationException(
                    "sku",
                    f"SKU must be between {REQUEST_SKU_MIN_LENGTH} and {REQUEST_SKU_MAX_LENGTH} characters"
                )

            currency = self._validate_currency(command.currency)
            category = self._validate_category(command.category)
            final_price = self._call_dependency(
                "pricing_service", self.pricing_service.calculate_price, base_price, category.name
            )
            quantity = self._validate_quantity(command.inventory or 0)

            sku = SKU(raw_sku)
            price = Price(final_price, currency)

            with self.transaction_manager.start():
                if self.item_repository.exists_by_sku(sku):
                    raise DuplicateKeyException("商品", "sku", sku.value)

                item = Item.create(sku, name, command.description or "", price, category)
                self._apply_attributes(item, command.attributes or {})
                if quantity:
                    item.restock(quantity)
                if base_price <= self.settings.draft_price_threshold:
                    item.activate()

                self.item_repository.save(item)

            self._publish_events(item.clear_domain_events())
            logger.info(f"商品创建成功: id={item.id}, sku={item.sku}, status={item.status}")
            return ItemDTO.from_entity(item)
        except Exception as e:
            logger.error(f"创建商品失败: {e}")
            raise

    def update_item(self, command: UpdateItemCommand) -> ItemDTO:
        """
        更新商品，只修改命令中提供的字段。

        Args:
            command: 更新商品命令

        Returns:
            更新后的商品DTO
        """
        try:
            name = self._validate_name(command.name) if command.name is not None else None
            category = self._validate_category(command.category) if command.category is not None else None
            amount = self._validate_price(command.price) if command.price is not None else None
            currency = self._validate_currency(command.currency) if command.currency is not None else None

            def mutation(item: Item) -> None:
                if name is not None:
                    item.rename(name)
                if command.description is not None:
                    item.redescribe(command.description)
                if amount is not None or currency is not None:
                    item.reprice(Price(
                        amount if amount is not None else item.price.amount,
                        currency or item.price.currency,
                    ))
                if category is not None:
                    item.recategorize(category)
                if command.attributes:
                    self._apply_attributes(item, command.attributes)

            return self._mutate(command.id, mutation)
        except Exception as e:
            logger.error(f"更新商品失败: {e}")
            raise

    def update_inventory(self, command: UpdateInventoryCommand) -> ItemDTO:
        """
        更新商品库存。

        Args:
            command: 更新商品库存命令

        Returns:
            更新后的商品DTO
        """
        try:
            quantity = self._validate_quantity(command.quantity)
            return self._mutate(command.id, lambda item: item.restock(quantity))
        except Exception as e:
            logger.error(f"更新商品库存失败: {e}")
            raise

    def add_image(self, command: AddImageCommand) -> ItemDTO:
        """
        添加商品图片。

        Args:
            command: 添加商品图片命令

        Returns:
            更新后的商品DTO
        """
        try:
            image = Image(command.url, command.alt, command.is_primary)
            return self._mutate(command.id, lambda item: item.add_image(image))
        except Exception as e:
            logger.error(f"添加商品图片失败: {e}")
            raise

    def clear_images(self, command: ClearImagesCommand) -> ItemDTO:
        """清空商品图片。"""
        try:
            return self._mutate(command.id, lambda item: item.clear_images())
        except Exception as e:
            logger.error(f"清空商品图片失败: {e}")
            raise

    def activate_item(self, command: ChangeItemStatusCommand) -> ItemDTO:
        """
        激活商品。

        Args:
            command: 变更商品状态命令

        Returns:
            更新后的商品DTO
        """
        try:
            return self._mutate(command.id, lambda item: item.activate())
        except Exception as e:
            logger.error(f"激活商品失败: {e}")
            raise

    def deactivate_item(self, command: ChangeItemStatusCommand) -> ItemDTO:
        """
        停用商品。

        Args:
            command: 变更商品状态命令

        Returns:
            更新后的商品DTO
        """
        try:
            return self._mutate(command.id, lambda item: item.deactivate())
        except Exception as e:
            logger.error(f"停用商品失败: {e}")
            raise

    def archive_item(self, command: ChangeItemStatusCommand) -> ItemDTO:
        """归档商品，归档后不能再变更状态。"""
        try:
            return self._mutate(command.id, lambda item: item.archive())
        except Exception as e:
            logger.error(f"归档商品失败: {e}")
            raise

    def delete_item(self, command: DeleteItemCommand) -> None:
        """
        删除商品。

        Args:
            command: 删除商品命令

        Raises:
            EntityNotFoundException: 商品不存在
        """
        try:
            with self.transaction_manager.start():
                item = self._load(command.id)
                self.item_repository.delete(item.id)
            self._publish_events([ItemDeletedEvent(item.id, item.sku.value)])
            logger.info(f"商品已删除: id={item.id}, sku={item.sku}")
        except Exception as e:
            logger.error(f"删除商品失败: {e}")
            raise

    # ==================== 查询处理方法 ====================

    def get_item(self, query: GetItemQuery) -> ItemDTO:
        """
        获取单个商品。

        Args:
            query: 获取商品查询

        Returns:
            商品DTO

        Raises:
            EntityNotFoundException: 商品不存在
        """
        try:
            return ItemDTO.from_entity(self._load(query.id))
        except Exception as e:
            logger.error(f"获取商品失败: {e}")
            raise

    def get_item_by_sku(self, query: GetItemBySkuQuery) -> ItemDTO:
        """
        根据SKU获取商品。

        Args:
            query: 根据SKU获取商品查询

        Returns:
            商品DTO
        """
        try:
            return ItemDTO.from_entity(self.item_repository.find_by_sku(SKU(query.sku)))
        except Exception as e:
            logger.error(f"根据SKU获取商品失败: {e}")
            raise

    def search_items(self, query: SearchItemsQuery) -> ItemListDTO:
        """
        搜索商品。
        按搜索文本、分类、状态的优先级选择其一进行过滤，都未提供时返回可售商品。

        Args:
            query: 搜索商品查询

        Returns:
            商品分页列表DTO，total为匹配的真实总数
        """
        try:
            page, page_size = self._resolve_page(query.page, query.page_size)
            offset = (page - 1) * page_size

            text = (query.query or "").strip()
            if text:
                items = self.item_repository.search(text, page_size, offset)
                total = self.item_repository.count_search(text)
            elif (query.category or "").strip():
                slug = Category(query.category).slug
                items = self.item_repository.find_by_category(slug, page_size, offset)
                total = self.item_repository.count_by_category(slug)
            elif (query.status or "").strip():
                status = ItemStatus.from_string(query.status)
                items = self.item_repository.find_by_status(status, page_size, offset)
                total = self.item_repository.count_by_status(status)
            else:
                items = self.item_repository.find_available_items(page_size, offset)
                total = self.item_repository.count_available_items()

            return self._build_page(items, total, page, page_size)
        except Exception as e:
            logger.error(f"搜索商品失败: {e}")
            raise

    def list_items_by_category(self, query: ListItemsByCategoryQuery) -> ItemListDTO:
        """
        按分类获取商品列表。

        Args:
            query: 按分类获取商品列表查询

        Returns:
            商品分页列表DTO
        """
        try:
            page, page_size = self._resolve_page(query.page, query.page_size)
            slug = Category(query.category).slug
            items = self.item_repository.find_by_category(slug, page_size, (page - 1) * page_size)
            total = self.item_repository.count_by_category(slug)
            return self._build_page(items, total, page, page_size)
        except Exception as e:
            logger.error(f"按分类获取商品列表失败: {e}")
            raise

    def list_available_items(self, query: ListAvailableItemsQuery) -> ItemListDTO:
        """
        获取可售商品列表。

        Args:
            query: 获取可售商品列表查询

        Returns:
            商品分页列表DTO
        """
        try:
            page, page_size = self._resolve_page(query.page, query.page_size)
            items = self.item_repository.find_available_items(page_size, (page - 1) * page_size)
            total = self.item_repository.count_available_items()
            return self._build_page(items, total, page, page_size)
        except Exception as e:
            logger.error(f"获取可售商品列表失败: {e}")
            raise

    def list_low_stock_items(self, query: ListLowStockItemsQuery) -> List[ItemDTO]:
        """
        获取低库存商品列表。

        Args:
            query: 获取低库存商品列表查询

        Returns:
            按库存升序排列的商品DTO列表
        """
        try:
            threshold = self.settings.low_stock_threshold if query.threshold is None else query.threshold
            if threshold < 0:
                raise ValidationException("threshold", "threshold cannot be negative")
            items = self.item_repository.find_items_with_low_stock(threshold)
            return [ItemDTO.from_entity(item) for item in items]
        except Exception as e:
            logger.error(f"获取低库存商品列表失败: {e}")
            raise
