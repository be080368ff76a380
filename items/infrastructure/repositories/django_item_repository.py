"""
商品仓储的Django实现。
"""
from typing import Any, Callable, Dict, List

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Q, QuerySet
from loguru import logger

from core.domain import (
    DomainException,
    EntityNotFoundException,
    DuplicateKeyException,
    DependencyFailureException,
)
from items.domain.entities import Item
from items.domain.repositories import ItemRepository
from items.domain.value_objects import (
    ItemID,
    SKU,
    Price,
    Category,
    Inventory,
    Image,
    Attributes,
    ItemStatus,
)
from items.infrastructure.models.item_models import ItemModel


ENTITY_NAME = "商品"


class DjangoItemRepository(ItemRepository):
    """
    基于Django ORM的商品仓储实现。
    列表查询按创建时间倒序返回，时间相同时按ID倒序，数据库错误统一转换为DependencyFailureException。
    """

    def _execute(self, operation: str, func: Callable[[], Any]) -> Any:
        """
        执行数据库操作并转换异常。

        Args:
            operation: 操作名称，用于日志
            func: 数据库操作

        Returns:
            操作结果
        """
        try:
            return func()
        except DomainException:
            raise
        except DatabaseError as e:
            logger.error(f"商品仓储{operation}失败: {e}")
            raise DependencyFailureException("database", str(e)) from e

    def _to_domain(self, model: ItemModel) -> Item:
        return Item.restore(
            id=ItemID.from_string(model.id),
            sku=SKU(model.sku),
            name=model.name,
            description=model.description,
            price=Price.from_minor_units(model.price_amount, model.price_currency),
            category=Category(model.category_name),
            inventory=Inventory(model.inventory_quantity),
            images=[Image.from_dict(data) for data in model.images or []],
            attributes=Attributes(model.attributes or {}),
            status=ItemStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model_fields(self, item: Item) -> Dict[str, Any]:
        return {
            'sku': item.sku.value,
            'name': item.name,
            'description': item.description,
            'price_amount': item.price.minor_units,
            'price_currency': item.price.currency,
            'category_name': item.category.name,
            'category_slug': item.category.slug,
            'inventory_quantity': item.inventory.quantity,
            'images': [image.to_dict() for image in item.images],
            'attributes': item.attributes.all(),
            'status': item.status.value,
            'created_at': item.created_at,
            'updated_at': item.updated_at,
        }

    def _list(self, queryset: QuerySet, limit: int, offset: int) -> List[Item]:
        models = queryset.order_by('-created_at', '-id')[offset:offset + limit]
        return [self._to_domain(model) for model in models]

    @staticmethod
    def _search_filter(query: str) -> Q:
        return Q(name__icontains=query) | Q(description__icontains=query) | Q(sku__icontains=query)

    @staticmethod
    def _available_queryset() -> QuerySet:
        return ItemModel.objects.filter(
            status=ItemStatus.ACTIVE.value, inventory_quantity__gt=0
        )

    # ==================== 写操作 ====================

    def save(self, item: Item) -> Item:
        """
        保存新商品。

        Args:
            item: 新商品

        Returns:
            保存后的商品

        Raises:
            DuplicateKeyException: SKU或ID已存在
            DependencyFailureException: 数据库不可用或违反其他约束
        """
        def create():
            try:
                # 使用保存点，约束冲突不影响外层事务
                with transaction.atomic():
                    ItemModel.objects.create(id=item.id.value, **self._to_model_fields(item))
            except IntegrityError as e:
                if ItemModel.objects.filter(sku=item.sku.value).exclude(id=item.id.value).exists():
                    raise DuplicateKeyException(ENTITY_NAME, "sku", item.sku.value) from e
                if ItemModel.objects.filter(id=item.id.value).exists():
                    raise DuplicateKeyException(ENTITY_NAME, "id", item.id) from e
                raise
            logger.debug(f"商品已保存: id={item.id}, sku={item.sku}")
            return item

        return self._execute("保存", create)

    def update(self, item: Item) -> Item:
        """
        更新已有商品。

        Raises:
            EntityNotFoundException: 商品不存在
        """
        def update():
            updated = ItemModel.objects.filter(id=item.id.value).update(**self._to_model_fields(item))
            if not updated:
                raise EntityNotFoundException(ENTITY_NAME, item.id)
            logger.debug(f"商品已更新: id={item.id}, status={item.status}")
            return item

        return self._execute("更新", update)

    def delete(self, item_id: ItemID) -> None:
        """
        删除商品。

        Raises:
            EntityNotFoundException: 商品不存在
        """
        def delete():
            deleted, _ = ItemModel.objects.filter(id=item_id.value).delete()
            if not deleted:
                raise EntityNotFoundException(ENTITY_NAME, item_id)
            logger.debug(f"商品已删除: id={item_id}")

        self._execute("删除", delete)

    # ==================== 读操作 ====================

    def find_by_id(self, item_id: ItemID) -> Item:
        def find():
            try:
                return self._to_domain(ItemModel.objects.get(id=item_id.value))
            except ItemModel.DoesNotExist:
                raise EntityNotFoundException(ENTITY_NAME, item_id)

        return self._execute("按ID查询", find)

    def find_by_sku(self, sku: SKU) -> Item:
        def find():
            try:
                return self._to_domain(ItemModel.objects.get(sku=sku.value))
            except ItemModel.DoesNotExist:
                raise EntityNotFoundException(ENTITY_NAME, f"sku={sku}")

        return self._execute("按SKU查询", find)

    def find_by_category(self, category_slug: str, limit: int, offset: int) -> List[Item]:
        return self._execute(
            "按分类查询",
            lambda: self._list(ItemModel.objects.filter(category_slug=category_slug), limit, offset)
        )

    def find_by_status(self, status: ItemStatus, limit: int, offset: int) -> List[Item]:
        return self._execute(
            "按状态查询",
            lambda: self._list(ItemModel.objects.filter(status=status.value), limit, offset)
        )

    def search(self, query: str, limit: int, offset: int) -> List[Item]:
        return self._execute(
            "搜索",
            lambda: self._list(ItemModel.objects.filter(self._search_filter(query)), limit, offset)
        )

    def find_available_items(self, limit: int, offset: int) -> List[Item]:
        return self._execute(
            "查询可售商品", lambda: self._list(self._available_queryset(), limit, offset)
        )

    def find_items_with_low_stock(self, threshold: int) -> List[Item]:
        """
        查询低库存商品。

        Args:
            threshold: 库存阈值，包含等于阈值的商品

        Returns:
            激活状态且库存不超过阈值的商品，按库存升序排列
        """
        def find():
            models = ItemModel.objects.filter(
                status=ItemStatus.ACTIVE.value, inventory_quantity__lte=threshold
            ).order_by('inventory_quantity', '-created_at', '-id')
            return [self._to_domain(model) for model in models]

        return self._execute("查询低库存商品", find)

    def exists_by_sku(self, sku: SKU) -> bool:
        return self._execute(
            "检查SKU", lambda: ItemModel.objects.filter(sku=sku.value).exists()
        )

    def exists_by_id(self, item_id: ItemID) -> bool:
        return self._execute(
            "检查ID", lambda: ItemModel.objects.filter(id=item_id.value).exists()
        )

    def count_by_category(self, category_slug: str) -> int:
        return self._execute(
            "统计分类", lambda: ItemModel.objects.filter(category_slug=category_slug).count()
        )

    def count_by_status(self, status: ItemStatus) -> int:
        return self._execute(
            "统计状态", lambda: ItemModel.objects.filter(status=status.value).count()
        )

    def count_search(self, query: str) -> int:
        return self._execute(
            "统计搜索结果", lambda: ItemModel.objects.filter(self._search_filter(query)).count()
        )

    def count_available_items(self) -> int:
        return self._execute("统计可售商品", lambda: self._available_queryset().count())
