"""
商品基础设施层数据库模型。
定义与商品领域相关的Django ORM模型。
"""
import uuid
from django.db import models


class ItemModel(models.Model):
    """商品数据库模型"""

    # 商品状态选项
    class StatusChoices(models.TextChoices):
        DRAFT = 'draft', '草稿'
        ACTIVE = 'active', '激活'
        INACTIVE = 'inactive', '未激活'
        ARCHIVED = 'archived', '已归档'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    sku = models.CharField(max_length=20, unique=True, verbose_name="商品SKU")
    name = models.CharField(max_length=255, verbose_name="商品名称")
    description = models.TextField(blank=True, default="", verbose_name="商品描述")
    # 以分为单位存储
    price_amount = models.BigIntegerField(verbose_name="价格金额(分)")
    price_currency = models.CharField(max_length=3, default="USD", verbose_name="价格货币")
    category_name = models.CharField(max_length=100, verbose_name="分类名称")
    category_slug = models.CharField(max_length=100, verbose_name="分类标识")
    inventory_quantity = models.IntegerField(default=0, verbose_name="库存数量")
    images = models.JSONField(default=list, blank=True, verbose_name="商品图片")
    attributes = models.JSONField(default=dict, blank=True, verbose_name="商品属性")
    status = models.CharField(
        max_length=20,
        choices=StatusChoices.choices,
        default=StatusChoices.DRAFT,
        verbose_name="商品状态"
    )
    # 时间戳由领域模型维护
    created_at = models.DateTimeField(verbose_name="创建时间")
    updated_at = models.DateTimeField(verbose_name="更新时间")

    class Meta:
        db_table = 'items'
        verbose_name = "商品"
        verbose_name_plural = "商品"
        indexes = [
            models.Index(fields=['category_slug'], name='idx_items_category_slug'),
            models.Index(fields=['status'], name='idx_items_status'),
            models.Index(fields=['created_at'], name='idx_items_created_at'),
            models.Index(fields=['inventory_quantity'], name='idx_items_inventory'),
            # 可售商品列表的条件索引
            models.Index(
                fields=['created_at'],
                condition=models.Q(status='active', inventory_quantity__gt=0),
                name='idx_items_available'
            ),
        ]

        constraints = [
            models.CheckConstraint(condition=models.Q(price_amount__gte=0), name='items_price_amount_gte_0'),
            models.CheckConstraint(
                condition=models.Q(inventory_quantity__gte=0), name='items_inventory_quantity_gte_0'
            ),
            models.CheckConstraint(
                condition=models.Q(status__in=['draft', 'active', 'inactive', 'archived']),
                name='items_status_valid'
            ),
        ]

    def __str__(self):
        return f"{self.sku} {self.name}"
