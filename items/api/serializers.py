"""
商品API序列化器。
负责请求和响应的序列化、反序列化和验证。
业务规则(名称最小长度、价格上限、币种等)由应用服务校验，这里只做格式校验。
"""
from rest_framework import serializers


DESCRIPTION_MAX_LENGTH = 1000
ATTRIBUTE_VALUE_MAX_LENGTH = 1000


def _attributes_field(**kwargs):
    return serializers.DictField(
        child=serializers.CharField(max_length=ATTRIBUTE_VALUE_MAX_LENGTH, allow_blank=True),
        **kwargs
    )


def _price_field(**kwargs):
    # 允许超过两位小数，由Price值对象负责舍入
    return serializers.DecimalField(max_digits=18, decimal_places=6, **kwargs)


# ==================== 请求序列化器 ====================

class ItemCreateSerializer(serializers.Serializer):
    """创建商品请求序列化器"""
    sku = serializers.CharField(max_length=100)
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(
        max_length=DESCRIPTION_MAX_LENGTH, required=False, allow_blank=True, default=""
    )
    price = _price_field()
    currency = serializers.CharField(max_length=3, required=False, allow_blank=True)
    category = serializers.CharField(max_length=100)
    inventory = serializers.IntegerField(required=False, default=0)
    attributes = _attributes_field(required=False, default=dict)


class ItemUpdateSerializer(serializers.Serializer):
    """更新商品请求序列化器，所有字段可选"""
    name = serializers.CharField(max_length=255, required=False)
    description = serializers.CharField(
        max_length=DESCRIPTION_MAX_LENGTH, required=False, allow_blank=True
    )
    price = _price_field(required=False)
    currency = serializers.CharField(max_length=3, required=False)
    category = serializers.CharField(max_length=100, required=False)
    attributes = _attributes_field(required=False)


class InventoryUpdateSerializer(serializers.Serializer):
    """商品库存更新请求序列化器"""
    quantity = serializers.IntegerField(required=True)


class ImageCreateSerializer(serializers.Serializer):
    """添加商品图片请求序列化器"""
    url = serializers.CharField(max_length=2000)
    alt = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    is_primary = serializers.BooleanField(required=False, default=False)


class PaginationSerializer(serializers.Serializer):
    """分页查询参数序列化器"""
    page = serializers.IntegerField(required=False, default=1)
    page_size = serializers.IntegerField(required=False, allow_null=True, default=None)


class ItemSearchSerializer(PaginationSerializer):
    """商品搜索查询参数序列化器"""
    query = serializers.CharField(required=False, allow_blank=True)
    category = serializers.CharField(required=False, allow_blank=True)
    status = serializers.CharField(required=False, allow_blank=True)


class LowStockQuerySerializer(serializers.Serializer):
    """低库存查询参数序列化器"""
    threshold = serializers.IntegerField(required=False, allow_null=True, default=None)


# ==================== 响应序列化器 ====================

class ItemDetailSerializer(serializers.Serializer):
    """商品详情响应序列化器"""
    id = serializers.CharField()
    sku = serializers.CharField()
    name = serializers.CharField()
    description = serializers.CharField()
    price = serializers.DecimalField(max_digits=18, decimal_places=2)
    currency = serializers.CharField()
    category = serializers.DictField()
    inventory = serializers.DictField()
    images = serializers.ListField(child=serializers.DictField())
    attributes = serializers.DictField()
    status = serializers.CharField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class ItemListItemSerializer(serializers.Serializer):
    """商品列表项响应序列化器"""
    id = serializers.CharField()
    sku = serializers.CharField()
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=18, decimal_places=2)
    currency = serializers.CharField()
    category = serializers.DictField()
    inventory = serializers.DictField()
    status = serializers.CharField()
    created_at = serializers.DateTimeField()
