"""
商品领域模型中的值对象。
每个值对象在构造时完成自校验，构造成功后不可变(Attributes除外)。
"""
import re
import uuid
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from enum import Enum
from typing import Any, Dict, Optional

from core.domain import ValueObject, ValidationException, InvalidFormatException


SKU_MIN_LENGTH = 3
SKU_MAX_LENGTH = 20
SKU_PATTERN = re.compile(r'^[A-Z0-9_-]+$')

DEFAULT_CURRENCY = "USD"
CATEGORY_NAME_MAX_LENGTH = 100
IMAGE_URL_MAX_LENGTH = 2000
IMAGE_ALT_MAX_LENGTH = 255

_CENTS = Decimal('0.01')


class ItemID(ValueObject):
    """
    商品标识值对象。
    包装UUID，可以随机生成或从字符串解析。
    """

    def __init__(self, value: uuid.UUID):
        self._value = value

    @classmethod
    def generate(cls) -> 'ItemID':
        """生成新的随机标识。"""
        return cls(uuid.uuid4())

    @classmethod
    def from_string(cls, value: Any) -> 'ItemID':
        """
        从字符串解析标识。

        Args:
            value: UUID字符串或UUID对象

        Returns:
            商品标识

        Raises:
            InvalidFormatException: 如果不是合法的UUID
        """
        if isinstance(value, uuid.UUID):
            return cls(value)
        try:
            return cls(uuid.UUID(str(value)))
        except (ValueError, TypeError, AttributeError):
            raise InvalidFormatException("id", value)

    @property
    def value(self) -> uuid.UUID:
        return self._value

    def __str__(self) -> str:
        return str(self._value)


class SKU(ValueObject):
    """
    库存单位(SKU)值对象。
    输入先去除首尾空白并转为大写，再校验长度(3-20)和字符集(A-Z0-9_-)。
    """

    def __init__(self, value: str):
        """
        初始化SKU值对象。

        Args:
            value: 原始SKU字符串

        Raises:
            ValidationException: 空值、长度不符或包含非法字符
        """
        normalized = (value or "").strip().upper()
        if not normalized:
            raise ValidationException("sku", "SKU cannot be empty")
        if not SKU_MIN_LENGTH <= len(normalized) <= SKU_MAX_LENGTH:
            raise ValidationException(
                "sku", f"SKU must be between {SKU_MIN_LENGTH} and {SKU_MAX_LENGTH} characters"
            )
        if not SKU_PATTERN.match(normalized):
            raise ValidationException(
                "sku", "SKU can only contain uppercase letters, numbers, hyphens, and underscores"
            )
        self._value = normalized

    @property
    def value(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value


class Price(ValueObject):
    """
    价格值对象。
    金额以整数最小货币单位(分)存储，换算时使用银行家舍入(ROUND_HALF_EVEN)保留两位小数。
    """

    def __init__(self, amount: Any, currency: Optional[str] = ""):
        """
        初始化价格值对象。

        Args:
            amount: 金额，float会先转为字符串再转为Decimal
            currency: 三位字母币种代码，为空时使用USD

        Raises:
            ValidationException: 金额非法、为负数或币种格式错误
        """
        decimal_amount = self._to_decimal(amount)
        if decimal_amount < 0:
            raise ValidationException("price", "price cannot be negative")

        normalized_currency = (currency or "").strip().upper() or DEFAULT_CURRENCY
        if len(normalized_currency) != 3 or not normalized_currency.isalpha():
            raise ValidationException("currency", "currency must be a 3-letter code")

        self._minor_units = int((decimal_amount * 100).quantize(Decimal('1'), rounding=ROUND_HALF_EVEN))
        self._currency = normalized_currency

    @staticmethod
    def _to_decimal(amount: Any) -> Decimal:
        if isinstance(amount, bool):
            raise ValidationException("price", "price must be a number")
        if isinstance(amount, float):
            amount = str(amount)
        try:
            value = Decimal(amount)
        except (InvalidOperation, TypeError, ValueError):
            raise ValidationException("price", "price must be a number")
        if not value.is_finite():
            raise ValidationException("price", "price must be a finite number")
        return value

    @classmethod
    def from_minor_units(cls, minor_units: int, currency: Optional[str] = "") -> 'Price':
        """
        从最小货币单位重建价格，用于从存储中恢复。

        Args:
            minor_units: 以分为单位的整数金额
            currency: 币种代码

        Returns:
            价格值对象
        """
        return cls(Decimal(int(minor_units)).scaleb(-2), currency)

    @property
    def amount(self) -> Decimal:
        """保留两位小数的金额。"""
        return (Decimal(self._minor_units) / 100).quantize(_CENTS)

    @property
    def minor_units(self) -> int:
        return self._minor_units

    @property
    def currency(self) -> str:
        return self._currency

    def to_dict(self) -> Dict[str, Any]:
        return {"amount": str(self.amount), "currency": self._currency}

    def __str__(self) -> str:
        return f"{self._currency} {self.amount:.2f}"


class Category(ValueObject):
    """
    商品分类值对象。
    slug由名称确定性推导: 转小写并把空格替换为连字符，其余标点原样保留。
    """

    def __init__(self, name: str):
        """
        初始化分类值对象。

        Args:
            name: 分类名称

        Raises:
            ValidationException: 名称为空或过长
        """
        normalized = (name or "").strip()
        if not normalized:
            raise ValidationException("category", "category name cannot be empty")
        if len(normalized) > CATEGORY_NAME_MAX_LENGTH:
            raise ValidationException(
                "category", f"category name must be at most {CATEGORY_NAME_MAX_LENGTH} characters"
            )
        self._name = normalized
        self._slug = normalized.lower().replace(" ", "-")

    @property
    def name(self) -> str:
        return self._name

    @property
    def slug(self) -> str:
        return self._slug

    def __str__(self) -> str:
        return self._name


class Inventory(ValueObject):
    """库存值对象，数量不能为负。"""

    def __init__(self, quantity: int):
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationException("inventory", "inventory quantity must be an integer")
        if quantity < 0:
            raise ValidationException("inventory", "inventory quantity cannot be negative")
        self._quantity = quantity

    @property
    def quantity(self) -> int:
        return self._quantity

    def is_available(self) -> bool:
        """库存大于0时可售。"""
        return self._quantity > 0

    def can_reserve(self, quantity: int) -> bool:
        """
        检查库存是否足以预留指定数量。

        Args:
            quantity: 需要预留的数量

        Returns:
            库存数量大于等于需要的数量时返回True
        """
        return self._quantity >= quantity


class Image(ValueObject):
    """
    商品图片值对象。
    是否为主图由图片自身携带，聚合根负责保证最多一张主图。
    """

    def __init__(self, url: str, alt: str = "", is_primary: bool = False):
        """
        初始化图片值对象。

        Args:
            url: 图片地址
            alt: 替代文本
            is_primary: 是否为主图

        Raises:
            ValidationException: 地址为空或字段超长
        """
        url = (url or "").strip()
        alt = (alt or "").strip()
        if not url:
            raise ValidationException("image", "image URL cannot be empty")
        if len(url) > IMAGE_URL_MAX_LENGTH:
            raise ValidationException(
                "image", f"image URL must be at most {IMAGE_URL_MAX_LENGTH} characters"
            )
        if len(alt) > IMAGE_ALT_MAX_LENGTH:
            raise ValidationException(
                "image", f"image alt text must be at most {IMAGE_ALT_MAX_LENGTH} characters"
            )
        self._url = url
        self._alt = alt
        self._is_primary = bool(is_primary)

    @property
    def url(self) -> str:
        return self._url

    @property
    def alt(self) -> str:
        return self._alt

    @property
    def is_primary(self) -> bool:
        return self._is_primary

    def as_secondary(self) -> 'Image':
        """返回取消主图标记后的副本。"""
        return Image(self._url, self._alt, False)

    def to_dict(self) -> Dict[str, Any]:
        return {"url": self._url, "alt": self._alt, "is_primary": self._is_primary}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Image':
        return cls(data.get("url", ""), data.get("alt", ""), data.get("is_primary", False))


class Attributes:
    """
    商品属性集合。
    可变的字符串键值存储，键去除空白后不能为空；all()返回副本而非实时视图。
    """

    # 可变对象不可哈希
    __hash__ = None

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = {}
        for key, value in (data or {}).items():
            self.set(key, value)

    def set(self, key: str, value: str) -> None:
        """
        设置属性值，已存在的键会被覆盖。

        Args:
            key: 属性名
            value: 属性值

        Raises:
            ValidationException: 属性名为空
        """
        key = str(key if key is not None else "").strip()
        if not key:
            raise ValidationException("attributes", "attribute key cannot be empty")
        self._data[key] = str(value if value is not None else "").strip()

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._data.get(key, default)

    def all(self) -> Dict[str, str]:
        return dict(self._data)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Attributes):
            return False
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Attributes({self._data!r})"


class ItemStatus(Enum):
    """商品状态枚举"""
    DRAFT = "draft"        # 草稿状态，未发布
    ACTIVE = "active"      # 激活状态，可销售
    INACTIVE = "inactive"  # 未激活状态，暂不可销售
    ARCHIVED = "archived"  # 已归档状态，终态

    @classmethod
    def from_string(cls, value: str) -> 'ItemStatus':
        """
        从字符串解析状态，大小写不敏感。

        Args:
            value: 状态字符串

        Returns:
            商品状态

        Raises:
            ValidationException: 无效的状态字符串
        """
        normalized = (value or "").strip().lower()
        for status in cls:
            if status.value == normalized:
                return status
        raise ValidationException("status", f"invalid status: {value!r}")

    def __str__(self) -> str:
        return self.value
