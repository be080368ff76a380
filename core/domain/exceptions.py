"""
领域异常模块。
包含领域模型中使用的各种异常类。
"""
from typing import Any, Optional


class DomainException(Exception):
    """
    领域异常基类。
    所有领域模型中的异常都应继承自此类。
    """

    def __init__(self, message: str):
        """
        初始化领域异常。

        Args:
            message: 异常消息
        """
        self.message = message
        super().__init__(self.message)


class ValidationException(DomainException):
    """
    数据验证异常。
    当数据验证失败时抛出，调用方修正输入后可以重试。
    """

    def __init__(self, field_name: Optional[str] = None, message: str = "数据验证失败"):
        """
        初始化数据验证异常。

        Args:
            field_name: 字段名称
            message: 异常消息
        """
        if field_name:
            full_message = f"字段'{field_name}'验证失败: {message}"
        else:
            full_message = message
        super().__init__(full_message)
        self.field_name = field_name
        self.reason = message


class InvalidFormatException(ValidationException):
    """
    格式无效异常。
    当标识符等字符串无法解析时抛出。
    """

    def __init__(self, field_name: str, value: Any):
        """
        初始化格式无效异常。

        Args:
            field_name: 字段名称
            value: 无法解析的原始值
        """
        super().__init__(field_name, f"invalid format: {value!r}")
        self.value = value


class EntityNotFoundException(DomainException):
    """
    实体未找到异常。
    当请求的实体不存在时抛出。
    """

    def __init__(self, entity_name: str, entity_id: Any):
        """
        初始化实体未找到异常。

        Args:
            entity_name: 实体名称
            entity_id: 实体ID或业务键
        """
        message = f"无法找到{entity_name}: ID={entity_id}"
        super().__init__(message)
        self.entity_name = entity_name
        self.entity_id = entity_id


class DuplicateKeyException(DomainException):
    """
    唯一键冲突异常。
    当创建的实体与已有实体的唯一业务键重复时抛出。
    """

    def __init__(self, entity_name: str, key_name: str, key_value: Any):
        """
        初始化唯一键冲突异常。

        Args:
            entity_name: 实体名称
            key_name: 唯一键名称
            key_value: 冲突的键值
        """
        message = f"{entity_name}已存在: {key_name}={key_value}"
        super().__init__(message)
        self.entity_name = entity_name
        self.key_name = key_name
        self.key_value = key_value


class DependencyFailureException(DomainException):
    """
    依赖服务失败异常。
    当外部协作者(分类服务、定价服务、存储)不可用或返回意外错误时抛出。
    """

    def __init__(self, dependency: str, message: Optional[str] = None):
        """
        初始化依赖服务失败异常。

        Args:
            dependency: 依赖名称
            message: 额外消息
        """
        if message:
            full_message = f"依赖服务'{dependency}'调用失败: {message}"
        else:
            full_message = f"依赖服务'{dependency}'调用失败"
        super().__init__(full_message)
        self.dependency = dependency
