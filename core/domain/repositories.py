"""
仓储接口模块。
定义仓储接口，用于持久化和检索领域对象。
"""
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T = TypeVar('T')


class Repository(Generic[T], ABC):
    """
    仓储接口。
    定义了所有仓储必须实现的基本操作。
    仓储本身不持有实体，只负责在内存对象和持久化表示之间转换。
    """

    @abstractmethod
    def save(self, entity: T) -> T:
        """
        保存新实体。

        Args:
            entity: 要保存的实体

        Returns:
            保存后的实体

        Raises:
            DuplicateKeyException: 唯一键已存在
        """
        pass

    @abstractmethod
    def find_by_id(self, id: Any) -> T:
        """
        根据ID获取实体。

        Args:
            id: 实体ID

        Returns:
            找到的实体

        Raises:
            EntityNotFoundException: 实体不存在
        """
        pass

    @abstractmethod
    def update(self, entity: T) -> T:
        """
        更新已存在的实体。

        Args:
            entity: 要更新的实体

        Returns:
            更新后的实体

        Raises:
            EntityNotFoundException: 实体不存在
        """
        pass

    @abstractmethod
    def delete(self, id: Any) -> None:
        """
        删除实体。

        Args:
            id: 实体ID

        Raises:
            EntityNotFoundException: 实体不存在
        """
        pass

    @abstractmethod
    def exists_by_id(self, id: Any) -> bool:
        """
        检查实体是否存在。

        Args:
            id: 实体ID

        Returns:
            存在返回True，否则返回False
        """
        pass
