"""
事务管理器模块。
提供用例级事务控制的接口和实现。
"""
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Generator

from django.db import transaction as django_transaction
from loguru import logger


class TransactionManager(ABC):
    """
    事务管理器接口。
    用例在start()返回的上下文中执行，正常退出时提交，抛出异常时回滚。
    """

    @abstractmethod
    @contextmanager
    def start(self) -> Generator[None, None, None]:
        """
        开启一个事务。

        Yields:
            None
        """
        pass


class DjangoTransactionManager(TransactionManager):
    """
    基于Django的事务管理器实现。
    嵌套调用时由atomic()自动降级为保存点。
    """

    def __init__(self, using: str = "default"):
        """
        初始化Django事务管理器。

        Args:
            using: 数据库别名
        """
        self.using = using

    @contextmanager
    def start(self) -> Generator[None, None, None]:
        """
        使用Django的事务机制开启一个事务。

        Yields:
            None
        """
        try:
            with django_transaction.atomic(using=self.using):
                logger.debug("事务已开启")
                yield
                logger.debug("事务已提交")
        except Exception as e:
            logger.debug(f"事务回滚: {e}")
            raise


class NoOpTransactionManager(TransactionManager):
    """
    空操作事务管理器。
    用于单元测试或不需要事务的场景，只记录开启、提交和回滚次数。
    """

    def __init__(self):
        self.started = 0
        self.committed = 0
        self.rolled_back = 0

    @contextmanager
    def start(self) -> Generator[None, None, None]:
        """
        模拟开启一个事务，但实际上不做任何操作。

        Yields:
            None
        """
        self.started += 1
        try:
            yield
        except Exception:
            self.rolled_back += 1
            logger.debug("模拟事务已回滚")
            raise
        self.committed += 1
