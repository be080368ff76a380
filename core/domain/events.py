"""
领域事件模块。
包含DomainEvent基类和DomainEvents管理器，用于领域事件的发布和订阅。
"""
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Type
import uuid


class DomainEvent:
    """
    领域事件基类。
    领域事件表示领域模型中发生的重要事件，由聚合根记录，在持久化成功后同步分发。
    """

    # 事件类型名称，子类覆盖
    event_type: str = "DomainEvent"

    def __init__(self, aggregate_id: Any):
        """
        初始化领域事件。
        自动设置事件ID和发生时间。

        Args:
            aggregate_id: 产生事件的聚合根ID
        """
        self.id = uuid.uuid4()
        self.aggregate_id = aggregate_id
        self.occurred_on = datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(aggregate_id={self.aggregate_id})"


# 事件处理器类型
EventHandler = Callable[[DomainEvent], None]


class DomainEvents:
    """
    领域事件管理器。
    负责事件的发布和订阅。
    """

    # 事件处理器字典，键为事件类型，值为处理器列表
    _handlers: Dict[Type[DomainEvent], List[EventHandler]] = {}

    @classmethod
    def register(cls, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """
        注册事件处理器。

        Args:
            event_type: 事件类型
            handler: 事件处理器函数
        """
        if event_type not in cls._handlers:
            cls._handlers[event_type] = []
        cls._handlers[event_type].append(handler)

    @classmethod
    def unregister(cls, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """
        取消注册事件处理器。

        Args:
            event_type: 事件类型
            handler: 事件处理器函数
        """
        if event_type in cls._handlers:
            cls._handlers[event_type].remove(handler)
            if not cls._handlers[event_type]:
                del cls._handlers[event_type]

    @classmethod
    def publish(cls, event: DomainEvent) -> None:
        """
        发布事件。
        调用所有注册到该事件类型的处理器。

        Args:
            event: 要发布的事件
        """
        for handler in cls._handlers.get(type(event), []):
            handler(event)

    @classmethod
    def publish_all(cls, events: List[DomainEvent]) -> None:
        """按记录顺序发布一组事件。"""
        for event in events:
            cls.publish(event)

    @classmethod
    def clear_handlers(cls) -> None:
        """
        清除所有事件处理器。
        通常用于测试环境的重置。
        """
        cls._handlers.clear()
