from django.db import models

# 引用基础设施层的模型
from items.infrastructure.models.item_models import ItemModel

__all__ = ['ItemModel']
