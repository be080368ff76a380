"""
URL configuration for catalog project.

所有接口统一挂载在api/v1/前缀下。
"""
from django.urls import path, include

urlpatterns = [
    # 商品模块API
    path('', include('items.urls')),
]
