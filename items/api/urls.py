"""
商品API URL配置。
定义RESTful API的路由映射。
"""
from django.urls import path
from items.api import views

# API URL模式
urlpatterns = [
    path('health/', views.HealthView.as_view(), name='health'),

    # 列表和搜索API
    path('items/search/', views.ItemSearchView.as_view(), name='item-search'),
    path('items/available/', views.AvailableItemListView.as_view(), name='item-available'),
    path('items/low-stock/', views.LowStockItemListView.as_view(), name='item-low-stock'),
    path('items/category/<str:category>/', views.ItemCategoryListView.as_view(), name='item-category'),
    path('items/sku/<str:sku>/', views.ItemBySkuView.as_view(), name='item-by-sku'),

    # 商品API
    path('items/', views.ItemCreateView.as_view(), name='item-create'),
    path('items/<uuid:item_id>/', views.ItemDetailView.as_view(), name='item-detail'),
    path('items/<uuid:item_id>/inventory/', views.ItemInventoryView.as_view(), name='item-inventory'),
    path('items/<uuid:item_id>/images/', views.ItemImagesView.as_view(), name='item-images'),

    # 状态API
    path('items/<uuid:item_id>/activate/', views.ItemActivateView.as_view(), name='item-activate'),
    path('items/<uuid:item_id>/deactivate/', views.ItemDeactivateView.as_view(), name='item-deactivate'),
    path('items/<uuid:item_id>/archive/', views.ItemArchiveView.as_view(), name='item-archive'),
]
