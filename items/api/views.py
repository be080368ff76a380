"""
商品API视图。
提供RESTful API接口，处理HTTP请求并调用应用服务。
领域异常不在视图中捕获，由统一异常处理器转换为对应的HTTP响应。
"""
from core.infrastructure.api_view import ApiBaseView
from core.infrastructure.response import StatusCode
from items.application import (
    ItemApplicationService,
    # 命令
    CreateItemCommand,
    UpdateItemCommand,
    UpdateInventoryCommand,
    AddImageCommand,
    ClearImagesCommand,
    ChangeItemStatusCommand,
    DeleteItemCommand,
    # 查询
    GetItemQuery,
    GetItemBySkuQuery,
    SearchItemsQuery,
    ListItemsByCategoryQuery,
    ListAvailableItemsQuery,
    ListLowStockItemsQuery,
)
from items.api.serializers import (
    # 请求序列化器
    ItemCreateSerializer,
    ItemUpdateSerializer,
    InventoryUpdateSerializer,
    ImageCreateSerializer,
    PaginationSerializer,
    ItemSearchSerializer,
    LowStockQuerySerializer,
    # 响应序列化器
    ItemDetailSerializer,
    ItemListItemSerializer,
)


def get_item_service() -> ItemApplicationService:
    """获取商品应用服务实例，每个请求单独组装"""
    from items.infrastructure.factory import ItemInfrastructureFactory

    return ItemInfrastructureFactory().create_item_service()


class HealthView(ApiBaseView):
    """健康检查接口"""

    def get(self, request):
        return self.success_response(data={"status": "ok"}, message="服务正常")


class ItemCreateView(ApiBaseView):
    """商品创建接口"""

    def post(self, request):
        """创建商品"""
        data = self.validated(ItemCreateSerializer, request.data)
        command = CreateItemCommand(
            sku=data['sku'],
            name=data['name'],
            price=data['price'],
            category=data['category'],
            description=data.get('description', ""),
            currency=data.get('currency') or None,
            inventory=data.get('inventory', 0),
            attributes=data.get('attributes'),
        )

        item = get_item_service().create_item(command)
        return self.created_response(data=ItemDetailSerializer(item).data, message="创建商品成功")


class ItemDetailView(ApiBaseView):
    """商品详情、更新和删除接口"""

    def get(self, request, item_id):
        """获取商品详情"""
        item = get_item_service().get_item(GetItemQuery(id=str(item_id)))
        return self.success_response(data=ItemDetailSerializer(item).data, message="获取商品详情成功")

    def put(self, request, item_id):
        """更新商品"""
        data = self.validated(ItemUpdateSerializer, request.data)
        command = UpdateItemCommand(id=str(item_id), **data)

        item = get_item_service().update_item(command)
        return self.success_response(
            data=ItemDetailSerializer(item).data,
            message="更新商品成功",
            code=StatusCode.UPDATED
        )

    def delete(self, request, item_id):
        """删除商品"""
        get_item_service().delete_item(DeleteItemCommand(id=str(item_id)))
        return self.success_response(message="删除商品成功", code=StatusCode.DELETED)


class ItemBySkuView(ApiBaseView):
    """根据SKU获取商品接口"""

    def get(self, request, sku):
        item = get_item_service().get_item_by_sku(GetItemBySkuQuery(sku=sku))
        return self.success_response(data=ItemDetailSerializer(item).data, message="获取商品详情成功")


class ItemInventoryView(ApiBaseView):
    """商品库存接口"""

    def patch(self, request, item_id):
        """更新商品库存"""
        data = self.validated(InventoryUpdateSerializer, request.data)
        command = UpdateInventoryCommand(id=str(item_id), quantity=data['quantity'])

        item = get_item_service().update_inventory(command)
        return self.success_response(
            data=ItemDetailSerializer(item).data,
            message="更新商品库存成功",
            code=StatusCode.UPDATED
        )


class ItemImagesView(ApiBaseView):
    """商品图片接口"""

    def post(self, request, item_id):
        """添加商品图片"""
        data = self.validated(ImageCreateSerializer, request.data)
        command = AddImageCommand(
            id=str(item_id),
            url=data['url'],
            alt=data.get('alt', ""),
            is_primary=data.get('is_primary', False),
        )

        item = get_item_service().add_image(command)
        return self.success_response(
            data=ItemDetailSerializer(item).data,
            message="添加商品图片成功",
            code=StatusCode.UPDATED
        )

    def delete(self, request, item_id):
        """清空商品图片"""
        item = get_item_service().clear_images(ClearImagesCommand(id=str(item_id)))
        return self.success_response(
            data=ItemDetailSerializer(item).data,
            message="清空商品图片成功",
            code=StatusCode.UPDATED
        )


class ItemStatusView(ApiBaseView):
    """
    商品状态变更接口。
    子类通过service_method指定调用的应用服务方法。
    """
    service_method = None
    message = "变更商品状态成功"

    def patch(self, request, item_id):
        service = get_item_service()
        handler = getattr(service, self.service_method)
        item = handler(ChangeItemStatusCommand(id=str(item_id)))
        return self.success_response(
            data=ItemDetailSerializer(item).data,
            message=self.message,
            code=StatusCode.UPDATED
        )


class ItemActivateView(ItemStatusView):
    service_method = 'activate_item'
    message = "激活商品成功"


class ItemDeactivateView(ItemStatusView):
    service_method = 'deactivate_item'
    message = "停用商品成功"


class ItemArchiveView(ItemStatusView):
    service_method = 'archive_item'
    message = "归档商品成功"


class ItemSearchView(ApiBaseView):
    """商品搜索接口"""

    def get(self, request):
        """搜索商品"""
        params = self.validated(ItemSearchSerializer, request.query_params)
        query = SearchItemsQuery(
            query=params.get('query'),
            category=params.get('category'),
            status=params.get('status'),
            page=params['page'],
            page_size=params['page_size'],
        )

        result = get_item_service().search_items(query)
        return self.paginated_response(result, ItemListItemSerializer, message="搜索商品成功")


class ItemCategoryListView(ApiBaseView):
    """按分类获取商品列表接口"""

    def get(self, request, category):
        params = self.validated(PaginationSerializer, request.query_params)
        query = ListItemsByCategoryQuery(
            category=category, page=params['page'], page_size=params['page_size']
        )

        result = get_item_service().list_items_by_category(query)
        return self.paginated_response(result, ItemListItemSerializer, message="获取分类商品列表成功")


class AvailableItemListView(ApiBaseView):
    """可售商品列表接口"""

    def get(self, request):
        params = self.validated(PaginationSerializer, request.query_params)
        query = ListAvailableItemsQuery(page=params['page'], page_size=params['page_size'])

        result = get_item_service().list_available_items(query)
        return self.paginated_response(result, ItemListItemSerializer, message="获取可售商品列表成功")


class LowStockItemListView(ApiBaseView):
    """低库存商品列表接口"""

    def get(self, request):
        params = self.validated(LowStockQuerySerializer, request.query_params)
        items = get_item_service().list_low_stock_items(
            ListLowStockItemsQuery(threshold=params['threshold'])
        )
        return self.success_response(
            data=ItemListItemSerializer(items, many=True).data,
            message="获取低库存商品列表成功"
        )
