"""
API视图基类。
提供统一的API视图类，用于规范API响应格式和请求数据校验。
"""
from rest_framework import serializers
from rest_framework.views import APIView

from core.infrastructure.response import ApiResponseBuilder, StatusCode


class ApiBaseView(APIView):
    """API视图基类，提供统一的响应方法"""

    def validated(self, serializer_class, data) -> dict:
        """
        使用序列化器校验请求数据。
        校验失败时抛出DRF的ValidationError，由统一异常处理器转换为400响应。

        Args:
            serializer_class: 请求序列化器类
            data: 请求数据

        Returns:
            校验后的数据
        """
        serializer: serializers.Serializer = serializer_class(data=data)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data

    def success_response(self, data=None, message="操作成功", code=StatusCode.SUCCESS):
        """
        成功响应

        Args:
            data: 响应数据
            message: 响应消息
            code: 业务状态码

        Returns:
            Response: 统一格式的响应
        """
        return ApiResponseBuilder.success(data=data, message=message, code=code)

    def created_response(self, data=None, message="创建成功", code=StatusCode.CREATED):
        """
        创建成功响应

        Args:
            data: 响应数据
            message: 响应消息
            code: 业务状态码

        Returns:
            Response: 统一格式的响应
        """
        return ApiResponseBuilder.created(data=data, message=message, code=code)

    def paginated_response(self, result, serializer_class, message="查询成功"):
        """
        分页响应

        Args:
            result: 分页结果DTO，包含items/total/page/page_size/total_pages
            serializer_class: 列表项响应序列化器类
            message: 响应消息

        Returns:
            Response: 统一格式的响应
        """
        return ApiResponseBuilder.paginated(
            items=serializer_class(result.items, many=True).data,
            total=result.total,
            page=result.page,
            page_size=result.page_size,
            total_pages=result.total_pages,
            message=message,
        )
