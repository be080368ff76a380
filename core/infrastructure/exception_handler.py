"""
统一异常处理器。
提供全局异常处理机制，将各种异常转换为统一的API响应格式。

领域异常到HTTP状态码的映射:
    EntityNotFoundException      -> 404
    ValidationException          -> 400
    DuplicateKeyException        -> 409
    DependencyFailureException   -> 503
    其他DomainException          -> 400
    其他未预期异常                -> 500
"""
import logging
import traceback

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    APIException,
    NotFound,
    ValidationError as DRFValidationError,
)

from core.domain.exceptions import (
    DomainException,
    EntityNotFoundException,
    ValidationException,
    DuplicateKeyException,
    DependencyFailureException,
)
from core.infrastructure.response import ApiResponseBuilder, StatusCode, get_status_message

logger = logging.getLogger(__name__)


# 领域异常映射表，按顺序匹配，子类必须排在父类之前
DOMAIN_EXCEPTION_MAPPING = (
    (EntityNotFoundException, StatusCode.ENTITY_NOT_FOUND, status.HTTP_404_NOT_FOUND),
    (ValidationException, StatusCode.VALIDATION_ERROR, status.HTTP_400_BAD_REQUEST),
    (DuplicateKeyException, StatusCode.DUPLICATE_ENTITY, status.HTTP_409_CONFLICT),
    (DependencyFailureException, StatusCode.SERVICE_UNAVAILABLE, status.HTTP_503_SERVICE_UNAVAILABLE),
    (DomainException, StatusCode.BAD_REQUEST, status.HTTP_400_BAD_REQUEST),
)


def unified_exception_handler(exc, context):
    """
    统一异常处理器，将各种异常转换为统一的API响应格式。

    Args:
        exc: 异常对象
        context: 异常上下文

    Returns:
        Response: 统一格式的API响应
    """
    # 记录异常信息
    request = context.get('request')
    if request:
        logger.warning(
            f"处理请求时发生异常: {request.method} {request.path}\n"
            f"异常类型: {exc.__class__.__name__}\n"
            f"异常信息: {str(exc)}"
        )

    # 1. 处理领域异常
    for exception_class, code, http_code in DOMAIN_EXCEPTION_MAPPING:
        if isinstance(exc, exception_class):
            return ApiResponseBuilder.fail(message=str(exc), code=code, http_code=http_code)

    # 2. 处理Django和DRF异常
    if isinstance(exc, (Http404, NotFound)):
        return ApiResponseBuilder.fail(
            message=get_status_message(StatusCode.NOT_FOUND),
            code=StatusCode.NOT_FOUND,
            http_code=status.HTTP_404_NOT_FOUND
        )

    if isinstance(exc, DRFValidationError):
        return ApiResponseBuilder.fail(
            message="数据验证失败",
            code=StatusCode.VALIDATION_ERROR,
            data=exc.detail,
            http_code=status.HTTP_400_BAD_REQUEST
        )

    if isinstance(exc, APIException):
        return ApiResponseBuilder.fail(
            message=str(exc.detail),
            code=StatusCode.BAD_REQUEST,
            http_code=exc.status_code
        )

    # 3. 处理其他未预期的异常
    logger.error(f"未处理的异常: {exc.__class__.__name__} - {str(exc)}\n{traceback.format_exc()}")
    return ApiResponseBuilder.fail(
        message=get_status_message(StatusCode.SERVER_ERROR),
        code=StatusCode.SERVER_ERROR,
        http_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
