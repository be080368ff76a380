"""
环境变量处理模块。
负责加载和处理环境变量。
"""
import os
import warnings
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv


# 项目根目录
BASE_DIR = Path(__file__).resolve().parent.parent.parent


def load_env_file() -> bool:
    """
    加载.env文件。
    优先使用ENV_FILE指定的路径，否则使用当前文件同级目录下的.env。

    Returns:
        是否成功加载
    """
    env_path = os.environ.get('ENV_FILE') or os.path.join(os.path.dirname(__file__), '.env')

    if not os.path.exists(env_path):
        return False
    # 已存在的进程环境变量优先
    return load_dotenv(dotenv_path=env_path, encoding='utf-8', override=False)


# 尝试加载环境变量
load_env_file()


def get_env(name: str, default: Any = None, cast_type: Optional[type] = None) -> Any:
    """
    获取环境变量值，支持类型转换和默认值

    Args:
        name: 环境变量名称
        default: 默认值，如果环境变量不存在则返回此值
        cast_type: 类型转换函数，如int, float, bool, list等

    Returns:
        环境变量的值，经过类型转换（如果指定了cast_type）
    """
    value = os.environ.get(name, default)

    if value is None:
        return None

    if cast_type is not None:
        if cast_type is bool and isinstance(value, str):
            return value.lower() in ('true', 'yes', '1', 'y')
        if cast_type is list and isinstance(value, str):
            return [item.strip() for item in value.split(',') if item.strip()]
        try:
            return cast_type(value)
        except (ValueError, TypeError):
            warnings.warn(f"无法将环境变量{name}的值'{value}'转换为{cast_type.__name__}类型，使用默认值")
            return default

    return value


# 导出常用环境变量
DEBUG = get_env('DEBUG', default=False, cast_type=bool)
SECRET_KEY = get_env('SECRET_KEY', default='django-insecure-catalog-service-development-key')
ALLOWED_HOSTS = get_env('ALLOWED_HOSTS', default='localhost,127.0.0.1', cast_type=list)

# 数据库配置
DB_ENGINE = get_env('DB_ENGINE', default='django.db.backends.postgresql')
DB_NAME = get_env('DB_NAME', default='catalog')
DB_USER = get_env('DB_USER', default='postgres')
DB_PASSWORD = get_env('DB_PASSWORD', default='postgres')
DB_HOST = get_env('DB_HOST', default='127.0.0.1')
DB_PORT = get_env('DB_PORT', default='5432')
DB_CONN_MAX_AGE = get_env('DB_CONN_MAX_AGE', default=60, cast_type=int)

# 国际化配置
LANGUAGE_CODE = get_env('LANGUAGE_CODE', default='zh-hans')
TIME_ZONE = get_env('TIME_ZONE', default='UTC')

# 日志配置
LOG_LEVEL = get_env('LOG_LEVEL', default='INFO')

# 商品模块配置
ITEM_DEFAULT_CURRENCY = get_env('ITEM_DEFAULT_CURRENCY', default='USD')
ITEM_ALLOWED_CURRENCIES = get_env('ITEM_ALLOWED_CURRENCIES', default='USD,EUR,GBP,JPY', cast_type=list)
ITEM_MAX_PRICE = get_env('ITEM_MAX_PRICE', default=999999, cast_type=int)
ITEM_DRAFT_PRICE_THRESHOLD = get_env('ITEM_DRAFT_PRICE_THRESHOLD', default=1000, cast_type=int)
ITEM_MAX_INVENTORY = get_env('ITEM_MAX_INVENTORY', default=999999, cast_type=int)
ITEM_BLOCKED_CATEGORIES = get_env('ITEM_BLOCKED_CATEGORIES', default='restricted', cast_type=list)
ITEM_ALLOWED_CATEGORIES = get_env('ITEM_ALLOWED_CATEGORIES', default='', cast_type=list)
ITEM_DEFAULT_PAGE_SIZE = get_env('ITEM_DEFAULT_PAGE_SIZE', default=20, cast_type=int)
ITEM_MAX_PAGE_SIZE = get_env('ITEM_MAX_PAGE_SIZE', default=100, cast_type=int)
ITEM_LOW_STOCK_THRESHOLD = get_env('ITEM_LOW_STOCK_THRESHOLD', default=5, cast_type=int)
