"""
测试环境配置文件。
包含测试环境特定的Django配置。
"""
from .base import *

# 测试环境禁用调试模式
DEBUG = False
ALLOWED_HOSTS = ['testserver', 'localhost']

# 使用内存数据库加速测试
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# 简化日志配置
LOGGING = {
    'version': 1,
    'disable_existing_loggers': True,
    'handlers': {
        'console': {
            'level': 'ERROR',
            'class': 'logging.StreamHandler',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'ERROR',
            'propagate': False,
        },
        'core': {
            'handlers': ['console'],
            'level': 'ERROR',
            'propagate': False,
        },
    },
}

# 测试环境特定的DRF配置
REST_FRAMEWORK['TEST_REQUEST_DEFAULT_FORMAT'] = 'json'

# 商品模块测试环境配置，不依赖外部.env
ITEM_SETTINGS = {
    'DEFAULT_CURRENCY': 'USD',
    'ALLOWED_CURRENCIES': ['USD', 'EUR', 'GBP', 'JPY'],
    'MAX_PRICE': 999999,
    'DRAFT_PRICE_THRESHOLD': 1000,
    'MIN_NAME_LENGTH': 3,
    'MAX_INVENTORY': 999999,
    'CATEGORY_DISCOUNTS': {
        'electronics': '0.95',
        'books': '0.90',
        'clothing': '0.85',
    },
    'BLOCKED_CATEGORIES': ['restricted'],
    'ALLOWED_CATEGORIES': [],
    'DEFAULT_PAGE_SIZE': 20,
    'MAX_PAGE_SIZE': 100,
    'LOW_STOCK_THRESHOLD': 5,
}
