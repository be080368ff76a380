"""
基础配置文件。
包含所有环境共享的Django配置，各环境配置文件在此基础上覆盖。
"""
from .env import *

ROOT_URLCONF = 'catalog.urls'
WSGI_APPLICATION = 'catalog.wsgi.application'

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'rest_framework',
    'items.apps.ItemsConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {'context_processors': []},
    },
]

USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# DRF配置
REST_FRAMEWORK = {
    'EXCEPTION_HANDLER': 'core.infrastructure.exception_handler.unified_exception_handler',
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [],
    'UNAUTHENTICATED_USER': None,
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
    ],
}

# 商品模块配置
ITEM_SETTINGS = {
    'DEFAULT_CURRENCY': ITEM_DEFAULT_CURRENCY,
    'ALLOWED_CURRENCIES': ITEM_ALLOWED_CURRENCIES,
    'MAX_PRICE': ITEM_MAX_PRICE,
    'DRAFT_PRICE_THRESHOLD': ITEM_DRAFT_PRICE_THRESHOLD,
    'MIN_NAME_LENGTH': 3,
    'MAX_INVENTORY': ITEM_MAX_INVENTORY,
    'CATEGORY_DISCOUNTS': {
        'electronics': '0.95',
        'books': '0.90',
        'clothing': '0.85',
    },
    'BLOCKED_CATEGORIES': ITEM_BLOCKED_CATEGORIES,
    'ALLOWED_CATEGORIES': ITEM_ALLOWED_CATEGORIES,
    'DEFAULT_PAGE_SIZE': ITEM_DEFAULT_PAGE_SIZE,
    'MAX_PAGE_SIZE': ITEM_MAX_PAGE_SIZE,
    'LOW_STOCK_THRESHOLD': ITEM_LOW_STOCK_THRESHOLD,
}
