"""
Django settings for catalog project.

此文件作为配置入口点，根据环境变量加载相应的配置模块。
"""

import os
import sys
from pathlib import Path

from loguru import logger

# 构建基本路径
BASE_DIR = Path(__file__).resolve().parent.parent

# 确定当前环境
DJANGO_ENV = os.environ.get('DJANGO_ENV', 'development')

# 根据环境加载相应的配置
if DJANGO_ENV == 'production':
    from .config.production import *
elif DJANGO_ENV == 'testing':
    from .config.testing import *
else:  # 默认使用开发环境配置
    from .config.development import *

# loguru输出级别与环境保持一致
logger.remove()
logger.add(
    sys.stderr,
    level='WARNING' if DJANGO_ENV == 'testing' else LOG_LEVEL,
    format='{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}',
)
logger.debug(f"使用{DJANGO_ENV}环境配置")
