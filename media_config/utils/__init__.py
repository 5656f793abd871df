# 工具模块
"""通用工具函数"""

from media_config.utils.logging import setup_logging

__all__ = [
    "setup_logging",
]
