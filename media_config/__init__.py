# 媒体配置加载器
"""
media_config 包

主要模块:
- config: 配置文件读取与加载流程
- core: 分辨率解析、字段加载、一致性处理与配置状态
- utils: 工具函数
"""

__version__ = "1.0.0"

from media_config.config import load_media_config
from media_config.core import MediaConfig, MediaConfigHolder, Resolution, ResolutionMode

__all__ = [
    "__version__",
    "load_media_config",
    "MediaConfig",
    "MediaConfigHolder",
    "Resolution",
    "ResolutionMode",
]
