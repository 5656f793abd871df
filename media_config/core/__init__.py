# 核心模块
"""分辨率解析、字段加载与一致性处理"""

from media_config.core.resolution import (
    AspectRatio,
    Resolution,
    ResolutionCatalog,
    parse_resolution_token,
    parse_resolution_list,
    load_resolution_list,
)
from media_config.core.fields import (
    ScalarField,
    load_bool,
    load_bool_with_default,
    load_int_with_default,
)
from media_config.core.modes import AudioProcessingConfig, ResolutionMode
from media_config.core.state import MediaConfig, MediaConfigHolder

__all__ = [
    "AspectRatio",
    "Resolution",
    "ResolutionCatalog",
    "parse_resolution_token",
    "parse_resolution_list",
    "load_resolution_list",
    "ScalarField",
    "load_bool",
    "load_bool_with_default",
    "load_int_with_default",
    "AudioProcessingConfig",
    "ResolutionMode",
    "MediaConfig",
    "MediaConfigHolder",
]
