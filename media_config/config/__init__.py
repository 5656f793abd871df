# 配置模块
"""配置加载和管理"""

from media_config.config.loader import load_media_config, build_media_config
from media_config.config.options_file import OptionsFile, YamlOptionsFile, open_options_file
from media_config.config.defaults import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_RESOLUTION_LIST_4_3,
    DEFAULT_RESOLUTION_LIST_16_9,
    KNOWN_KEYS,
)

__all__ = [
    "load_media_config",
    "build_media_config",
    "OptionsFile",
    "YamlOptionsFile",
    "open_options_file",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_RESOLUTION_LIST_4_3",
    "DEFAULT_RESOLUTION_LIST_16_9",
    "KNOWN_KEYS",
]
