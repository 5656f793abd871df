#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置加载器

从键值配置文件构建 MediaConfig，加载顺序:
标量字段 → 分辨率列表 → 初始分辨率请求 → 分辨率模式与音频开关一致性处理
"""

import os
import logging
from typing import Optional

from media_config.config.defaults import (
    DEFAULT_CONFIG_PATH,
    KNOWN_KEYS,
    KEY_MAX_BITRATE,
    KEY_VIDEO_ROTATION,
    KEY_VIDEO_VFLIP,
    KEY_VIDEO_HFLIP,
    KEY_USE_4_3_RESOLUTION,
    KEY_USE_DYNAMIC_RESOLUTION,
    KEY_RESOLUTION_LIST_4_3,
    KEY_RESOLUTION_LIST_16_9,
    DEFAULT_MAX_BITRATE,
    DEFAULT_VIDEO_ROTATION,
    DEFAULT_VIDEO_VFLIP,
    DEFAULT_VIDEO_HFLIP,
    DEFAULT_USE_4_3_RESOLUTION,
    DEFAULT_USE_DYNAMIC_RESOLUTION,
    DEFAULT_INITIAL_RESOLUTION,
    DEFAULT_RESOLUTION_LIST_4_3,
    DEFAULT_RESOLUTION_LIST_16_9,
)
from media_config.config.options_file import OptionsFile, open_options_file
from media_config.core.fields import (
    ScalarField,
    load_field,
    validate_video_max_bitrate,
    validate_video_rotation,
)
from media_config.core.modes import (
    resolve_audio_config,
    resolve_initial_resolution,
    resolve_resolution_mode,
)
from media_config.core.resolution import (
    AspectRatio,
    Resolution,
    ResolutionCatalog,
    load_resolution_list,
)
from media_config.core.state import MediaConfig
from media_config.errors import SourceUnavailableError

logger = logging.getLogger(__name__)

# ============================================================
# 标量字段声明
# ============================================================
FIELD_MAX_BITRATE = ScalarField(KEY_MAX_BITRATE, DEFAULT_MAX_BITRATE, validate_video_max_bitrate)
FIELD_VIDEO_ROTATION = ScalarField(KEY_VIDEO_ROTATION, DEFAULT_VIDEO_ROTATION, validate_video_rotation)
FIELD_VIDEO_VFLIP = ScalarField(KEY_VIDEO_VFLIP, DEFAULT_VIDEO_VFLIP)
FIELD_VIDEO_HFLIP = ScalarField(KEY_VIDEO_HFLIP, DEFAULT_VIDEO_HFLIP)
FIELD_USE_4_3_RESOLUTION = ScalarField(KEY_USE_4_3_RESOLUTION, DEFAULT_USE_4_3_RESOLUTION)
# 启用时按平均码率在分辨率列表中动态切换；关闭时保持初始分辨率
FIELD_USE_DYNAMIC_RESOLUTION = ScalarField(KEY_USE_DYNAMIC_RESOLUTION, DEFAULT_USE_DYNAMIC_RESOLUTION)


def find_default_config() -> Optional[str]:
    """
    查找默认配置文件

    Returns:
        当前目录下的 media_config.conf，不存在时返回 None
    """
    if os.path.exists(DEFAULT_CONFIG_PATH):
        return DEFAULT_CONFIG_PATH
    return None


def build_media_config(store: OptionsFile) -> MediaConfig:
    """
    从已加载的键值存储构建配置

    所有字段级错误都在此就地恢复并记录日志，不会抛出异常。

    Args:
        store: 已成功 load 的键值存储

    Returns:
        MediaConfig
    """
    for key in store.options:
        if key not in KNOWN_KEYS:
            logger.warning(f"忽略未知配置项: {key}", extra={"key": key})

    max_bitrate = load_field(store, FIELD_MAX_BITRATE)
    video_rotation = load_field(store, FIELD_VIDEO_ROTATION)
    video_vflip = load_field(store, FIELD_VIDEO_VFLIP)
    video_hflip = load_field(store, FIELD_VIDEO_HFLIP)
    aspect = AspectRatio.from_flag(load_field(store, FIELD_USE_4_3_RESOLUTION))
    use_dynamic = load_field(store, FIELD_USE_DYNAMIC_RESOLUTION)

    catalog = ResolutionCatalog(
        list_4_3=load_resolution_list(
            store.get_string(KEY_RESOLUTION_LIST_4_3),
            DEFAULT_RESOLUTION_LIST_4_3,
            KEY_RESOLUTION_LIST_4_3,
        ),
        list_16_9=load_resolution_list(
            store.get_string(KEY_RESOLUTION_LIST_16_9),
            DEFAULT_RESOLUTION_LIST_16_9,
            KEY_RESOLUTION_LIST_16_9,
        ),
    )

    decision = resolve_initial_resolution(store, catalog, aspect)
    initial_resolution = decision.resolution or Resolution(*DEFAULT_INITIAL_RESOLUTION)
    mode, initial_resolution = resolve_resolution_mode(
        use_dynamic, decision.enabled, initial_resolution, catalog, aspect
    )

    return MediaConfig(
        max_bitrate=max_bitrate,
        video_rotation=video_rotation,
        video_vflip=video_vflip,
        video_hflip=video_hflip,
        aspect_ratio=aspect,
        resolution_mode=mode,
        initial_video_resolution=initial_resolution,
        initial_video_framerate=decision.framerate,
        resolutions=catalog,
        audio=resolve_audio_config(store),
    )


def load_media_config(config_path: Optional[str] = None) -> MediaConfig:
    """
    加载媒体配置

    Args:
        config_path: 配置文件路径，为 None 时查找默认路径

    Returns:
        MediaConfig

    Raises:
        SourceUnavailableError: 配置文件不存在或无法读取
    """
    if config_path is None:
        config_path = find_default_config()
    if config_path is None:
        raise SourceUnavailableError(DEFAULT_CONFIG_PATH, "文件不存在")

    store = open_options_file(config_path)
    if not store.load():
        raise SourceUnavailableError(config_path, store.error or "")

    logger.info(f"已读取配置文件: {config_path}", extra={"source": config_path})
    return build_media_config(store)
