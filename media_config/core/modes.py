#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
跨字段一致性处理

在所有单字段加载完成后统一决定分辨率模式和音频处理开关:
- 动态分辨率与初始分辨率至少启用其一
- 初始分辨率必须存在于当前宽高比的分辨率列表中
- 音频子功能只有在音频处理启用时才从配置读取
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from media_config.config.defaults import (
    KEY_USE_INITIAL_RESOLUTION,
    KEY_INITIAL_RESOLUTION,
    KEY_INITIAL_FRAMERATE,
    KEY_AUDIO_PROCESSING,
    KEY_AUDIO_ECHO_CANCEL,
    KEY_AUDIO_GAIN_CONTROL,
    KEY_AUDIO_HIGHPASS_FILTER,
    KEY_AUDIO_NOISE_SUPPRESSION,
    KEY_AUDIO_LEVEL_CONTROL,
    DEFAULT_VIDEO_FRAMERATE,
    DEFAULT_AUDIO_ECHO_CANCEL,
    DEFAULT_AUDIO_GAIN_CONTROL,
    DEFAULT_AUDIO_HIGHPASS_FILTER,
    DEFAULT_AUDIO_NOISE_SUPPRESSION,
    DEFAULT_AUDIO_LEVEL_CONTROL,
)
from media_config.core.fields import (
    decode_bool,
    load_bool,
    load_int_with_default,
    validate_video_framerate,
)
from media_config.core.resolution import (
    AspectRatio,
    Resolution,
    ResolutionCatalog,
    parse_resolution_token,
)

logger = logging.getLogger(__name__)


class ResolutionMode(Enum):
    """分辨率模式枚举（不存在两者都关闭的状态）"""
    DYNAMIC = "dynamic"
    INITIAL = "initial"
    DYNAMIC_FROM_INITIAL = "dynamic_from_initial"

    @classmethod
    def from_flags(cls, dynamic: bool, initial: bool) -> "ResolutionMode":
        if dynamic and initial:
            return cls.DYNAMIC_FROM_INITIAL
        if dynamic:
            return cls.DYNAMIC
        if initial:
            return cls.INITIAL
        raise ValueError("动态分辨率与初始分辨率不能同时关闭")

    @property
    def dynamic(self) -> bool:
        return self is not ResolutionMode.INITIAL

    @property
    def initial(self) -> bool:
        return self is not ResolutionMode.DYNAMIC


@dataclass(frozen=True)
class InitialResolutionDecision:
    """初始分辨率请求的处理结果"""
    enabled: bool
    resolution: Optional[Resolution] = None
    framerate: int = DEFAULT_VIDEO_FRAMERATE


@dataclass(frozen=True)
class AudioProcessingConfig:
    """音频处理配置"""
    enable: bool = False
    echo_cancel: bool = DEFAULT_AUDIO_ECHO_CANCEL
    gain_control: bool = DEFAULT_AUDIO_GAIN_CONTROL
    highpass_filter: bool = DEFAULT_AUDIO_HIGHPASS_FILTER
    noise_suppression: bool = DEFAULT_AUDIO_NOISE_SUPPRESSION
    level_control: bool = DEFAULT_AUDIO_LEVEL_CONTROL


def resolve_initial_resolution(
    store, catalog: ResolutionCatalog, aspect: AspectRatio
) -> InitialResolutionDecision:
    """
    解析 use_initial_video_resolution 请求

    只有请求为 "true"、初始分辨率可解析且存在于当前宽高比列表中时才启用。

    Args:
        store: 键值存储
        catalog: 已加载的分辨率列表
        aspect: 当前宽高比

    Returns:
        InitialResolutionDecision
    """
    raw = store.get_string(KEY_USE_INITIAL_RESOLUTION)
    if raw is None:
        return InitialResolutionDecision(enabled=False)

    requested = decode_bool(raw)
    if requested is None:
        logger.error(
            f"初始分辨率开关 \"{KEY_USE_INITIAL_RESOLUTION}\" 的值无效: {raw!r}，使用默认值 false",
            extra={"key": KEY_USE_INITIAL_RESOLUTION, "value": raw},
        )
        return InitialResolutionDecision(enabled=False)
    if not requested:
        return InitialResolutionDecision(enabled=False)

    resolution_text = store.get_string(KEY_INITIAL_RESOLUTION)
    if resolution_text is None:
        logger.error(f"未找到初始分辨率配置 \"{KEY_INITIAL_RESOLUTION}\"")
        return InitialResolutionDecision(enabled=False)

    framerate = load_int_with_default(
        store, KEY_INITIAL_FRAMERATE, DEFAULT_VIDEO_FRAMERATE, validate_video_framerate
    )

    resolution = parse_resolution_token(resolution_text)
    if resolution is None:
        logger.error(
            f"初始分辨率 {resolution_text!r} 格式无效",
            extra={"key": KEY_INITIAL_RESOLUTION, "value": resolution_text},
        )
        return InitialResolutionDecision(enabled=False, framerate=framerate)

    if not catalog.contains(resolution, aspect):
        logger.error(
            f"初始分辨率 \"{resolution}\" 不在 {aspect.value} 分辨率列表中",
            extra={"key": KEY_INITIAL_RESOLUTION, "value": str(resolution)},
        )
        return InitialResolutionDecision(enabled=False, framerate=framerate)

    return InitialResolutionDecision(enabled=True, resolution=resolution, framerate=framerate)


def resolve_resolution_mode(
    dynamic: bool,
    initial: bool,
    initial_resolution: Resolution,
    catalog: ResolutionCatalog,
    aspect: AspectRatio,
):
    """
    决定最终分辨率模式

    两种模式都关闭时强制启用初始分辨率；若当前初始分辨率不在列表中，
    改用列表中像素数最接近的条目。

    Returns:
        (ResolutionMode, 初始分辨率) 元组
    """
    if dynamic or initial:
        return ResolutionMode.from_flags(dynamic, initial), initial_resolution

    logger.error("动态分辨率与初始分辨率均被禁用")
    logger.error("强制启用初始分辨率")
    if not catalog.contains(initial_resolution, aspect):
        replacement = catalog.nearest(initial_resolution, aspect)
        logger.warning(
            f"初始分辨率 \"{initial_resolution}\" 不在 {aspect.value} 分辨率列表中，改用 \"{replacement}\"",
            extra={"key": KEY_INITIAL_RESOLUTION, "value": str(replacement)},
        )
        initial_resolution = replacement
    return ResolutionMode.INITIAL, initial_resolution


def resolve_audio_config(store) -> AudioProcessingConfig:
    """
    加载音频处理配置

    audio_processing_enable 必须显式为 "true"，四个子功能才会从配置读取；
    电平控制与音频处理开关无关，总是读取。
    """
    defaults = AudioProcessingConfig()
    level_control = load_bool(store, KEY_AUDIO_LEVEL_CONTROL, defaults.level_control)

    raw = store.get_string(KEY_AUDIO_PROCESSING)
    if raw != "true":
        if raw is not None and decode_bool(raw) is None:
            logger.warning(
                f"音频处理开关 \"{KEY_AUDIO_PROCESSING}\" 的值无效: {raw!r}，保持关闭",
                extra={"key": KEY_AUDIO_PROCESSING, "value": raw},
            )
        return AudioProcessingConfig(level_control=level_control)

    return AudioProcessingConfig(
        enable=True,
        echo_cancel=load_bool(store, KEY_AUDIO_ECHO_CANCEL, defaults.echo_cancel),
        gain_control=load_bool(store, KEY_AUDIO_GAIN_CONTROL, defaults.gain_control),
        highpass_filter=load_bool(store, KEY_AUDIO_HIGHPASS_FILTER, defaults.highpass_filter),
        noise_suppression=load_bool(store, KEY_AUDIO_NOISE_SUPPRESSION, defaults.noise_suppression),
        level_control=level_control,
    )
