#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置状态模块

MediaConfig 为一次加载得到的只读配置；MediaConfigHolder 负责持有当前配置，
重新加载时整体构建新配置后再替换引用。
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from media_config.config.defaults import (
    DEFAULT_MAX_BITRATE,
    DEFAULT_VIDEO_ROTATION,
    DEFAULT_VIDEO_VFLIP,
    DEFAULT_VIDEO_HFLIP,
    DEFAULT_INITIAL_RESOLUTION,
    DEFAULT_VIDEO_FRAMERATE,
    DEFAULT_RESOLUTION_LIST_4_3,
    DEFAULT_RESOLUTION_LIST_16_9,
)
from media_config.core.modes import AudioProcessingConfig, ResolutionMode
from media_config.core.resolution import (
    AspectRatio,
    Resolution,
    ResolutionCatalog,
    parse_resolution_list,
)
from media_config.errors import SourceUnavailableError


def default_catalog() -> ResolutionCatalog:
    """内置分辨率列表"""
    return ResolutionCatalog(
        list_4_3=parse_resolution_list(DEFAULT_RESOLUTION_LIST_4_3),
        list_16_9=parse_resolution_list(DEFAULT_RESOLUTION_LIST_16_9),
    )


@dataclass(frozen=True)
class MediaConfig:
    """媒体配置（加载完成后只读）"""
    max_bitrate: int = DEFAULT_MAX_BITRATE
    video_rotation: int = DEFAULT_VIDEO_ROTATION
    video_vflip: bool = DEFAULT_VIDEO_VFLIP
    video_hflip: bool = DEFAULT_VIDEO_HFLIP
    aspect_ratio: AspectRatio = AspectRatio.RATIO_4_3
    resolution_mode: ResolutionMode = ResolutionMode.DYNAMIC
    initial_video_resolution: Resolution = Resolution(*DEFAULT_INITIAL_RESOLUTION)
    initial_video_framerate: int = DEFAULT_VIDEO_FRAMERATE
    resolutions: ResolutionCatalog = field(default_factory=default_catalog)
    audio: AudioProcessingConfig = field(default_factory=AudioProcessingConfig)

    @classmethod
    def defaults(cls) -> "MediaConfig":
        return cls()

    @property
    def resolution_4_3_enable(self) -> bool:
        return self.aspect_ratio is AspectRatio.RATIO_4_3

    @property
    def use_dynamic_video_resolution(self) -> bool:
        return self.resolution_mode.dynamic

    @property
    def use_initial_video_resolution(self) -> bool:
        return self.resolution_mode.initial

    @property
    def active_resolutions(self) -> Tuple[Resolution, ...]:
        return self.resolutions.for_aspect(self.aspect_ratio)

    def to_dict(self) -> Dict[str, Any]:
        """转换为便于输出的字典（键名与配置文件一致）"""
        return {
            "max_bitrate": self.max_bitrate,
            "video_rotation": self.video_rotation,
            "video_vflip": self.video_vflip,
            "video_hflip": self.video_hflip,
            "use_4_3_video_resolution": self.resolution_4_3_enable,
            "use_dynamic_video_resolution": self.use_dynamic_video_resolution,
            "use_initial_video_resolution": self.use_initial_video_resolution,
            "initial_video_resolution": str(self.initial_video_resolution),
            "initial_video_framerate": self.initial_video_framerate,
            "video_resolution_list_4_3": [str(r) for r in self.resolutions.list_4_3],
            "video_resolution_list_16_9": [str(r) for r in self.resolutions.list_16_9],
            "audio_processing_enable": self.audio.enable,
            "audio_echo_cancellation": self.audio.echo_cancel,
            "audio_gain_control": self.audio.gain_control,
            "audio_high_passfilter": self.audio.highpass_filter,
            "audio_noise_suppression": self.audio.noise_suppression,
            "audio_level_control_enable": self.audio.level_control,
        }


class MediaConfigHolder:
    """
    当前媒体配置的持有者

    初始为默认配置；load 成功后整体替换，失败时保留原配置。
    """

    def __init__(self, config: Optional[MediaConfig] = None):
        self._config = config or MediaConfig.defaults()
        self._lock = threading.Lock()
        self.source_path: Optional[str] = None
        self.loaded = False
        self.logger = logging.getLogger("MediaConfigHolder")

    @property
    def current(self) -> MediaConfig:
        return self._config

    def load(self, path: str) -> bool:
        """
        从配置文件加载并替换当前配置

        Args:
            path: 配置文件路径

        Returns:
            是否加载成功
        """
        from media_config.config.loader import load_media_config

        try:
            config = load_media_config(path)
        except SourceUnavailableError as e:
            self.logger.error(str(e), extra={"source": path})
            return False

        with self._lock:
            self._config = config
            self.source_path = path
            self.loaded = True
        self.logger.info(f"已加载媒体配置: {path}", extra={"source": path})
        return True
