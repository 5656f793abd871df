#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
默认配置常量

定义配置键名、程序默认值和内置分辨率列表
"""

# ============================================================
# 路径配置
# ============================================================
DEFAULT_CONFIG_PATH = "./media_config.conf"
YAML_EXTENSIONS = (".yaml", ".yml")

# ============================================================
# 视频配置键
# ============================================================
KEY_MAX_BITRATE = "max_bitrate"
KEY_VIDEO_ROTATION = "video_rotation"
KEY_VIDEO_VFLIP = "video_vflip"
KEY_VIDEO_HFLIP = "video_hflip"
KEY_USE_4_3_RESOLUTION = "use_4_3_video_resolution"
KEY_USE_DYNAMIC_RESOLUTION = "use_dynamic_video_resolution"
KEY_RESOLUTION_LIST_4_3 = "video_resolution_list_4_3"
KEY_RESOLUTION_LIST_16_9 = "video_resolution_list_16_9"
KEY_USE_INITIAL_RESOLUTION = "use_initial_video_resolution"
KEY_INITIAL_RESOLUTION = "initial_video_resolution"
KEY_INITIAL_FRAMERATE = "initial_video_framerate"

# ============================================================
# 音频配置键
# ============================================================
KEY_AUDIO_PROCESSING = "audio_processing_enable"
KEY_AUDIO_ECHO_CANCEL = "audio_echo_cancellation"
KEY_AUDIO_GAIN_CONTROL = "audio_gain_control"
KEY_AUDIO_HIGHPASS_FILTER = "audio_high_passfilter"
KEY_AUDIO_NOISE_SUPPRESSION = "audio_noise_suppression"
KEY_AUDIO_LEVEL_CONTROL = "audio_level_control_enable"

KNOWN_KEYS = (
    KEY_MAX_BITRATE,
    KEY_VIDEO_ROTATION,
    KEY_VIDEO_VFLIP,
    KEY_VIDEO_HFLIP,
    KEY_USE_4_3_RESOLUTION,
    KEY_USE_DYNAMIC_RESOLUTION,
    KEY_RESOLUTION_LIST_4_3,
    KEY_RESOLUTION_LIST_16_9,
    KEY_USE_INITIAL_RESOLUTION,
    KEY_INITIAL_RESOLUTION,
    KEY_INITIAL_FRAMERATE,
    KEY_AUDIO_PROCESSING,
    KEY_AUDIO_ECHO_CANCEL,
    KEY_AUDIO_GAIN_CONTROL,
    KEY_AUDIO_HIGHPASS_FILTER,
    KEY_AUDIO_NOISE_SUPPRESSION,
    KEY_AUDIO_LEVEL_CONTROL,
)

# ============================================================
# 视频默认值
# ============================================================
DEFAULT_MAX_BITRATE = 3500000
DEFAULT_VIDEO_ROTATION = 0
DEFAULT_VIDEO_VFLIP = False
DEFAULT_VIDEO_HFLIP = False
DEFAULT_USE_4_3_RESOLUTION = True
DEFAULT_USE_DYNAMIC_RESOLUTION = True
DEFAULT_USE_INITIAL_RESOLUTION = False
DEFAULT_INITIAL_RESOLUTION = (640, 480)
DEFAULT_VIDEO_FRAMERATE = 30

# ============================================================
# 内置分辨率列表
# ============================================================
DEFAULT_RESOLUTION_LIST_4_3 = (
    "320x240,400x300,512x384,640x480,1024x768,1152x864,1296x972,1640x1232"
)
DEFAULT_RESOLUTION_LIST_16_9 = (
    "384x216,512x288,640x360,768x432,896x504,1024x576,1152x648,1280x720,1408x864,1920x1080"
)

# ============================================================
# 音频默认值（音频处理会带来较高 CPU 占用，默认关闭）
# ============================================================
DEFAULT_AUDIO_PROCESSING = False
DEFAULT_AUDIO_ECHO_CANCEL = True
DEFAULT_AUDIO_GAIN_CONTROL = True
DEFAULT_AUDIO_HIGHPASS_FILTER = True
DEFAULT_AUDIO_NOISE_SUPPRESSION = True
DEFAULT_AUDIO_LEVEL_CONTROL = True

