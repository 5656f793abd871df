#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
跨字段一致性处理测试
"""

import pytest

from media_config.core.modes import (
    AudioProcessingConfig,
    ResolutionMode,
    resolve_audio_config,
    resolve_initial_resolution,
    resolve_resolution_mode,
)
from media_config.core.resolution import AspectRatio, Resolution, ResolutionCatalog
from media_config.core.state import default_catalog


class TestResolutionMode:
    """分辨率模式枚举测试"""

    def test_from_flags(self):
        assert ResolutionMode.from_flags(True, False) is ResolutionMode.DYNAMIC
        assert ResolutionMode.from_flags(False, True) is ResolutionMode.INITIAL
        assert ResolutionMode.from_flags(True, True) is ResolutionMode.DYNAMIC_FROM_INITIAL

    def test_neither_rejected(self):
        with pytest.raises(ValueError):
            ResolutionMode.from_flags(False, False)

    def test_flag_properties(self):
        assert ResolutionMode.DYNAMIC.dynamic and not ResolutionMode.DYNAMIC.initial
        assert ResolutionMode.INITIAL.initial and not ResolutionMode.INITIAL.dynamic
        assert ResolutionMode.DYNAMIC_FROM_INITIAL.dynamic
        assert ResolutionMode.DYNAMIC_FROM_INITIAL.initial


class TestResolveInitialResolution:
    """初始分辨率请求处理测试"""

    @pytest.fixture
    def catalog(self):
        return default_catalog()

    def test_absent_flag(self, make_store, catalog):
        """测试未配置开关时跳过整个初始分辨率处理"""
        store = make_store(initial_video_resolution="640x480", initial_video_framerate="15")
        decision = resolve_initial_resolution(store, catalog, AspectRatio.RATIO_4_3)
        assert decision.enabled is False
        assert decision.resolution is None
        assert decision.framerate == 30

    def test_accepted(self, make_store, catalog):
        store = make_store(
            use_initial_video_resolution="true",
            initial_video_resolution="1024x768",
            initial_video_framerate="25",
        )
        decision = resolve_initial_resolution(store, catalog, AspectRatio.RATIO_4_3)
        assert decision.enabled is True
        assert decision.resolution == Resolution(1024, 768)
        assert decision.framerate == 25

    def test_zero_framerate_defaults(self, make_store, catalog):
        store = make_store(
            use_initial_video_resolution="true",
            initial_video_resolution="640x480",
            initial_video_framerate="0",
        )
        decision = resolve_initial_resolution(store, catalog, AspectRatio.RATIO_4_3)
        assert decision.framerate == 30

    def test_not_in_active_list(self, make_store, catalog):
        """测试分辨率不在当前宽高比列表中时拒绝"""
        store = make_store(use_initial_video_resolution="true", initial_video_resolution="800x600")
        decision = resolve_initial_resolution(store, catalog, AspectRatio.RATIO_4_3)
        assert decision.enabled is False

    def test_other_aspect_list_not_consulted(self, make_store, catalog):
        store = make_store(use_initial_video_resolution="true", initial_video_resolution="1280x720")
        decision = resolve_initial_resolution(store, catalog, AspectRatio.RATIO_4_3)
        assert decision.enabled is False

    def test_unparsable_resolution(self, make_store, catalog):
        store = make_store(use_initial_video_resolution="true", initial_video_resolution="big")
        decision = resolve_initial_resolution(store, catalog, AspectRatio.RATIO_4_3)
        assert decision.enabled is False

    def test_missing_resolution(self, make_store, catalog):
        store = make_store(use_initial_video_resolution="true")
        decision = resolve_initial_resolution(store, catalog, AspectRatio.RATIO_4_3)
        assert decision.enabled is False

    @pytest.mark.parametrize("raw", ["false", "yes"])
    def test_false_or_invalid_flag(self, make_store, catalog, raw):
        store = make_store(use_initial_video_resolution=raw, initial_video_resolution="640x480")
        decision = resolve_initial_resolution(store, catalog, AspectRatio.RATIO_4_3)
        assert decision.enabled is False


class TestResolveResolutionMode:
    """分辨率模式回退测试"""

    @pytest.fixture
    def catalog(self):
        return default_catalog()

    def test_dynamic_only(self, catalog):
        mode, resolution = resolve_resolution_mode(
            True, False, Resolution(640, 480), catalog, AspectRatio.RATIO_4_3
        )
        assert mode is ResolutionMode.DYNAMIC
        assert resolution == Resolution(640, 480)

    def test_both_enabled(self, catalog):
        mode, _ = resolve_resolution_mode(
            True, True, Resolution(1024, 768), catalog, AspectRatio.RATIO_4_3
        )
        assert mode is ResolutionMode.DYNAMIC_FROM_INITIAL

    def test_neither_forces_initial(self, catalog):
        """测试两者均关闭时强制启用初始分辨率"""
        mode, resolution = resolve_resolution_mode(
            False, False, Resolution(640, 480), catalog, AspectRatio.RATIO_4_3
        )
        assert mode is ResolutionMode.INITIAL
        assert resolution == Resolution(640, 480)

    def test_forced_initial_kept_in_active_list(self, catalog):
        """测试强制启用时初始分辨率替换为当前列表中最接近的条目"""
        mode, resolution = resolve_resolution_mode(
            False, False, Resolution(640, 480), catalog, AspectRatio.RATIO_16_9
        )
        assert mode is ResolutionMode.INITIAL
        assert resolution == Resolution(768, 432)
        assert catalog.contains(resolution, AspectRatio.RATIO_16_9)

    def test_custom_list(self):
        catalog = ResolutionCatalog(list_4_3=(Resolution(320, 240),), list_16_9=(Resolution(1920, 1080),))
        _, resolution = resolve_resolution_mode(
            False, False, Resolution(640, 480), catalog, AspectRatio.RATIO_4_3
        )
        assert resolution == Resolution(320, 240)


class TestResolveAudioConfig:
    """音频开关测试"""

    def test_defaults(self, make_store):
        assert resolve_audio_config(make_store()) == AudioProcessingConfig()

    def test_sub_flags_ignored_when_disabled(self, make_store):
        """测试音频处理未启用时子功能保持默认值，电平控制仍然读取"""
        store = make_store(
            audio_echo_cancellation="false",
            audio_gain_control="false",
            audio_high_passfilter="false",
            audio_noise_suppression="false",
            audio_level_control_enable="false",
        )
        audio = resolve_audio_config(store)
        assert audio.enable is False
        assert audio.echo_cancel is True
        assert audio.gain_control is True
        assert audio.highpass_filter is True
        assert audio.noise_suppression is True
        assert audio.level_control is False

    @pytest.mark.parametrize("raw", ["false", "TRUE", "1"])
    def test_enable_requires_exact_true(self, make_store, raw):
        store = make_store(audio_processing_enable=raw, audio_gain_control="false")
        audio = resolve_audio_config(store)
        assert audio.enable is False
        assert audio.gain_control is True

    def test_sub_flags_loaded_when_enabled(self, make_store):
        store = make_store(
            audio_processing_enable="true",
            audio_echo_cancellation="false",
            audio_gain_control="bogus",
            audio_noise_suppression="false",
        )
        audio = resolve_audio_config(store)
        assert audio.enable is True
        assert audio.echo_cancel is False
        # 非法值保留默认
        assert audio.gain_control is True
        assert audio.highpass_filter is True
        assert audio.noise_suppression is False
        assert audio.level_control is True
