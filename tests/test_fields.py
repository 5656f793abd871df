#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
标量字段加载测试
"""

import pytest

from media_config.core.fields import (
    ScalarField,
    decode_bool,
    load_bool,
    load_bool_with_default,
    load_int_with_default,
    load_field,
    validate_video_rotation,
    validate_video_max_bitrate,
    validate_video_framerate,
)


class TestDecodeBool:
    """布尔值解析测试"""

    def test_exact_values(self):
        assert decode_bool("true") is True
        assert decode_bool("false") is False

    @pytest.mark.parametrize("raw", ["True", "FALSE", "1", "yes", " true", "", None])
    def test_invalid_values(self, raw):
        assert decode_bool(raw) is None


class TestLoadBool:
    """布尔字段两种加载策略测试"""

    def test_bare_load_keeps_current_on_invalid(self, make_store):
        """测试直接加载：值非法时保留当前值"""
        store = make_store(flag="maybe")
        assert load_bool(store, "flag", True) is True
        assert load_bool(store, "flag", False) is False

    def test_bare_load_absent(self, make_store):
        assert load_bool(make_store(), "flag", False) is False

    def test_bare_load_valid(self, make_store):
        assert load_bool(make_store(flag="false"), "flag", True) is False

    def test_defaulted_load_resets_on_invalid(self, make_store):
        """测试带默认值加载：值非法时重置为默认值"""
        store = make_store(flag="maybe")
        assert load_bool_with_default(store, "flag", True) is True
        assert load_bool_with_default(store, "flag", False) is False

    def test_defaulted_load_valid(self, make_store):
        assert load_bool_with_default(make_store(flag="true"), "flag", False) is True

    def test_invalid_value_logged(self, make_store, caplog):
        load_bool(make_store(flag="maybe"), "flag", True)
        record = caplog.records[-1]
        assert record.key == "flag"
        assert record.value == "maybe"


class TestLoadInt:
    """整数字段加载测试"""

    def test_absent_skips_validator(self, make_store):
        """测试键缺失时直接使用默认值，不调用校验函数"""
        calls = []

        def validator(value, default):
            calls.append(value)
            return value

        assert load_int_with_default(make_store(), "n", 7, validator) == 7
        assert calls == []

    def test_validator_always_called(self, make_store):
        """测试值在范围内时也会调用校验函数"""
        calls = []

        def validator(value, default):
            calls.append((value, default))
            return value

        assert load_int_with_default(make_store(n="5"), "n", 7, validator) == 5
        assert calls == [(5, 7)]

    def test_malformed_uses_default(self, make_store, caplog):
        assert load_int_with_default(make_store(n="five"), "n", 7, validate_video_rotation) == 7
        assert any(getattr(r, "value", None) == "five" for r in caplog.records)

    def test_load_field_dispatch(self, make_store):
        store = make_store(flag="bogus", n="90")
        assert load_field(store, ScalarField("flag", True)) is True
        assert load_field(store, ScalarField("n", 0, validate_video_rotation)) == 90


class TestValidators:
    """校验函数测试"""

    @pytest.mark.parametrize("value", [0, 90, 180, 270])
    def test_valid_rotation(self, value):
        assert validate_video_rotation(value, 0) == value

    @pytest.mark.parametrize("value", [-90, 1, 45, 360, 271])
    def test_invalid_rotation(self, value):
        assert validate_video_rotation(value, 0) == 0

    @pytest.mark.parametrize("value", [200, 3500000, 17000000])
    def test_valid_bitrate(self, value):
        assert validate_video_max_bitrate(value, 3500000) == value

    @pytest.mark.parametrize("value", [199, 0, -1, 17000001])
    def test_invalid_bitrate(self, value):
        assert validate_video_max_bitrate(value, 3500000) == 3500000

    def test_framerate(self):
        assert validate_video_framerate(25, 30) == 25
        assert validate_video_framerate(0, 30) == 30
        assert validate_video_framerate(-5, 30) == 30
