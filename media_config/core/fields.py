#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
标量字段加载模块

按字段加载整数/布尔配置，缺失或非法时回退默认值，整数字段额外经过校验函数。

布尔字段有两种加载策略:
- 带默认值加载: 值非法时重置为默认值
- 直接加载: 值非法时保留调用方当前的值
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

Validator = Callable[[int, int], int]

VALID_ROTATIONS = (0, 90, 180, 270)
MIN_MAX_BITRATE = 200
# 17000000 取自 RaspiVid 1080p 码率上限
MAX_MAX_BITRATE = 17000000


@dataclass(frozen=True)
class ScalarField:
    """配置字段声明：键名、默认值、（整数字段的）校验函数"""
    key: str
    default: Any
    validator: Optional[Validator] = None


def decode_bool(raw: Optional[str]) -> Optional[bool]:
    """严格解析布尔值，只接受 "true" / "false" """
    if raw == "true":
        return True
    if raw == "false":
        return False
    return None


def _log_invalid(key: str, raw: Any) -> None:
    logger.error(
        f"配置 \"{key}\" 的值无效: {raw!r}",
        extra={"key": key, "value": raw},
    )


def load_bool(store, key: str, current: bool) -> bool:
    """
    直接加载布尔字段

    Args:
        store: 键值存储（提供 get_string）
        key: 配置键名
        current: 当前值，键缺失或值非法时原样返回

    Returns:
        加载后的布尔值
    """
    raw = store.get_string(key)
    if raw is None:
        return current
    value = decode_bool(raw)
    if value is None:
        _log_invalid(key, raw)
        return current
    return value


def load_bool_with_default(store, key: str, default: bool) -> bool:
    """
    带默认值加载布尔字段，值非法时返回默认值

    Args:
        store: 键值存储（提供 get_string）
        key: 配置键名
        default: 默认值

    Returns:
        加载后的布尔值
    """
    raw = store.get_string(key)
    if raw is None:
        return default
    value = decode_bool(raw)
    if value is None:
        _log_invalid(key, raw)
        logger.error(f"重置为默认值: {default}", extra={"key": key})
        return default
    return value


def load_int_with_default(store, key: str, default: int, validator: Optional[Validator] = None) -> int:
    """
    带默认值和校验函数加载整数字段

    键缺失时直接返回默认值（不调用校验函数）；键存在且为整数时总是调用校验函数。

    Args:
        store: 键值存储（提供 get_string / get_int）
        key: 配置键名
        default: 默认值
        validator: 校验函数 validate(value, default) -> value

    Returns:
        加载后的整数值
    """
    if store.get_string(key) is None:
        return default
    value = store.get_int(key)
    if value is None:
        _log_invalid(key, store.get_string(key))
        logger.error(f"重置为默认值: {default}", extra={"key": key})
        return default
    if validator is None:
        return value
    return validator(value, default)


def load_field(store, field: ScalarField) -> Any:
    """按字段声明加载（布尔字段使用带默认值策略）"""
    if isinstance(field.default, bool):
        return load_bool_with_default(store, field.key, field.default)
    return load_int_with_default(store, field.key, field.default, field.validator)


# ============================================================
# 校验函数
# ============================================================

def validate_video_rotation(value: int, default: int) -> int:
    """旋转角度只允许 0/90/180/270"""
    if value in VALID_ROTATIONS:
        return value
    logger.error(
        f"视频旋转角度 {value} 无效，重置为默认值: {default}",
        extra={"key": "video_rotation", "value": value},
    )
    return default


def validate_video_max_bitrate(value: int, default: int) -> int:
    """最大码率需在 [200, 17000000] 之间"""
    if MIN_MAX_BITRATE <= value <= MAX_MAX_BITRATE:
        return value
    logger.error(
        f"最大码率 {value} 无效，重置为默认值: {default}",
        extra={"key": "max_bitrate", "value": value},
    )
    return default


def validate_video_framerate(value: int, default: int) -> int:
    """帧率必须为正数，0 表示使用默认帧率"""
    if value > 0:
        return value
    if value < 0:
        logger.error(
            f"初始帧率 {value} 无效，重置为默认值: {default}",
            extra={"key": "initial_video_framerate", "value": value},
        )
    return default
