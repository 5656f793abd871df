#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
分辨率解析模块

提供 WIDTHxHEIGHT 记号解析、分辨率列表解析以及按宽高比的成员校验
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

RESOLUTION_DELIMITER = ","
_TOKEN_PATTERN = re.compile(r"([0-9]+)[xX]([0-9]+)")


@dataclass(frozen=True)
class Resolution:
    """视频分辨率"""
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"分辨率必须为正数: {self.width}x{self.height}")

    @property
    def pixels(self) -> int:
        return self.width * self.height

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class AspectRatio(Enum):
    """宽高比枚举"""
    RATIO_4_3 = "4:3"
    RATIO_16_9 = "16:9"

    @classmethod
    def from_flag(cls, use_4_3: bool) -> "AspectRatio":
        return cls.RATIO_4_3 if use_4_3 else cls.RATIO_16_9


def parse_resolution_token(token: str) -> Optional[Resolution]:
    """
    解析单个分辨率记号

    Args:
        token: 形如 "640x480" 的字符串，允许前后空白，分隔符不区分大小写

    Returns:
        Resolution，格式不合法时返回 None
    """
    if token is None:
        return None
    match = _TOKEN_PATTERN.fullmatch(token.strip())
    if match is None:
        return None
    width, height = int(match.group(1)), int(match.group(2))
    if width <= 0 or height <= 0:
        return None
    return Resolution(width, height)


def parse_resolution_list(text: str) -> Tuple[Resolution, ...]:
    """
    解析以逗号分隔的分辨率列表

    非法记号逐个跳过并记录日志，不影响其余记号的解析。

    Args:
        text: 分辨率列表字符串

    Returns:
        按出现顺序排列的分辨率元组（可能为空）
    """
    if not text or not text.strip():
        return ()

    resolutions = []
    for token in text.split(RESOLUTION_DELIMITER):
        resolution = parse_resolution_token(token)
        if resolution is None:
            logger.error(f"无法添加分辨率: {token!r}", extra={"value": token})
            continue
        resolutions.append(resolution)
    return tuple(resolutions)


def load_resolution_list(
    raw: Optional[str], fallback_text: str, key: str = ""
) -> Tuple[Resolution, ...]:
    """
    加载分辨率列表，配置为空或全部非法时回退到内置默认列表

    Args:
        raw: 配置中的原始字符串，缺失时为 None
        fallback_text: 内置默认列表字符串
        key: 配置键名，仅用于日志

    Returns:
        非空的分辨率元组

    Raises:
        ValueError: 内置默认列表本身无法解析出任何分辨率
    """
    resolutions = parse_resolution_list(raw) if raw is not None else ()
    if resolutions:
        return resolutions

    if raw is not None:
        logger.warning(
            f"配置 \"{key}\" 中没有可用的分辨率，使用内置默认列表",
            extra={"key": key, "value": raw},
        )
    resolutions = parse_resolution_list(fallback_text)
    # 内置列表不允许为空
    if not resolutions:
        raise ValueError(f"内置分辨率列表无效: {fallback_text!r}")
    return resolutions


@dataclass(frozen=True)
class ResolutionCatalog:
    """4:3 与 16:9 两组分辨率列表"""
    list_4_3: Tuple[Resolution, ...]
    list_16_9: Tuple[Resolution, ...]

    def for_aspect(self, aspect: AspectRatio) -> Tuple[Resolution, ...]:
        if aspect is AspectRatio.RATIO_4_3:
            return self.list_4_3
        return self.list_16_9

    def contains(self, resolution: Resolution, aspect: AspectRatio) -> bool:
        """检查分辨率是否存在于当前宽高比对应的列表中（宽高均需完全相等）"""
        for candidate in self.for_aspect(aspect):
            if candidate.width == resolution.width and candidate.height == resolution.height:
                return True
        return False

    def nearest(self, resolution: Resolution, aspect: AspectRatio) -> Resolution:
        """返回当前列表中像素数最接近给定分辨率的条目，相同时取靠前者"""
        candidates = self.for_aspect(aspect)
        return min(candidates, key=lambda r: abs(r.pixels - resolution.pixels))
