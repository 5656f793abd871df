#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
键值配置存储

支持两种格式:
- key=value 文本文件（每行一项，# 开头为注释）
- 扁平 YAML 映射（.yaml / .yml）

两者都以字符串形式保存取值，对外提供 load / get_string / get_int。
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from media_config.config.defaults import YAML_EXTENSIONS

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class OptionsFile:
    """key=value 格式的配置文件"""

    def __init__(self, path: str):
        self.path = str(path)
        self.options: Dict[str, str] = {}
        self.error: Optional[str] = None

    def load(self) -> bool:
        """
        读取配置文件

        Returns:
            文件能否打开并读取
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            self.error = str(e)
            return False

        self.options = {}
        for lineno, line in enumerate(lines, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            key, sep, value = line.partition("=")
            if not sep:
                logger.warning(
                    f"忽略格式错误的行 {self.path}:{lineno}: {line!r}",
                    extra={"source": self.path},
                )
                continue
            self.options[key.strip()] = value.strip()
        return True

    def get_string(self, key: str) -> Optional[str]:
        return self.options.get(key)

    def get_int(self, key: str) -> Optional[int]:
        raw = self.options.get(key)
        if raw is None:
            return None
        # 只接受十进制 ASCII 整数，拒绝 1_000 等 Python 字面量写法
        if _INT_PATTERN.fullmatch(raw) is None:
            return None
        return int(raw)


def _normalize_scalar(value: Any) -> Optional[str]:
    """将 YAML 标量转换为与文本格式一致的字符串"""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    if isinstance(value, (list, tuple)):
        # 分辨率列表可写成 YAML 序列
        if all(isinstance(item, str) for item in value):
            return ",".join(value)
    return None


class YamlOptionsFile(OptionsFile):
    """扁平 YAML 映射格式的配置文件"""

    def load(self) -> bool:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            self.error = str(e)
            return False

        if not isinstance(data, dict):
            self.error = "YAML 顶层必须是映射"
            return False

        self.options = {}
        for key, value in data.items():
            if value is None:
                continue
            normalized = _normalize_scalar(value)
            if normalized is None:
                logger.warning(
                    f"忽略不支持的配置值 \"{key}\": {value!r}",
                    extra={"key": key, "source": self.path},
                )
                continue
            self.options[str(key)] = normalized
        return True


def open_options_file(path: str) -> OptionsFile:
    """按扩展名选择配置存储"""
    if Path(path).suffix.lower() in YAML_EXTENSIONS:
        return YamlOptionsFile(path)
    return OptionsFile(path)
