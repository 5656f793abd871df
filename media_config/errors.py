#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
异常定义

只有配置源不可用属于硬失败，其余字段级问题均在加载过程中就地恢复并记录日志。
"""


class MediaConfigError(Exception):
    """媒体配置相关异常基类"""


class SourceUnavailableError(MediaConfigError):
    """配置源无法打开或解析"""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"无法加载配置文件: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
