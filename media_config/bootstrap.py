#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
启动准备模块

统一处理控制台编码与日志初始化。
"""

import sys
import io
import logging
from typing import Optional

from media_config.utils.logging import setup_logging


def enforce_utf8_windows() -> None:
    """在 Windows 强制 stdout/stderr 使用 UTF-8，避免中文乱码"""
    if sys.platform != 'win32':
        return
    if sys.stdout.encoding != 'utf-8':
        sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', errors='replace')
    if sys.stderr.encoding != 'utf-8':
        sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8', errors='replace')


def resolve_log_level(verbose: int = 0, quiet: int = 0) -> str:
    """
    根据 -v / -q 次数计算日志级别

    verbose 优先；quiet=1 -> WARNING，quiet>=2 -> ERROR
    """
    if verbose:
        return "DEBUG"
    if quiet >= 2:
        return "ERROR"
    if quiet == 1:
        return "WARNING"
    return "INFO"


def prepare_environment(
    log_folder: Optional[str] = None,
    verbose: int = 0,
    quiet: int = 0,
    plain: bool = False,
    json_logs: bool = False,
) -> Optional[str]:
    """
    启动前统一准备工作：编码、日志初始化。

    Returns:
        日志文件路径（未启用文件日志时为 None）
    """
    enforce_utf8_windows()

    level = resolve_log_level(verbose, quiet)
    log_file = setup_logging(
        log_folder,
        level=level,
        plain=plain,
        json_console=json_logs,
    )
    if log_file:
        logging.debug(f"日志文件: {log_file}")
    return log_file
