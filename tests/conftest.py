#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
pytest 配置文件
"""

import os
import sys
import pytest

# 添加项目根目录到 Python 路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from media_config.config.options_file import OptionsFile
from media_config.config.defaults import (
    DEFAULT_RESOLUTION_LIST_4_3,
    DEFAULT_RESOLUTION_LIST_16_9,
)


@pytest.fixture
def make_store():
    """构造已加载的内存键值存储"""
    def _make(**options):
        store = OptionsFile("<memory>")
        store.options = {key: str(value) for key, value in options.items()}
        return store
    return _make


@pytest.fixture
def write_config(tmp_path):
    """将 key=value 写入临时配置文件，返回文件路径"""
    def _write(text: str = "", name: str = "media_config.conf", **options):
        lines = [text] if text else []
        lines.extend(f"{key}={value}" for key, value in options.items())
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def default_lists_config(write_config):
    """只包含内置分辨率列表的配置文件"""
    return write_config(
        video_resolution_list_4_3=DEFAULT_RESOLUTION_LIST_4_3,
        video_resolution_list_16_9=DEFAULT_RESOLUTION_LIST_16_9,
    )
