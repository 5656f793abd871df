#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
媒体配置加载器 - CLI 入口

加载配置文件并输出校验后的最终配置
"""

import os
import sys
import json
import logging
import argparse

import yaml

# 确保可以导入 media_config 包
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from media_config.bootstrap import prepare_environment
from media_config.config.defaults import DEFAULT_CONFIG_PATH
from media_config.core import MediaConfigHolder


def parse_arguments(argv=None):
    """解析命令行参数"""
    parser = argparse.ArgumentParser(
        description='媒体配置加载器 - 加载并校验采集/编码设备的运行参数',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
使用示例:
  # 使用默认配置文件
  python main.py

  # 指定配置文件并以 YAML 输出
  python main.py --config ./media_config.conf --format yaml
        '''
    )

    parser.add_argument('--config', type=str, default=DEFAULT_CONFIG_PATH,
                        help=f'配置文件路径 (key=value 或 YAML 格式，默认: {DEFAULT_CONFIG_PATH})')
    parser.add_argument('--format', choices=['text', 'yaml', 'json'], default='text',
                        help='输出格式 (默认: text)')

    # 日志选项
    parser.add_argument('-l', '--log', type=str, default=None,
                        help='日志文件夹路径（不指定则不写日志文件）')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='输出调试日志')
    parser.add_argument('-q', '--quiet', action='count', default=0,
                        help='减少日志输出 (-q: WARNING, -qq: ERROR)')
    parser.add_argument('--plain', action='store_true',
                        help='控制台日志禁用彩色')
    parser.add_argument('--json-logs', action='store_true',
                        help='控制台日志使用 JSON 行格式')

    return parser.parse_args(argv)


def render_config(data: dict, fmt: str) -> str:
    """按指定格式渲染配置字典"""
    if fmt == 'json':
        return json.dumps(data, ensure_ascii=False, indent=2)
    if fmt == 'yaml':
        return yaml.safe_dump(data, allow_unicode=True, sort_keys=False).rstrip()

    lines = []
    width = max(len(key) for key in data)
    for key, value in data.items():
        if isinstance(value, list):
            value = ",".join(value)
        elif isinstance(value, bool):
            value = "true" if value else "false"
        lines.append(f"{key:<{width}} = {value}")
    return "\n".join(lines)


def main(argv=None):
    """主函数"""
    args = parse_arguments(argv)

    try:
        prepare_environment(
            log_folder=args.log,
            verbose=args.verbose,
            quiet=args.quiet,
            plain=args.plain,
            json_logs=args.json_logs,
        )

        holder = MediaConfigHolder()
        if not holder.load(args.config):
            return 1

        print(render_config(holder.current.to_dict(), args.format))
        return 0

    except KeyboardInterrupt:
        logging.warning("用户中断操作")
        return 130


if __name__ == "__main__":
    sys.exit(main())
