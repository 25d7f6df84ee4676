"""sdkprops 命令行模块

提供对项目 default.properties 的查看和修改。
"""
from .cli import main, parse_args, run

__all__ = [
    'main',
    'parse_args',
    'run',
]
