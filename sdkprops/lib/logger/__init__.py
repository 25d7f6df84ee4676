"""
sdkprops Logger Module

统一日志模块，日志文件存储在 ~/.sdkprops/logs/ 目录下。

Usage:
    from sdkprops.lib.logger import get_logger, LogContext

    logger = get_logger("properties")
    logger.info("Loading project properties")

    # 使用上下文记录
    with LogContext(logger, "save_properties"):
        logger.debug("Writing default.properties")

Available loggers:
    - properties: 属性文件读写日志
    - cli: 命令行日志
"""
from .python_logger import (
    SdkPropsLogger,
    get_logger,
    reset_session,
)
from .context import LogContext
from .utils import cleanup_old_logs, get_current_log_file
from .constants import LOGS_DIR, GLOBAL_DIR

__all__ = [
    # 核心类和函数
    'SdkPropsLogger',
    'get_logger',
    'LogContext',
    'reset_session',

    # 工具函数
    'cleanup_old_logs',
    'get_current_log_file',

    # 常量
    'LOGS_DIR',
    'GLOBAL_DIR',
]
