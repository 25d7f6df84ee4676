"""
sdkprops Python Logger

日志文件统一存储在 ~/.sdkprops/logs/ 目录下（可通过 SDKPROPS_HOME 覆盖）。

只有命令行入口创建带文件输出的 SdkPropsLogger；库模块（属性读写、解析）
直接使用 logging.getLogger("sdkprops.<name>")，不触碰文件系统。入口通过
capture() 把库模块的日志收进同一个日志文件。

Usage:
    from sdkprops.lib.logger import get_logger

    logger = get_logger('cli')
    logger.capture('properties')
    logger.info("Loading project properties")
"""
import logging
import os
import sys
from datetime import datetime
from typing import List, Optional

from .constants import (
    LOG_FORMAT,
    LOG_FORMAT_DETAILED,
    LOG_TIMESTAMP_FORMAT,
    DATE_FORMAT,
    ENV_VERBOSE,
    ensure_logs_dir,
)


class SdkPropsLogger:
    """sdkprops 日志记录器"""

    _instances: dict = {}
    _session_id: Optional[str] = None

    def __init__(self, name: str, log_file: Optional[str] = None, verbose: bool = False):
        self.name = name
        self.logger = logging.getLogger(f"sdkprops.{name}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        self.log_file: Optional[str] = None
        # 本实例添加的 handler（宿主或 pytest 添加的不算）
        self._handlers: List[logging.Handler] = []
        self._captured: List[logging.Logger] = []

        existing = self._find_file_handler()
        if existing is not None:
            self.log_file = existing.baseFilename
        else:
            self._setup_file_handler(log_file)

        if verbose or os.environ.get(ENV_VERBOSE):
            self.enable_console()

    def _find_file_handler(self) -> Optional[logging.FileHandler]:
        for handler in self.logger.handlers:
            if isinstance(handler, logging.FileHandler):
                return handler
        return None

    def _setup_file_handler(self, log_file: Optional[str] = None):
        """设置文件处理器；日志目录不可写时退化为 NullHandler"""
        try:
            if log_file is None:
                log_file = self._get_default_log_file()
            handler = logging.FileHandler(log_file, encoding='utf-8', delay=True)
        except OSError:
            self._add_handler(logging.NullHandler())
            return

        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED, DATE_FORMAT))
        self._add_handler(handler)
        self.log_file = handler.baseFilename

    def _get_default_log_file(self) -> str:
        """获取默认日志文件路径"""
        logs_dir = ensure_logs_dir()

        # 使用会话 ID 确保同一次运行的日志在同一个文件
        if SdkPropsLogger._session_id is None:
            SdkPropsLogger._session_id = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)

        return str(logs_dir / f"{self.name}_{SdkPropsLogger._session_id}.log")

    def _add_handler(self, handler: logging.Handler):
        self.logger.addHandler(handler)
        self._handlers.append(handler)
        for target in self._captured:
            target.addHandler(handler)

    def enable_console(self):
        """追加 stderr 输出（INFO 及以上），重复调用无副作用"""
        for handler in self._handlers:
            if type(handler) is logging.StreamHandler:
                return
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        self._add_handler(console_handler)

    def capture(self, *names: str):
        """
        把库模块 logger（sdkprops.<name>）的输出接到本实例的 handler 上

        Args:
            names: 库模块 logger 名称，如 'properties'
        """
        for name in names:
            target = logging.getLogger(f"sdkprops.{name}")
            if target is self.logger or target in self._captured:
                continue
            target.setLevel(logging.DEBUG)
            for handler in self._handlers:
                target.addHandler(handler)
            self._captured.append(target)

    def close(self):
        """关闭并移除本实例添加的 handler"""
        for target in self._captured:
            for handler in self._handlers:
                target.removeHandler(handler)
            target.setLevel(logging.NOTSET)
        for handler in self._handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self._captured.clear()
        self._handlers.clear()

    def debug(self, msg: str, *args, **kwargs):
        self.logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self.logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self.logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        self.logger.error(msg, *args, **kwargs)

    def log_separator(self, title: str = ""):
        """记录分隔线"""
        if title:
            self.info(f"{'=' * 20} {title} {'=' * 20}")
        else:
            self.info("=" * 60)


def get_logger(name: str, log_file: Optional[str] = None, verbose: bool = False) -> SdkPropsLogger:
    """
    获取日志记录器（单例模式）

    Args:
        name: 日志记录器名称，如 'cli'
        log_file: 可选的日志文件路径
        verbose: 是否同时输出到 stderr

    Returns:
        SdkPropsLogger 实例
    """
    if name not in SdkPropsLogger._instances:
        SdkPropsLogger._instances[name] = SdkPropsLogger(name, log_file, verbose)
    elif verbose:
        SdkPropsLogger._instances[name].enable_console()
    return SdkPropsLogger._instances[name]


def reset_session():
    """重置会话（用于新的运行）"""
    for instance in SdkPropsLogger._instances.values():
        instance.close()
    SdkPropsLogger._session_id = None
    SdkPropsLogger._instances.clear()
