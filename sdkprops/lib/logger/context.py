"""
sdkprops Logger Context

记录一次文件操作（读/写属性文件）的耗时和结果。
"""
import time
from typing import Any, Union, TYPE_CHECKING

if TYPE_CHECKING:
    import logging
    from .python_logger import SdkPropsLogger


class LogContext:
    """
    操作日志上下文，异常照常向外抛出

    logger 可以是 SdkPropsLogger，也可以是库模块的 logging.Logger。

    Usage:
        with LogContext(logger, "save_properties", path=target) as ctx:
            f.write(content)
        ctx.elapsed  # 秒
    """

    def __init__(self, logger: Union["SdkPropsLogger", "logging.Logger"], operation: str, **detail: Any):
        self.logger = logger
        self.operation = operation
        self.detail = detail
        self.elapsed = 0.0
        self._started = 0.0

    def _describe(self) -> str:
        if not self.detail:
            return self.operation
        fields = ' '.join(f"{key}={value}" for key, value in self.detail.items())
        return f"{self.operation} ({fields})"

    def __enter__(self) -> "LogContext":
        self._started = time.monotonic()
        self.logger.debug(f"[{self._describe()}] begin")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.elapsed = time.monotonic() - self._started
        if exc_type is None:
            self.logger.debug(f"[{self._describe()}] done in {self.elapsed * 1000:.1f}ms")
        else:
            self.logger.error(
                f"[{self._describe()}] {exc_type.__name__} after {self.elapsed * 1000:.1f}ms: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb),
            )
        return False
