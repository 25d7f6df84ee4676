"""
sdkprops Logger Utilities

日志工具函数（清理、查询当前日志文件）
"""
from datetime import datetime
from typing import Optional

from . import constants
from .constants import LOG_RETENTION_DAYS


def cleanup_old_logs(max_days: int = LOG_RETENTION_DAYS) -> int:
    """清理旧日志文件

    Args:
        max_days: 保留天数，默认 7 天

    Returns:
        删除的文件数量
    """
    if not constants.LOGS_DIR.exists():
        return 0

    now = datetime.now()
    deleted_count = 0

    for log_file in constants.LOGS_DIR.glob("*.log"):
        try:
            # 格式: name_YYYYMMDD_HHMMSS.log
            parts = log_file.stem.split('_')
            if len(parts) >= 3:
                file_date = datetime.strptime(parts[-2], "%Y%m%d")
                if (now - file_date).days > max_days:
                    log_file.unlink()
                    deleted_count += 1
        except ValueError:
            continue

    return deleted_count


def get_current_log_file(name: str) -> Optional[str]:
    """获取当前日志文件路径

    Args:
        name: 日志记录器名称

    Returns:
        日志文件路径，如果不存在则返回 None
    """
    # 延迟导入避免循环依赖
    from .python_logger import SdkPropsLogger

    if name in SdkPropsLogger._instances:
        return SdkPropsLogger._instances[name].log_file
    return None
