"""
sdkprops Logger Constants

日志模块路径常量定义（内部使用，零依赖）
只使用 Python 标准库，不导入任何业务模块。
"""
import os
from pathlib import Path


# ==================== 环境变量 ====================

# 全局目录覆盖（测试时指向临时目录）
ENV_HOME = "SDKPROPS_HOME"

# 打开控制台日志
ENV_VERBOSE = "SDKPROPS_VERBOSE"


# ==================== 全局目录 ====================

# 全局根目录 ~/.sdkprops
GLOBAL_DIR = Path(os.environ[ENV_HOME]) if os.environ.get(ENV_HOME) else Path.home() / '.sdkprops'

# 日志目录 ~/.sdkprops/logs/
LOGS_DIR = GLOBAL_DIR / 'logs'


# ==================== 日志格式 ====================

LOG_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

# 日志输出格式
LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
LOG_FORMAT_DETAILED = "%(asctime)s [%(levelname)s] [%(name)s:%(funcName)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# ==================== 日志配置 ====================

# 日志保留天数
LOG_RETENTION_DAYS = 7


def ensure_logs_dir() -> Path:
    """确保日志目录存在"""
    LOGS_DIR.mkdir(parents=True, exist_ok=True)
    return LOGS_DIR
