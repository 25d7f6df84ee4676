"""
sdkprops - 项目构建属性（default.properties）读写工具
"""
import logging

__version__ = "1.0.0"

# 未配置日志时不输出（也不落盘）
logging.getLogger("sdkprops").addHandler(logging.NullHandler())
