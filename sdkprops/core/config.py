"""
Configuration Module - 工具配置文件解析和管理

配置文件位置：$SDKPROPS_CONFIG，未设置时为 ~/.sdkprops/config.yaml
"""
import copy
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..lib.logger.constants import GLOBAL_DIR, LOG_RETENTION_DAYS


# 配置文件路径环境变量
ENV_CONFIG = "SDKPROPS_CONFIG"


class ConfigError(ValueError):
    """配置文件格式错误"""


@dataclass
class PropertiesConfig:
    """属性文件读写配置"""
    # 文件编码（空表示平台默认编码）
    encoding: str = ""


@dataclass
class LoggingConfig:
    """日志配置"""
    # 是否同时输出到 stderr
    verbose: bool = False
    # 日志保留天数
    retention_days: int = LOG_RETENTION_DAYS


@dataclass
class ToolConfig:
    """完整的工具配置"""
    properties: PropertiesConfig = field(default_factory=PropertiesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def encoding(self) -> Optional[str]:
        return self.properties.encoding or None


def default_config_path() -> Path:
    """返回默认配置文件路径"""
    env_path = os.environ.get(ENV_CONFIG)
    if env_path:
        return Path(env_path)
    return GLOBAL_DIR / 'config.yaml'


class ConfigLoader:
    """配置加载器"""

    DEFAULT_CONFIG = {
        "properties": {
            "encoding": "",
        },
        "logging": {
            "verbose": False,
            "retention_days": LOG_RETENTION_DAYS,
        },
    }

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else default_config_path()
        self._config: Dict[str, Any] = {}
        self.logger = logging.getLogger("sdkprops.config")

    def load(self) -> ToolConfig:
        """加载配置文件"""
        self.logger.debug(f"Loading config from: {self.config_path}")

        # 从默认配置开始（深拷贝）
        self._config = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path.is_file():
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    user_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid config file {self.config_path}: {e}") from e

            if not isinstance(user_config, dict):
                raise ConfigError(f"Config file {self.config_path} must contain a mapping")

            self._merge_config(self._config, user_config)
            self.logger.debug(f"Merged {len(user_config)} user config keys")
        else:
            self.logger.debug("No config file found, using defaults only")

        return self._build_tool_config()

    def _merge_config(self, base: Dict, override: Dict):
        """递归合并配置"""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def _build_tool_config(self) -> ToolConfig:
        """构建 ToolConfig 对象"""
        properties_cfg = self._config.get("properties") or {}
        logging_cfg = self._config.get("logging") or {}

        return ToolConfig(
            properties=PropertiesConfig(
                encoding=str(properties_cfg.get("encoding") or ""),
            ),
            logging=LoggingConfig(
                verbose=bool(logging_cfg.get("verbose", False)),
                retention_days=int(logging_cfg.get("retention_days", LOG_RETENTION_DAYS)),
            ),
        )

