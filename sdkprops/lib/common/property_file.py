"""
属性文件解析模块

解析 `key=value` 形式的 .properties 文本文件：
- 空行和以 `#` 开头的行被忽略
- 其余每一行都必须是合法的 `key=value`，否则整个文件视为无效

解析失败（语法错误、读取失败、编码错误）不抛异常，统一返回 None。
"""
import logging
import re
from pathlib import Path
from typing import Dict, Optional, Union


# key 只允许字母、数字、点、下划线和连字符
PATTERN_PROP = re.compile(r'^([a-zA-Z0-9._-]+)\s*=\s*(.*)\s*$')


def parse_property_file(path: Union[str, Path], encoding: Optional[str] = None,
                        logger: Optional[logging.Logger] = None) -> Optional[Dict[str, str]]:
    """
    解析属性文件

    Args:
        path: 属性文件路径
        encoding: 文件编码，None 表示平台默认编码
        logger: 日志记录器，默认 sdkprops.properties

    Returns:
        key -> value 映射；文件无法读取或格式错误时返回 None
    """
    if logger is None:
        logger = logging.getLogger("sdkprops.properties")

    path = Path(path)
    properties: Dict[str, str] = {}

    try:
        with open(path, 'r', encoding=encoding) as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith('#'):
                    continue

                match = PATTERN_PROP.match(line)
                if not match:
                    logger.warning(f"Error parsing '{path}': \"{line}\" is not a valid syntax")
                    return None

                properties[match.group(1)] = match.group(2).rstrip()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Error parsing '{path}': {e}")
        return None

    logger.debug(f"Parsed {len(properties)} properties from {path}")
    return properties
