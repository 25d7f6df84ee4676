"""
项目属性存取模块

加载和保存项目目录下的 default.properties（同时供 IDE 和 Ant 构建使用）。

使用方式：

    from sdkprops.core.project import ProjectProperties, PROPERTY_TARGET

    props = ProjectProperties.load(project_dir)
    if props is None:
        props = ProjectProperties.create(project_dir)

    props.set_property(PROPERTY_TARGET, "android-10")
    props.save()

文件只在显式调用 save() 时写入，且为整体覆盖写。
"""
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Optional, Union

from ...lib.common import parse_property_file
from ...lib.logger import LogContext

# 库模块只写 logging，不创建日志文件；命令行入口通过 capture() 收集
logger = logging.getLogger("sdkprops.properties")


# 已知属性名
PROPERTY_TARGET = "target"
PROPERTY_SDK = "sdk-folder"

# 属性文件名
PROPERTIES_FILE = "default.properties"

PROP_HEADER = (
    "# This file is automatically generated by Android Tools.\n"
    "# Do not modify this file -- YOUR CHANGES WILL BE ERASED!\n"
    "# For customized properties when using Ant, set new values\n"
    "# in a \"build.properties\" file.\n"
    "\n"
)

# 已知属性 -> 写在 key=value 行之前的注释
COMMENT_MAP = MappingProxyType({
    PROPERTY_TARGET: "# Project target.",
    PROPERTY_SDK: "# location of the SDK. Only used by Ant.",
})


class ProjectProperties:
    """
    单个项目目录的属性集合

    通过 load() 或 create() 获取实例，不要直接构造。
    """

    def __init__(self, project_folder: Union[str, Path], properties: Dict[str, str],
                 *, encoding: Optional[str] = None):
        self._location = str(project_folder)
        self._properties = properties
        self._encoding = encoding

    @classmethod
    def load(cls, project_folder: Union[str, Path], *,
             encoding: Optional[str] = None) -> Optional["ProjectProperties"]:
        """
        加载项目目录下的属性文件

        Args:
            project_folder: 项目目录
            encoding: 文件编码，None 表示平台默认编码

        Returns:
            ProjectProperties；目录不存在、文件不存在或文件无法解析时返回 None
        """
        folder = Path(project_folder)

        if not folder.is_dir():
            logger.debug(f"Not a directory: {folder}")
            return None

        default_file = folder / PROPERTIES_FILE
        if not default_file.is_file():
            logger.debug(f"No {PROPERTIES_FILE} in {folder}")
            return None

        properties = parse_property_file(default_file, encoding=encoding, logger=logger)
        if properties is None:
            return None

        return cls(project_folder, properties, encoding=encoding)

    @classmethod
    def create(cls, project_folder: Union[str, Path], *,
               encoding: Optional[str] = None) -> "ProjectProperties":
        """
        创建空的属性集合

        文件在调用 save() 之前不会被创建。
        """
        return cls(project_folder, {}, encoding=encoding)

    @property
    def location(self) -> str:
        """所属项目目录"""
        return self._location

    @property
    def properties_path(self) -> Path:
        return Path(self._location) / PROPERTIES_FILE

    def set_property(self, name: str, value: str):
        """
        设置属性，已存在则覆盖

        name 和 value 不做校验，但能被 load() 读回的只有 name 由
        [a-zA-Z0-9._-] 组成、value 不含换行且首尾无空白的属性。
        其余属性仍会照写，但写出的文件整体无法再被 load()（返回 None）。
        """
        self._properties[name] = value

    def get_property(self, name: str) -> Optional[str]:
        """返回属性值，未设置返回 None"""
        return self._properties.get(name)

    def remove_property(self, name: str) -> Optional[str]:
        """移除属性，返回被移除的值（未设置返回 None）"""
        return self._properties.pop(name, None)

    def keys(self) -> List[str]:
        """按写入顺序（key 排序）返回所有属性名"""
        return sorted(self._properties)

    def __contains__(self, name: str) -> bool:
        return name in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def to_text(self) -> str:
        """
        生成属性文件的完整内容

        固定文件头之后，每个属性一行 `key=value`，已知属性前面附加一行注释。
        """
        lines = [PROP_HEADER]
        for name in self.keys():
            comment = COMMENT_MAP.get(name)
            if comment is not None:
                lines.append(f"{comment}\n")
            lines.append(f"{name}={self._properties[name]}\n")
        return ''.join(lines)

    def save(self):
        """
        保存属性文件（整体覆盖写）

        Raises:
            OSError: 文件无法打开或写入失败
        """
        target = self.properties_path
        content = self.to_text()

        with LogContext(logger, "save_properties", path=target, count=len(self._properties)):
            with open(target, 'w', encoding=self._encoding) as f:
                f.write(content)

    def __repr__(self) -> str:
        return f"ProjectProperties(location={self._location!r}, properties={len(self._properties)})"
