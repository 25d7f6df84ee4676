"""
项目属性模块
"""
from .properties import (
    ProjectProperties,
    PROPERTY_TARGET,
    PROPERTY_SDK,
    PROPERTIES_FILE,
    PROP_HEADER,
    COMMENT_MAP,
)

__all__ = [
    "ProjectProperties",
    "PROPERTY_TARGET",
    "PROPERTY_SDK",
    "PROPERTIES_FILE",
    "PROP_HEADER",
    "COMMENT_MAP",
]
