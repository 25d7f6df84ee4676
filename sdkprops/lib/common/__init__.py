"""
Common utilities module
"""
from .property_file import (
    PATTERN_PROP,
    parse_property_file,
)

__all__ = [
    "PATTERN_PROP",
    "parse_property_file",
]
