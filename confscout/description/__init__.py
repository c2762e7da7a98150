"""
Description Module
==================

Configuration descriptions and loaded results.
"""

from .descriptions import (
    AnyItem,
    ArrayDescription,
    ConfigDescription,
    DataclassDescription,
    ParserContext,
    SingleOrArrayDescription,
    any_item,
    array,
    dataclass_item,
    single_or_array,
)
from .result import ConfigResult, ResultFile

__all__ = [
    'ConfigDescription',
    'ParserContext',
    'AnyItem',
    'ArrayDescription',
    'SingleOrArrayDescription',
    'DataclassDescription',
    'any_item',
    'array',
    'single_or_array',
    'dataclass_item',
    'ConfigResult',
    'ResultFile',
]
