"""
Query construction: SELECT builder and named parameters
"""

from .parameters import SqlParameter, build_parameters
from .select_builder import BuiltQuery, SelectBuilder

__all__ = [
    'SqlParameter',
    'build_parameters',
    'BuiltQuery',
    'SelectBuilder'
]
