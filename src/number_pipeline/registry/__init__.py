"""
Registry Module - Dynamic Filter Management.

This module provides a registry that maps filter name prefixes to
constructors, so new filter kinds can be added without touching the
dispatch logic.

Components:
    - FilterRegistry: Prefix-keyed registry with longest-prefix resolution
    - FilterInfo: Metadata about registered prefixes
    - create_default_registry: Registry with EVEN, ODD and GT
"""

from number_pipeline.registry.defaults import create_default_registry
from number_pipeline.registry.filter_registry import (
    FilterInfo,
    FilterRegistry,
)

__all__ = [
    "FilterRegistry",
    "FilterInfo",
    "create_default_registry",
]
