"""
Filters Package - Concrete Filter Implementations.

Filters:
    - EvenFilter: passes even numbers
    - OddFilter: passes odd numbers
    - GreaterThanFilter: passes numbers strictly above a threshold

All filters satisfy the NumberFilter protocol. They are usually built by
name through the FilterRegistry rather than instantiated directly.
"""

from number_pipeline.filters.parity import EvenFilter, OddFilter
from number_pipeline.filters.threshold import GreaterThanFilter, parse_threshold

__all__ = [
    "EvenFilter",
    "OddFilter",
    "GreaterThanFilter",
    "parse_threshold",
]
