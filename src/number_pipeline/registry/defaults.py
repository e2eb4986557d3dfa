"""
Default Filter Registrations.

Constructors for the built-in filters and a factory for a registry that
has them registered. Every call returns a new registry, so callers and
tests never share registrations.
"""

from __future__ import annotations

from number_pipeline.domain.errors import ConstructionError
from number_pipeline.filters.parity import EvenFilter, OddFilter
from number_pipeline.filters.threshold import GreaterThanFilter, parse_threshold
from number_pipeline.registry.filter_registry import FilterRegistry


def _reject_parameter(residual: str) -> None:
    if residual:
        raise ConstructionError(f"unexpected parameter '{residual}'", residual=residual)


def build_even(residual: str) -> EvenFilter:
    _reject_parameter(residual)
    return EvenFilter()


def build_odd(residual: str) -> OddFilter:
    _reject_parameter(residual)
    return OddFilter()


def build_greater_than(residual: str) -> GreaterThanFilter:
    return GreaterThanFilter(parse_threshold(residual))


def create_default_registry() -> FilterRegistry:
    """
    Create a registry with the built-in filters.

    Registered prefixes:
        - EVEN: even numbers
        - ODD: odd numbers
        - GT<n>: numbers greater than n

    Returns:
        New FilterRegistry instance
    """
    registry = FilterRegistry()
    registry.register("EVEN", build_even, description="Even numbers")
    registry.register("ODD", build_odd, description="Odd numbers")
    registry.register(
        "GT", build_greater_than, description="Numbers greater than the parameter"
    )
    return registry
