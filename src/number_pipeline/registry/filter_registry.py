"""
Filter Registry - Prefix-Keyed Filter Construction.

This module provides a thread-safe registry that turns filter names into
filter instances. Each entry maps a name prefix to a constructor; the part
of the name after the prefix (the residual) is passed to the constructor
as its parameter.

Resolution rule:
    1. Collect every registered prefix the name starts with
    2. Pick the longest one
    3. On equal length, pick the earliest registration

Usage:
    registry = FilterRegistry()
    registry.register("EVEN", build_even)
    registry.register("GT", build_greater_than)

    registry.create("GT5")   # -> GreaterThanFilter(5), residual "5"
    registry.create("GT")    # -> ConstructionError, empty residual
    registry.create("FOO")   # -> RegistryNoMatch
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from threading import RLock
from typing import Any, Dict, List, Optional

from number_pipeline.domain.errors import ConstructionError, RegistryNoMatch
from number_pipeline.interfaces.number_filter import FilterConstructor, NumberFilter

logger = logging.getLogger(__name__)


@dataclass
class FilterInfo:
    """Metadata about a registered filter prefix."""

    prefix: str
    constructor: FilterConstructor
    sequence: int
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "prefix": self.prefix,
            "sequence": self.sequence,
            "description": self.description,
            "constructor": getattr(
                self.constructor, "__name__", type(self.constructor).__name__
            ),
        }



class FilterRegistry:
    """
    Thread-safe registry of filter constructors keyed by name prefix.

    Supports:
        - Runtime registration of new filter kinds
        - Overlapping prefixes ("GT" and "GTE") with longest-prefix resolution
        - Parameterized names, the residual is handed to the constructor
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._filters: Dict[str, FilterInfo] = {}
        self._sequence = itertools.count()
        self._lock = RLock()
        logger.debug("FilterRegistry initialized")

    def register(
        self,
        prefix: str,
        constructor: FilterConstructor,
        description: str = "",
    ) -> None:
        """
        Register a filter constructor under a prefix.

        Registering an existing prefix again replaces its constructor.
        Overlapping prefixes are not checked; resolution handles them.

        Args:
            prefix: Name prefix, e.g. "GT"
            constructor: Callable taking the residual string
            description: Optional description

        Raises:
            ValueError: If prefix is empty
        """
        if not prefix:
            raise ValueError("Filter prefix must not be empty")

        with self._lock:
            replaced = prefix in self._filters
            self._filters[prefix] = FilterInfo(
                prefix=prefix,
                constructor=constructor,
                sequence=next(self._sequence),
                description=description,
            )
            if replaced:
                logger.info(f"Replaced filter constructor: {prefix}")
            else:
                logger.info(f"Registered filter: {prefix}")

    def unregister(self, prefix: str) -> bool:
        """
        Unregister a prefix.

        Args:
            prefix: Prefix to remove

        Returns:
            True if the prefix was removed, False if not found
        """
        with self._lock:
            if prefix not in self._filters:
                logger.warning(f"Cannot unregister: filter '{prefix}' not found")
                return False

            del self._filters[prefix]
            logger.info(f"Unregistered filter: {prefix}")
            return True

    def resolve(self, name: str) -> Optional[FilterInfo]:
        """
        Find the entry a filter name resolves to, without constructing.

        Args:
            name: Full filter name, e.g. "GT5"

        Returns:
            Matching FilterInfo or None if no prefix matches
        """
        with self._lock:
            candidates = [
                info for info in self._filters.values() if name.startswith(info.prefix)
            ]
        if not candidates:
            return None
        return min(candidates, key=lambda info: (-len(info.prefix), info.sequence))

    def create(self, name: str) -> NumberFilter:
        """
        Build the filter a name resolves to.

        Args:
            name: Full filter name, e.g. "EVEN" or "GT5"

        Returns:
            Filter instance

        Raises:
            RegistryNoMatch: If no registered prefix matches
            ConstructionError: If the constructor rejects the residual
        """
        info = self.resolve(name)
        if info is None:
            raise RegistryNoMatch(name, self.prefixes())

        residual = name[len(info.prefix):]
        logger.debug(f"Resolved '{name}' to prefix '{info.prefix}' (residual '{residual}')")

        try:
            return info.constructor(residual)
        except ConstructionError as e:
            raise ConstructionError(e.reason, name=name, residual=residual) from e
        except ValueError as e:
            raise ConstructionError(str(e), name=name, residual=residual) from e

    def prefixes(self) -> List[str]:
        """Registered prefixes in registration order."""
        with self._lock:
            ordered = sorted(self._filters.values(), key=lambda info: info.sequence)
            return [info.prefix for info in ordered]

    def list_all(self) -> Dict[str, FilterInfo]:
        """
        List all registered prefixes.

        Returns:
            Dictionary of prefix to FilterInfo
        """
        with self._lock:
            return dict(self._filters)

    @property
    def registered_count(self) -> int:
        """Total number of registered prefixes."""
        with self._lock:
            return len(self._filters)

    def __contains__(self, prefix: object) -> bool:
        with self._lock:
            return prefix in self._filters

    def clear(self) -> None:
        """Remove all registered prefixes."""
        with self._lock:
            self._filters.clear()
            logger.info("Cleared all filters from registry")
