"""Host lookups answering whether a name is already taken."""

from __future__ import annotations

import importlib.util
import logging
import sys
from typing import Iterable, Protocol, runtime_checkable

__all__ = ["ImportlibResolver", "StaticResolver", "SymbolResolver"]


LOGGER = logging.getLogger(__name__)


@runtime_checkable
class SymbolResolver(Protocol):
    """Capability reporting whether ``name`` already resolves in the host."""

    def exists(self, name: str) -> bool:
        """Return ``True`` when ``name`` refers to something loadable."""


class ImportlibResolver:
    """Resolve names against the running interpreter's import system.

    Every call queries the live environment; results are never cached since a
    package may be installed between two runs.
    """

    def exists(self, name: str) -> bool:
        if name in sys.modules:
            return True
        try:
            spec = importlib.util.find_spec(name)
        except (ImportError, ValueError):
            # find_spec imports parents of dotted names; a missing parent
            # means the child cannot exist either.
            LOGGER.debug("find_spec(%r) failed, treating as unresolved", name)
            return False
        return spec is not None


class StaticResolver:
    """Resolve names from a fixed collection."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names = frozenset(names)

    @property
    def names(self) -> frozenset[str]:
        return self._names

    def exists(self, name: str) -> bool:
        return name in self._names
