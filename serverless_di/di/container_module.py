"""
Container modules.

A ``ContainerModule`` holds the bindings produced for one module category as
plain ``(key, strategy, target)`` tuples. It is also an ``injector.Module``,
so a binding set can be handed straight to ``injector.Injector``; other
containers can read ``bindings`` instead.
"""

import logging
from enum import Enum
from typing import Any, Iterator, List, NamedTuple

from injector import Binder, CallableProvider, ClassProvider, InstanceProvider, Module, Provider

logger = logging.getLogger(__name__)


class Strategy(str, Enum):
    """How a key is resolved."""
    CLASS = "class"        # construct ``target`` on each resolution
    SELF = "self"          # key is the class itself, constructed on each resolution
    CONSTANT = "constant"  # return ``target`` as is
    FACTORY = "factory"    # call ``target`` on each resolution


class Binding(NamedTuple):
    """One key and the strategy used to resolve it."""
    key: Any
    strategy: Strategy
    target: Any

    def provider(self) -> Provider:
        """Build the ``injector`` provider for this binding."""
        if self.strategy in (Strategy.CLASS, Strategy.SELF):
            return ClassProvider(self.target)
        elif self.strategy == Strategy.CONSTANT:
            return InstanceProvider(self.target)
        elif self.strategy == Strategy.FACTORY:
            return CallableProvider(self.target)
        raise ValueError(f"Unknown binding strategy: {self.strategy!r}")


class ContainerModule(Module):
    """Bindings of one category, loadable by ``injector.Injector``."""

    def __init__(self, category: str, bindings: List[Binding]):
        self.category = category
        self.bindings = list(bindings)

    def configure(self, binder: Binder) -> None:
        for binding in self.bindings:
            binder.bind(binding.key, to=binding.provider())
        logger.debug(f"Loaded {len(self.bindings)} {self.category} binding(s)")

    def __iter__(self) -> Iterator[Binding]:
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)

    def __repr__(self) -> str:
        return f"ContainerModule(category={self.category!r}, bindings={len(self.bindings)})"
