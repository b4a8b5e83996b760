"""
Symbol registry.

Holds the name -> key lookup tables filled in while a module is registered.
One registry is created per application at bootstrap and handed to whoever
needs to resolve a handler, controller or environment value by name.
"""

import logging
from typing import Any, Dict, NamedTuple, NewType, Optional

logger = logging.getLogger(__name__)


class ControllerKeys(NamedTuple):
    """Keys bound for one controller."""
    target: Any
    methods: Any


class SymbolRegistry:
    """Name-indexed binding keys for handlers, controllers and environment values."""

    def __init__(self):
        self.handlers: Dict[str, Any] = {}
        self.controllers: Dict[str, ControllerKeys] = {}
        self.env: Dict[str, Any] = {}
        self._symbols: Dict[str, Any] = {}
        self._categories: Dict[str, str] = {}

    def symbol_for(self, name: str, supertype: Any = object, category: Optional[str] = None) -> Any:
        """Return the key interned for ``name``, creating it on first use.

        The same name always yields the same key, whatever category asks for it.
        A name claimed by two categories is logged, the later binding wins.
        """
        if category is not None:
            owner = self._categories.setdefault(name, category)
            if owner != category:
                logger.warning(
                    f"{name!r} is registered as both {owner} and {category}, "
                    f"they share one key and the later binding replaces the earlier one."
                )
        symbol = self._symbols.get(name)
        if symbol is None:
            symbol = self._symbols[name] = NewType(name, supertype)
        return symbol

    def stage(self) -> 'SymbolRegistry':
        """Copy this registry so a registration can be applied all at once."""
        staged = SymbolRegistry()
        staged.handlers = dict(self.handlers)
        staged.controllers = dict(self.controllers)
        staged.env = dict(self.env)
        staged._symbols = dict(self._symbols)
        staged._categories = dict(self._categories)
        return staged

    def commit(self, staged: 'SymbolRegistry') -> None:
        """Apply the entries of ``staged``; names registered again keep their interned key."""
        self.handlers.update(staged.handlers)
        self.controllers.update(staged.controllers)
        self.env.update(staged.env)
        self._symbols.update(staged._symbols)
        self._categories.update(staged._categories)

    def __repr__(self) -> str:
        return (
            f"SymbolRegistry(handlers={sorted(self.handlers)}, "
            f"controllers={sorted(self.controllers)}, env={sorted(self.env)})"
        )
