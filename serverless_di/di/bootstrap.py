"""
Application bootstrap.

    context = bootstrap(AppModule)
    create_order = context.handler("CreateOrder")
    orders = context.table("orders")

``bootstrap`` registers a module once, loads the resulting binding set into
an ``injector.Injector`` and returns the ``AppContext`` that the rest of the
application resolves from.
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from injector import Injector, Module

from ..config import DynamoDBConfig
from ..core.table_client import TableClient
from ..exceptions import ConfigurationError
from ..models import ModuleDescription
from .keys import datasource_key
from .registrar import BindingSet, register_bindings
from .registry import SymbolRegistry

logger = logging.getLogger(__name__)


class AppContext:
    """Registry, binding set and container of one application."""

    def __init__(self, registry: SymbolRegistry, bindings: BindingSet, injector: Injector):
        self.registry = registry
        self.bindings = bindings
        self.injector = injector

    def get(self, key: Any) -> Any:
        """Resolve an explicitly bound key."""
        if not self.injector.binder.has_binding_for(key):
            raise ConfigurationError(f"Nothing is bound to {key!r}", subject=repr(key))
        return self.injector.get(key)

    def _lookup(self, table: Dict[str, Any], kind: str, name: str) -> Any:
        try:
            return table[name]
        except KeyError:
            raise ConfigurationError(f"No {kind} registered under '{name}'", subject=name) from None

    def handler(self, name: str) -> Any:
        return self.get(self._lookup(self.registry.handlers, 'handler', name))

    def controller(self, name: str) -> Tuple[Any, Dict[str, str]]:
        """Return the controller instance and its action -> method map."""
        keys = self._lookup(self.registry.controllers, 'controller', name)
        return self.get(keys.target), self.get(keys.methods)

    def env(self, name: str) -> str:
        return self.get(self._lookup(self.registry.env, 'environment variable', name))

    def table(self, name: str) -> TableClient:
        """Build a new client for the datasource table ``name``."""
        return self.get(datasource_key(name))()


def bootstrap(
    module: Union[ModuleDescription, Mapping[str, Any]],
    config: Optional[DynamoDBConfig] = None,
    modules: Iterable[Module] = (),
) -> AppContext:
    """Register ``module`` and build its container.

    Args:
        module: Module description of the application
        config: Connection settings for datasource table clients
        modules: Additional ``injector`` modules loaded after the binding set

    Returns:
        AppContext for the application
    """
    registry = SymbolRegistry()
    bindings = register_bindings(module, registry, config)
    injector = Injector([*bindings.values(), *modules])
    logger.info(f"Bootstrapped application with {sum(len(m) for m in bindings.values())} binding(s)")
    return AppContext(registry, bindings, injector)
