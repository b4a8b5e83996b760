"""
Dependency injection layer.

- Declaration decorators (``handler``, ``controller``, ``action``)
- Binding registrar turning a module description into container modules
- Symbol registry and ``AppContext`` bootstrap over ``injector``
"""

from .bootstrap import AppContext, bootstrap
from .container_module import Binding, ContainerModule, Strategy
from .decorators import action, controller, ensure_injectable, handler
from .keys import DynamoDB, TableClientFactory, datasource_key
from .registrar import (
    BindingSet,
    register_bindings,
    register_datasources,
    register_declarations,
    register_environment,
    register_providers,
    verify_provider,
)
from .registry import ControllerKeys, SymbolRegistry

__all__ = [
    # Bootstrap
    "AppContext",
    "bootstrap",

    # Bindings
    "Binding",
    "BindingSet",
    "ContainerModule",
    "Strategy",

    # Decorators
    "action",
    "controller",
    "ensure_injectable",
    "handler",

    # Keys and registry
    "ControllerKeys",
    "DynamoDB",
    "SymbolRegistry",
    "TableClientFactory",
    "datasource_key",

    # Registrar
    "register_bindings",
    "register_datasources",
    "register_declarations",
    "register_environment",
    "register_providers",
    "verify_provider",
]
